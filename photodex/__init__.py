# -*- coding: utf-8 -*-
"""
PhotoDex - Catalog browser for a photo collection.

Renders a fixed collection of entities as a grid, filters it by name,
steps through each entity's image variants in a modal gallery, and
persists a light/dark theme preference. A headless entry point
validates the catalog document.

License
-------
MIT License
Copyright (c) 2026 PhotoDex contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

__version__ = "0.1.0"


def show(source=None, *, block=True):
    """Open the PhotoDex browser window.

    Re-exported from ``photodex.viewers.show``.
    See :func:`photodex.viewers.show` for full documentation.
    """
    from photodex.viewers import show as _show
    return _show(source, block=block)


__all__: list = ["show"]
