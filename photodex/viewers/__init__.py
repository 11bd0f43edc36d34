# -*- coding: utf-8 -*-
"""
Viewers Module - Qt front end for the PhotoDex catalog browser.

Components
----------
- ``grid_view`` — Scrollable grid of entity cells (EntityCell,
  DexGridWidget, bytes_to_pixmap)
- ``gallery_dialog`` — Modal image gallery with keyboard navigation
- ``captured_dialog`` — Captured-entity list with show-all toggle
- ``main_window`` — Standalone browser window and ``photodex-viewer``
  entry point

Dependencies
------------
PyQt6

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

from photodex.viewers.grid_view import DexGridWidget, EntityCell
from photodex.viewers.gallery_dialog import GalleryDialog
from photodex.viewers.captured_dialog import CapturedDialog
from photodex.viewers.main_window import PhotoDexWindow


def show(source=None, *, block=True):
    """Open the PhotoDex browser window.

    Parameters
    ----------
    source : str, optional
        Path or URL of the catalog document. If ``None``, resolved from
        ``PHOTODEX_DATA``, the config file, or ``data.json``.
    block : bool
        If ``True`` (default), block until the window is closed.
        If ``False``, return immediately.

    Returns
    -------
    PhotoDexWindow
        The browser window instance.
    """
    from PyQt6.QtWidgets import QApplication
    import sys

    app = QApplication.instance()
    created_app = False
    if app is None:
        app = QApplication(sys.argv)
        created_app = True

    window = PhotoDexWindow()
    window.load(source)
    window.show()

    if block:
        if created_app:
            app.exec()
        else:
            from PyQt6.QtCore import QEventLoop
            loop = QEventLoop()
            original_close = window.closeEvent

            def _on_close(event):
                original_close(event)
                loop.quit()

            window.closeEvent = _on_close
            loop.exec()

    return window


__all__ = [
    "CapturedDialog",
    "DexGridWidget",
    "EntityCell",
    "GalleryDialog",
    "PhotoDexWindow",
    "show",
]
