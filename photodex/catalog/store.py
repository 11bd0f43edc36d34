# -*- coding: utf-8 -*-
"""
Catalog Store - Load the catalog once and hold it for the session.

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

# Standard library
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# PhotoDex internal
from photodex.catalog.fetcher import CatalogLoadError, ResourceFetcher
from photodex.catalog.models import Catalog


def load_catalog(
    source: str,
    fetcher: Optional[ResourceFetcher] = None,
) -> Catalog:
    """Fetch, parse and build the catalog.

    Parameters
    ----------
    source : str
        Local path or URL of the catalog document.
    fetcher : Optional[ResourceFetcher]
        Fetcher to use. A default one is created if omitted.

    Returns
    -------
    Catalog

    Raises
    ------
    CatalogLoadError
        If the document cannot be fetched or parsed.
    """
    fetcher = fetcher or ResourceFetcher()
    data = fetcher.fetch_document(source)
    catalog = Catalog.from_document(data)
    logger.info("Catalog loaded: %d entries", len(catalog))
    return catalog


__all__ = ["CatalogLoadError", "load_catalog"]
