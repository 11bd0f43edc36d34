# -*- coding: utf-8 -*-
"""
FetchPool - Thread pool for background catalog and image fetches.

Provides a managed thread pool for loading the catalog document and
grid/gallery images in the background without blocking the UI.

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
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

logger = logging.getLogger(__name__)

# PhotoDex internal
from photodex.catalog.fetcher import ResourceFetcher


class FetchPool:
    """Manages a pool of worker threads for background fetches.

    Parameters
    ----------
    fetcher : Optional[ResourceFetcher]
        Fetcher used by every job. A default one is created if omitted.
    max_workers : int
        Maximum number of concurrent threads. Default 4.
    """

    def __init__(
        self,
        fetcher: Optional[ResourceFetcher] = None,
        max_workers: int = 4,
    ) -> None:
        self._fetcher = fetcher or ResourceFetcher()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="photodex-fetch",
        )

    def submit_catalog_load(self, source: str) -> Future:
        """Submit a catalog document load.

        Parameters
        ----------
        source : str
            Local path or URL of the document.

        Returns
        -------
        Future
            Future resolving to the parsed document dict, or raising
            CatalogLoadError.
        """
        return self._executor.submit(self._fetcher.fetch_document, source)

    def submit_image(self, locator: str) -> Future:
        """Submit an image fetch.

        Parameters
        ----------
        locator : str
            Image URL or path.

        Returns
        -------
        Future
            Future resolving to the image bytes, or None on failure.
        """
        logger.debug("Queueing image fetch: %s", locator)
        return self._executor.submit(self._fetcher.fetch_image, locator)

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the thread pool.

        Parameters
        ----------
        wait : bool
            If True, wait for running tasks to complete.
        """
        self._executor.shutdown(wait=wait, cancel_futures=not wait)
