# -*- coding: utf-8 -*-
"""
Resource Fetcher - Read the catalog document and image bytes.

Fetches http(s) resources with requests and local paths from the
filesystem. Image failures are reported as None so that a single
unreachable locator only degrades its own cell; catalog failures raise
CatalogLoadError.

Dependencies
------------
requests

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
import json
import logging
from pathlib import Path
from typing import Optional

# Third-party
import requests

logger = logging.getLogger(__name__)

# PhotoDex internal
from photodex.catalog.models import is_placeholder
from photodex.catalog.resolver import is_remote


class CatalogLoadError(Exception):
    """The catalog document could not be fetched or parsed."""


class ResourceFetcher:
    """Fetches the catalog document and image data.

    Parameters
    ----------
    timeout : float
        HTTP request timeout in seconds. Default 10.0.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        self._timeout = timeout

    def fetch_document(self, source: str) -> dict:
        """Fetch and parse the catalog document.

        Parameters
        ----------
        source : str
            Local path or http(s) URL.

        Returns
        -------
        dict
            Parsed document.

        Raises
        ------
        CatalogLoadError
            If the document cannot be read, is not JSON, or is not a
            JSON object.
        """
        logger.info("Loading catalog from %s", source)
        try:
            if is_remote(source):
                resp = requests.get(source, timeout=self._timeout)
                resp.raise_for_status()
                data = resp.json()
            else:
                with open(source, 'r', encoding='utf-8') as f:
                    data = json.load(f)
        except (requests.RequestException, OSError, ValueError) as e:
            raise CatalogLoadError(f"Failed to load catalog from {source}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogLoadError(
                f"Catalog at {source} must be a JSON object, "
                f"got {type(data).__name__}"
            )
        return data

    def fetch_image(self, locator: str) -> Optional[bytes]:
        """Fetch the raw bytes of one image.

        Parameters
        ----------
        locator : str
            Image URL or local path.

        Returns
        -------
        Optional[bytes]
            Image bytes, or None if the image is a placeholder or could
            not be fetched.
        """
        if is_placeholder(locator):
            return None
        try:
            if is_remote(locator):
                resp = requests.get(locator, timeout=self._timeout)
                resp.raise_for_status()
                return resp.content
            return Path(locator).read_bytes()
        except (requests.RequestException, OSError) as e:
            logger.warning("Image fetch failed for '%s': %s", locator, e)
            return None
