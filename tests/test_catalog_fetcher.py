# -*- coding: utf-8 -*-
"""
Tests for photodex.catalog.fetcher, pool and store.

Created
-------
2026-10-19
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from photodex.catalog.fetcher import CatalogLoadError, ResourceFetcher
from photodex.catalog.models import PLACEHOLDER_URL
from photodex.catalog.pool import FetchPool
from photodex.catalog.store import load_catalog


@pytest.fixture
def fetcher():
    return ResourceFetcher(timeout=5.0)


def _response(**kwargs):
    resp = MagicMock(status_code=200, **kwargs)
    resp.raise_for_status = MagicMock()
    return resp


# ---------------------------------------------------------------------------
# fetch_document
# ---------------------------------------------------------------------------

class TestFetchDocument:
    def test_local_file(self, tmp_path, fetcher, small_document):
        path = tmp_path / "data.json"
        path.write_text(json.dumps(small_document, ensure_ascii=False), encoding='utf-8')
        assert fetcher.fetch_document(str(path)) == small_document

    def test_unicode_preserved(self, tmp_path, fetcher):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({'029': {'name': 'Nidoran♀'}}, ensure_ascii=False),
                        encoding='utf-8')
        assert fetcher.fetch_document(str(path))['029']['name'] == 'Nidoran♀'

    def test_missing_file(self, tmp_path, fetcher):
        with pytest.raises(CatalogLoadError):
            fetcher.fetch_document(str(tmp_path / "missing.json"))

    def test_bad_json(self, tmp_path, fetcher):
        path = tmp_path / "data.json"
        path.write_text("{oops")
        with pytest.raises(CatalogLoadError):
            fetcher.fetch_document(str(path))

    def test_non_object(self, tmp_path, fetcher):
        path = tmp_path / "data.json"
        path.write_text("[]")
        with pytest.raises(CatalogLoadError):
            fetcher.fetch_document(str(path))

    @patch('photodex.catalog.fetcher.requests.get')
    def test_remote(self, mock_get, fetcher, small_document):
        mock_get.return_value = _response(json=lambda: small_document)
        assert fetcher.fetch_document("https://example.org/data.json") == small_document
        mock_get.assert_called_once_with("https://example.org/data.json", timeout=5.0)

    @patch('photodex.catalog.fetcher.requests.get')
    def test_remote_http_error(self, mock_get, fetcher):
        mock_get.side_effect = requests.RequestException("timeout")
        with pytest.raises(CatalogLoadError):
            fetcher.fetch_document("https://example.org/data.json")

    @patch('photodex.catalog.fetcher.requests.get')
    def test_remote_bad_json(self, mock_get, fetcher):
        mock_get.return_value = _response()
        mock_get.return_value.json.side_effect = json.JSONDecodeError("", "", 0)
        with pytest.raises(CatalogLoadError):
            fetcher.fetch_document("https://example.org/data.json")


# ---------------------------------------------------------------------------
# fetch_image
# ---------------------------------------------------------------------------

class TestFetchImage:
    def test_placeholder_not_fetched(self, fetcher):
        with patch('photodex.catalog.fetcher.requests.get') as mock_get:
            assert fetcher.fetch_image(PLACEHOLDER_URL) is None
            mock_get.assert_not_called()

    @patch('photodex.catalog.fetcher.requests.get')
    def test_remote(self, mock_get, fetcher):
        mock_get.return_value = _response(content=b'\x89PNG')
        assert fetcher.fetch_image("https://img.example.org/001.png") == b'\x89PNG'

    @patch('photodex.catalog.fetcher.requests.get')
    def test_unreachable(self, mock_get, fetcher):
        mock_get.side_effect = requests.ConnectionError("down")
        assert fetcher.fetch_image("https://img.example.org/001.png") is None

    def test_local(self, tmp_path, fetcher):
        path = tmp_path / "001.png"
        path.write_bytes(b'data')
        assert fetcher.fetch_image(str(path)) == b'data'

    def test_local_missing(self, tmp_path, fetcher):
        assert fetcher.fetch_image(str(tmp_path / "nope.png")) is None


# ---------------------------------------------------------------------------
# FetchPool
# ---------------------------------------------------------------------------

class TestFetchPool:
    def test_submit_image(self):
        fake = MagicMock()
        fake.fetch_image.return_value = b'bytes'
        pool = FetchPool(fetcher=fake, max_workers=2)
        try:
            assert pool.submit_image("a.png").result(timeout=5) == b'bytes'
            fake.fetch_image.assert_called_once_with("a.png")
        finally:
            pool.shutdown(wait=True)

    def test_submit_catalog_load_propagates_error(self):
        fake = MagicMock()
        fake.fetch_document.side_effect = CatalogLoadError("bad")
        pool = FetchPool(fetcher=fake, max_workers=1)
        try:
            future = pool.submit_catalog_load("data.json")
            with pytest.raises(CatalogLoadError):
                future.result(timeout=5)
        finally:
            pool.shutdown(wait=True)

    def test_shutdown_is_safe(self):
        pool = FetchPool(max_workers=1)
        pool.shutdown(wait=False)


# ---------------------------------------------------------------------------
# load_catalog
# ---------------------------------------------------------------------------

class TestLoadCatalog:
    def test_builds_catalog(self, small_document):
        fake = MagicMock()
        fake.fetch_document.return_value = small_document
        catalog = load_catalog("data.json", fetcher=fake)
        assert catalog.ids == ['001', '002', '003', '004', '005']

    def test_error_propagates(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            load_catalog(str(tmp_path / "missing.json"))
