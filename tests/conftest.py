# -*- coding: utf-8 -*-
"""
Shared fixtures: catalog documents and catalogs.

Created
-------
2026-10-19
"""

import os
import sys

import pytest

from photodex.catalog.models import PLACEHOLDER_URL, Catalog, format_entity_id
from photodex.core.validation import DEFAULT_SPOT_CHECKS


def make_document(count=1025, captured=(), names=None):
    """Build a document of ``count`` entries.

    Entries listed in ``captured`` get a real image; all others carry
    only the placeholder. Spot-checked identifiers get their expected
    names.
    """
    names = dict(DEFAULT_SPOT_CHECKS, **(names or {}))
    data = {}
    for i in range(1, count + 1):
        key = format_entity_id(i)
        image = (
            f"https://img.example.org/{key}.png" if key in captured
            else PLACEHOLDER_URL
        )
        data[key] = {
            'name': names.get(key, f"Entity {key}"),
            'variants': [{'label': 'Base', 'image': image}],
        }
    return data


@pytest.fixture
def document():
    return make_document(captured={'001', '004', '025'})


@pytest.fixture
def catalog(document):
    return Catalog.from_document(document)


@pytest.fixture
def small_document():
    """A handful of entries covering every variant shape."""
    return {
        '001': {
            'name': 'Bulbasaur',
            'variants': [
                {'label': 'Base', 'image': 'https://img.example.org/001.png'},
                {'label': 'Shiny', 'image': PLACEHOLDER_URL},
            ],
        },
        '002': {
            'name': 'Ivysaur',
            'variants': [{'label': 'Base', 'image': PLACEHOLDER_URL}],
        },
        '003': {
            'name': 'Venusaur',
            'variants': [
                {
                    'label': 'Base',
                    'image': ['https://img.example.org/003a.png',
                              'https://img.example.org/003b.png'],
                    'position': ['top', 'bottom'],
                },
                {
                    'label': 'Venusaur Mega',
                    'image': ['https://img.example.org/003c.png',
                              'https://img.example.org/003d.png'],
                    'fit': 'cover',
                },
            ],
        },
        '004': {'name': 'Charmander'},
        '005': {
            'name': 'Charmeleon',
            'variants': [{'label': 'Charmeleon', 'image': 'https://img.example.org/005.png'}],
        },
    }


@pytest.fixture
def small_catalog(small_document):
    return Catalog.from_document(small_document)


@pytest.fixture
def document_factory():
    return make_document


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication for the test session."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:
        pytest.skip("Qt not available")
        return

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
