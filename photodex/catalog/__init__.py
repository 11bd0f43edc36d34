# -*- coding: utf-8 -*-
"""
Catalog Module - Catalog data model, loading and fetching.

Provides the Entity/Variant/Catalog models, resolution of the data
source and preference paths, and requests-based fetching of the catalog
document and images on a background thread pool.

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
