# -*- coding: utf-8 -*-
"""
Core Module - Non-GUI logic for PhotoDex.

Contains image resolution, grid cell computation, the gallery state
machine, name filtering, capture summary, application state dispatch,
preferences, configuration, and catalog validation.

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
