# -*- coding: utf-8 -*-
"""
Source Path Resolver - Locate the catalog document and preference file.

Resolves the catalog data source using a priority chain:
1. Explicit argument (command line)
2. PHOTODEX_DATA environment variable
3. ~/.photodex/config.json "data_source" field
4. data.json in the working directory (default fallback)

The preference file follows PHOTODEX_PREFS_PATH, then
~/.photodex/preferences.json.

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
import os
from pathlib import Path
from typing import Optional


_DATA_ENV_VAR = "PHOTODEX_DATA"
_PREFS_ENV_VAR = "PHOTODEX_PREFS_PATH"
_CONFIG_DIR = ".photodex"
_CONFIG_FILE = "config.json"
_PREFS_FILE = "preferences.json"
_DEFAULT_DATA = "data.json"


def is_remote(source: str) -> bool:
    """Whether a source string is an http(s) URL."""
    return source.lower().startswith(('http://', 'https://'))


def resolve_data_source(explicit: Optional[str] = None) -> str:
    """Resolve the catalog document location.

    Priority:
    1. ``explicit`` argument
    2. ``PHOTODEX_DATA`` environment variable
    3. ``~/.photodex/config.json`` → ``data_source`` field
    4. ``data.json`` (default)

    Parameters
    ----------
    explicit : Optional[str]
        Source given by the caller, e.g. on the command line.

    Returns
    -------
    str
        Path or URL of the catalog document.
    """
    if explicit:
        return explicit

    env_source = os.environ.get(_DATA_ENV_VAR)
    if env_source:
        return env_source

    config_path = Path.home() / _CONFIG_DIR / _CONFIG_FILE
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
            data_source = config.get('data_source')
            if data_source:
                return str(data_source)
        except (json.JSONDecodeError, OSError, AttributeError):
            pass

    return _DEFAULT_DATA


def resolve_prefs_path() -> Path:
    """Resolve the theme preference file path.

    Returns
    -------
    Path
        ``PHOTODEX_PREFS_PATH`` if set, else
        ``~/.photodex/preferences.json``.
    """
    env_path = os.environ.get(_PREFS_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / _CONFIG_DIR / _PREFS_FILE

