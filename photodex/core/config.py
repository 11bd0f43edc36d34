# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable defaults for PhotoDex.

Provides a PhotoDexConfig dataclass with default values for the data
source, grid sizing, filter threshold, timeouts, and worker counts.
Loads from ~/.photodex/config.json if it exists, otherwise uses
sensible defaults.

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
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".photodex"
_CONFIG_FILE = _CONFIG_DIR / "config.json"


@dataclass
class PhotoDexConfig:
    """Global PhotoDex configuration with defaults.

    Attributes
    ----------
    data_source : str
        Path or URL of the catalog document.
    entry_count : int
        Number of entries the catalog is expected to hold.
    thumb_size : int
        Grid cell image size in pixels.
    columns : int
        Grid columns in the multi-column layout.
    compact_threshold : int
        Visible-cell count at or below which the grid switches to the
        single-column layout.
    captured_preview : int
        Entries shown in the captured list before "Show All".
    request_timeout : float
        HTTP timeout for catalog and image fetches in seconds.
    max_workers : int
        Maximum worker threads for background fetches.
    """

    data_source: str = "data.json"
    entry_count: int = 1025
    thumb_size: int = 120
    columns: int = 8
    compact_threshold: int = 2
    captured_preview: int = 20
    request_timeout: float = 10.0
    max_workers: int = 4

    def save(self, path: Optional[Path] = None) -> None:
        """Write the config as JSON.

        Keys already in the file that PhotoDex does not know are kept.
        """
        path = path or _CONFIG_FILE
        data = _read_object(path) or {}
        data.update(asdict(self))
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


# Smallest accepted value per numeric field.
_MINIMUMS: Dict[str, float] = {
    'entry_count': 1,
    'thumb_size': 16,
    'columns': 1,
    'compact_threshold': 0,
    'captured_preview': 1,
    'request_timeout': 0.1,
    'max_workers': 1,
}


def _read_object(path: Path) -> Optional[Dict[str, Any]]:
    if not path.exists():
        return None
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning(
            "Config at %s must be a JSON object, got %s", path, type(data).__name__,
        )
        return None
    return data


def _accepts(name: str, value: Any) -> bool:
    """Whether ``value`` is usable for the config field ``name``."""
    kind = PhotoDexConfig.__dataclass_fields__[name].type
    if kind in (str, 'str'):
        return isinstance(value, str) and bool(value.strip())
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if kind in (int, 'int') and not isinstance(value, int):
        return False
    return value >= _MINIMUMS.get(name, value)


def load_config(path: Optional[Path] = None) -> PhotoDexConfig:
    """Load configuration from file, or return defaults.

    Each field is checked on its own: a value of the wrong type or below
    its minimum is logged and replaced by the default, and the remaining
    fields still apply. Unknown keys are ignored.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to ~/.photodex/config.json.

    Returns
    -------
    PhotoDexConfig
        Loaded or default configuration.
    """
    path = path or _CONFIG_FILE
    data = _read_object(path)
    if data is None:
        return PhotoDexConfig()

    values = {}
    for name, value in data.items():
        if name not in PhotoDexConfig.__dataclass_fields__:
            logger.debug("Ignoring unknown config key %r", name)
            continue
        if not _accepts(name, value):
            logger.warning("Ignoring invalid config value %s=%r", name, value)
            continue
        values[name] = value
    return PhotoDexConfig(**values)
