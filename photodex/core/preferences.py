# -*- coding: utf-8 -*-
"""
Preferences - Persisted theme preference.

A single ``theme`` key ("dark" or "light") stored in a JSON file. Read
once at startup and written whenever the theme is toggled. A missing
file means the default dark theme.

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
from enum import Enum
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# PhotoDex internal
from photodex.catalog.resolver import resolve_prefs_path

_THEME_KEY = "theme"


class Theme(Enum):
    """Visual theme."""

    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> 'Theme':
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK

    @property
    def toggle_text(self) -> str:
        """Label of the toggle button while this theme is active."""
        return "Toggle Light Mode" if self is Theme.DARK else "Toggle Dark Mode"


DEFAULT_THEME = Theme.DARK


class PreferenceStore:
    """Reads and writes the theme preference.

    Parameters
    ----------
    path : Optional[Path]
        Preference file. Defaults to :func:`resolve_prefs_path`.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or resolve_prefs_path()

    def load_theme(self) -> Theme:
        """Read the stored theme, or the default if none is stored.

        Returns
        -------
        Theme
        """
        if not self.path.exists():
            return DEFAULT_THEME
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return Theme(data[_THEME_KEY])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable preferences in %s: %s", self.path, e)
            return DEFAULT_THEME

    def save_theme(self, theme: Theme) -> None:
        """Persist the theme.

        Parameters
        ----------
        theme : Theme
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({_THEME_KEY: theme.value}, f, indent=2)
        logger.debug("Saved theme %s to %s", theme.value, self.path)
