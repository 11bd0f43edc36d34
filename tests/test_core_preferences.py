# -*- coding: utf-8 -*-
"""
Tests for photodex.core.preferences — theme persistence.

Created
-------
2026-10-19
"""

import json
import os
from pathlib import Path
from unittest import mock

from photodex.core.preferences import DEFAULT_THEME, PreferenceStore, Theme


class TestTheme:
    def test_toggle(self):
        assert Theme.DARK.toggled() is Theme.LIGHT
        assert Theme.LIGHT.toggled() is Theme.DARK

    def test_toggle_text(self):
        assert Theme.DARK.toggle_text == "Toggle Light Mode"
        assert Theme.LIGHT.toggle_text == "Toggle Dark Mode"

    def test_default_is_dark(self):
        assert DEFAULT_THEME is Theme.DARK


class TestPreferenceStore:
    def test_absent_file_defaults(self, tmp_path):
        store = PreferenceStore(tmp_path / "prefs.json")
        assert store.load_theme() is Theme.DARK

    def test_save_and_load(self, tmp_path):
        store = PreferenceStore(tmp_path / "nested" / "prefs.json")
        store.save_theme(Theme.LIGHT)
        assert json.loads(store.path.read_text()) == {"theme": "light"}
        assert PreferenceStore(store.path).load_theme() is Theme.LIGHT

    def test_corrupt_file_defaults(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json")
        assert PreferenceStore(path).load_theme() is Theme.DARK

    def test_unknown_theme_defaults(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"theme": "sepia"}))
        assert PreferenceStore(path).load_theme() is Theme.DARK

    def test_env_var_path(self, tmp_path):
        target = tmp_path / "env-prefs.json"
        with mock.patch.dict(os.environ, {"PHOTODEX_PREFS_PATH": str(target)}):
            assert PreferenceStore().path == Path(target)
