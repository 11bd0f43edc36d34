# -*- coding: utf-8 -*-
"""
Tests for photodex.core.config — PhotoDexConfig and load_config.

Created
-------
2026-10-19
"""

import json

from photodex.core.config import PhotoDexConfig, load_config


class TestPhotoDexConfig:
    def test_defaults(self):
        cfg = PhotoDexConfig()
        assert cfg.data_source == "data.json"
        assert cfg.entry_count == 1025
        assert cfg.thumb_size == 120
        assert cfg.columns == 8
        assert cfg.compact_threshold == 2
        assert cfg.captured_preview == 20
        assert cfg.request_timeout == 10.0
        assert cfg.max_workers == 4

    def test_custom_values(self):
        cfg = PhotoDexConfig(columns=4, max_workers=8)
        assert cfg.columns == 4
        assert cfg.max_workers == 8

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        cfg = PhotoDexConfig(thumb_size=64, compact_threshold=5)
        cfg.save(path)

        loaded = load_config(path)
        assert loaded.thumb_size == 64
        assert loaded.compact_threshold == 5
        # Other fields should be default
        assert loaded.columns == 8

    def test_load_missing_file_returns_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "nonexistent.json")
        assert cfg.thumb_size == 120

    def test_load_corrupted_file_returns_defaults(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json {{{")
        cfg = load_config(path)
        assert cfg.thumb_size == 120

    def test_load_non_object_returns_defaults(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        assert load_config(path) == PhotoDexConfig()

    def test_load_ignores_unknown_fields(self, tmp_path):
        path = tmp_path / "config.json"
        with open(path, 'w') as f:
            json.dump({"columns": 6, "unknown_field": 42}, f)
        cfg = load_config(path)
        assert cfg.columns == 6

    def test_invalid_values_fall_back_per_field(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "columns": "eight",
            "thumb_size": 0,
            "max_workers": True,
            "request_timeout": 3,
            "compact_threshold": 0,
            "data_source": "",
        }))
        cfg = load_config(path)
        assert cfg.columns == 8
        assert cfg.thumb_size == 120
        assert cfg.max_workers == 4
        assert cfg.data_source == "data.json"
        assert cfg.request_timeout == 3
        assert cfg.compact_threshold == 0

    def test_float_rejected_for_int_field(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"columns": 6.5}))
        assert load_config(path).columns == 8

    def test_save_keeps_unknown_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"note": "kept", "columns": 3}))
        PhotoDexConfig(columns=5).save(path)
        data = json.loads(path.read_text())
        assert data["note"] == "kept"
        assert data["columns"] == 5
