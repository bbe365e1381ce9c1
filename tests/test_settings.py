# -*- coding: utf-8 -*-
"""
Tests for settings loading, validation and saving.
"""

import json

import pytest

import localeforge_config as config
from localeforge_settings import default_settings, load_settings, save_settings


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(config, "SETTINGS_FILE_PATH", path)
    return path


class TestSettings:

    def test_missing_file_gives_defaults(self, settings_file):
        assert load_settings() == default_settings()

    def test_defaults(self):
        defaults = default_settings()
        assert defaults["translation_timeout_sec"] is None
        assert defaults["active_engine"] == config.DEFAULT_ENGINE_ID
        assert defaults["translation_max_workers"] == config.DEFAULT_TRANSLATION_MAX_WORKERS

    def test_corrupt_file_gives_defaults(self, settings_file):
        settings_file.write_text("{broken", encoding='utf-8')
        assert load_settings() == default_settings()

    def test_non_mapping_gives_defaults(self, settings_file):
        settings_file.write_text("[1, 2]", encoding='utf-8')
        assert load_settings() == default_settings()

    def test_invalid_values_corrected(self, settings_file):
        settings_file.write_text(json.dumps({
            "assets_dir": "",
            "active_engine": 5,
            "translation_timeout_sec": -3,
            "translation_max_workers": 0,
            "window_size_w": "wide",
        }), encoding='utf-8')
        settings = load_settings()
        defaults = default_settings()

        assert settings["assets_dir"] == defaults["assets_dir"]
        assert settings["active_engine"] == defaults["active_engine"]
        assert settings["translation_timeout_sec"] is None
        assert settings["translation_max_workers"] == defaults["translation_max_workers"]
        assert settings["window_size_w"] == defaults["window_size_w"]

    def test_save_and_reload(self, settings_file, tmp_path):
        data = default_settings()
        data["assets_dir"] = str(tmp_path / "my_assets")
        data["translation_timeout_sec"] = 7.5
        data["active_engine"] = config.DUMMY_ENGINE_ID

        assert save_settings(data) is True
        assert load_settings() == data

    def test_save_unserializable_returns_false(self, settings_file):
        assert save_settings({"bad": object()}) is False
