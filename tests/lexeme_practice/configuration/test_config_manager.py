#!/usr/bin/env python3
"""
Tests for configuration loading and defaults.
"""
import json

import pytest

from lexeme_practice.configuration.config_manager import ConfigManager, HintSettings, TIMEOUT_ENV_VAR
from lexeme_practice.logging import LogLevel
from lexeme_practice.util.paths import get_config_path


def test_missing_config_file_raises(tmp_path):
    manager = ConfigManager(config_path=tmp_path / "missing.json")
    with pytest.raises(FileNotFoundError):
        manager.load_config_data()


def test_defaults_for_empty_sections():
    manager = ConfigManager(config_data={})
    assert manager.get_hint_settings() == HintSettings()
    assert manager.get_hint_settings().max_requests_per_minute == 20
    assert manager.get_hint_settings().max_cache_size == 500
    assert manager.get_log_level() is LogLevel.INFO


def test_reads_values_from_file(tmp_path, monkeypatch):
    monkeypatch.delenv(TIMEOUT_ENV_VAR, raising=False)
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({
        "log_level": "trace",
        "hint": {"max_cache_size": 10, "max_requests_per_minute": 3, "model_id": "gemini-2.5-flash"},
        "chat": {"temperature": 0.2, "timeout_seconds": 12},
    }), encoding="utf-8")

    manager = ConfigManager(config_path=config_path)
    hint_settings = manager.get_hint_settings()
    assert hint_settings.max_cache_size == 10
    assert hint_settings.max_requests_per_minute == 3
    assert hint_settings.model_id == "gemini-2.5-flash"
    assert hint_settings.source_language_code == "id"

    chat_settings = manager.get_chat_settings()
    assert chat_settings.temperature == 0.2
    assert chat_settings.timeout_seconds == 12
    assert manager.get_log_level() is LogLevel.TRACE


def test_timeout_environment_override(monkeypatch):
    monkeypatch.setenv(TIMEOUT_ENV_VAR, "45000")
    manager = ConfigManager(config_data={"chat": {"timeout_seconds": 10}})
    assert manager.get_chat_settings().timeout_seconds == 45


def test_shipped_config_is_valid():
    manager = ConfigManager(config_path=get_config_path())
    assert manager.get_hint_settings().cache_key == "cshs-hints"
