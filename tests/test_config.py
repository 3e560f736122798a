from __future__ import annotations

import importlib

import config


def test_optional_float(monkeypatch):
    monkeypatch.delenv("LOCAL_UTC_OFFSET_HOURS", raising=False)
    assert config.optional_float("LOCAL_UTC_OFFSET_HOURS") is None
    assert config.optional_float("LOCAL_UTC_OFFSET_HOURS", 8.0) == 8.0

    monkeypatch.setenv("LOCAL_UTC_OFFSET_HOURS", " 5.5 ")
    assert config.optional_float("LOCAL_UTC_OFFSET_HOURS", 8.0) == 5.5


def test_production_defaults_to_utc_plus_8(monkeypatch):
    monkeypatch.delenv("LOCAL_UTC_OFFSET_HOURS", raising=False)
    monkeypatch.setenv("APP_ENV", "production")

    settings = importlib.reload(importlib.import_module(config.get_settings_module()))
    assert settings.LOCAL_UTC_OFFSET_HOURS == 8.0
