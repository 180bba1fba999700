"""Tests for config module."""

import logging

from gw2_client.config import Settings, configure_logging, reload_settings


def test_settings_defaults():
    settings = Settings()

    assert settings.api_timeout == 30.0
    assert settings.base_url == "https://api.guildwars2.com"
    assert settings.render_base_url == "https://render.guildwars2.com"
    assert settings.default_language == "en"
    assert settings.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("GW2_API_TIMEOUT", "60.0")
    monkeypatch.setenv("GW2_DEFAULT_LANGUAGE", "de")
    monkeypatch.setenv("GW2_LOG_LEVEL", "DEBUG")

    settings = reload_settings()

    assert settings.api_timeout == 60.0
    assert settings.default_language == "de"
    assert settings.log_level == "DEBUG"


def test_settings_ignores_extra_env_vars(monkeypatch):
    monkeypatch.setenv("GW2_UNKNOWN_VAR", "value")

    settings = reload_settings()

    assert not hasattr(settings, "unknown_var")


def test_configure_logging_uses_settings_level(mocker):
    basic_config = mocker.patch("logging.basicConfig")

    configure_logging(Settings(log_level="debug"))

    assert basic_config.call_args.kwargs["level"] == logging.DEBUG


def test_configure_logging_falls_back_to_info(mocker):
    basic_config = mocker.patch("logging.basicConfig")

    configure_logging(Settings(log_level="chatty"))

    assert basic_config.call_args.kwargs["level"] == logging.INFO
