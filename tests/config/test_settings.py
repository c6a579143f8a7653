"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from monaditto.config.settings import Environment, LogLevel, Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("MONADITTO_LOG_LEVEL", raising=False)
        monkeypatch.delenv("MONADITTO_ENVIRONMENT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL is LogLevel.WARNING
        assert settings.ENVIRONMENT is Environment.DEV
        assert settings.is_production is False

    def test_reads_prefixed_env(self, monkeypatch) -> None:
        monkeypatch.setenv("MONADITTO_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MONADITTO_ENVIRONMENT", "prod")
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL is LogLevel.DEBUG
        assert settings.is_production is True

    def test_unprefixed_env_is_ignored(self, monkeypatch) -> None:
        monkeypatch.delenv("MONADITTO_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings(_env_file=None).LOG_LEVEL is LogLevel.WARNING

    def test_invalid_level_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("MONADITTO_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_factory(self) -> None:
        assert isinstance(get_settings(), Settings)
