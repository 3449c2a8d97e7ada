"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from mysql_utilities.config import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MYSQL_UTILITIES_SLOW_THRESHOLD_MS", raising=False)
        monkeypatch.delenv("MYSQL_UTILITIES_IDENTIFIER_QUOTE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.slow_threshold_ms == 2000
        assert settings.identifier_quote == "`"
        assert settings.log_to_file is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MYSQL_UTILITIES_SLOW_THRESHOLD_MS", "150")
        assert Settings(_env_file=None).slow_threshold_ms == 150

    def test_log_level_without_prefix(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

    def test_quote_must_be_single_character(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, identifier_quote="``")

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, slow_threshold_ms=-1)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
