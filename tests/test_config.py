"""Tests for environment driven settings."""

import pytest

from cakeshop.config import get_settings


@pytest.mark.unit
class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("CAKESHOP_PERSIST_HISTORY", "CAKESHOP_LOG_LEVEL", "CAKESHOP_HOST", "CAKESHOP_PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.persist_history is True
        assert settings.log_level == "INFO"
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
        monkeypatch.setenv("CAKESHOP_PERSIST_HISTORY", "no")
        monkeypatch.setenv("CAKESHOP_LOG_LEVEL", "debug")
        monkeypatch.setenv("CAKESHOP_PORT", "9000")

        settings = get_settings()

        assert settings.database_url == "sqlite:///./other.db"
        assert settings.persist_history is False
        assert settings.log_level == "DEBUG"
        assert settings.port == 9000
