"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from reportlab.lib.pagesizes import A4, LETTER

from resume_tailor.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "RESUME_TAILOR_PAGE_SIZE",
        "RESUME_TAILOR_LOG_LEVEL",
        "RESUME_TAILOR_CORS_ORIGINS",
        "RESUME_TAILOR_HOST",
        "RESUME_TAILOR_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("resume_tailor.config.load_dotenv", lambda: False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self) -> None:
        settings = get_settings()
        assert settings.page_size == A4
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ("*",)
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000

    def test_values_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESUME_TAILOR_PAGE_SIZE", "letter")
        monkeypatch.setenv("RESUME_TAILOR_LOG_LEVEL", "debug")
        monkeypatch.setenv("RESUME_TAILOR_CORS_ORIGINS", "http://a.test, http://b.test")
        monkeypatch.setenv("RESUME_TAILOR_PORT", "9000")
        settings = get_settings()
        assert settings.page_size == LETTER
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ("http://a.test", "http://b.test")
        assert settings.port == 9000

    def test_invalid_values_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESUME_TAILOR_PAGE_SIZE", "tabloid")
        monkeypatch.setenv("RESUME_TAILOR_LOG_LEVEL", "loud")
        monkeypatch.setenv("RESUME_TAILOR_PORT", "eighty")
        settings = get_settings()
        assert settings.page_size == A4
        assert settings.log_level == "INFO"
        assert settings.port == 8000

    def test_cached(self) -> None:
        assert get_settings() is get_settings()
