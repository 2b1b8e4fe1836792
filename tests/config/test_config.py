"""Tests for BackofficeConfig loading and validation."""

import pytest
from pydantic import ValidationError

from backoffice.config import BackofficeConfig


class TestBackofficeConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("OVERVIEW_CACHE_TTL", raising=False)
        config = BackofficeConfig(_env_file=None)
        assert config.database_url.startswith("sqlite+aiosqlite")
        assert config.filter_debounce_ms == 500
        assert config.users_default_page_size == 20
        assert "en" in config.supported_locales

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FILTER_DEBOUNCE_MS", "250")
        monkeypatch.setenv("API_BASE_URL", "http://backoffice.internal")
        config = BackofficeConfig(_env_file=None)
        assert config.filter_debounce_ms == 250
        assert config.api_base_url == "http://backoffice.internal"

    def test_rejects_unknown_jwt_algorithm(self):
        with pytest.raises(ValidationError):
            BackofficeConfig(_env_file=None, jwt_algorithm="none")

    @pytest.mark.parametrize("delay", [0, -10])
    def test_rejects_non_positive_debounce(self, delay):
        with pytest.raises(ValidationError):
            BackofficeConfig(_env_file=None, filter_debounce_ms=delay)
