import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from dynadocs.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    get_settings.cache_clear()

    settings = Settings()

    assert settings.app_name == "Dynadocs"
    assert settings.api_prefix == "/api/dynamic"
    assert settings.port == 8080
    assert settings.store_timeout_seconds is None
    assert settings.is_development is True


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "DYNADOCS_ENVIRONMENT": "production",
        "DYNADOCS_PORT": "9000",
        "DYNADOCS_STORE_TIMEOUT_SECONDS": "2.5",
    }):
        settings = Settings()

        assert settings.is_production is True
        assert settings.port == 9000
        assert settings.store_timeout_seconds == 2.5


def test_cors_origins_comma_separated():
    """Test CORS origins parsing from a comma-separated string."""
    with patch.dict(os.environ, {"DYNADOCS_CORS_ORIGINS": "http://a.com, http://b.com"}):
        settings = Settings()
        assert settings.cors_origins == ["http://a.com", "http://b.com"]


def test_store_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(store_timeout_seconds=0)


def test_sqlite_rejects_multiple_workers():
    with pytest.raises(ValidationError, match="SQLite does not support multiple worker"):
        Settings(workers=2, database_url="sqlite+aiosqlite:///./x.db")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
