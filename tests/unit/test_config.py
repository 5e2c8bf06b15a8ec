"""Unit tests for config.py settings validation."""

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:
    def test_postgres_url_coerced_to_asyncpg(self):
        settings = Settings(database_url="postgresql://u:p@db:5432/auth")
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/auth"

    def test_production_rejects_default_secret(self):
        with pytest.raises(ValidationError):
            Settings(environment="production", jwt_secret_key="CHANGE-ME-IN-PRODUCTION")

    def test_production_rejects_short_secret(self):
        with pytest.raises(ValidationError):
            Settings(environment="production", jwt_secret_key="short")

    def test_production_accepts_strong_secret(self):
        settings = Settings(environment="production", jwt_secret_key="x" * 32)
        assert settings.is_production

    def test_development_warns_on_short_secret(self):
        with pytest.warns(UserWarning):
            Settings(environment="development", jwt_secret_key="short")

    def test_access_token_ttl_seconds(self):
        settings = Settings(jwt_access_token_expire_minutes=15)
        assert settings.access_token_ttl_seconds == 900
