"""Unit tests for settings."""

import pytest

from dealort.config import AuthSettings, Settings
from dealort.util.error import ConfigurationError


class TestSettings:
    def test_development_urls(self):
        settings = Settings(environment="development")

        assert settings.api.base_url == "http://localhost:8000"
        assert settings.api.frontend_url == "http://localhost:3001"
        assert settings.allowed_origins[0] == "http://localhost:3001"

    def test_production_urls(self):
        settings = Settings(
            environment="production",
            host="api.dealort.com",
            frontend_host="dealort.com",
        )

        assert settings.api.base_url == "https://api.dealort.com"
        assert settings.api.frontend_url == "https://dealort.com"

    def test_placeholder_secret_rejected_in_production(self):
        settings = Settings(environment="production")

        with pytest.raises(ConfigurationError, match="AUTH__JWT_SECRET"):
            settings.require_production_secrets()

    def test_placeholder_secret_allowed_in_development(self):
        Settings(environment="development").require_production_secrets()

    def test_real_secret_accepted_in_production(self):
        settings = Settings(
            environment="production", auth=AuthSettings(jwt_secret="s3cret")
        )

        settings.require_production_secrets()
