"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds its environment variables and that
the grouped configuration models are derived from them.
"""

import pytest

from ucsb_api.server.core.config import CORSConfig, JWTConfig, Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove variables the test session sets so defaults can be observed."""
    for name in ("DATABASE_URL", "JWT_SECRET_KEY", "ENABLE_FILE_LOGGING", "UCSB_API_SERVER_PORT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsDefaults:
    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 8080
        assert settings.log_level == "INFO"
        assert settings.database_url == "sqlite+aiosqlite:///./ucsb_api.db"
        assert settings.jwt_algorithm == "HS256"
        assert settings.enable_file_logging is False


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_server_binding(self, monkeypatch):
        monkeypatch.setenv("UCSB_API_SERVER_HOST", "127.0.0.1")
        monkeypatch.setenv("UCSB_API_SERVER_PORT", "9000")

        settings = Settings(_env_file=None)

        assert settings.server_host == "127.0.0.1"
        assert settings.server_port == 9000

    def test_database_url_binding(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/ucsb")
        assert Settings(_env_file=None).database_url == "postgresql://u:p@db:5432/ucsb"

    def test_log_settings_binding(self, monkeypatch):
        monkeypatch.setenv("UCSB_API_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("ENABLE_FILE_LOGGING", "true")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.enable_file_logging is True

    def test_cors_origins_binding(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')
        assert Settings(_env_file=None).cors_origins == ["http://localhost:3000"]

    def test_env_names_are_case_sensitive(self, monkeypatch):
        monkeypatch.setenv("ucsb_api_server_port", "1234")
        monkeypatch.delenv("UCSB_API_SERVER_PORT", raising=False)
        assert Settings(_env_file=None).server_port == 8080


class TestGroupedConfig:
    def test_jwt_config_is_built_from_settings(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")
        monkeypatch.setenv("JWT_ACCESS_TOKEN_EXPIRE_MINUTES", "5")

        jwt_config = Settings(_env_file=None).jwt

        assert isinstance(jwt_config, JWTConfig)
        assert jwt_config.secret_key == "s3cret"
        assert jwt_config.access_token_expire_minutes == 5

    def test_cors_config_is_built_from_settings(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", "false")

        cors = Settings(_env_file=None).cors

        assert isinstance(cors, CORSConfig)
        assert cors.allow_credentials is False
        assert cors.origins == ["*"]

    def test_grouped_models_accept_field_names(self):
        assert JWTConfig(secret_key="k").secret_key == "k"
        assert CORSConfig(origins=["https://ucsb.edu"]).origins == ["https://ucsb.edu"]
