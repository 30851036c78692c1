"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class JWTConfig(BaseModel):
    """Bearer token verification configuration."""

    secret_key: str = Field(
        default="change-me-in-production",
        alias="JWT_SECRET_KEY",
        description="Secret used to sign and verify access tokens",
    )
    algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM", description="Token signing algorithm")
    access_token_expire_minutes: int = Field(
        default=60,
        alias="JWT_ACCESS_TOKEN_EXPIRE_MINUTES",
        description="Lifetime of tokens issued by create_access_token",
    )

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Server host address to bind to",
        alias="UCSB_API_SERVER_HOST",
    )
    server_port: int = Field(
        default=8080,
        description="Server port number",
        alias="UCSB_API_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="UCSB_API_LOG_LEVEL",
    )
    log_format: str = Field(default="detailed", description="Log format (simple, detailed, json)", alias="LOG_FORMAT")
    log_file_dir: str = Field(default="logs", description="Directory for the log file", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(
        default=False, description="Also write logs to a file", alias="ENABLE_FILE_LOGGING"
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./ucsb_api.db",
        description="Async database connection URL; Postgres URLs are rewritten to asyncpg",
        alias="DATABASE_URL",
    )

    # =====================================================================
    # Security Configuration
    # =====================================================================
    jwt_secret_key: str = Field(default="change-me-in-production", alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_access_token_expire_minutes: int = Field(default=60, alias="JWT_ACCESS_TOKEN_EXPIRE_MINUTES")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def jwt(self) -> JWTConfig:
        """Get bearer token configuration from environment variables."""
        return JWTConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
