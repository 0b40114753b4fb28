"""
Configuration settings for the GD Farms backend.

Loads environment variables from .env file and provides typed configuration.
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    ENVIRONMENT: str = Field(
        default="development", description="'development' or 'production'"
    )
    HOST: str = Field(default="0.0.0.0", description="Bind address")
    PORT: int = Field(default=8080, description="Listening port")
    CORS_ORIGINS: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )

    # Database Configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./data/gdfarms.db", description="Database connection URL"
    )
    DATABASE_ECHO: bool = Field(
        default=False, description="Echo SQL queries (for debugging)"
    )
    DATABASE_POOL_SIZE: int = Field(default=10, description="Pooled connections")
    DATABASE_MAX_OVERFLOW: int = Field(
        default=5, description="Connections allowed beyond the pool size"
    )
    DATABASE_POOL_TIMEOUT: int = Field(
        default=30, description="Seconds to wait for a pooled connection"
    )
    DATABASE_SSL: Optional[bool] = Field(
        default=None,
        description="Require TLS without certificate verification "
        "(defaults to on in production)",
    )

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = Field(default=True)
    USER_INIT_RATE_LIMIT: str = Field(
        default="30/minute", description="slowapi limit for POST /api/user/init"
    )

    # New-user defaults
    DEFAULT_CURRENCY: str = Field(default="KES")
    DEFAULT_APP_NAME: str = Field(default="GD Farms")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    @property
    def database_requires_ssl(self) -> bool:
        if self.DATABASE_SSL is not None:
            return self.DATABASE_SSL
        return self.ENVIRONMENT.lower() == "production"


# Global settings instance
settings = Settings()
