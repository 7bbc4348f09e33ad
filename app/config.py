"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    jwt_secret: str = Field(
        description="Shared secret used to verify tokens issued by the identity provider",
        min_length=1,
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="Signature algorithm expected on incoming access tokens",
    )
    jwt_audience: str | None = Field(
        default="authenticated",
        description="Audience claim required on access tokens; empty disables the check",
    )
    admin_role: str = Field(
        default="admin",
        description="Role claim value that grants rule authoring privileges",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Asia/Kolkata",
        description="IANA timezone name or UTC offset used for stored timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma-separated list of origins allowed to call the API",
    )

    @field_validator("jwt_audience")
    @classmethod
    def _blank_audience_disables_check(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    def allowed_origins(self) -> list[str]:
        """Return the configured CORS origins as a list."""

        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
