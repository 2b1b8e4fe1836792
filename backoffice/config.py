"""Back office configuration system using Pydantic Settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackofficeConfig(BaseSettings):
    """Main configuration class. Loads from .env file and environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Coaching Back Office"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: str = "http://localhost:3000"

    # Database
    database_url: str = "sqlite+aiosqlite:///./backoffice.db"

    # Auth
    secret_key: str = "CHANGE_ME_IN_PRODUCTION"
    jwt_algorithm: str = "HS256"
    jwt_expiry_minutes: int = 60
    # First admin account created at startup when no admin exists
    admin_email: str = ""
    admin_password: str = ""

    # Logging
    log_dir: str = "logs"
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5

    # Admin dashboard
    overview_cache_ttl: float = 10.0
    users_default_page_size: int = 20
    users_max_page_size: int = 200
    supported_locales: list[str] = ["en", "de", "fr", "es"]

    # Console (admin API client side)
    api_base_url: str = "http://127.0.0.1:8000"
    api_timeout_seconds: float = 30.0
    filter_debounce_ms: int = 500

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        allowed = {"HS256", "HS384", "HS512"}
        if v not in allowed:
            raise ValueError(f"jwt_algorithm must be one of {allowed}")
        return v

    @field_validator("filter_debounce_ms")
    @classmethod
    def validate_debounce(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("filter_debounce_ms must be positive")
        return v

    @property
    def base_dir(self) -> Path:
        return Path(__file__).resolve().parent.parent


def get_config() -> BackofficeConfig:
    """Factory function to create config instance."""
    return BackofficeConfig()
