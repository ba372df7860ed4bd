"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support; validation runs in get_settings(), not at import.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "tenant-users"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: any SQLAlchemy async URL (postgresql+asyncpg://... in production)
    database_url: str = "sqlite+aiosqlite:///./users.db"
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    # Create tables on startup (no migrations are shipped)
    database_create_tables: bool = True

    # Security
    bcrypt_rounds: int = 12

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Tenant
    tenant_header_name: str = "X-Tenant"
    tenant_exempt_paths: str = "/api/v1/health,/docs,/redoc,/openapi.json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database_url(self) -> "Settings":
        """Require an async driver in DATABASE_URL (the app uses AsyncSession only)."""
        if not self.database_url:
            raise ValueError("DATABASE_URL is required. Set in environment or .env file.")
        scheme = self.database_url.split("://", 1)[0]
        if "+" not in scheme:
            raise ValueError(
                f"DATABASE_URL must name an async driver "
                f"(e.g. postgresql+asyncpg, sqlite+aiosqlite), got scheme: {scheme!r}"
            )
        return self

    @property
    def tenant_exempt_path_list(self) -> list[str]:
        """Path prefixes served without a tenant header."""
        return [p.strip() for p in self.tenant_exempt_paths.split(",") if p.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() after overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
