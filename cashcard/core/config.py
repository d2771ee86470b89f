"""
Configuration helpers for the cash card backend.

Settings are read from environment variables once and cached; tests clear the
cache with ``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    default_page_size: int
    max_page_size: int
    auto_create_tables: bool
    seed_demo_data: bool
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    default_size = max(1, _int(os.getenv("DEFAULT_PAGE_SIZE"), 20))
    max_size = max(default_size, _int(os.getenv("MAX_PAGE_SIZE"), 2000))
    origins = tuple(o.strip().rstrip("/") for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./cashcard.db").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        default_page_size=default_size,
        max_page_size=max_size,
        auto_create_tables=_bool(os.getenv("AUTO_CREATE_TABLES"), True),
        seed_demo_data=_bool(os.getenv("SEED_DEMO_DATA"), False),
        cors_origins=origins,
    )
