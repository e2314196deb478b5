"""Application settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Central configuration for the Library Catalog API."""

    model_config = {"env_prefix": "LIBRARY_", "case_sensitive": False}

    # Persistence
    repository_backend: Literal["memory", "sqlalchemy"] = "memory"
    database_url: str = "sqlite:///./library.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    run_migrations: bool = True
    seed_data: bool = True

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    # CORS
    cors_origins: str = "*"


def get_settings() -> AppSettings:
    """Return a fresh settings object read from the environment."""
    return AppSettings()
