"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Campus Marketplace API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # All routers are mounted below this prefix, e.g. ``/api/messages``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "campus_marketplace.db")


# Environment variables must be set before this module is imported.
settings = Settings()
