"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration, backed by a SQLite file
next to the package.  In a production deployment you should override
these via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Space Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the ship routes are mounted.  The historical
    # public path is ``/rest/ships``.
    api_prefix: str = os.getenv("API_PREFIX", "/rest")

    # Storage backend for ships: ``sqlite`` persists to ``database_url``,
    # ``memory`` keeps everything in process (useful for demos and tests).
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite")

    # Path or connection string for the SQLite database.  If a relative
    # path is provided, it will be resolved relative to the project root
    # by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "ships.db")

    # Page size used by the listing endpoint when the client omits it.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "3"))

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
