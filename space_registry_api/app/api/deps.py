"""
FastAPI dependencies shared by the v1 endpoints.

``get_ship_service`` builds the repository selected by
``settings.storage_backend`` on first use and wraps it in a
``ShipService``.  Tests replace it through
``app.dependency_overrides``.
"""

import logging
from functools import lru_cache

from space_registry_api.app.core.config import settings
from space_registry_api.app.repositories import (
    InMemoryShipRepository,
    ShipRepository,
    SqliteShipRepository,
)
from space_registry_api.app.services.ship_service import ShipService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_repository() -> ShipRepository:
    backend = settings.storage_backend.lower()
    if backend == "memory":
        logger.info("Using in-memory ship storage")
        return InMemoryShipRepository()
    if backend == "sqlite":
        logger.info("Using SQLite ship storage at %s", settings.database_url)
        return SqliteShipRepository(settings.database_url)
    raise RuntimeError(f"Unsupported STORAGE_BACKEND: {settings.storage_backend!r}")


def get_ship_service() -> ShipService:
    return ShipService(get_repository())
