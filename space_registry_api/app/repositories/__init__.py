"""Storage implementations for ships."""

from space_registry_api.app.repositories.ship_repository import (
    InMemoryShipRepository,
    ShipRepository,
    SqliteShipRepository,
)

__all__ = ["InMemoryShipRepository", "ShipRepository", "SqliteShipRepository"]
