"""
Domain models for the ship registry.

These are pure Python classes, separate from the API schemas and the
SQLite row layout.
"""

from space_registry_api.app.models.ship import (
    MAX_EPOCH_MILLIS,
    MAX_SHIP_ID,
    MIN_EPOCH_MILLIS,
    Ship,
    ShipDraft,
    ShipFilters,
    ShipOrder,
    ShipType,
    from_epoch_millis,
    to_epoch_millis,
)

__all__ = [
    "MAX_EPOCH_MILLIS",
    "MAX_SHIP_ID",
    "MIN_EPOCH_MILLIS",
    "Ship",
    "ShipDraft",
    "ShipFilters",
    "ShipOrder",
    "ShipType",
    "from_epoch_millis",
    "to_epoch_millis",
]
