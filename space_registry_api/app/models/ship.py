"""
Domain model for ships.

``Ship`` is the persisted record; ``ShipDraft`` is the immutable
field-presence wrapper used for create and update payloads, where
``None`` means "not supplied".  ``ShipFilters`` holds the optional
listing predicates.  These are pure Python classes, independent of
both the API schemas and the storage layer.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Tuple

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sort keys accepted by the listing operation."""

    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=millis)


def to_epoch_millis(moment: datetime) -> int:
    """Convert a datetime to epoch milliseconds (naive values are UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - EPOCH) // timedelta(milliseconds=1)


# Range of epoch milliseconds representable as a datetime.
MIN_EPOCH_MILLIS = to_epoch_millis(datetime.min.replace(tzinfo=timezone.utc))
MAX_EPOCH_MILLIS = to_epoch_millis(datetime.max.replace(tzinfo=timezone.utc))

# Ids are stored as signed 64-bit SQLite integers.
MAX_SHIP_ID = 2**63 - 1


@dataclass(slots=True, kw_only=True)
class Ship:
    id: Optional[int] = None
    name: str
    planet: str
    ship_type: ShipType
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float


@dataclass(frozen=True)
class ShipDraft:
    """Client-supplied ship fields; ``None`` marks an absent field."""

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    prod_date: Optional[datetime] = None
    is_used: Optional[bool] = None
    speed: Optional[float] = None
    crew_size: Optional[int] = None

    def supplied(self) -> Tuple[str, ...]:
        """Names of the fields that carry a value, in declaration order."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)


@dataclass(frozen=True)
class ShipFilters:
    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    is_used: Optional[bool] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    min_crew_size: Optional[int] = None
    max_crew_size: Optional[int] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None
