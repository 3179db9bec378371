"""
Pydantic models for ship data.

These schemas define the JSON exchanged via the API.  Field names on
the wire are camelCase (``shipType``, ``prodDate``, ``isUsed``,
``crewSize``) and ``prodDate`` travels as epoch milliseconds.  Request
schemas leave every field optional: required-on-create is a domain
rule enforced by the service so that a missing field is reported the
same way as an out-of-range one.  ``id`` and ``rating`` in request
bodies are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field

from space_registry_api.app.models import (
    MAX_EPOCH_MILLIS,
    MIN_EPOCH_MILLIS,
    Ship,
    ShipDraft,
    ShipType,
    from_epoch_millis,
    to_epoch_millis,
)


class ShipPayload(BaseModel):
    name: Optional[str] = Field(None, examples=["Orion III"])
    planet: Optional[str] = Field(None, examples=["Mars"])
    ship_type: Optional[ShipType] = Field(None, alias="shipType", examples=["MERCHANT"])
    prod_date: Optional[int] = Field(
        None,
        alias="prodDate",
        ge=MIN_EPOCH_MILLIS,
        le=MAX_EPOCH_MILLIS,
        description="Production date as epoch milliseconds",
        examples=[32998435200000],
    )
    is_used: Optional[bool] = Field(None, alias="isUsed", examples=[False])
    speed: Optional[float] = Field(None, examples=[0.82])
    crew_size: Optional[int] = Field(None, alias="crewSize", examples=[617])

    model_config = {
        "populate_by_name": True,
    }

    def to_draft(self) -> ShipDraft:
        """Convert to the domain draft; ``None`` fields count as not supplied."""
        return ShipDraft(
            name=self.name,
            planet=self.planet,
            ship_type=self.ship_type,
            prod_date=from_epoch_millis(self.prod_date) if self.prod_date is not None else None,
            is_used=self.is_used,
            speed=self.speed,
            crew_size=self.crew_size,
        )


class ShipCreate(ShipPayload):
    """Schema for creating a ship.  ``isUsed`` defaults to ``false``."""
    pass


class ShipUpdate(ShipPayload):
    """Schema for updating a ship.

    All fields are optional; only provided fields will be updated.
    """
    pass


class ShipRead(BaseModel):
    """Schema for reading a ship from the API."""

    id: int
    name: str
    planet: str
    ship_type: ShipType = Field(..., alias="shipType")
    prod_date: int = Field(..., alias="prodDate")
    is_used: bool = Field(..., alias="isUsed")
    speed: float
    crew_size: int = Field(..., alias="crewSize")
    rating: float

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_ship(cls, ship: Ship) -> "ShipRead":
        return cls(
            id=ship.id,
            name=ship.name,
            planet=ship.planet,
            ship_type=ship.ship_type,
            prod_date=to_epoch_millis(ship.prod_date),
            is_used=ship.is_used,
            speed=ship.speed,
            crew_size=ship.crew_size,
            rating=ship.rating,
        )
