"""
Business logic for ships.

``ShipService`` sequences validation, rating derivation and storage
calls.  The repository is passed in explicitly; the service holds no
other state.  Every write validates the complete payload before it
touches storage, so a rejected create or update leaves nothing behind.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from space_registry_api.app.core.config import settings
from space_registry_api.app.core.exceptions import InvalidInputError, NotFoundError
from space_registry_api.app.models import Ship, ShipDraft, ShipFilters, ShipOrder
from space_registry_api.app.repositories import ShipRepository
from space_registry_api.app.services import query_engine
from space_registry_api.app.services.rating import calculate_rating, round2
from space_registry_api.app.services.validation import (
    FieldError,
    validate_for_create,
    validate_for_update,
)

logger = logging.getLogger(__name__)


def _reject(action: str, errors: List[FieldError]) -> InvalidInputError:
    messages = [str(error) for error in errors]
    logger.warning("Rejected ship %s: %s", action, "; ".join(messages))
    return InvalidInputError(f"Invalid ship {action} payload", messages)


class ShipService:
    """Create, update, delete, find, list and count ships."""

    def __init__(self, repository: ShipRepository) -> None:
        self.repository = repository

    def list(
        self,
        filters: ShipFilters,
        order: ShipOrder = ShipOrder.ID,
        page_number: int = 0,
        page_size: Optional[int] = None,
    ) -> List[Ship]:
        if page_size is None:
            page_size = settings.default_page_size
        if page_number < 0:
            raise InvalidInputError("pageNumber must not be negative")
        if page_size < 1:
            raise InvalidInputError("pageSize must be positive")
        snapshot = self.repository.fetch_all()
        ships = query_engine.list_ships(snapshot, filters, order, page_number, page_size)
        logger.debug(
            "Listed %d of %d ships (order=%s, page=%d, size=%d)",
            len(ships), len(snapshot), order.value, page_number, page_size,
        )
        return ships

    def count(self, filters: ShipFilters) -> int:
        total = query_engine.count_ships(self.repository.fetch_all(), filters)
        logger.debug("Counted %d ships", total)
        return total

    def find(self, ship_id: int) -> Ship:
        ship = self.repository.fetch_by_id(ship_id)
        if ship is None:
            raise NotFoundError(ship_id)
        return ship

    def create(self, draft: ShipDraft) -> Ship:
        """Validate a complete draft, derive its rating and persist it."""
        errors = validate_for_create(draft)
        if errors:
            raise _reject("create", errors)
        is_used = draft.is_used if draft.is_used is not None else False
        speed = round2(draft.speed)
        ship = Ship(
            name=draft.name,
            planet=draft.planet,
            ship_type=draft.ship_type,
            prod_date=draft.prod_date,
            is_used=is_used,
            speed=speed,
            crew_size=draft.crew_size,
            rating=calculate_rating(speed, draft.prod_date, is_used),
        )
        stored = self.repository.save(ship)
        logger.info("Created ship %s '%s' with rating %s", stored.id, stored.name, stored.rating)
        return stored

    def update(self, ship_id: int, draft: ShipDraft) -> Ship:
        """Merge the supplied fields of ``draft`` onto ship ``ship_id``.

        Fields absent from the draft keep their stored values.  The
        rating is recomputed from the merged record even when no rating
        input changed.
        """
        existing = self.find(ship_id)
        errors = validate_for_update(draft)
        if errors:
            raise _reject("update", errors)
        changes = {name: getattr(draft, name) for name in draft.supplied()}
        merged = replace(existing, **changes)
        merged.speed = round2(merged.speed)
        merged.rating = calculate_rating(merged.speed, merged.prod_date, merged.is_used)
        stored = self.repository.save(merged)
        logger.info("Updated ship %s (%s)", ship_id, ", ".join(changes) or "no fields")
        return stored

    def delete(self, ship_id: int) -> None:
        self.find(ship_id)
        self.repository.delete_by_id(ship_id)
        logger.info("Deleted ship %s", ship_id)
