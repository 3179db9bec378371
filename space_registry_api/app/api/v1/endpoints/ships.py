"""
Ship endpoints for API v1.

These routes expose listing, counting and CRUD operations for ships.
Ship ids arrive as raw path strings and are parsed here; anything that
is not a positive integer is rejected with HTTP 400 before the service
is called.  Domain errors raised by ``ShipService`` are translated to
``HTTPException``: ``InvalidInputError`` becomes 400 and
``NotFoundError`` becomes 404.
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from space_registry_api.app.api.deps import get_ship_service
from space_registry_api.app.core.config import settings
from space_registry_api.app.core.exceptions import InvalidInputError, NotFoundError
from space_registry_api.app.models import (
    MAX_EPOCH_MILLIS,
    MAX_SHIP_ID,
    MIN_EPOCH_MILLIS,
    ShipFilters,
    ShipOrder,
    ShipType,
    from_epoch_millis,
)
from space_registry_api.app.schemas.ship import ShipCreate, ShipRead, ShipUpdate
from space_registry_api.app.services.ship_service import ShipService

router = APIRouter()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_ship_id(raw: str) -> int:
    """Parse a path id, requiring a plain decimal integer in ``1..2**63-1``."""
    if not _ID_PATTERN.fullmatch(raw):
        raise InvalidInputError(f"{raw} is not a valid id")
    ship_id = int(raw)
    if ship_id > MAX_SHIP_ID:
        raise InvalidInputError(f"Id {raw} is out of range")
    if ship_id <= 0:
        raise InvalidInputError(f"Id must be greater than zero, got {raw}")
    return ship_id


def ship_filters(
    name: Optional[str] = Query(None),
    planet: Optional[str] = Query(None),
    ship_type: Optional[ShipType] = Query(None, alias="shipType"),
    after: Optional[int] = Query(
        None, ge=MIN_EPOCH_MILLIS, le=MAX_EPOCH_MILLIS, description="Earliest prodDate, epoch milliseconds (inclusive)"
    ),
    before: Optional[int] = Query(
        None, ge=MIN_EPOCH_MILLIS, le=MAX_EPOCH_MILLIS, description="Latest prodDate, epoch milliseconds (inclusive)"
    ),
    is_used: Optional[bool] = Query(None, alias="isUsed"),
    min_speed: Optional[float] = Query(None, alias="minSpeed"),
    max_speed: Optional[float] = Query(None, alias="maxSpeed"),
    min_crew_size: Optional[int] = Query(None, alias="minCrewSize"),
    max_crew_size: Optional[int] = Query(None, alias="maxCrewSize"),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    max_rating: Optional[float] = Query(None, alias="maxRating"),
) -> ShipFilters:
    """Collect the optional listing filters shared by list and count."""
    return ShipFilters(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=from_epoch_millis(after) if after is not None else None,
        before=from_epoch_millis(before) if before is not None else None,
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )


def _bad_request(exc: InvalidInputError) -> HTTPException:
    detail = {"message": str(exc), "errors": exc.errors} if exc.errors else str(exc)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("", response_model=List[ShipRead])
async def list_ships(
    filters: ShipFilters = Depends(ship_filters),
    order: ShipOrder = Query(ShipOrder.ID),
    page_number: int = Query(0, alias="pageNumber", ge=0),
    page_size: int = Query(settings.default_page_size, alias="pageSize", ge=1),
    service: ShipService = Depends(get_ship_service),
) -> List[ShipRead]:
    """Return one page of ships matching every supplied filter.

    - **order**: sort key, `ID`, `SPEED`, `DATE` or `RATING` (ascending).
    - **pageNumber**, **pageSize**: 0-based page index and page length.
    """
    try:
        ships = service.list(filters, order, page_number, page_size)
    except InvalidInputError as e:
        raise _bad_request(e) from e
    return [ShipRead.from_ship(ship) for ship in ships]


@router.get("/count", response_model=int)
async def count_ships(
    filters: ShipFilters = Depends(ship_filters),
    service: ShipService = Depends(get_ship_service),
) -> int:
    """Return how many ships match the filters, ignoring pagination."""
    return service.count(filters)


@router.post("", response_model=ShipRead)
async def create_ship(
    ship: ShipCreate,
    service: ShipService = Depends(get_ship_service),
) -> ShipRead:
    """Create a ship.

    ``name``, ``planet``, ``shipType``, ``prodDate``, ``speed`` and
    ``crewSize`` are required; ``isUsed`` defaults to ``false``.  The
    rating is always computed by the server.
    """
    try:
        created = service.create(ship.to_draft())
    except InvalidInputError as e:
        raise _bad_request(e) from e
    return ShipRead.from_ship(created)


@router.get("/{ship_id}", response_model=ShipRead)
async def get_ship(
    ship_id: str,
    service: ShipService = Depends(get_ship_service),
) -> ShipRead:
    """Retrieve a single ship by its ID."""
    try:
        return ShipRead.from_ship(service.find(parse_ship_id(ship_id)))
    except InvalidInputError as e:
        raise _bad_request(e) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/{ship_id}", response_model=ShipRead)
async def update_ship(
    ship_id: str,
    updates: ShipUpdate,
    service: ShipService = Depends(get_ship_service),
) -> ShipRead:
    """Update an existing ship.

    Partial updates are supported; any unspecified fields remain
    unchanged and the rating is recomputed.
    """
    try:
        updated = service.update(parse_ship_id(ship_id), updates.to_draft())
    except InvalidInputError as e:
        raise _bad_request(e) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ShipRead.from_ship(updated)


@router.delete("/{ship_id}", response_class=Response)
async def delete_ship(
    ship_id: str,
    service: ShipService = Depends(get_ship_service),
) -> Response:
    """Delete a ship."""
    try:
        service.delete(parse_ship_id(ship_id))
    except InvalidInputError as e:
        raise _bad_request(e) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)
