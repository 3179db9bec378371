"""
In-memory filtering, ordering and pagination of ships.

The engine works on a snapshot (a plain list handed over by the
service) and never mutates it.  Every supplied filter must hold for a
ship to match; filters left as ``None`` impose no constraint.
Sorting is ascending and stable, so ships with equal keys keep the
snapshot order, which storage guarantees to be id order.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from space_registry_api.app.models import Ship, ShipFilters, ShipOrder

_SORT_KEYS: Dict[ShipOrder, Callable[[Ship], Any]] = {
    ShipOrder.ID: lambda ship: ship.id,
    ShipOrder.SPEED: lambda ship: ship.speed,
    ShipOrder.DATE: lambda ship: ship.prod_date,
    ShipOrder.RATING: lambda ship: ship.rating,
}


def matches(ship: Ship, filters: ShipFilters) -> bool:
    f = filters
    if f.name is not None and f.name not in ship.name:
        return False
    if f.planet is not None and f.planet not in ship.planet:
        return False
    if f.ship_type is not None and ship.ship_type != f.ship_type:
        return False
    if f.after is not None and ship.prod_date < f.after:
        return False
    if f.before is not None and ship.prod_date > f.before:
        return False
    if f.is_used is not None and ship.is_used != f.is_used:
        return False
    if f.min_speed is not None and ship.speed < f.min_speed:
        return False
    if f.max_speed is not None and ship.speed > f.max_speed:
        return False
    if f.min_crew_size is not None and ship.crew_size < f.min_crew_size:
        return False
    if f.max_crew_size is not None and ship.crew_size > f.max_crew_size:
        return False
    if f.min_rating is not None and ship.rating < f.min_rating:
        return False
    if f.max_rating is not None and ship.rating > f.max_rating:
        return False
    return True


def filter_ships(snapshot: Iterable[Ship], filters: ShipFilters) -> List[Ship]:
    return [ship for ship in snapshot if matches(ship, filters)]


def sort_ships(ships: Iterable[Ship], order: ShipOrder = ShipOrder.ID) -> List[Ship]:
    return sorted(ships, key=_SORT_KEYS[order])


def paginate(ships: List[Ship], page_number: int, page_size: int) -> List[Ship]:
    """Return the ``page_number``-th page (0-based) of ``page_size`` items.

    A page that starts past the end is simply empty.
    """
    if page_number < 0 or page_size < 1:
        raise ValueError("page_number must be >= 0 and page_size >= 1")
    start = page_number * page_size
    return ships[start:start + page_size]


def list_ships(
    snapshot: Iterable[Ship],
    filters: ShipFilters,
    order: ShipOrder = ShipOrder.ID,
    page_number: int = 0,
    page_size: int = 3,
) -> List[Ship]:
    """Filter, sort and paginate a snapshot of ships."""
    return paginate(sort_ships(filter_ships(snapshot, filters), order), page_number, page_size)


def count_ships(snapshot: Iterable[Ship], filters: ShipFilters) -> int:
    """Number of ships in ``snapshot`` matching ``filters``."""
    return sum(1 for ship in snapshot if matches(ship, filters))
