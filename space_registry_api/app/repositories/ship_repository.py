"""
Storage for ships.

``ShipRepository`` is the contract the service depends on: four
atomic calls, each of which either completes or leaves storage
untouched.  Two implementations are provided: an in-process store
used by tests and demos, and a SQLite store built on ``core.db``.
Both hand out copies, so mutating a returned ship never changes what
is stored until it is passed back to ``save``.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from dataclasses import replace
from typing import Dict, List, Optional, Protocol

from space_registry_api.app.core.db import get_cursor, init_db
from space_registry_api.app.models import MAX_SHIP_ID, Ship, ShipType, from_epoch_millis, to_epoch_millis

logger = logging.getLogger(__name__)


class ShipRepository(Protocol):
    def fetch_all(self) -> List[Ship]:
        """Return every stored ship in ascending id order."""
        ...

    def fetch_by_id(self, ship_id: int) -> Optional[Ship]:
        ...

    def save(self, ship: Ship) -> Ship:
        """Insert (``ship.id is None``) or overwrite a ship; return the stored copy."""
        ...

    def delete_by_id(self, ship_id: int) -> None:
        ...


class InMemoryShipRepository:
    """Dictionary-backed repository; ids come from a counter and are never reused."""

    def __init__(self) -> None:
        self._ships: Dict[int, Ship] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def fetch_all(self) -> List[Ship]:
        with self._lock:
            return [replace(self._ships[ship_id]) for ship_id in sorted(self._ships)]

    def fetch_by_id(self, ship_id: int) -> Optional[Ship]:
        with self._lock:
            ship = self._ships.get(ship_id)
            return replace(ship) if ship else None

    def save(self, ship: Ship) -> Ship:
        with self._lock:
            if ship.id is None:
                stored = replace(ship, id=self._next_id)
                self._next_id += 1
            else:
                stored = replace(ship)
                self._next_id = max(self._next_id, stored.id + 1)
            self._ships[stored.id] = stored
            return replace(stored)

    def delete_by_id(self, ship_id: int) -> None:
        with self._lock:
            self._ships.pop(ship_id, None)


class SqliteShipRepository:
    """SQLite-backed repository.  Every call uses its own connection and transaction."""

    _COLUMNS = "id, name, planet, ship_type, prod_date, is_used, speed, crew_size, rating"

    def __init__(self, database_url: Optional[str] = None, migrate: bool = True) -> None:
        self.database_url = database_url
        if migrate:
            init_db(database_url)

    def fetch_all(self) -> List[Ship]:
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute(f"SELECT {self._COLUMNS} FROM ships ORDER BY id").fetchall()
        return [self._row_to_ship(row) for row in rows]

    def fetch_by_id(self, ship_id: int) -> Optional[Ship]:
        if not 0 < ship_id <= MAX_SHIP_ID:
            return None
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                f"SELECT {self._COLUMNS} FROM ships WHERE id = ?", (ship_id,)
            ).fetchone()
        return self._row_to_ship(row) if row else None

    def save(self, ship: Ship) -> Ship:
        values = (
            ship.name,
            ship.planet,
            ship.ship_type.value,
            to_epoch_millis(ship.prod_date),
            int(ship.is_used),
            ship.speed,
            ship.crew_size,
            ship.rating,
        )
        with get_cursor(self.database_url) as cursor:
            if ship.id is None:
                cursor.execute(
                    """
                    INSERT INTO ships (name, planet, ship_type, prod_date, is_used, speed, crew_size, rating)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    values,
                )
                ship_id = cursor.lastrowid
            else:
                ship_id = ship.id
                cursor.execute(
                    """
                    INSERT OR REPLACE INTO ships (name, planet, ship_type, prod_date, is_used, speed, crew_size, rating, id)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    values + (ship_id,),
                )
            logger.debug("Stored ship row %s", ship_id)
        return replace(ship, id=ship_id)

    def delete_by_id(self, ship_id: int) -> None:
        if not 0 < ship_id <= MAX_SHIP_ID:
            return
        with get_cursor(self.database_url) as cursor:
            cursor.execute("DELETE FROM ships WHERE id = ?", (ship_id,))

    @staticmethod
    def _row_to_ship(row: sqlite3.Row) -> Ship:
        return Ship(
            id=row["id"],
            name=row["name"],
            planet=row["planet"],
            ship_type=ShipType(row["ship_type"]),
            prod_date=from_epoch_millis(row["prod_date"]),
            is_used=bool(row["is_used"]),
            speed=row["speed"],
            crew_size=row["crew_size"],
            rating=row["rating"],
        )
