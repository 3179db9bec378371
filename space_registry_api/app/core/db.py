"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that commits on success
(``get_cursor``) and ``init_db`` which applies schema migrations.  The
migration mechanism stores applied versions in the ``migrations``
table and executes newer entries of ``MIGRATIONS`` in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import settings

logger = logging.getLogger(__name__)

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: ships table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS ships (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            planet TEXT NOT NULL,
            ship_type TEXT NOT NULL,
            prod_date INTEGER NOT NULL,
            is_used INTEGER NOT NULL DEFAULT 0,
            speed REAL NOT NULL,
            crew_size INTEGER NOT NULL,
            rating REAL NOT NULL
        );
        """,
    ),
    # Migration 2: indices for the most common listing orders
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_ships_prod_date ON ships(prod_date);
        CREATE INDEX IF NOT EXISTS idx_ships_rating ON ships(rating);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and the special ``:memory:`` name are returned
    unchanged; relative paths are resolved against the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection with ``sqlite3.Row`` rows."""
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_url: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success, roll back on error, always close."""
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_url: Optional[str] = None) -> int:
    """Create the database if needed and apply pending migrations.

    Returns the schema version after migration.
    """
    with get_cursor(database_url) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                current_version = version
    return current_version
