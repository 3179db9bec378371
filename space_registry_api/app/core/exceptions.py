"""
Domain exceptions for the ship registry.

Only two failure kinds exist: the client sent something unacceptable
(``InvalidInputError``) or referenced a ship that is not stored
(``NotFoundError``).  Endpoints translate them to HTTP 400 and 404
respectively.  Neither is ever retried.
"""

from typing import List, Optional


class ShipRegistryError(Exception):
    """Base class for all errors raised by the ship registry core."""


class InvalidInputError(ShipRegistryError):
    """Raised when a payload or identifier violates the domain rules.

    ``errors`` carries the individual field messages collected by the
    validator, if any.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class NotFoundError(ShipRegistryError):
    """Raised when a ship id is not present in storage."""

    def __init__(self, ship_id: int) -> None:
        super().__init__(f"Ship with id {ship_id} does not exist")
        self.ship_id = ship_id
