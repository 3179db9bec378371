"""
Field validation for ship payloads.

Validators never raise for a rule violation; they return a list of
``FieldError`` values (empty when the payload is acceptable).  The
service decides what to do with them.  ``validate_for_create``
requires every mandatory field, ``validate_for_update`` only checks the
fields the client actually supplied.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from space_registry_api.app.models import ShipDraft, ShipType

MAX_TEXT_LENGTH = 50
MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019
MIN_SPEED = 0.01
MAX_SPEED = 0.99
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999

REQUIRED_ON_CREATE = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def _check_text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return "must be a string"
    if not 0 < len(value) <= MAX_TEXT_LENGTH:
        return f"length must be between 1 and {MAX_TEXT_LENGTH}"
    return None


def _check_ship_type(value: Any) -> Optional[str]:
    if not isinstance(value, ShipType):
        return "unknown ship type"
    return None


def _check_prod_date(value: Any) -> Optional[str]:
    if not isinstance(value, datetime):
        return "must be a point in time"
    if not MIN_PROD_YEAR <= value.year <= MAX_PROD_YEAR:
        return f"year must be between {MIN_PROD_YEAR} and {MAX_PROD_YEAR}"
    return None


def _check_is_used(value: Any) -> Optional[str]:
    if not isinstance(value, bool):
        return "must be a boolean"
    return None


def _check_speed(value: Any) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "must be a number"
    if not MIN_SPEED <= value <= MAX_SPEED:
        return f"must be between {MIN_SPEED} and {MAX_SPEED}"
    return None


def _check_crew_size(value: Any) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, int):
        return "must be an integer"
    if not MIN_CREW_SIZE <= value <= MAX_CREW_SIZE:
        return f"must be between {MIN_CREW_SIZE} and {MAX_CREW_SIZE}"
    return None


_CHECKS: Dict[str, Callable[[Any], Optional[str]]] = {
    "name": _check_text,
    "planet": _check_text,
    "ship_type": _check_ship_type,
    "prod_date": _check_prod_date,
    "is_used": _check_is_used,
    "speed": _check_speed,
    "crew_size": _check_crew_size,
}


def validate_field(kind: str, value: Any) -> Optional[FieldError]:
    """Check a single supplied value against the bounds for ``kind``."""
    check = _CHECKS.get(kind)
    if check is None:
        return FieldError(kind, "unknown field")
    message = check(value)
    return FieldError(kind, message) if message else None


def validate_for_update(draft: ShipDraft) -> List[FieldError]:
    errors: List[FieldError] = []
    for name in draft.supplied():
        error = validate_field(name, getattr(draft, name))
        if error:
            errors.append(error)
    return errors


def validate_for_create(draft: ShipDraft) -> List[FieldError]:
    """Require every mandatory field, then bound-check all supplied ones."""
    supplied = draft.supplied()
    errors = [FieldError(name, "is required") for name in REQUIRED_ON_CREATE if name not in supplied]
    errors.extend(validate_for_update(draft))
    return errors
