"""
Ship rating derivation.

The rating rewards fast, new, unused ships::

    k      = 0.5 if is_used else 1.0
    age    = CURRENT_YEAR - year(prod_date)
    rating = round2(80 * speed * k / (age + 1))

``CURRENT_YEAR`` is the registry's fixed "present" and also the upper
bound for production years, so ``age`` is never negative for a valid
ship.
"""

import math
from datetime import datetime

CURRENT_YEAR = 3019
USED_SHIP_COEFFICIENT = 0.5
RATING_SCALE = 80


def round2(value: float) -> float:
    """Round half up to two decimal places."""
    return math.floor(value * 100 + 0.5) / 100


def calculate_rating(speed: float, prod_date: datetime, is_used: bool) -> float:
    k = USED_SHIP_COEFFICIENT if is_used else 1.0
    age = CURRENT_YEAR - prod_date.year
    return round2(RATING_SCALE * speed * k / (age + 1))
