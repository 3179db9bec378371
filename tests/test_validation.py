"""Tests for ship field validation."""

from __future__ import annotations

import pytest

from conftest import make_draft, prod_date
from space_registry_api.app.models import ShipDraft, ShipType
from space_registry_api.app.services.validation import (
    REQUIRED_ON_CREATE,
    validate_field,
    validate_for_create,
    validate_for_update,
)


class TestValidateField:
    @pytest.mark.parametrize(
        "kind, value",
        [
            ("name", "a"),
            ("name", "x" * 50),
            ("planet", "Earth"),
            ("prod_date", prod_date(2800)),
            ("prod_date", prod_date(3019, 12, 31)),
            ("speed", 0.01),
            ("speed", 0.99),
            ("crew_size", 1),
            ("crew_size", 9999),
            ("ship_type", ShipType.MILITARY),
            ("is_used", True),
        ],
    )
    def test_accepts_values_within_bounds(self, kind, value):
        assert validate_field(kind, value) is None

    @pytest.mark.parametrize(
        "kind, value",
        [
            ("name", ""),
            ("name", "x" * 51),
            ("planet", ""),
            ("planet", "p" * 51),
            ("prod_date", prod_date(2799, 12, 31)),
            ("prod_date", prod_date(3020)),
            ("speed", 0.009),
            ("speed", 1.0),
            ("crew_size", 0),
            ("crew_size", 10000),
            ("ship_type", "BOAT"),
            ("is_used", "yes"),
        ],
    )
    def test_rejects_values_out_of_bounds(self, kind, value):
        error = validate_field(kind, value)
        assert error is not None
        assert error.field == kind

    def test_unknown_field(self):
        assert validate_field("colour", "red").message == "unknown field"


class TestValidateForCreate:
    def test_complete_draft_is_valid(self):
        assert validate_for_create(make_draft()) == []

    def test_is_used_is_optional(self):
        assert validate_for_create(make_draft(is_used=None)) == []

    def test_every_missing_field_is_reported(self):
        errors = validate_for_create(ShipDraft())
        assert [e.field for e in errors] == list(REQUIRED_ON_CREATE)
        assert all(e.message == "is required" for e in errors)

    def test_bounds_checked_alongside_presence(self):
        errors = validate_for_create(make_draft(planet=None, crew_size=0))
        assert {e.field for e in errors} == {"planet", "crew_size"}


class TestValidateForUpdate:
    def test_empty_draft_is_valid(self):
        assert validate_for_update(ShipDraft()) == []

    def test_only_supplied_fields_are_checked(self):
        assert validate_for_update(ShipDraft(crew_size=5)) == []

    def test_supplied_invalid_field_is_reported(self):
        errors = validate_for_update(ShipDraft(speed=2.0, name="ok"))
        assert [str(e) for e in errors] == ["speed: must be between 0.01 and 0.99"]
