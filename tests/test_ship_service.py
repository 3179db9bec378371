"""Tests for the ship service orchestration."""

from __future__ import annotations

import pytest

from conftest import make_draft, prod_date
from space_registry_api.app.core.config import settings
from space_registry_api.app.core.exceptions import InvalidInputError, NotFoundError
from space_registry_api.app.models import ShipDraft, ShipFilters, ShipOrder, ShipType
from space_registry_api.app.services.rating import calculate_rating
from space_registry_api.app.services.ship_service import ShipService


class TestCreate:
    def test_create_assigns_id_and_rating(self, service):
        ship = service.create(make_draft(speed=0.5, prod_date=prod_date(3019), is_used=False))
        assert ship.id == 1
        assert ship.rating == 40.0

    def test_created_ship_can_be_found_unchanged(self, service):
        created = service.create(make_draft())
        assert service.find(created.id) == created

    def test_is_used_defaults_to_false(self, service):
        ship = service.create(make_draft(is_used=None))
        assert ship.is_used is False

    def test_speed_is_rounded_before_rating(self, service):
        ship = service.create(make_draft(speed=0.126, prod_date=prod_date(3019)))
        assert ship.speed == 0.13
        assert ship.rating == calculate_rating(0.13, prod_date(3019), False)

    def test_rating_is_consistent_with_stored_fields(self, service):
        for speed, year, used in [(0.01, 2800, True), (0.99, 3019, False), (0.37, 2950, True)]:
            ship = service.create(make_draft(speed=speed, prod_date=prod_date(year), is_used=used))
            assert ship.rating >= 0
            assert ship.rating == calculate_rating(ship.speed, ship.prod_date, ship.is_used)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"crew_size": 0},
            {"crew_size": 10000},
            {"name": "n" * 51},
            {"prod_date": prod_date(2799)},
            {"prod_date": prod_date(3020)},
            {"speed": None},
        ],
    )
    def test_invalid_create_persists_nothing(self, service, repository, overrides):
        with pytest.raises(InvalidInputError) as excinfo:
            service.create(make_draft(**overrides))
        assert excinfo.value.errors
        assert repository.fetch_all() == []

    def test_ids_are_never_reused(self, service):
        first = service.create(make_draft())
        service.delete(first.id)
        second = service.create(make_draft())
        assert second.id > first.id


class TestUpdate:
    def test_partial_update_keeps_other_fields(self, service):
        original = service.create(make_draft(is_used=True))
        updated = service.update(original.id, ShipDraft(crew_size=42))
        assert updated.crew_size == 42
        for field in ("id", "name", "planet", "ship_type", "prod_date", "speed", "is_used"):
            assert getattr(updated, field) == getattr(original, field)
        assert updated.rating == calculate_rating(original.speed, original.prod_date, original.is_used)

    def test_update_recomputes_rating(self, service):
        original = service.create(make_draft(speed=0.5, prod_date=prod_date(3019), is_used=False))
        updated = service.update(original.id, ShipDraft(is_used=True))
        assert updated.rating == 20.0
        assert service.find(original.id).rating == 20.0

    def test_update_can_change_every_field(self, service):
        original = service.create(make_draft())
        draft = ShipDraft(
            name="Renamed",
            planet="Venus",
            ship_type=ShipType.MILITARY,
            prod_date=prod_date(3019),
            is_used=True,
            speed=0.8,
            crew_size=9999,
        )
        updated = service.update(original.id, draft)
        assert (updated.name, updated.planet, updated.ship_type) == ("Renamed", "Venus", ShipType.MILITARY)
        assert updated.rating == 32.0

    def test_invalid_update_leaves_record_untouched(self, service):
        original = service.create(make_draft())
        with pytest.raises(InvalidInputError):
            service.update(original.id, ShipDraft(name="valid", speed=5.0))
        assert service.find(original.id) == original

    def test_update_of_missing_ship(self, service):
        with pytest.raises(NotFoundError):
            service.update(99, ShipDraft(crew_size=5))


class TestFindAndDelete:
    def test_find_missing_ship(self, service):
        with pytest.raises(NotFoundError) as excinfo:
            service.find(7)
        assert excinfo.value.ship_id == 7

    def test_delete_removes_ship(self, service):
        ship = service.create(make_draft())
        service.delete(ship.id)
        with pytest.raises(NotFoundError):
            service.find(ship.id)

    def test_delete_missing_ship(self, service):
        with pytest.raises(NotFoundError):
            service.delete(1)

    def test_huge_id_is_not_found_in_sqlite(self, sqlite_repository):
        sqlite_service = ShipService(sqlite_repository)
        with pytest.raises(NotFoundError):
            sqlite_service.find(2**63)
        with pytest.raises(NotFoundError):
            sqlite_service.delete(2**63)


class TestListAndCount:
    @pytest.fixture
    def five_ships(self, service):
        return [
            service.create(make_draft(name=f"Ship {i}", speed=speed))
            for i, speed in enumerate([0.9, 0.1, 0.5, 0.3, 0.7], start=1)
        ]

    def test_default_listing_is_by_id(self, service, five_ships):
        ships = service.list(ShipFilters(), page_size=10)
        assert [s.id for s in ships] == [s.id for s in five_ships]

    def test_page_size_defaults_to_setting(self, service, five_ships, monkeypatch):
        monkeypatch.setattr(settings, "default_page_size", 4)
        assert len(service.list(ShipFilters())) == 4

    def test_third_page_of_five_is_empty(self, service, five_ships):
        assert service.list(ShipFilters(), page_number=2, page_size=3) == []
        assert service.count(ShipFilters()) == 5

    def test_ordered_listing(self, service, five_ships):
        ships = service.list(ShipFilters(), ShipOrder.SPEED, page_size=5)
        assert [s.speed for s in ships] == [0.1, 0.3, 0.5, 0.7, 0.9]

    def test_count_with_filters(self, service, five_ships):
        assert service.count(ShipFilters(min_speed=0.5)) == 3

    @pytest.mark.parametrize("page_number, page_size", [(-1, 3), (0, 0)])
    def test_invalid_paging(self, service, page_number, page_size):
        with pytest.raises(InvalidInputError):
            service.list(ShipFilters(), page_number=page_number, page_size=page_size)
