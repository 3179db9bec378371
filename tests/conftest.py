"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[1]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from space_registry_api.app.models import ShipDraft, ShipType, to_epoch_millis
from space_registry_api.app.repositories import InMemoryShipRepository, SqliteShipRepository
from space_registry_api.app.services.ship_service import ShipService


def prod_date(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def make_draft(**overrides) -> ShipDraft:
    values = dict(
        name="Orion",
        planet="Mars",
        ship_type=ShipType.MERCHANT,
        prod_date=prod_date(3000),
        is_used=False,
        speed=0.5,
        crew_size=100,
    )
    values.update(overrides)
    return ShipDraft(**values)


def make_payload(**overrides) -> dict:
    payload = {
        "name": "Orion",
        "planet": "Mars",
        "shipType": "MERCHANT",
        "prodDate": to_epoch_millis(prod_date(3000)),
        "isUsed": False,
        "speed": 0.5,
        "crewSize": 100,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def repository():
    return InMemoryShipRepository()


@pytest.fixture
def service(repository):
    return ShipService(repository)


@pytest.fixture
def sqlite_repository(tmp_path):
    """Repository backed by a migrated SQLite file in a temporary directory."""
    return SqliteShipRepository(str(tmp_path / "ships.db"))


@pytest.fixture
def client(service):
    """TestClient whose ship routes use the in-memory ``service`` fixture."""
    from fastapi.testclient import TestClient

    from space_registry_api.app.api.deps import get_ship_service
    from space_registry_api.app.main import app

    app.dependency_overrides[get_ship_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
