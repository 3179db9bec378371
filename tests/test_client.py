"""Tests for the requests-based API client."""

from __future__ import annotations

import json

import pytest
import requests

from space_registry_client import ShipRegistryClient


def fake_response(status_code: int, body=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.url = "http://testserver"
    return response


class FakeSession:
    """Records calls and replays canned responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_client(*responses):
    session = FakeSession(*responses)
    return ShipRegistryClient(base_url="http://testserver/", session=session), session


class TestShipRegistryClient:
    def test_list_ships_sends_filters(self):
        client, session = make_client(fake_response(200, [{"id": 1}]))
        ships, error = client.list_ships(planet="Mars", isUsed=False, order="RATING", pageSize=10, name=None)
        assert error is None
        assert ships == [{"id": 1}]
        call = session.calls[0]
        assert call["method"] == "GET"
        assert call["url"] == "http://testserver/rest/ships"
        assert call["params"] == {"planet": "Mars", "isUsed": "false", "order": "RATING", "pageSize": 10}

    def test_unknown_filter_is_a_programming_error(self):
        client, _ = make_client()
        with pytest.raises(TypeError):
            client.count_ships(colour="red")

    def test_count_ships(self):
        client, session = make_client(fake_response(200, 4))
        assert client.count_ships(minSpeed=0.5) == (4, None)
        assert session.calls[0]["url"].endswith("/rest/ships/count")

    def test_create_and_update_post_json(self):
        client, session = make_client(fake_response(200, {"id": 1}), fake_response(200, {"id": 1, "crewSize": 3}))
        assert client.create_ship({"name": "Orion"}) == ({"id": 1}, None)
        assert client.update_ship(1, {"crewSize": 3}) == ({"id": 1, "crewSize": 3}, None)
        assert [c["method"] for c in session.calls] == ["POST", "POST"]
        assert session.calls[1]["url"].endswith("/rest/ships/1")
        assert session.calls[1]["json"] == {"crewSize": 3}

    def test_delete_ship(self):
        client, session = make_client(fake_response(200))
        assert client.delete_ship(3) == (True, None)
        assert session.calls[0]["method"] == "DELETE"

    def test_http_error_is_returned(self):
        client, _ = make_client(fake_response(404, {"detail": "Ship with id 9 does not exist"}))
        ship, error = client.get_ship(9)
        assert ship is None
        assert error == {"status_code": 404, "message": "Ship with id 9 does not exist"}

    def test_network_error_is_returned(self):
        client, _ = make_client(requests.ConnectionError("refused"))
        ships, error = client.list_ships()
        assert ships == []
        assert error["status_code"] is None
        assert "refused" in error["message"]

    def test_delete_failure(self):
        client, _ = make_client(fake_response(400, {"detail": "x is not a valid id"}))
        ok, error = client.delete_ship("x")
        assert ok is False
        assert error["status_code"] == 400
