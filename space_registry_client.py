"""Space Registry API client.

A thin wrapper around the ``/rest/ships`` HTTP resource, built on the
``requests`` library.  Every public method returns a ``(data, error)``
tuple: on success ``error`` is ``None``; on failure ``data`` is empty
and ``error`` is a dictionary with ``status_code`` and ``message``.
The client never raises for HTTP or network errors.

* :meth:`ShipRegistryClient.list_ships` – one page of ships matching filters.
* :meth:`ShipRegistryClient.count_ships` – number of ships matching filters.
* :meth:`ShipRegistryClient.get_ship` – a single ship by id.
* :meth:`ShipRegistryClient.create_ship` – create a ship.
* :meth:`ShipRegistryClient.update_ship` – partially update a ship.
* :meth:`ShipRegistryClient.delete_ship` – delete a ship.

Filters and payloads use the API's camelCase names, for example
``client.list_ships(planet="Mars", order="RATING", pageSize=10)``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]

FILTER_PARAMS = (
    "name",
    "planet",
    "shipType",
    "after",
    "before",
    "isUsed",
    "minSpeed",
    "maxSpeed",
    "minCrewSize",
    "maxCrewSize",
    "minRating",
    "maxRating",
)
LIST_PARAMS = FILTER_PARAMS + ("order", "pageNumber", "pageSize")


class ShipRegistryClient:
    """Client for the ship registry REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/rest",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            prefix: Path prefix the ship routes are mounted under.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + "/" + prefix.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    detail = exc.response.json().get("detail")
                    message = detail if isinstance(detail, str) else str(detail)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _query(allowed: Tuple[str, ...], values: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(values) - set(allowed)
        if unknown:
            raise TypeError(f"Unknown query parameters: {', '.join(sorted(unknown))}")
        params: Dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            # requests would send True as "True"; the API expects lower case.
            params[key] = str(value).lower() if isinstance(value, bool) else value
        return params

    # ------------------------------------------------------------------
    # Ship operations
    # ------------------------------------------------------------------
    def list_ships(self, **filters: Any) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve one page of ships.

        Accepts any of the filter names plus ``order``, ``pageNumber``
        and ``pageSize``.
        """
        data, error = self._request("GET", "/ships", params=self._query(LIST_PARAMS, filters))
        if error:
            return [], error
        return data or [], None

    def count_ships(self, **filters: Any) -> Tuple[int, Optional[ApiError]]:
        data, error = self._request("GET", "/ships/count", params=self._query(FILTER_PARAMS, filters))
        if error:
            return 0, error
        return int(data or 0), None

    def get_ship(self, ship_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/ships/{ship_id}")

    def create_ship(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a ship from a camelCase payload; the server computes the rating."""
        return self._request("POST", "/ships", json_body=payload)

    def update_ship(self, ship_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Send only the fields to change; the rest stay as stored."""
        return self._request("POST", f"/ships/{ship_id}", json_body=payload)

    def delete_ship(self, ship_id: Any) -> Tuple[bool, Optional[ApiError]]:
        _, error = self._request("DELETE", f"/ships/{ship_id}")
        if error:
            return False, error
        return True, None
