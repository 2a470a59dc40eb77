"""Room reservations API client.

A thin wrapper around the reservations HTTP API using the ``requests``
library.  It exposes one method per operation:

* :meth:`ReservationsClient.list_reservations` – list reservations,
  optionally filtered by room substring and exact date.
* :meth:`ReservationsClient.create_reservation` – book a room.
* :meth:`ReservationsClient.update_reservation` – change a booking.
* :meth:`ReservationsClient.delete_reservation` – cancel a booking.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``, where ``message`` is the
server's ``error`` text when it sent one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ReservationsClient:
    """Client for the ``/api/reservations`` endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Root URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            body (``None`` for empty bodies such as 204 responses).
        """
        url = f"{self.base_url}/api{path}"
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
                    body = exc.response.json()
                    if isinstance(body, dict):
                        message = body.get("error") or ""
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.warning("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Reservation operations
    # ------------------------------------------------------------------
    def list_reservations(
        self, room: Optional[str] = None, date: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve reservations sorted by date and time."""
        params = {k: v for k, v in {"room": room, "date": date}.items() if v}
        data, error = self._request("GET", "/reservations", params=params or None)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def create_reservation(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a reservation from ``room``, ``date``, ``time`` and ``owner``."""
        return self._request("POST", "/reservations", json_body=payload)

    def update_reservation(
        self, reservation_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the fields of an existing reservation."""
        return self._request("PUT", f"/reservations/{reservation_id}", json_body=payload)

    def delete_reservation(self, reservation_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a reservation.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/reservations/{reservation_id}")
        if error:
            return False, error
        return True, None
