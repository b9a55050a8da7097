"""Tourism API client.

This module defines a small client wrapper around the Tourism REST
API.  It is meant for scripts and integrations (a chat bot, a data
import job) that need to read the catalogue or submit reviews,
bookings, subscriptions and preferences without dealing with raw HTTP.
The client uses the ``requests`` library internally.

Every operation returns a tuple ``(data, error)``:

* on success ``data`` holds the decoded JSON body and ``error`` is
  ``None``;
* on failure ``data`` is ``None`` (or an empty list for listings) and
  ``error`` is a dictionary with the keys ``status_code`` and
  ``message``.  ``status_code`` is ``None`` for network failures.

The client never raises for HTTP errors, so callers can branch on the
error dictionary (e.g. treat ``404`` as "not found").
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TourismAPI:
    """Client for interacting with the Tourism API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[Any] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:5000``.
            api_prefix: Prefix under which the API routes are mounted.
            session: Optional object with a ``requests.Session`` compatible
                ``request`` method.  If not supplied a session will be
                created automatically.
            timeout: Per‑request timeout in seconds.
        """
        prefix = api_prefix.strip("/")
        self.base_url = base_url.rstrip("/") + (f"/{prefix}" if prefix else "")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``).
            path: Path relative to the API prefix (e.g. ``/destinations``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request (for POST/PATCH).
        Returns:
            A tuple ``(data, error)``.
        """
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
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                body = response.json()
                message = body.get("detail") or body.get("message") or str(body)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Catalogue
    # ------------------------------------------------------------------
    def list_destinations(
        self, *, region: Optional[str] = None, tags: Optional[Sequence[str]] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve destinations, optionally narrowed to a region or to tags.

        ``region`` takes precedence over ``tags``; tags match if a
        destination carries any of them.
        """
        if region:
            return self._list(f"/destinations/region/{region}")
        if tags:
            return self._list("/destinations", params={"tags": list(tags)})
        return self._list("/destinations")

    def get_destination(self, destination_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/destinations/{destination_id}")

    def list_experiences(self, *, category: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        if category:
            return self._list(f"/experiences/category/{category}")
        return self._list("/experiences")

    def list_hidden_gems(self, *, region: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        if region:
            return self._list(f"/hidden-gems/region/{region}")
        return self._list("/hidden-gems")

    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/events")

    def get_event(self, event_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/events/{event_id}")

    # ------------------------------------------------------------------
    # Users and reviews
    # ------------------------------------------------------------------
    def register_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user.  A taken username or e‑mail yields a 409 error."""
        return self._request("POST", "/users", json_body=payload)

    def create_review(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/reviews", json_body=payload)

    def list_reviews(
        self,
        *,
        destination_id: Optional[int] = None,
        experience_id: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve reviews, filtered by the first of the given ids that is set."""
        if destination_id is not None:
            return self._list(f"/reviews/destination/{destination_id}")
        if experience_id is not None:
            return self._list(f"/reviews/experience/{experience_id}")
        if user_id is not None:
            return self._list(f"/reviews/user/{user_id}")
        return self._list("/reviews")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def create_booking(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/bookings", json_body=payload)

    def list_user_bookings(self, user_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/bookings/user/{user_id}")

    def update_booking_status(self, booking_id: int, status: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/bookings/{booking_id}/status", json_body={"status": status})

    # ------------------------------------------------------------------
    # Newsletter and preferences
    # ------------------------------------------------------------------
    def subscribe(self, email: str, name: Optional[str] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload: Dict[str, Any] = {"email": email}
        if name is not None:
            payload["name"] = name
        return self._request("POST", "/newsletter", json_body=payload)

    def get_preferences(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/preferences/{user_id}")

    def save_preferences(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/preferences", json_body=payload)

    def update_preferences(self, user_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/preferences/{user_id}", json_body=payload)

    # ------------------------------------------------------------------
    # Weather
    # ------------------------------------------------------------------
    def get_weather(self, city: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/weather/{city}")
