"""User Service API client.

A thin wrapper around the HTTP surface of the user service built on
the ``requests`` library.  Every public method returns a tuple
``(data, error)``: on success ``data`` holds the decoded JSON (or
``True`` for a delete) and ``error`` is ``None``; on failure ``data``
is empty and ``error`` is a dictionary with the keys ``status_code``,
``type`` and ``message`` taken from the service's error body.

Example::

    client = UserServiceClient(base_url="http://localhost:8080")
    user, error = client.create_user("Alice", "alice@example.com")
    if error and error["status_code"] == 409:
        ...
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserServiceClient:
    """Client for the ``/users`` and ``/health`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            error = self._parse_error(exc.response)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "type": None, "message": str(exc)}

    @staticmethod
    def _parse_error(response: Optional[requests.Response]) -> Error:
        if response is None:
            return {"status_code": None, "type": None, "message": "no response"}
        error: Error = {"status_code": response.status_code, "type": None, "message": ""}
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error["type"] = body["error"].get("type")
            error["message"] = body["error"].get("message", "")
            if body["error"].get("field"):
                error["field"] = body["error"]["field"]
        if not error["message"]:
            error["message"] = response.text or response.reason or ""
        return error

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/users", json_body={"name": name, "email": email})

    def update_user(
        self, user_id: str, *, name: Optional[str] = None, email: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update a user.  Only the arguments that are given are sent."""
        payload = {key: value for key, value in (("name", name), ("email", email)) if value is not None}
        return self._request("PUT", f"/users/{user_id}", json_body=payload)

    def delete_user(self, user_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/users/{user_id}")
        if error:
            return False, error
        return True, None

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")
