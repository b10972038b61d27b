"""Users API client.

A thin wrapper around the Users API HTTP endpoints built on the
``requests`` library.  It is meant for scripts and other services that
need to read or modify the user list of a running instance::

    api = UsersAPI(base_url="http://localhost:3000")
    users, error = api.list_users()

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``data`` is ``None`` and ``error`` is a
dictionary with keys ``status_code`` and ``message``; ``message`` is
taken from the ``error`` field of the service's response body where
available.  Network failures are reported with ``status_code`` set to
``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class UsersAPI:
    """Client for the ``/api/users`` endpoints."""

    USERS_PATH = "/api/users"

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            json_body: JSON body to send with the request (for POST/PUT).
        Returns:
            A tuple ``(data, error)``; see the module docstring.
        """
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
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _user_path(self, user_id: int) -> str:
        return f"{self.USERS_PATH}/{user_id}"

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` is an empty list on
            failure.
        """
        data, error = self._request("GET", self.USERS_PATH)
        if error:
            return [], error
        return data or [], None

    def create_user(self, name: Optional[str] = None, email: Optional[str] = None) -> Result:
        """Create a user and return the stored record, including its id."""
        body: Dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if email is not None:
            body["email"] = email
        return self._request("POST", self.USERS_PATH, json_body=body)

    def get_user(self, user_id: int) -> Result:
        return self._request("GET", self._user_path(user_id))

    def update_user(self, user_id: int, **fields: Any) -> Result:
        """Update some of ``name`` and ``email``; other fields keep their values."""
        return self._request("PUT", self._user_path(user_id), json_body=fields)

    def delete_user(self, user_id: int) -> Result:
        """Delete a user.  On success returns ``(None, None)``."""
        return self._request("DELETE", self._user_path(user_id))
