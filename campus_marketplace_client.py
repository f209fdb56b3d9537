"""Campus Marketplace API client.

A small client wrapper around the marketplace's REST API for the
messaging feature.  The client uses the ``requests`` library and
exposes high‑level methods:

* :meth:`get_messages_between_users` – fetch the conversation between two users.
* :meth:`send_message` – send a message from one user to another.
* :meth:`user_exists` – check whether a username is registered.
* :meth:`register_user` – create a new user.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)


class CampusMarketplaceAPI:
    """Client for the messaging and user endpoints."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8000/api",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the API prefix, e.g.
                ``http://localhost:8000/api``.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        text_body: str | None = None,
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/messages/send``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
            text_body: Plain text body; sent as ``text/plain`` UTF-8.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        data = None
        if text_body is not None:
            headers["Content-Type"] = "text/plain; charset=utf-8"
            data = text_body.encode("utf-8")
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                data=data,
                headers=headers,
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
                    message = err_json.get("detail") or err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------
    def get_messages_between_users(
        self, username1: str, username2: str
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Fetch the conversation between two users, oldest first."""
        data, error = self._request(
            "GET",
            "/messages/between",
            params={"username1": username1, "username2": username2},
        )
        if error:
            return [], error
        return data or [], None

    def send_message(
        self, from_username: str, to_username: str, content: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Send ``content`` from one user to another.

        Returns:
            A tuple ``(message, error)`` where ``message`` is the created
            message as returned by the server.
        """
        return self._request(
            "POST",
            "/messages/send",
            params={"fromUsername": from_username, "toUsername": to_username},
            text_body=content,
        )

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def user_exists(self, username: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        data, error = self._request("GET", f"/users/exists/{quote(username, safe='')}")
        if error:
            return False, error
        return bool(data), None

    def register_user(
        self,
        username: str,
        password: str,
        *,
        email: Optional[str] = None,
        college: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        payload = {"username": username, "password": password, "email": email, "college": college}
        return self._request("POST", "/users/", json_body=payload)
