"""Small HTTP client with bearer authentication and one retry on 401."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

import requests

logger = logging.getLogger(__name__)

TokenRefreshCallback = Callable[[], str]


class HttpError(Exception):
    """Raised when a request cannot be completed at the transport level."""


class HttpClient:
    """Send JSON requests and return the response body as text.

    Requests that carry an ``Authorization`` header are retried once with a
    fresh token when the server answers 401 and a refresh callback is set.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        token_refresh_callback: TokenRefreshCallback | None = None,
    ) -> None:
        self._session = session if session is not None else requests.Session()
        self.token_refresh_callback = token_refresh_callback
        self.last_response_code = 0

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying session."""
        self._session.close()

    def post_json(self, url: str, json_body: str) -> str:
        """POST a JSON body without authentication."""
        headers = {"Content-Type": "application/json"}
        return self._request("POST", url, headers, json_body)

    def post_json_with_auth(
        self,
        url: str,
        json_body: str,
        token: str,
        extra_headers: Mapping[str, str] | None = None,
    ) -> str:
        """POST a JSON body with a bearer token and optional extra headers."""
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        if extra_headers:
            headers.update(sorted(extra_headers.items()))
        return self._request("POST", url, headers, json_body)

    def get(self, url: str) -> str:
        """GET a JSON resource without authentication."""
        return self._request("GET", url, {"Accept": "application/json"})

    def get_with_auth(self, url: str, token: str) -> str:
        """GET a JSON resource with a bearer token."""
        headers = {"Authorization": f"Bearer {token}", "Accept": "application/json"}
        return self._request("GET", url, headers)

    def delete_with_auth(self, url: str, token: str) -> str:
        """DELETE a resource with a bearer token."""
        headers = {"Authorization": f"Bearer {token}", "Accept": "application/json"}
        return self._request("DELETE", url, headers)

    def _request(
        self, method: str, url: str, headers: dict[str, str], body: str | None = None
    ) -> str:
        is_auth_request = "Authorization" in headers
        return self._perform(method, url, headers, body, retry_on_401=is_auth_request)

    def _perform(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | None,
        retry_on_401: bool,
    ) -> str:
        logger.debug("%s %s headers=%s body=%s", method, url, headers, body)
        data = body.encode("utf-8") if body is not None else None
        try:
            response = self._session.request(method, url, headers=headers, data=data)
        except requests.RequestException as exc:
            self.last_response_code = 0
            raise HttpError(f"request failed: {exc}") from exc

        self.last_response_code = response.status_code

        if retry_on_401 and response.status_code == 401 and self.token_refresh_callback:
            new_token = self.token_refresh_callback()
            retry_headers = {"Authorization": f"Bearer {new_token}"}
            if method == "POST":
                retry_headers["Content-Type"] = "application/json"
            else:
                retry_headers["Accept"] = "application/json"
            return self._perform(method, url, retry_headers, body, retry_on_401=False)

        return response.text