"""
HTTP transport for kinopoisk.ru pages and the GraphQL endpoint.
"""

from __future__ import annotations

from typing import Any

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from watchsync.config.models import WatchSyncSettings
from watchsync.errors import DocumentParseError


def parse_document(body: str | bytes) -> BeautifulSoup:
    """
    Parse an HTML body into a navigable tree.
    """

    try:
        return BeautifulSoup(body, "html.parser")
    except ParserRejectedMarkup as exc:
        raise DocumentParseError(f"HTML body could not be parsed: {exc}") from exc


class KinopoiskTransport:
    """
    Sends browser-like requests carrying the user's session cookie.

    Status codes are not inspected: whatever body comes back is handed to the
    caller, which decides whether it is usable.
    """

    def __init__(
        self,
        *,
        settings: WatchSyncSettings,
        cookie: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout_seconds = settings.timeout_seconds

        self.request_headers = {"User-Agent": settings.user_agent}
        cookie_value = cookie if cookie is not None else settings.cookie
        if cookie_value:
            self.request_headers["Cookie"] = cookie_value
        self.json_headers = {
            **self.request_headers,
            "Content-Type": "application/json",
            "Origin": settings.origin,
            "Referer": f"{settings.origin}/",
            "Service-Id": "25",
            "Source-Id": "1",
        }

    def get_document(self, url: str) -> BeautifulSoup:
        response = self._session.get(
            url,
            headers=self.request_headers,
            timeout=self._timeout_seconds,
        )
        return parse_document(response.content)

    def post_json(self, url: str, payload: dict[str, Any]) -> Any:
        """
        POST a JSON payload and return the decoded JSON response.

        Raises requests.RequestException on transport failure and ValueError
        when the response body is not JSON.
        """

        response = self._session.post(
            url,
            json=payload,
            headers=self.json_headers,
            timeout=self._timeout_seconds,
        )
        return response.json()
