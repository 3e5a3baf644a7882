"""HTTP client for fetching sheet exports."""

from __future__ import annotations

import logging
from typing import Any

import requests

from ..common.config import Settings

logger = logging.getLogger(__name__)


class HTTPClient:
    """Thin wrapper around a ``requests.Session``.

    Single attempt per call, no retries. The response is returned whatever
    its status code so callers can report the upstream status and body.
    """

    USER_AGENT = "sheet-price-lookup/0.1 (+https://docs.google.com/spreadsheets)"

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._session = requests.Session()
        self._session.headers["User-Agent"] = self.USER_AGENT

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send a GET request.

        Args:
            url: Target URL.
            params: Query parameters.
            headers: Extra headers (merged with session defaults).

        Returns:
            requests.Response object, including non-2xx responses.

        Raises:
            requests.RequestException: On connection or transport failure.
        """
        logger.debug("GET %s", url)
        return self._session.get(
            url,
            params=params,
            headers=headers,
            timeout=self.settings.request_timeout,
        )

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
