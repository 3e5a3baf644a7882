"""Live row source backed by a published Google Sheet.

Every call to ``read_rows`` fetches the CSV export again unless a memo TTL
is configured. Failures come back as ``RowsResult`` error kinds instead of
exceptions so the HTTP layer can map them to status codes.
"""

from __future__ import annotations

import logging
import threading
import time

import requests

from ..common.config import Settings
from .csv_decoder import decode
from .http_client import HTTPClient
from .models import ErrorKind, Row, RowsResult

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 180
SHARING_MESSAGE = (
    "Google Sheet not accessible. "
    "Set Share -> Anyone with the link -> Viewer."
)


def looks_like_html(text: str) -> bool:
    """True when a private sheet answered with a sign-in page instead of CSV."""
    lowered = text.strip().lower()
    return lowered.startswith("<!doctype") or "<html" in lowered


class LiveRowSource:
    """Fetches and decodes the configured sheet tab.

    Usage:
        source = LiveRowSource(Settings.load())
        result = source.read_rows()
        if result.ok:
            rows = result.rows
    """

    EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq"

    def __init__(
        self,
        settings: Settings,
        client: HTTPClient | None = None,
    ) -> None:
        self.settings = settings
        self._client = client
        self._memo: dict[tuple[str, str], tuple[float, list[Row]]] = {}
        self._lock = threading.Lock()

    def csv_url(self) -> str | None:
        """CSV export URL of the configured tab, or None without a sheet id."""
        if not self.settings.sheet_id:
            return None
        base = self.EXPORT_URL.format(sheet_id=self.settings.sheet_id)
        return f"{base}?tqx=out:csv&gid={self.settings.sheet_gid}"

    def read_rows(self) -> RowsResult:
        """Fetch the sheet and decode it into rows."""
        url = self.csv_url()
        if url is None:
            return RowsResult.failure(
                ErrorKind.CONFIG, "Missing SHEET_ID in configuration"
            )

        cached = self._memo_get()
        if cached is not None:
            logger.debug("Using memoized rows (%d)", len(cached))
            return RowsResult(rows=cached)

        try:
            status, text = self._fetch(url)
        except requests.RequestException as exc:
            logger.warning("Google Sheet request failed: %s", exc)
            return RowsResult.failure(
                ErrorKind.FETCH, f"Google Sheet fetch failed: {exc}"
            )

        if not 200 <= status < 300:
            logger.warning("Google Sheet fetch returned HTTP %d", status)
            return RowsResult.failure(
                ErrorKind.FETCH,
                f"Google Sheet fetch failed: {status} {text[:SNIPPET_LENGTH]}",
            )

        if looks_like_html(text):
            logger.warning("Google Sheet returned HTML; link sharing is off")
            return RowsResult.failure(ErrorKind.SHARING_DISABLED, SHARING_MESSAGE)

        rows = decode(text)
        logger.info("Fetched %d rows from sheet %s", len(rows), self.settings.sheet_id)
        self._memo_put(rows)
        return RowsResult(rows=rows)

    def _fetch(self, url: str) -> tuple[int, str]:
        if self._client is not None:
            resp = self._client.get(url)
            return resp.status_code, resp.text
        with HTTPClient(self.settings) as client:
            resp = client.get(url)
            return resp.status_code, resp.text

    # ------------------------------------------------------------------
    # Optional memo, keyed by sheet and tab
    # ------------------------------------------------------------------

    def _memo_key(self) -> tuple[str, str]:
        return self.settings.sheet_id, self.settings.sheet_gid

    def _memo_get(self) -> list[Row] | None:
        ttl = self.settings.cache_ttl_seconds
        if ttl <= 0:
            return None
        with self._lock:
            entry = self._memo.get(self._memo_key())
        if entry is None:
            return None
        stored_at, rows = entry
        if time.monotonic() - stored_at >= ttl:
            return None
        # Copies so callers cannot mutate the memoized rows
        return [dict(r) for r in rows]

    def _memo_put(self, rows: list[Row]) -> None:
        if self.settings.cache_ttl_seconds <= 0:
            return
        with self._lock:
            self._memo[self._memo_key()] = (
                time.monotonic(),
                [dict(r) for r in rows],
            )
