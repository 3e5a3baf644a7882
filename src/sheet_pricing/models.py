"""Data models for sheet price lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# One decoded spreadsheet record: header column name -> trimmed cell value
Row = dict[str, str]

CURRENCY = "INR"


class ErrorKind(str, Enum):
    """Why a lookup produced no price."""

    CONFIG = "config"
    FETCH = "fetch"
    SHARING_DISABLED = "sharing_disabled"
    NOT_FOUND = "not_found"


@dataclass
class RowsResult:
    """Outcome of reading the live sheet: rows, or an error kind and message."""

    rows: list[Row] = field(default_factory=list)
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> RowsResult:
        return cls(error=error, message=message)


@dataclass
class PriceLookup:
    """Result of a single model lookup.

    Maps to the API contract: { model, quote_price_inr, currency }
    """

    model: str
    row: Row | None = None
    quote_price_inr: int | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "quote_price_inr": self.quote_price_inr,
            "currency": CURRENCY,
        }

    def to_admin_dict(self) -> dict:
        """Public fields plus the raw FX columns of the matched row."""
        row = self.row or {}
        live_currency = row.get("chinese live currency")
        if live_currency is None:
            live_currency = row.get("live currency")
        return {
            **self.to_dict(),
            "fx_override": row.get("FX_OVERRIDE (for testing)"),
            "live_currency": live_currency,
        }
