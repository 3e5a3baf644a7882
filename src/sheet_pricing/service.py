"""Price lookups against the live sheet: fetch, decode, match, extract."""

from __future__ import annotations

import logging

from ..common.config import Settings
from .matcher import MODEL_COLUMN, find_by_model, quote_from_row
from .models import ErrorKind, PriceLookup, RowsResult
from .sheet_source import LiveRowSource

logger = logging.getLogger(__name__)

DEBUG_SAMPLE_SIZE = 10


class PriceService:
    """Request-level lookup flow over a ``LiveRowSource``."""

    def __init__(
        self,
        settings: Settings,
        source: LiveRowSource | None = None,
    ) -> None:
        self.settings = settings
        self.source = source or LiveRowSource(settings)

    def lookup(self, model: str) -> PriceLookup:
        """Find the quote price for ``model``.

        Source failures are passed through as the lookup's error kind;
        an unmatched model gives ``ErrorKind.NOT_FOUND``.
        """
        result = self.source.read_rows()
        if not result.ok:
            return PriceLookup(model=model, error=result.error, message=result.message)

        row = find_by_model(result.rows, model)
        if row is None:
            logger.info("No row for model '%s' among %d rows", model, len(result.rows))
            return PriceLookup(
                model=model,
                error=ErrorKind.NOT_FOUND,
                message="Model not found",
            )

        price = quote_from_row(row)
        logger.info("Model '%s' -> '%s' (quote: %s)", model, row.get(MODEL_COLUMN), price)
        return PriceLookup(model=model, row=row, quote_price_inr=price)

    def debug_summary(self) -> tuple[dict | None, RowsResult]:
        """Diagnostic view of the live sheet.

        Returns the summary dict (None on failure) alongside the raw
        ``RowsResult`` so callers can report the error.
        """
        result = self.source.read_rows()
        if not result.ok:
            return None, result

        rows = result.rows
        summary = {
            "sheetCsv": self.source.csv_url(),
            "rowCount": len(rows),
            "headers": list(rows[0].keys()) if rows else [],
            "sampleModels": [
                r.get(MODEL_COLUMN) for r in rows[:DEBUG_SAMPLE_SIZE]
            ],
        }
        return summary, result
