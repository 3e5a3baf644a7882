"""Model-name matching and quote price extraction for decoded sheet rows."""

from __future__ import annotations

import logging
import math
import re

from .models import Row

logger = logging.getLogger(__name__)

MODEL_COLUMN = "model"
QUOTE_PRICE_COLUMN = "quote price"

_SEPARATORS = re.compile(r"[-_]")
_PARENTHESIZED = re.compile(r"\(.*?\)")
_WHITESPACE = re.compile(r"\s+")
# Plain decimal notation: sign, digits, optional fraction and exponent
_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def norm(value: object) -> str:
    """Fold case, spacing and punctuation so model names compare loosely.

    >>> norm("Duke-R9 (India)")
    'duke r9'
    """
    if value is None:
        return ""
    s = str(value).strip().lower()
    s = s.replace("\u00a0", " ")
    s = _SEPARATORS.sub(" ", s)
    s = _PARENTHESIZED.sub("", s)
    s = _WHITESPACE.sub(" ", s)
    return s.strip()


def find_by_model(rows: list[Row], model: str | None) -> Row | None:
    """Return the row whose ``model`` column best matches ``model``.

    Exact normalized match first, then the first row (in sheet order)
    where either normalized string contains the other. Returns None when
    nothing qualifies or the query normalizes to an empty string.
    """
    key = norm(model)
    if not key:
        return None

    normalized = [norm(r.get(MODEL_COLUMN)) for r in rows]

    for row, candidate in zip(rows, normalized):
        if candidate == key:
            logger.debug("Exact match for '%s'", key)
            return row

    for row, candidate in zip(rows, normalized):
        if candidate and (key in candidate or candidate in key):
            logger.debug("Substring match for '%s': '%s'", key, candidate)
            return row

    return None


def parse_number(text: str | None) -> float | None:
    """Parse a decimal number string, or None when it is not one."""
    if text is None:
        return None
    stripped = text.strip()
    if not _NUMBER.fullmatch(stripped):
        return None
    value = float(stripped)
    return value if math.isfinite(value) else None


def quote_from_row(row: Row) -> int | None:
    """Quote price of a matched row, rounded to the nearest integer.

    Halves round up (2.5 -> 3). Missing, blank or non-numeric cells give
    None rather than an error.
    """
    value = parse_number(row.get(QUOTE_PRICE_COLUMN))
    if value is None:
        return None
    return math.floor(value + 0.5)
