"""CSV decoding for Google Sheets exports.

The gviz CSV export quotes every cell and may embed commas, doubled quotes
and line breaks inside quoted cells. ``split_records`` is a single-pass
scanner over the raw text; ``decode`` turns its output into header-keyed
rows.
"""

from __future__ import annotations

import logging

from .models import Row

logger = logging.getLogger(__name__)


def split_records(text: str) -> list[list[str]]:
    """Split raw CSV text into records of untrimmed cell strings.

    An unterminated quote is not an error: end of input closes the
    pending cell and record.
    """
    records: list[list[str]] = []
    record: list[str] = []
    cell: list[str] = []
    in_quotes = False

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if ch == '"':
            if in_quotes and i + 1 < n and text[i + 1] == '"':
                cell.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            record.append("".join(cell))
            cell = []
        elif ch in "\r\n" and not in_quotes:
            # \r\n counts as one terminator
            if ch == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
            record.append("".join(cell))
            records.append(record)
            record = []
            cell = []
        else:
            cell.append(ch)
        i += 1

    if cell or record:
        record.append("".join(cell))
        records.append(record)

    return records


def _is_blank(record: list[str]) -> bool:
    return all(c.strip() == "" for c in record)


def decode(text: str) -> list[Row]:
    """Decode CSV text into rows keyed by the trimmed header cells.

    Blank records are skipped. Short records are padded with empty
    strings; cells beyond the header are ignored.
    """
    records = split_records(text)

    header: list[str] = []
    body_start = len(records)
    for idx, record in enumerate(records):
        if not _is_blank(record):
            header = [h.strip() for h in record]
            body_start = idx + 1
            break

    rows: list[Row] = []
    for record in records[body_start:]:
        if _is_blank(record):
            continue
        rows.append({
            key: (record[pos] if pos < len(record) else "").strip()
            for pos, key in enumerate(header)
        })

    logger.debug("Decoded %d rows with %d columns", len(rows), len(header))
    return rows
