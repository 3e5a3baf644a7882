"""Sheet Pricing - live Google Sheet CSV decoding, model matching, quote prices."""

from .csv_decoder import decode, split_records
from .matcher import find_by_model, norm, quote_from_row
from .models import ErrorKind, PriceLookup, Row, RowsResult
from .service import PriceService
from .sheet_source import LiveRowSource

__all__ = [
    "ErrorKind",
    "LiveRowSource",
    "PriceLookup",
    "PriceService",
    "Row",
    "RowsResult",
    "decode",
    "find_by_model",
    "norm",
    "quote_from_row",
    "split_records",
]

__version__ = "0.1.0"
