"""CLI entry point for one-off sheet price lookups.

Usage:
    python -m src.sheet_pricing.main --model "DUKE R9"
    python -m src.sheet_pricing.main --model "DUKE R9" --admin
    python -m src.sheet_pricing.main --debug
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ..common.config import Settings
from ..common.logging import setup_logging
from .service import PriceService

logger = logging.getLogger(__name__)


def _print_json(data: dict) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _run_lookup(service: PriceService, model: str, *, admin: bool) -> int:
    lookup = service.lookup(model)
    if not lookup.ok:
        logger.error("Lookup failed (%s): %s", lookup.error.value, lookup.message)
        return 1
    _print_json(lookup.to_admin_dict() if admin else lookup.to_dict())
    return 0


def _run_debug(service: PriceService) -> int:
    summary, result = service.debug_summary()
    if summary is None:
        logger.error("Sheet read failed (%s): %s", result.error.value, result.message)
        return 1
    _print_json(summary)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sheet Price Lookup")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--model",
        type=str,
        help="Model name to look up (e.g., 'DUKE R9')",
    )
    group.add_argument(
        "--debug",
        action="store_true",
        help="Print row count, headers and sample models of the live sheet",
    )
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Include FX override and live currency columns",
    )

    args = parser.parse_args(argv)

    settings = Settings.load()
    setup_logging(settings.log_level)
    service = PriceService(settings)

    if args.debug:
        return _run_debug(service)
    return _run_lookup(service, args.model, admin=args.admin)


if __name__ == "__main__":
    sys.exit(main())
