"""CLI entry point for the price lookup HTTP server.

Usage:
    python -m src.api.main
    python -m src.api.main --port 8080 --debug
"""

from __future__ import annotations

import argparse
import logging

from ..common.config import Settings
from ..common.logging import setup_logging
from .app import create_app

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sheet Price Lookup server")
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Interface to bind (default: all interfaces)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: PORT from env, else 3001)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode and DEBUG logging",
    )

    args = parser.parse_args(argv)

    settings = Settings.load()
    setup_logging(logging.DEBUG if args.debug else settings.log_level)

    if not settings.sheet_id:
        logger.warning("SHEET_ID not set; price lookups will fail until configured")

    app = create_app(settings)
    port = args.port or settings.port
    logger.info("Backend running at http://%s:%d", args.host, port)
    app.run(host=args.host, port=port, debug=args.debug)


if __name__ == "__main__":
    main()
