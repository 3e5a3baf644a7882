"""HTTP API - Flask app, admin login tokens."""

from .app import create_app
from .auth import TokenSigner

__all__ = ["TokenSigner", "create_app"]
