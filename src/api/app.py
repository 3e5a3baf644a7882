"""Flask application exposing the sheet price lookups over HTTP.

Routes:
    GET  /                         liveness text
    POST /api/login                {password} -> {token}
    GET  /api/price/<model>        public quote price
    GET  /api/admin/price/<model>  quote price plus FX columns (Bearer token)
    GET  /api/debug                row count, headers, sample models
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..common.config import Settings
from ..sheet_pricing.models import ErrorKind, PriceLookup
from ..sheet_pricing.service import PriceService
from .auth import AuthConfigError, TokenSigner, require_admin

logger = logging.getLogger(__name__)

_CORS_METHODS = "GET, POST, OPTIONS"
_CORS_HEADERS = "Content-Type, Authorization"


def origin_allowed(origin: str | None) -> bool:
    """Codespaces and local development origins; requests without Origin pass."""
    if not origin:
        return True
    return (
        origin.endswith(".app.github.dev")
        or origin.startswith("http://localhost")
        or origin.startswith("http://127.0.0.1")
    )


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _lookup_response(lookup: PriceLookup, *, admin: bool = False):
    if lookup.error is ErrorKind.NOT_FOUND:
        return _error("Model not found", 404)
    if not lookup.ok:
        return _error(lookup.message, 500)
    return jsonify(lookup.to_admin_dict() if admin else lookup.to_dict())


def create_app(
    settings: Settings | None = None,
    service: PriceService | None = None,
) -> Flask:
    """Build the Flask app around one settings object."""
    settings = settings or Settings.load()
    service = service or PriceService(settings)
    signer = TokenSigner(settings)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    # ------------------------------------------------------------------
    # CORS
    # ------------------------------------------------------------------

    @app.before_request
    def _preflight():
        if request.method == "OPTIONS":
            return "", 204
        return None

    @app.after_request
    def _cors(response):
        origin = request.headers.get("Origin")
        if origin and origin_allowed(origin):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = _CORS_METHODS
            response.headers["Access-Control-Allow-Headers"] = _CORS_HEADERS
            response.headers["Vary"] = "Origin"
        elif origin:
            logger.warning("CORS blocked: %s", origin)
        return response

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    @app.errorhandler(Exception)
    def _unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error on %s", request.path)
        return _error(str(exc), 500)

    # ------------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------------

    @app.get("/")
    def index():
        return "Backend is running. Use /api/price/DUKE%20R9"

    @app.post("/api/login")
    def login():
        body = request.get_json(silent=True) or {}
        password = body.get("password") if isinstance(body, dict) else None
        if not password:
            return _error("Password required", 400)
        if not isinstance(password, str) or not signer.check_password(password):
            logger.warning("Admin login rejected")
            return _error("Wrong password", 401)
        try:
            token = signer.issue()
        except AuthConfigError as exc:
            logger.error("Cannot issue token: %s", exc)
            return _error(str(exc), 500)
        logger.info("Admin login succeeded")
        return jsonify({"token": token})

    @app.get("/api/debug")
    def debug():
        summary, result = service.debug_summary()
        if summary is None:
            return _error(result.message, 500)
        return jsonify(summary)

    @app.get("/api/price/<path:model>")
    def price(model: str):
        return _lookup_response(service.lookup(model))

    @app.get("/api/admin/price/<path:model>")
    @require_admin(signer)
    def admin_price(model: str):
        return _lookup_response(service.lookup(model), admin=True)

    return app
