"""Admin login tokens.

Tokens are HS256 JWTs carrying ``{"role": "admin"}`` and an expiry
``token_ttl_hours`` after issue. Verification failures of any sort
(bad signature, expired, malformed, wrong role) are reported as invalid.
"""

from __future__ import annotations

import functools
import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt
from flask import jsonify, request

from ..common.config import Settings

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
ADMIN_ROLE = "admin"


class AuthConfigError(RuntimeError):
    """Signing secret is not configured."""


class TokenSigner:
    """Issues and verifies admin tokens with the configured secret."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def check_password(self, password: str) -> bool:
        """Constant-time compare against the configured admin password."""
        expected = self.settings.admin_password
        if not expected:
            logger.warning("ADMIN_PASSWORD not set; admin login disabled")
            return False
        return hmac.compare_digest(
            password.encode("utf-8", "surrogatepass"),
            expected.encode("utf-8", "surrogatepass"),
        )

    def issue(self, now: datetime | None = None) -> str:
        if not self.settings.jwt_secret:
            raise AuthConfigError("JWT_SECRET not set in configuration")
        now = now or datetime.now(timezone.utc)
        payload = {
            "role": ADMIN_ROLE,
            "iat": now,
            "exp": now + timedelta(hours=self.settings.token_ttl_hours),
        }
        return jwt.encode(payload, self.settings.jwt_secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> bool:
        if not token or not self.settings.jwt_secret:
            return False
        try:
            payload = jwt.decode(
                token,
                self.settings.jwt_secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp"]},
            )
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid token: %s", e)
            return False
        return payload.get("role") == ADMIN_ROLE


def bearer_token(header: str | None) -> str:
    """Token part of an ``Authorization: Bearer <token>`` header, or ''."""
    header = header or ""
    if header.startswith("Bearer "):
        return header[len("Bearer "):].strip()
    return ""


def require_admin(signer: TokenSigner) -> Callable:
    """Route decorator that rejects requests without a valid admin token."""

    def decorator(view: Callable) -> Callable:
        @functools.wraps(view)
        def wrapped(*args, **kwargs):
            token = bearer_token(request.headers.get("Authorization"))
            if not token:
                return jsonify({"error": "Not logged in"}), 401
            if not signer.verify(token):
                return jsonify({"error": "Invalid/expired login"}), 401
            return view(*args, **kwargs)

        return wrapped

    return decorator
