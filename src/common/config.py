"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
The resulting ``Settings`` object is immutable and is built once at
start-up, then handed to the components that need it.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Environment variable -> Settings field
_ENV_OVERRIDES = {
    "SHEET_ID": "sheet_id",
    "SHEET_GID": "sheet_gid",
    "PORT": "port",
    "ADMIN_PASSWORD": "admin_password",
    "JWT_SECRET": "jwt_secret",
    "REQUEST_TIMEOUT": "request_timeout",
    "SHEET_CACHE_TTL": "cache_ttl_seconds",
    "LOG_LEVEL": "log_level",
}


class Settings(BaseModel):
    """Top-level application settings."""

    model_config = ConfigDict(frozen=True)

    # Google Sheet
    sheet_id: str = ""
    sheet_gid: str = "0"

    # HTTP server
    port: int = Field(default=3001, ge=1, le=65535)

    # Admin login
    admin_password: str = ""
    jwt_secret: str = ""
    token_ttl_hours: float = Field(default=12.0, gt=0)

    # Upstream fetch; None keeps the transport default (no timeout)
    request_timeout: float | None = None
    # 0 disables the row memo, every lookup refetches the sheet
    cache_ttl_seconds: float = Field(default=0.0, ge=0)

    log_level: str = "INFO"

    @classmethod
    def load(cls, env_file: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, then apply env overrides."""
        load_dotenv(env_file or PROJECT_ROOT / ".env")

        data: dict = {}
        settings_path = CONFIG_DIR / "settings.yaml"
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is not None and value.strip() != "":
                data[field_name] = value.strip()

        return cls(**data)
