"""Shared test fixtures for the sheet price service."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import Settings
from src.sheet_pricing.sheet_source import LiveRowSource

TEST_JWT_SECRET = "test-secret-0123456789-abcdefghijklmnop"
TEST_ADMIN_PASSWORD = "s3cret-admin"


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake sheet with admin login enabled."""
    return Settings(
        sheet_id="test-sheet-id",
        sheet_gid="0",
        admin_password=TEST_ADMIN_PASSWORD,
        jwt_secret=TEST_JWT_SECRET,
    )


@pytest.fixture
def sample_csv() -> str:
    """CSV text in the shape of the gviz export of the pricing sheet."""
    return (
        '"model","quote price","FX_OVERRIDE (for testing)","chinese live currency"\r\n'
        '"DUKE R9","123000","","11.85"\r\n'
        '"SUPER R9 (India)","98500.6","12.1","11.85"\r\n'
        '"","","",""\r\n'
        '"Trail-X 200","call us","",""\r\n'
    )


def _make_response(text: str, status: int = 200) -> MagicMock:
    """Stand-in for a requests.Response."""
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    return resp


@pytest.fixture
def make_response():
    """Factory for fake responses: make_response(text, status=200)."""
    return _make_response


@pytest.fixture
def mock_client(sample_csv):
    """HTTP client whose GET returns the sample CSV."""
    client = MagicMock()
    client.get = MagicMock(return_value=_make_response(sample_csv))
    return client


@pytest.fixture
def source(settings, mock_client) -> LiveRowSource:
    """LiveRowSource wired to the mock client."""
    return LiveRowSource(settings, client=mock_client)
