"""Tests for the one-off lookup CLI."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from src.sheet_pricing import main as cli
from src.sheet_pricing.service import PriceService


@pytest.fixture
def patched_service(settings, source):
    service = PriceService(settings, source)
    with patch.object(cli, "Settings") as settings_cls, \
            patch.object(cli, "PriceService", return_value=service), \
            patch.object(cli, "setup_logging"):
        settings_cls.load.return_value = settings
        yield service


class TestCli:
    def test_lookup(self, patched_service, capsys):
        assert cli.main(["--model", "DUKE R9"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out == {"model": "DUKE R9", "quote_price_inr": 123000, "currency": "INR"}

    def test_admin_lookup(self, patched_service, capsys):
        assert cli.main(["--model", "super r9", "--admin"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["fx_override"] == "12.1"

    def test_not_found_exit_code(self, patched_service, capsys):
        assert cli.main(["--model", "UNKNOWN"]) == 1
        assert capsys.readouterr().out == ""

    def test_debug(self, patched_service, capsys):
        assert cli.main(["--debug"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["rowCount"] == 3

    def test_requires_mode(self):
        with pytest.raises(SystemExit):
            cli.main([])
