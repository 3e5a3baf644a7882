"""Tests for the packaging metadata."""

import pytest

tomllib = pytest.importorskip("tomllib")


def _pyproject(project_root) -> dict:
    with open(project_root / "pyproject.toml", "rb") as f:
        return tomllib.load(f)


class TestPackaging:
    def test_src_namespace_packages_discovered(self, project_root):
        find = _pyproject(project_root)["tool"]["setuptools"]["packages"]["find"]
        assert find["namespaces"] is True
        assert "src*" in find["include"]
        assert not (project_root / "src" / "__init__.py").exists()

    def test_console_scripts_target_src_modules(self, project_root):
        scripts = _pyproject(project_root)["project"]["scripts"]
        assert scripts["sheet-price-server"] == "src.api.main:main"
        assert scripts["sheet-price"] == "src.sheet_pricing.main:main"
