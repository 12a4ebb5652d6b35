"""Shared fixtures for the svg_inspector test suite."""

from pathlib import Path

import pytest

from svg_inspector.validators import ValidationEngine

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SVG_NS = "http://www.w3.org/2000/svg"


@pytest.fixture
def engine():
    """A fresh engine over the built-in SVG catalogue."""
    return ValidationEngine()


@pytest.fixture
def make_svg():
    """Wrap body markup in a conforming <svg> root."""

    def _make(body: str = "", **root_attrs: str) -> str:
        attrs = {"xmlns": SVG_NS, "width": "100", "height": "100", **root_attrs}
        rendered = " ".join(f'{name.replace("_", "-")}="{value}"' for name, value in attrs.items())
        return f"<svg {rendered}>{body}</svg>"

    return _make


@pytest.fixture
def fixture_text():
    """Read an SVG file from tests/fixtures."""

    def _read(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _read
