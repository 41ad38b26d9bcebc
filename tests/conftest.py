"""Test setup for json2sections."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from json2sections import DecodingOptions, TokenCache  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    The server tests can be deselected when FastAPI is not installed:
        pytest -m "not server"
    """
    config.addinivalue_line(
        "markers",
        "server: marks tests that exercise the HTTP API through a test client",
    )


@pytest.fixture
def options() -> DecodingOptions:
    """Options with the nesting limit pinned regardless of the environment."""
    return DecodingOptions(max_nesting_level=5)


@pytest.fixture
def token_cache() -> TokenCache:
    """A small shared token cache."""
    return TokenCache(max_size=8)
