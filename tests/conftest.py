from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so tests run without installation.
2. Provides shared fixtures for building scanners and resetting logging.
"""

import io
import os
import sys
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from tokenscanner.core.scanner import TokenScanner  # noqa: E402
from tokenscanner.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_scanner() -> Callable[[str], TokenScanner]:
    """Return a factory building a scanner over an in-memory text source."""
    def _factory(text: str) -> TokenScanner:
        return TokenScanner(io.StringIO(text))
    return _factory


@pytest.fixture
def input_file(tmp_path):
    """Write ``text`` to a temp file and return its path as a string."""
    def _factory(text: str, name: str = "input.txt") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _factory


@pytest.fixture
def clean_logging():
    """Tear down any logging configuration before and after the test."""
    shutdown_logging()
    yield
    shutdown_logging()
