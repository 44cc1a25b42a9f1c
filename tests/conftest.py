"""
Shared test fixtures and helpers for the subtag-registry test suite.

Provides path resolution for registry fixture files and a small inline
registry used where a fixture file would hide the input under test.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SAMPLE_REGISTRY = "registry_sample.txt"
SAMPLE_RECORD_COUNT = 13

MINIMAL_REGISTRY = """File-Date: 2022-08-08
%%
Type: language
Subtag: cu
Description: Church Slavic
Description: Church Slavonic
Added: 2005-10-16
%%
Type: script
Subtag: Latf
Description: Latin (Fraktur variant)
Added: 2005-10-16
"""


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo per-test structlog configuration bound to a captured stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def fixtures_dir() -> Path:
    """Return the absolute path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture()
def sample_registry_text() -> str:
    """Return the sample registry excerpt as text."""
    return fixture_path(SAMPLE_REGISTRY).read_text(encoding="utf-8")


def fixture_path(filename: str) -> Path:
    """
    Resolve the absolute path to a test fixture file.

    Raises FileNotFoundError if the fixture does not exist.
    """
    path = FIXTURES_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Test fixture not found: {path}")
    return path
