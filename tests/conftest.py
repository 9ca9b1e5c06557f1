"""Pytest configuration and shared fixtures for Plugstore tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src and project root to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root / "src", project_root):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture
def example_holder():
    """Holder used by the single-holder storage scenarios."""
    from core.types import DataHolder

    return DataHolder("ExamplePlugin")
