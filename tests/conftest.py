"""Shared fixtures for nex tests."""

from pathlib import Path

import pytest


@pytest.fixture
def nex_home(tmp_path: Path) -> Path:
    """Nex home directory inside the test's temporary directory."""
    return tmp_path / ".nex"
