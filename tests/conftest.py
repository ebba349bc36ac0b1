"""Pytest configuration for the nurbsect tests."""

import sys
from pathlib import Path

import pytest

root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from nurbsect.config import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore the default tolerances after every test."""
    yield
    Settings.reset()
