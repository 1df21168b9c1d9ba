"""Shared fixtures for the idforge test suite."""

import sys
from pathlib import Path

import pytest

# Make the src layout importable without an installed package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from idforge.cache import AlphabetCache  # noqa: E402
from idforge.random_source import CallableRandomSource  # noqa: E402


def _cycling_bytes():
    position = 0

    def generate_bytes(count: int) -> bytes:
        nonlocal position
        data = bytes((position + i) % 256 for i in range(count))
        position = (position + count) % 256
        return data

    return generate_bytes


@pytest.fixture
def cache():
    """Fresh alphabet cache per test."""
    return AlphabetCache()


@pytest.fixture
def cycling_source():
    """Random source that yields 0, 1, ..., 255, 0, 1, ... in order."""
    return CallableRandomSource(_cycling_bytes(), name="cycling")
