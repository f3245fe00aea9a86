"""Shared test fixtures for the project tracker tests."""

import sys
from pathlib import Path

import pytest

# Ensure the repo root is importable (pkg/ is a namespace package)
sys.path.insert(0, str(Path(__file__).parent.parent))

from pkg.tracker.store import ProjectStore


@pytest.fixture
def store():
    return ProjectStore()


@pytest.fixture
def snapshots(store):
    """Every snapshot a listener receives, in order."""
    received = []
    store.subscribe(received.append)
    return received
