"""Shared fixtures for icalkit tests."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest


@pytest.fixture
def stamp():
    """A fixed UTC creation instant for DTSTAMP."""
    return datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def berlin():
    return ZoneInfo("Europe/Berlin")


@pytest.fixture(autouse=True)
def default_prodid(monkeypatch):
    """Keep PRODID independent of the developer's environment."""
    monkeypatch.delenv("ICALKIT_PRODID", raising=False)
