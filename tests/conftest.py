"""
Shared fixtures for census_span tests.
"""

import pytest

from census_span.models import Span
from census_span.time_source import TimeSource


class FakeTimeSource(TimeSource):
    """Time source whose readings are set directly by the test."""

    def __init__(self, now: float = 0.0, origin: float = 0.0):
        self.current = now
        self.origin = origin

    def now(self) -> float:
        return self.current

    def time_origin(self) -> float:
        return self.origin


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: whole trace-tree scenarios")


@pytest.fixture
def clock():
    """Deterministic time source starting at zero."""
    return FakeTimeSource()


@pytest.fixture
def span(clock):
    """Fresh root span reading time from the fake clock."""
    return Span(time_source=clock)
