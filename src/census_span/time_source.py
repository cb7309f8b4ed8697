"""
Time sources used by spans to read monotonic time and the wall-clock origin.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging
import time

logger = logging.getLogger(__name__)


class TimeSource(ABC):
    """Abstract interface for the clock a span reads its timestamps from."""

    @abstractmethod
    def now(self) -> float:
        """
        Read the current monotonic time.

        Returns:
            Milliseconds elapsed since an arbitrary but fixed point (monotonic zero)
        """
        pass

    @abstractmethod
    def time_origin(self) -> float:
        """
        Read the wall-clock instant that corresponds to monotonic zero.

        Returns:
            Milliseconds since the Unix epoch
        """
        pass


class PerformanceTimeSource(TimeSource):
    """
    Time source backed by ``time.perf_counter``.

    The origin is anchored once, when the source is created, by pairing a
    wall-clock reading with a monotonic one.
    """

    def __init__(self):
        self._origin_ms = time.time() * 1000.0 - time.perf_counter() * 1000.0

    def now(self) -> float:
        return time.perf_counter() * 1000.0

    def time_origin(self) -> float:
        return self._origin_ms

    def reanchor(self) -> None:
        """Re-pair the origin with the wall clock, e.g. after a system clock adjustment."""
        self._origin_ms = time.time() * 1000.0 - time.perf_counter() * 1000.0
        logger.debug(f"Re-anchored time origin to {self._origin_ms:.3f} ms")


_default_time_source: TimeSource = PerformanceTimeSource()


def get_default_time_source() -> TimeSource:
    """Return the process-wide time source given to spans created without one."""
    return _default_time_source


def set_default_time_source(source: Optional[TimeSource]) -> None:
    """
    Replace the process-wide default time source.

    Spans already constructed keep the source they captured.

    Args:
        source: New default, or None to restore a fresh PerformanceTimeSource
    """
    global _default_time_source
    _default_time_source = source if source is not None else PerformanceTimeSource()
    logger.debug(f"Default time source set to {type(_default_time_source).__name__}")
