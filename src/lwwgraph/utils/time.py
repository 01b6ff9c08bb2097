from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Returns current UTC time.
    """
    return datetime.now(timezone.utc)


def epoch_millis(dt: datetime | None = None) -> int:
    """
    Milliseconds since the Unix epoch.
    """
    if dt is None:
        dt = utc_now()
    return int(dt.timestamp() * 1000)


class Clock(ABC):
    """
    Supplies the timestamp of an operation when the caller omits one.

    Timestamps are opaque, totally ordered, non-negative integers.
    """

    @abstractmethod
    def now(self) -> int:
        raise NotImplementedError


class WallClock(Clock):
    """
    Wall-clock milliseconds. Successive readings may be equal.
    """

    def now(self) -> int:
        return epoch_millis()


class LogicalClock(Clock):
    """
    Strictly increasing counter, one tick per reading.
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("LogicalClock start must be non-negative")
        self._counter = itertools.count(start)

    def now(self) -> int:
        return next(self._counter)


class FixedClock(Clock):
    """
    Always returns the same reading.
    """

    def __init__(self, timestamp: int) -> None:
        self.timestamp = timestamp

    def now(self) -> int:
        return self.timestamp
