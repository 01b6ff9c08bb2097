"""
Utility functions for lwwgraph.

This module contains low-level helpers used across the system.
No merge or validity logic should live here.
"""

from lwwgraph.utils.text import is_blank, is_valid_timestamp
from lwwgraph.utils.time import (
    Clock,
    FixedClock,
    LogicalClock,
    WallClock,
    epoch_millis,
    utc_now,
)

__all__ = [
    "is_blank",
    "is_valid_timestamp",
    "Clock",
    "FixedClock",
    "LogicalClock",
    "WallClock",
    "epoch_millis",
    "utc_now",
]
