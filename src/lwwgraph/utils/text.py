from __future__ import annotations

from typing import Any


def is_blank(label: Any) -> bool:
    """
    True for ``None``, non-strings, and strings made only of whitespace.
    """
    return not isinstance(label, str) or not label.strip()


def is_valid_timestamp(timestamp: Any) -> bool:
    # bool is an int subclass but never a meaningful timestamp
    return (
        isinstance(timestamp, int)
        and not isinstance(timestamp, bool)
        and timestamp >= 0
    )
