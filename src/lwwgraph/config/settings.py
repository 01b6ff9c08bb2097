from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# ---------------------------------------------------------------------
# Replica policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how a replica is constructed and how it reports rejected
    operations.
    """

    directed: bool = False
    # Raise rejected operations instead of returning a failed result
    strict: bool = False
    clock: Literal["wall", "logical"] = "wall"
    logical_clock_start: int = 0
