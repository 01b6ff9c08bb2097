"""
Configuration layer for lwwgraph.

Configuration is:
- Explicit (passed to a replica, not global)
- Typed (frozen dataclass)
- Overridable from ``LWWGRAPH_*`` environment variables via dynaconf
"""

from lwwgraph.config.settings import GraphConfig
from lwwgraph.config.loader import load_config, build_clock

__all__ = [
    "GraphConfig",
    "load_config",
    "build_clock",
]
