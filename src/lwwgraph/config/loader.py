from __future__ import annotations

import logging

from dynaconf import Dynaconf

from lwwgraph.config.constants import DEFAULTS
from lwwgraph.config.settings import GraphConfig
from lwwgraph.utils.time import Clock, LogicalClock, WallClock


def _settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="LWWGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def load_config() -> GraphConfig:
    """
    Build a GraphConfig from ``LWWGRAPH_*`` environment variables
    (and a ``.env`` file, if present), falling back to DEFAULTS.
    """
    settings = _settings()

    clock = str(settings.get("CLOCK", DEFAULTS["CLOCK"])).strip().lower()
    if clock not in {"wall", "logical"}:
        raise ValueError(f"Unknown clock {clock!r}, expected 'wall' or 'logical'")

    config = GraphConfig(
        directed=_as_bool(settings.get("DIRECTED", DEFAULTS["DIRECTED"])),
        strict=_as_bool(settings.get("STRICT", DEFAULTS["STRICT"])),
        clock=clock,
        logical_clock_start=int(
            settings.get("LOGICAL_CLOCK_START", DEFAULTS["LOGICAL_CLOCK_START"])
        ),
    )
    logging.getLogger("lwwgraph.config").debug("loaded %s", config)
    return config


def build_clock(config: GraphConfig) -> Clock:
    if config.clock == "logical":
        return LogicalClock(start=config.logical_clock_start)
    if config.clock == "wall":
        return WallClock()
    raise ValueError(f"Unknown clock {config.clock!r}, expected 'wall' or 'logical'")
