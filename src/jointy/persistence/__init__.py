"""Whole-state JSON persistence."""

from .schemas import SCHEMA_VERSION, StudioSnapshot
from .adapter import from_snapshot, to_snapshot
from .store import StateError, dumps, load_state, loads, save_state

__all__ = [
    "SCHEMA_VERSION",
    "StudioSnapshot",
    "to_snapshot",
    "from_snapshot",
    "StateError",
    "dumps",
    "loads",
    "save_state",
    "load_state",
]
