"""Application state snapshot: library, the joint being edited and UI flags."""

from __future__ import annotations

from dataclasses import dataclass, field

from .joint import BoltedJoint
from .library import Library


@dataclass
class UIState:
    show_nav_panel: bool = True
    show_prop_panel: bool = True
    show_settings: bool = False


@dataclass
class StudioState:
    """Everything persisted between sessions, saved and loaded as one unit."""

    joint: BoltedJoint = field(default_factory=BoltedJoint)
    library: Library = field(default_factory=Library)
    ui: UIState = field(default_factory=UIState)


__all__ = ["UIState", "StudioState"]
