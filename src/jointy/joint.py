"""Bolted joint cross-reference records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from .elements import Bolt, Clamped, Nut, Stud, ThreadedInsert
from .errors import InvalidReferenceError

ElementKind = Literal["bolt", "stud", "nut", "threaded", "clamped"]
ELEMENT_KINDS: tuple[str, ...] = ("bolt", "stud", "nut", "threaded", "clamped")

Element = Union[Bolt, Stud, Nut, ThreadedInsert, Clamped]


def _check_index(kind: str, index: int | None) -> None:
    if index is not None and index < 0:
        raise InvalidReferenceError(f"Joint {kind} index cannot be negative (got {index})")


@dataclass
class BoltedJoint:
    """Named assembly pointing at library elements by position.

    Every reference is optional; a joint with no references is legal.
    Indices are not checked against the library here, only on resolution.
    """

    name: str = ""
    description: str = ""
    bolt: int | None = None
    stud: int | None = None
    nut: int | None = None
    threaded: int | None = None
    clamped: int | None = None

    def __post_init__(self) -> None:
        for kind in ELEMENT_KINDS:
            _check_index(kind, getattr(self, kind))

    def assign(self, kind: ElementKind, index: int | None) -> None:
        """Point the joint at another element of `kind` (None detaches it)."""
        if kind not in ELEMENT_KINDS:
            raise InvalidReferenceError(f"Unknown element kind: {kind!r}")
        _check_index(kind, index)
        setattr(self, kind, index)

    def references(self) -> dict[str, int]:
        """Populated references as ``{kind: index}``."""
        refs: dict[str, int] = {}
        for kind in ELEMENT_KINDS:
            index = getattr(self, kind)
            if index is not None:
                refs[kind] = index
        return refs

    @property
    def is_empty(self) -> bool:
        return not self.references()


@dataclass(frozen=True)
class ResolvedJoint:
    """A joint together with the library elements it points at."""

    joint: BoltedJoint
    bolt: Bolt | None = None
    stud: Stud | None = None
    nut: Nut | None = None
    threaded: ThreadedInsert | None = None
    clamped: Clamped | None = None

    @property
    def elements(self) -> dict[str, Element]:
        attached: dict[str, Element] = {}
        for kind in ELEMENT_KINDS:
            element = getattr(self, kind)
            if element is not None:
                attached[kind] = element
        return attached

    @property
    def is_empty(self) -> bool:
        return not self.elements

    @property
    def grip_length(self) -> float | None:
        """Clamped length between bearing faces, when a clamped member is attached."""
        if self.clamped is None:
            return None
        return self.clamped.thickness


__all__ = ["ElementKind", "ELEMENT_KINDS", "Element", "BoltedJoint", "ResolvedJoint"]
