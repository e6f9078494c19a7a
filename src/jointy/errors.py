"""Exception types raised by jointy.

Each error also derives from the builtin the rest of the package would
otherwise raise, so callers catching ``ValueError`` / ``LookupError`` keep
working.
"""

from __future__ import annotations


class JointyError(Exception):
    """Base class for all jointy errors."""


class InvalidGeometryError(JointyError, ValueError):
    """A diameter, pitch, length or angle is out of its physical range."""


class InvalidMaterialError(JointyError, ValueError):
    """A material property group was given a physically meaningless value."""


class InvalidReferenceError(JointyError, ValueError):
    """A cross-reference is malformed (negative index or unknown kind)."""


class DanglingReferenceError(JointyError, LookupError):
    """A cross-reference points outside its target collection."""

    def __init__(self, kind: str, index: int, size: int) -> None:
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(
            f"Referenced element not found: {kind}[{index}] (collection has {size} item(s))"
        )


__all__ = [
    "JointyError",
    "InvalidGeometryError",
    "InvalidMaterialError",
    "InvalidReferenceError",
    "DanglingReferenceError",
]
