"""
Element library.

The library owns every material, fastener element and joint in append-only
lists. Everything else refers to library entries by list position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import calculations
from .elements import Bolt, Clamped, Nut, Stud, ThreadedInsert
from .errors import DanglingReferenceError, InvalidReferenceError
from .joint import ELEMENT_KINDS, BoltedJoint, ElementKind, ResolvedJoint
from .material import Material

_COLLECTIONS: dict[str, str] = {
    "material": "materials",
    "bolt": "bolts",
    "stud": "studs",
    "nut": "nuts",
    "threaded": "threaded",
    "clamped": "clamped",
    "joint": "joints",
}


@dataclass
class Library:
    """Indexed store of materials, fastener elements and joints."""

    materials: list[Material] = field(default_factory=list)
    bolts: list[Bolt] = field(default_factory=list)
    studs: list[Stud] = field(default_factory=list)
    nuts: list[Nut] = field(default_factory=list)
    threaded: list[ThreadedInsert] = field(default_factory=list)
    clamped: list[Clamped] = field(default_factory=list)
    joints: list[BoltedJoint] = field(default_factory=list)

    def collection(self, kind: str) -> list[Any]:
        """Return the list backing `kind` ("material", "bolt", ..., "joint")."""
        attr = _COLLECTIONS.get(kind)
        if attr is None:
            raise InvalidReferenceError(f"Unknown collection kind: {kind!r}")
        return getattr(self, attr)

    def get(self, kind: str, index: int) -> Any:
        """Return ``collection(kind)[index]``.

        Raises `InvalidReferenceError` for a non-integer index and
        `DanglingReferenceError` for one outside the collection.
        """
        items = self.collection(kind)
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidReferenceError(f"{kind} index must be an integer (got {index!r})")
        if not 0 <= index < len(items):
            raise DanglingReferenceError(kind, index, len(items))
        return items[index]

    def _append(self, kind: str, item: Any) -> int:
        items = self.collection(kind)
        items.append(item)
        return len(items) - 1

    def _check_material_ref(self, element: Any) -> None:
        index = getattr(element, "material", None)
        if index is not None:
            self.get("material", index)

    def add_material(self, material: Material) -> int:
        return self._append("material", material)

    def add_bolt(self, bolt: Bolt) -> int:
        self._check_material_ref(bolt)
        return self._append("bolt", bolt)

    def add_stud(self, stud: Stud) -> int:
        self._check_material_ref(stud)
        return self._append("stud", stud)

    def add_nut(self, nut: Nut) -> int:
        self._check_material_ref(nut)
        return self._append("nut", nut)

    def add_threaded(self, insert: ThreadedInsert) -> int:
        self._check_material_ref(insert)
        return self._append("threaded", insert)

    def add_clamped(self, clamped: Clamped) -> int:
        self._check_material_ref(clamped)
        return self._append("clamped", clamped)

    def add_joint(self, joint: BoltedJoint) -> int:
        return self._append("joint", joint)

    def material_of(self, element: Bolt | Stud | Nut | ThreadedInsert | Clamped) -> Material | None:
        """Resolve an element's material index (None when unassigned)."""
        if element.material is None:
            return None
        return self.get("material", element.material)

    def resolve(self, joint: BoltedJoint) -> ResolvedJoint:
        """Look up every element `joint` references.

        Raises `DanglingReferenceError` for the first reference that is out of
        range. A joint without references resolves to an empty result.
        """
        found: dict[str, Any] = {}
        for kind, index in joint.references().items():
            found[kind] = self.get(kind, index)
        return ResolvedJoint(joint=joint, **found)

    def dangling_references(self, joint: BoltedJoint) -> list[tuple[ElementKind, int]]:
        """References of `joint` that do not point at an existing element."""
        dangling: list[tuple[ElementKind, int]] = []
        for kind, index in joint.references().items():
            if not 0 <= index < len(self.collection(kind)):
                dangling.append((kind, index))  # type: ignore[arg-type]
        return dangling

    def bolt_weight(self, index: int) -> float | None:
        bolt: Bolt = self.get("bolt", index)
        return calculations.bolt_weight(bolt, self.material_of(bolt))

    def counts(self) -> dict[str, int]:
        return {kind: len(self.collection(kind)) for kind in _COLLECTIONS}


__all__ = ["Library", "ELEMENT_KINDS"]
