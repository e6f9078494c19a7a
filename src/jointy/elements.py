"""
Fastener element models (bolt, stud, nut, threaded insert, clamped member).

These are input data structures only. Materials are referenced by index into
`Library.materials`; resolving them is the library's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from . import calculations
from .errors import InvalidGeometryError, InvalidReferenceError
from .material import Material
from .thread import Thread

HeadType = Literal["hex", "hex_flange", "socket_cap", "countersunk", "pan", "button", "other"]
BoltDrive = Literal["hex", "allen", "torx", "slotted", "phillips", "other"]
NutDrive = Literal["hex", "bihex"]

HEAD_TYPES: frozenset[str] = frozenset({"hex", "hex_flange", "socket_cap", "countersunk", "pan", "button", "other"})
BOLT_DRIVES: frozenset[str] = frozenset({"hex", "allen", "torx", "slotted", "phillips", "other"})
NUT_DRIVES: frozenset[str] = frozenset({"hex", "bihex"})


_BOLT_GRADE_PROPERTIES: dict[str, dict[str, float]] = {
    # Nominal minimum values in MPa.
    # ISO 898-1 property classes
    "4.6": {"fy": 240.0, "fu": 400.0},
    "5.8": {"fy": 400.0, "fu": 500.0},
    "8.8": {"fy": 640.0, "fu": 800.0},
    "10.9": {"fy": 900.0, "fu": 1000.0},
    "12.9": {"fy": 1080.0, "fu": 1200.0},
    # SAE J429 grades
    "SAE 2": {"fy": 393.0, "fu": 510.0},
    "SAE 5": {"fy": 634.0, "fu": 827.0},
    "SAE 8": {"fy": 896.0, "fu": 1034.0},
    # ASTM structural bolts
    "A325": {"fy": 660.0, "fu": 830.0},
    "A490": {"fy": 940.0, "fu": 1040.0},
}


def grade_strengths(grade: str | None) -> dict[str, float] | None:
    """Return ``{"fy": ..., "fu": ...}`` in MPa for a known grade, else ``None``."""
    if grade is None:
        return None
    props = _BOLT_GRADE_PROPERTIES.get(grade)
    return dict(props) if props is not None else None


def known_grades() -> list[str]:
    return list(_BOLT_GRADE_PROPERTIES)


def _check_dimension(value: float | None, label: str) -> None:
    if value is not None and not value > 0.0:
        raise InvalidGeometryError(f"{label} must be positive (got {value})")


def _check_material(index: int | None) -> None:
    if index is not None and index < 0:
        raise InvalidReferenceError(f"Material index cannot be negative (got {index})")


@dataclass
class Bolt:
    """Headed, externally threaded fastener.

    Attributes:
        name: Display name, e.g. "M12x50 hex bolt"
        thread: Thread of the threaded portion
        length: Overall length under the head (thread units)
        material: Index into `Library.materials`, or None when unassigned
        grade: Strength grade, e.g. "8.8" or "A325" (custom strings allowed)
        head_type / drive_type: Head shape and drive
        thread_length: Length of the threaded portion
        head_thickness: Head height
        bearing_diameter: Outer diameter of the head bearing face
        root_fillet: Head-to-shank fillet radius
        head_diameter / shank_diameter / washer_face_diameter: Optional dimensions
        note: Free-text note
    """

    name: str
    thread: Thread
    length: float
    material: int | None = None
    grade: str | None = None
    head_type: HeadType = "hex"
    drive_type: BoltDrive = "hex"
    thread_length: float | None = None
    head_thickness: float | None = None
    bearing_diameter: float | None = None
    root_fillet: float | None = None
    head_diameter: float | None = None
    shank_diameter: float | None = None
    washer_face_diameter: float | None = None
    note: str | None = None

    def __post_init__(self) -> None:
        _check_dimension(self.length, "Bolt length")
        for label, value in (
            ("Bolt thread length", self.thread_length),
            ("Bolt head thickness", self.head_thickness),
            ("Bolt bearing diameter", self.bearing_diameter),
            ("Bolt root fillet", self.root_fillet),
            ("Bolt head diameter", self.head_diameter),
            ("Bolt shank diameter", self.shank_diameter),
            ("Bolt washer face diameter", self.washer_face_diameter),
        ):
            _check_dimension(value, label)
        if self.thread_length is not None and self.thread_length > self.length:
            raise InvalidGeometryError("Bolt thread length cannot exceed bolt length")
        if self.head_type not in HEAD_TYPES:
            raise InvalidGeometryError(f"Unsupported bolt head type: {self.head_type!r}")
        if self.drive_type not in BOLT_DRIVES:
            raise InvalidGeometryError(f"Unsupported bolt drive type: {self.drive_type!r}")
        _check_material(self.material)

    def set_grade(self, grade: str) -> None:
        self.grade = grade

    def set_head_geometry(self, head_type: HeadType, drive_type: BoltDrive, height: float, diameter: float) -> None:
        """Set head type, drive, height and diameter together."""
        if head_type not in HEAD_TYPES:
            raise InvalidGeometryError(f"Unsupported bolt head type: {head_type!r}")
        if drive_type not in BOLT_DRIVES:
            raise InvalidGeometryError(f"Unsupported bolt drive type: {drive_type!r}")
        _check_dimension(height, "Bolt head height")
        _check_dimension(diameter, "Bolt head diameter")
        self.head_type = head_type
        self.drive_type = drive_type
        self.head_thickness = float(height)
        self.head_diameter = float(diameter)

    def set_shank_geometry(self, shank_diameter: float, washer_face_diameter: float | None = None) -> None:
        _check_dimension(shank_diameter, "Bolt shank diameter")
        _check_dimension(washer_face_diameter, "Bolt washer face diameter")
        self.shank_diameter = float(shank_diameter)
        self.washer_face_diameter = washer_face_diameter

    def set_note(self, note: str) -> None:
        self.note = note

    @property
    def tensile_area(self) -> float:
        """Approximate tensile stress area, see `calculations.tensile_area`."""
        return calculations.tensile_area(self.thread)

    def weight(self, material: Material | None) -> float | None:
        """Approximate mass in kg, or None when the density is unknown."""
        return calculations.bolt_weight(self, material)

    @property
    def ultimate_tensile_load(self) -> float | None:
        return calculations.ultimate_tensile_load(self)


@dataclass
class Stud:
    """Double-ended stud with independent end threads ``a`` and ``b``."""

    thread_a: Thread
    thread_length_a: float
    thread_b: Thread
    thread_length_b: float
    shank_diameter: float
    shank_length: float
    nipple_inner_diameter: float | None = None
    nipple_outer_diameter: float | None = None
    nipple_angle: float | None = None
    material: int | None = None

    def __post_init__(self) -> None:
        _check_dimension(self.thread_length_a, "Stud thread length a")
        _check_dimension(self.thread_length_b, "Stud thread length b")
        _check_dimension(self.shank_diameter, "Stud shank diameter")
        _check_dimension(self.shank_length, "Stud shank length")
        _check_dimension(self.nipple_inner_diameter, "Stud nipple inner diameter")
        _check_dimension(self.nipple_outer_diameter, "Stud nipple outer diameter")
        if (
            self.nipple_inner_diameter is not None
            and self.nipple_outer_diameter is not None
            and self.nipple_inner_diameter >= self.nipple_outer_diameter
        ):
            raise InvalidGeometryError("Stud nipple inner diameter must be smaller than outer diameter")
        if self.nipple_angle is not None and not 0.0 < self.nipple_angle < 180.0:
            raise InvalidGeometryError(f"Stud nipple angle must be between 0 and 180 degrees (got {self.nipple_angle})")
        _check_material(self.material)

    @property
    def overall_length(self) -> float:
        return self.thread_length_a + self.shank_length + self.thread_length_b


@dataclass
class Nut:
    """Internally threaded nut.

    ``prevailing_torque`` is the torque already present before installation
    (locking nuts); ``mass`` is the installed mass.
    """

    thread: Thread
    bearing_inner_diameter: float
    bearing_outer_diameter: float
    thickness: float
    prevailing_torque: float | None = None
    mass: float | None = None
    drive: NutDrive = "hex"
    material: int | None = None

    def __post_init__(self) -> None:
        _check_dimension(self.bearing_inner_diameter, "Nut bearing inner diameter")
        _check_dimension(self.bearing_outer_diameter, "Nut bearing outer diameter")
        _check_dimension(self.thickness, "Nut thickness")
        _check_dimension(self.mass, "Nut mass")
        if self.bearing_inner_diameter >= self.bearing_outer_diameter:
            raise InvalidGeometryError("Nut bearing inner diameter must be smaller than outer diameter")
        if self.prevailing_torque is not None and self.prevailing_torque < 0.0:
            raise InvalidGeometryError("Nut prevailing torque cannot be negative")
        if self.drive not in NUT_DRIVES:
            raise InvalidGeometryError(f"Nut drive must be 'hex' or 'bihex' (got {self.drive!r})")
        _check_material(self.material)


@dataclass
class ThreadedInsert:
    """Tapped hole or threaded insert receiving a bolt or stud."""

    thread: Thread
    thread_length: float
    stud_bearing: float | None = None
    material: int | None = None

    def __post_init__(self) -> None:
        _check_dimension(self.thread_length, "Insert thread length")
        _check_dimension(self.stud_bearing, "Insert stud bearing")
        _check_material(self.material)


@dataclass
class Clamped:
    """Plate or part compressed between bolt head and nut."""

    inner_diameter: float
    thickness: float
    outer_diameter: float | None = None
    material: int | None = None

    def __post_init__(self) -> None:
        _check_dimension(self.inner_diameter, "Clamped inner diameter")
        _check_dimension(self.thickness, "Clamped thickness")
        _check_dimension(self.outer_diameter, "Clamped outer diameter")
        if self.outer_diameter is not None and self.outer_diameter <= self.inner_diameter:
            raise InvalidGeometryError("Clamped outer diameter must be larger than inner diameter")
        _check_material(self.material)


__all__ = [
    "HeadType",
    "BoltDrive",
    "NutDrive",
    "Bolt",
    "Stud",
    "Nut",
    "ThreadedInsert",
    "Clamped",
    "grade_strengths",
    "known_grades",
]
