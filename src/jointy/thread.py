"""
Screw thread geometry.

Lengths are millimetres for metric threads and inches for imperial threads.
The sizing constructors derive the minor diameter from the pitch with the
usual 60° approximations; once built, a thread is plain data.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal

from .errors import InvalidGeometryError

Unit = Literal["metric", "imperial"]
ThreadForm = Literal["ISO", "UNC", "UNF", "Acme", "Trapezoidal", "Custom"]
ThreadHand = Literal["right", "left"]

UNITS: frozenset[str] = frozenset({"metric", "imperial"})
THREAD_FORMS: frozenset[str] = frozenset({"ISO", "UNC", "UNF", "Acme", "Trapezoidal", "Custom"})
THREAD_HANDS: frozenset[str] = frozenset({"right", "left"})

# ISO 68-1 root: d1 = d - 2 * (5/8) * H, H = (sqrt(3)/2) * P  ->  ~1.226869 * P
METRIC_MINOR_FACTOR = 1.226869
# Unified 60° thread, approximate root for external threads
IMPERIAL_MINOR_FACTOR = 0.6495

# ISO 261 coarse series, nominal diameter (mm) -> pitch (mm)
_ISO_COARSE_PITCH: dict[float, float] = {
    1.6: 0.35,
    2.0: 0.4,
    2.5: 0.45,
    3.0: 0.5,
    4.0: 0.7,
    5.0: 0.8,
    6.0: 1.0,
    8.0: 1.25,
    10.0: 1.5,
    12.0: 1.75,
    14.0: 2.0,
    16.0: 2.0,
    18.0: 2.5,
    20.0: 2.5,
    22.0: 2.5,
    24.0: 3.0,
    27.0: 3.0,
    30.0: 3.5,
    33.0: 3.5,
    36.0: 4.0,
    39.0: 4.0,
    42.0: 4.5,
    45.0: 4.5,
    48.0: 5.0,
    52.0: 5.0,
    56.0: 5.5,
    60.0: 5.5,
    64.0: 6.0,
}


def _require_positive(value: float, label: str) -> None:
    # `not value > 0` also rejects NaN
    if not value > 0.0:
        raise InvalidGeometryError(f"Thread {label} must be positive (got {value})")


@dataclass(frozen=True)
class Thread:
    """Complete thread description.

    Geometry is fixed at construction; only the note can be changed afterwards.

    Attributes:
        unit: "metric" (mm) or "imperial" (inches)
        form: Thread profile standard (ISO, UNC, UNF, Acme, Trapezoidal, Custom)
        major_diameter: Outer diameter
        minor_diameter: Root diameter
        pitch: Axial distance between adjacent crests
        threads_per_unit: Threads per inch, imperial threads only
        length: Optional nominal thread length
        hand: "right" or "left"
        angle: Included flank angle in degrees
        tolerance_class: Free-text class, e.g. "6g" or "2A" (not validated)
        note: Free-text note
    """

    unit: Unit
    form: ThreadForm
    major_diameter: float
    minor_diameter: float
    pitch: float
    threads_per_unit: float | None = None
    length: float | None = None
    hand: ThreadHand = "right"
    angle: float = 60.0
    tolerance_class: str | None = None
    note: str | None = None

    def __post_init__(self) -> None:
        if self.unit not in UNITS:
            raise InvalidGeometryError(f"Thread unit must be 'metric' or 'imperial' (got {self.unit!r})")
        if self.form not in THREAD_FORMS:
            raise InvalidGeometryError(f"Unsupported thread form: {self.form!r}")
        if self.hand not in THREAD_HANDS:
            raise InvalidGeometryError(f"Thread hand must be 'right' or 'left' (got {self.hand!r})")

        _require_positive(self.major_diameter, "major diameter")
        _require_positive(self.minor_diameter, "minor diameter")
        _require_positive(self.pitch, "pitch")
        if self.minor_diameter >= self.major_diameter:
            raise InvalidGeometryError(
                f"Thread minor diameter ({self.minor_diameter}) must be smaller than "
                f"major diameter ({self.major_diameter})"
            )
        if self.length is not None:
            _require_positive(self.length, "length")
        if not 0.0 < self.angle < 180.0:
            raise InvalidGeometryError(f"Thread angle must be between 0 and 180 degrees (got {self.angle})")

        if self.threads_per_unit is not None:
            _require_positive(self.threads_per_unit, "threads per unit")
            if self.unit == "imperial" and not math.isclose(
                self.pitch, 1.0 / self.threads_per_unit, rel_tol=1e-9
            ):
                raise InvalidGeometryError("Imperial thread pitch must equal 1 / threads_per_unit")

    @classmethod
    def metric(
        cls,
        major_diameter: float,
        pitch: float,
        length: float | None = None,
        hand: ThreadHand = "right",
        tolerance_class: str | None = None,
    ) -> "Thread":
        """Create an ISO metric thread from its nominal diameter and pitch."""
        _require_positive(major_diameter, "major diameter")
        _require_positive(pitch, "pitch")
        return cls(
            unit="metric",
            form="ISO",
            major_diameter=float(major_diameter),
            minor_diameter=major_diameter - METRIC_MINOR_FACTOR * pitch,
            pitch=float(pitch),
            length=length,
            hand=hand,
            angle=60.0,
            tolerance_class=tolerance_class,
        )

    @classmethod
    def imperial(
        cls,
        major_diameter: float,
        threads_per_inch: float,
        length: float | None = None,
        hand: ThreadHand = "right",
        form: ThreadForm = "UNC",
        tolerance_class: str | None = None,
    ) -> "Thread":
        """Create a unified (UNC/UNF) thread from its diameter and threads per inch."""
        _require_positive(major_diameter, "major diameter")
        _require_positive(threads_per_inch, "threads per inch")
        pitch = 1.0 / threads_per_inch
        return cls(
            unit="imperial",
            form=form,
            major_diameter=float(major_diameter),
            minor_diameter=major_diameter - IMPERIAL_MINOR_FACTOR * pitch,
            pitch=pitch,
            threads_per_unit=float(threads_per_inch),
            length=length,
            hand=hand,
            angle=60.0,
            tolerance_class=tolerance_class,
        )

    @classmethod
    def metric_coarse(
        cls,
        size: float,
        length: float | None = None,
        hand: ThreadHand = "right",
        tolerance_class: str | None = None,
    ) -> "Thread":
        """Create an ISO coarse-series thread (e.g. ``size=12`` for M12x1.75)."""
        pitch = _ISO_COARSE_PITCH.get(float(size))
        if pitch is None:
            raise InvalidGeometryError(f"No ISO coarse pitch for M{size:g}")
        return cls.metric(size, pitch, length=length, hand=hand, tolerance_class=tolerance_class)

    def depth(self) -> float:
        """Radial thread depth, from the stored diameters."""
        return (self.major_diameter - self.minor_diameter) / 2.0

    def set_note(self, note: str) -> None:
        object.__setattr__(self, "note", note)

    @property
    def designation(self) -> str:
        """Short display designation, e.g. ``M12x1.75-6g`` or ``0.5-13 UNC-2A``."""
        if self.unit == "metric":
            text = f"M{self.major_diameter:g}x{self.pitch:g}"
        else:
            tpi = self.threads_per_unit if self.threads_per_unit is not None else 1.0 / self.pitch
            text = f"{self.major_diameter:g}-{tpi:g} {self.form}"
        if self.tolerance_class:
            text += f"-{self.tolerance_class}"
        if self.hand == "left":
            text += " LH"
        return text


def coarse_sizes() -> list[float]:
    """Nominal diameters available to `Thread.metric_coarse`."""
    return sorted(_ISO_COARSE_PITCH)


__all__ = [
    "Unit",
    "ThreadForm",
    "ThreadHand",
    "Thread",
    "coarse_sizes",
    "METRIC_MINOR_FACTOR",
    "IMPERIAL_MINOR_FACTOR",
]
