"""
Derived engineering quantities.

All functions are pure closed-form arithmetic, recomputed on every call.
The formulas are deliberate first-order approximations:

- Tensile stress area uses the thread *minor* diameter, π·d₁²/4. ISO 898-1 and
  ASTM use a slightly larger effective diameter, so this is conservative and
  not an exact code value.
- Bolt weight treats the bolt as a solid cylinder at the major diameter over
  its full length; head volume, thread relief and drillings are ignored.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .elements import Bolt
    from .material import Material
    from .thread import Thread, Unit

MM_PER_INCH = 25.4

_METRES_PER_LENGTH_UNIT: dict[str, float] = {
    "metric": 1.0e-3,
    "imperial": MM_PER_INCH * 1.0e-3,
}


def length_to_metres(unit: "Unit") -> float:
    """Factor converting a thread length unit (mm or in) to metres."""
    return _METRES_PER_LENGTH_UNIT[unit]


def thread_depth(thread: "Thread") -> float:
    return (thread.major_diameter - thread.minor_diameter) / 2.0


def tensile_area(thread: "Thread") -> float:
    """Approximate tensile stress area, π·d_minor²/4, in thread units squared."""
    d = thread.minor_diameter
    return math.pi * d * d / 4.0


def bolt_volume(bolt: "Bolt") -> float:
    """Solid-cylinder volume at the major diameter, in thread units cubed."""
    return math.pi * (bolt.thread.major_diameter / 2.0) ** 2 * bolt.length


def bolt_weight(bolt: "Bolt", material: "Material | None") -> float | None:
    """Approximate bolt mass in kg (density in kg/m³).

    Returns None when there is no material or its density is unknown; that is
    distinct from a computed zero.
    """
    if material is None or material.density is None:
        return None
    scale = length_to_metres(bolt.thread.unit)
    return material.density * bolt_volume(bolt) * scale**3


def ultimate_tensile_load(bolt: "Bolt") -> float | None:
    """Nominal ultimate tensile load in N (fu × tensile area) for a tabulated grade."""
    from .elements import grade_strengths

    props = grade_strengths(bolt.grade)
    if props is None:
        return None
    area_mm2 = tensile_area(bolt.thread)
    if bolt.thread.unit == "imperial":
        area_mm2 *= MM_PER_INCH**2
    return props["fu"] * area_mm2


__all__ = [
    "length_to_metres",
    "thread_depth",
    "tensile_area",
    "bolt_volume",
    "bolt_weight",
    "ultimate_tensile_load",
]
