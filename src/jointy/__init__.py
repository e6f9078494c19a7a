"""
Jointy - Bolted Joint Data Model Package

Describe threads, fasteners, clamped members and their materials, collect them
in a library, assemble bolted joints and derive elementary strength/mass
estimates.

Example usage:
    from jointy import Bolt, BoltedJoint, Clamped, Library, Nut, Thread, bolt_steel_8_8

    library = Library()
    steel = library.add_material(bolt_steel_8_8())

    # 1. Thread from nominal size and pitch
    thread = Thread.metric(12.0, 1.75, tolerance_class="6g")
    print(f"{thread.designation}: minor {thread.minor_diameter:.3f} mm, depth {thread.depth():.4f} mm")

    # 2. Elements
    bolt = library.add_bolt(Bolt("M12x50", thread, length=50.0, material=steel, grade="8.8"))
    nut = library.add_nut(
        Nut(thread, bearing_inner_diameter=13.0, bearing_outer_diameter=18.0, thickness=10.8)
    )
    plate = library.add_clamped(Clamped(inner_diameter=13.0, thickness=20.0, outer_diameter=40.0))

    # 3. Joint referencing elements by position
    joint = BoltedJoint("Flange", bolt=bolt, nut=nut, clamped=plate)
    library.add_joint(joint)
    resolved = library.resolve(joint)

    # 4. Derived values
    print(f"Tensile area: {resolved.bolt.tensile_area:.1f} mm²")
    print(f"Weight: {library.bolt_weight(bolt):.3f} kg")

    # 5. Persist
    from jointy import StudioState, save_state
    save_state(StudioState(joint=joint, library=library), "studio.json")
"""

from .errors import (
    DanglingReferenceError,
    InvalidGeometryError,
    InvalidMaterialError,
    InvalidReferenceError,
    JointyError,
)
from .thread import Thread, ThreadForm, ThreadHand, Unit, coarse_sizes
from .material import (
    Material,
    MaterialStandard,
    MaterialType,
    aluminium_6061_t6,
    bolt_steel_8_8,
    stainless_steel_304,
    structural_steel,
)
from .elements import Bolt, Clamped, Nut, Stud, ThreadedInsert, grade_strengths, known_grades
from .calculations import bolt_volume, bolt_weight, tensile_area, thread_depth, ultimate_tensile_load
from .joint import ELEMENT_KINDS, BoltedJoint, ResolvedJoint
from .library import Library
from .state import StudioState, UIState
from .persistence import StateError, dumps, load_state, loads, save_state
from .plotting import plot_joint, plot_thread_profile

__version__ = "0.1.0"

__all__ = [
    # Errors
    "JointyError",
    "InvalidGeometryError",
    "InvalidMaterialError",
    "InvalidReferenceError",
    "DanglingReferenceError",
    # Thread
    "Thread",
    "Unit",
    "ThreadForm",
    "ThreadHand",
    "coarse_sizes",
    # Material
    "Material",
    "MaterialStandard",
    "MaterialType",
    "structural_steel",
    "stainless_steel_304",
    "aluminium_6061_t6",
    "bolt_steel_8_8",
    # Elements
    "Bolt",
    "Stud",
    "Nut",
    "ThreadedInsert",
    "Clamped",
    "grade_strengths",
    "known_grades",
    # Calculations
    "thread_depth",
    "tensile_area",
    "bolt_volume",
    "bolt_weight",
    "ultimate_tensile_load",
    # Joint + library
    "ELEMENT_KINDS",
    "BoltedJoint",
    "ResolvedJoint",
    "Library",
    # State + persistence
    "UIState",
    "StudioState",
    "StateError",
    "dumps",
    "loads",
    "save_state",
    "load_state",
    # Plotting
    "plot_joint",
    "plot_thread_profile",
]
