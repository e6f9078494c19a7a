import matplotlib

matplotlib.use("Agg")

import pytest

from jointy import Bolt, BoltedJoint, Clamped, Library, Nut, Stud, Thread, ThreadedInsert, bolt_steel_8_8


@pytest.fixture
def m12() -> Thread:
    """M12x1.75-6g right-hand thread."""
    return Thread.metric(12.0, 1.75, None, "right", "6g")


@pytest.fixture
def library(m12: Thread) -> Library:
    """Library with one element of each kind and a material for the bolt."""
    lib = Library()
    steel = lib.add_material(bolt_steel_8_8())

    lib.add_bolt(Bolt("M12x50", m12, length=50.0, material=steel, grade="8.8", thread_length=30.0, head_thickness=7.5))
    lib.add_stud(
        Stud(
            thread_a=m12,
            thread_length_a=20.0,
            thread_b=Thread.metric(12.0, 1.25),
            thread_length_b=15.0,
            shank_diameter=10.0,
            shank_length=40.0,
        )
    )
    lib.add_nut(Nut(m12, bearing_inner_diameter=13.0, bearing_outer_diameter=18.0, thickness=10.8))
    lib.add_threaded(ThreadedInsert(m12, thread_length=18.0))
    lib.add_clamped(Clamped(inner_diameter=13.0, thickness=20.0, outer_diameter=40.0, material=steel))
    return lib


@pytest.fixture
def joint() -> BoltedJoint:
    """Bolt + nut + clamped member, all at index 0."""
    return BoltedJoint(name="Flange", description="M12 through-bolt", bolt=0, nut=0, clamped=0)
