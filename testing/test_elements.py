import math

import pytest

from jointy import (
    Bolt,
    Clamped,
    InvalidGeometryError,
    InvalidReferenceError,
    Material,
    Nut,
    Stud,
    Thread,
    ThreadedInsert,
    bolt_volume,
    bolt_weight,
    grade_strengths,
    tensile_area,
    ultimate_tensile_load,
)


def _steel() -> Material:
    mat = Material("Steel")
    mat.set_mechanical(7850.0, 200e9, 79e9, 0.3, 400e6, 250e6, 120.0)
    return mat


def test_tensile_area_closed_form() -> None:
    t = Thread(unit="metric", form="Custom", major_diameter=10.0, minor_diameter=8.16, pitch=1.5)
    bolt = Bolt("M10", t, length=40.0)

    assert tensile_area(t) == pytest.approx(math.pi * 8.16**2 / 4.0)
    assert bolt.tensile_area == pytest.approx(52.3, abs=0.05)


def test_tensile_area_increases_with_minor_diameter() -> None:
    areas = [
        tensile_area(Thread(unit="metric", form="Custom", major_diameter=20.0, minor_diameter=d, pitch=2.0))
        for d in (5.0, 8.0, 12.0, 16.0, 19.0)
    ]
    assert areas == sorted(areas)
    assert len(set(areas)) == len(areas)


def test_weight_unknown_without_density() -> None:
    bolt = Bolt("M10x50", Thread.metric(10.0, 1.5), length=50.0)

    assert bolt.weight(None) is None
    assert bolt.weight(Material("No datasheet")) is None


def test_weight_closed_form_metric() -> None:
    bolt = Bolt("M10x50", Thread.metric(10.0, 1.5), length=50.0)

    expected = 7850.0 * math.pi * 0.005**2 * 0.05
    assert bolt.weight(_steel()) == pytest.approx(expected, rel=1e-12)
    assert bolt_weight(bolt, _steel()) == pytest.approx(0.03082, abs=1e-5)


def test_weight_imperial_converts_inches() -> None:
    bolt = Bolt("1/2-13 x 2", Thread.imperial(0.5, 13.0), length=2.0)

    expected = 7850.0 * math.pi * (0.25 * 0.0254) ** 2 * (2.0 * 0.0254)
    assert bolt.weight(_steel()) == pytest.approx(expected, rel=1e-12)


def test_bolt_volume_is_full_major_cylinder() -> None:
    bolt = Bolt("M10x50", Thread.metric(10.0, 1.5), length=50.0, head_thickness=6.4)
    assert bolt_volume(bolt) == pytest.approx(math.pi * 25.0 * 50.0)


def test_ultimate_tensile_load_from_grade(m12: Thread) -> None:
    bolt = Bolt("M12x50", m12, length=50.0, grade="8.8")

    assert ultimate_tensile_load(bolt) == pytest.approx(800.0 * bolt.tensile_area)
    assert bolt.ultimate_tensile_load == ultimate_tensile_load(bolt)

    bolt.set_grade("custom-x")
    assert bolt.ultimate_tensile_load is None
    assert grade_strengths("custom-x") is None
    assert grade_strengths("10.9") == {"fy": 900.0, "fu": 1000.0}


def test_bolt_staged_setters(m12: Thread) -> None:
    bolt = Bolt("M12x50", m12, length=50.0)
    assert bolt.head_type == "hex" and bolt.drive_type == "hex"

    bolt.set_head_geometry("socket_cap", "allen", height=12.0, diameter=18.0)
    bolt.set_shank_geometry(12.0, washer_face_diameter=17.0)
    bolt.set_note("zinc flake")

    assert bolt.head_type == "socket_cap"
    assert bolt.drive_type == "allen"
    assert bolt.head_thickness == 12.0
    assert bolt.head_diameter == 18.0
    assert bolt.shank_diameter == 12.0
    assert bolt.washer_face_diameter == 17.0
    assert bolt.note == "zinc flake"

    with pytest.raises(InvalidGeometryError):
        bolt.set_head_geometry("hex", "hex", height=0.0, diameter=18.0)
    with pytest.raises(InvalidGeometryError):
        bolt.set_head_geometry("mushroom", "hex", height=8.0, diameter=18.0)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"length": 0.0},
        {"length": 50.0, "head_thickness": -1.0},
        {"length": 50.0, "bearing_diameter": 0.0},
        {"length": 50.0, "root_fillet": -0.2},
        {"length": 50.0, "thread_length": 60.0},
    ],
)
def test_bolt_rejects_invalid_dimensions(m12: Thread, kwargs: dict[str, float]) -> None:
    with pytest.raises(InvalidGeometryError):
        Bolt("bad", m12, **kwargs)


def test_bolt_rejects_negative_material_index(m12: Thread) -> None:
    with pytest.raises(InvalidReferenceError):
        Bolt("bad", m12, length=50.0, material=-1)


def test_stud_overall_length_and_nipple_checks(m12: Thread) -> None:
    stud = Stud(
        thread_a=m12,
        thread_length_a=20.0,
        thread_b=m12,
        thread_length_b=15.0,
        shank_diameter=10.0,
        shank_length=40.0,
        nipple_inner_diameter=4.0,
        nipple_outer_diameter=8.0,
        nipple_angle=90.0,
    )
    assert stud.overall_length == pytest.approx(75.0)

    with pytest.raises(InvalidGeometryError, match="nipple"):
        Stud(m12, 20.0, m12, 15.0, 10.0, 40.0, nipple_inner_diameter=8.0, nipple_outer_diameter=4.0)
    with pytest.raises(InvalidGeometryError):
        Stud(m12, 20.0, m12, 15.0, 0.0, 40.0)


def test_nut_validation(m12: Thread) -> None:
    nut = Nut(m12, 13.0, 18.0, 10.8, prevailing_torque=3.0, mass=0.012, drive="bihex")
    assert nut.drive == "bihex"

    with pytest.raises(InvalidGeometryError):
        Nut(m12, 18.0, 13.0, 10.8)
    with pytest.raises(InvalidGeometryError):
        Nut(m12, 13.0, 18.0, 0.0)
    with pytest.raises(InvalidGeometryError):
        Nut(m12, 13.0, 18.0, 10.8, prevailing_torque=-1.0)
    with pytest.raises(InvalidGeometryError):
        Nut(m12, 13.0, 18.0, 10.8, drive="square")  # type: ignore[arg-type]


def test_threaded_insert_and_clamped_validation(m12: Thread) -> None:
    ThreadedInsert(m12, thread_length=18.0, stud_bearing=2.0)
    Clamped(inner_diameter=13.0, thickness=20.0)

    with pytest.raises(InvalidGeometryError):
        ThreadedInsert(m12, thread_length=0.0)
    with pytest.raises(InvalidGeometryError):
        Clamped(inner_diameter=13.0, thickness=-20.0)
    with pytest.raises(InvalidGeometryError):
        Clamped(inner_diameter=13.0, thickness=20.0, outer_diameter=12.0)
