import json
from dataclasses import asdict

import pytest

from jointy import BoltedJoint, Library, StateError, StudioState, UIState, dumps, load_state, loads, save_state
from jointy.material import structural_steel


@pytest.fixture
def state(library: Library, joint: BoltedJoint) -> StudioState:
    library.materials[0].set_note("quenched and tempered")
    library.add_material(structural_steel())
    library.add_joint(joint)
    return StudioState(joint=joint, library=library, ui=UIState(show_nav_panel=False, show_settings=True))


def test_default_state() -> None:
    s = StudioState()

    assert s.ui.show_nav_panel is True
    assert s.ui.show_prop_panel is True
    assert s.ui.show_settings is False
    assert s.joint.is_empty
    assert all(n == 0 for n in s.library.counts().values())


def test_round_trip_preserves_counts_and_fields(state: StudioState) -> None:
    restored = loads(dumps(state))

    assert restored.library.counts() == state.library.counts()
    assert asdict(restored.library) == asdict(state.library)
    assert asdict(restored.joint) == asdict(state.joint)
    assert restored.ui == state.ui
    # resolution still works after reload
    assert restored.library.resolve(restored.joint).bolt == state.library.bolts[0]


def test_round_trip_is_idempotent(state: StudioState) -> None:
    text = dumps(state)
    assert dumps(loads(text)) == text


def test_save_and_load_file(state: StudioState, tmp_path) -> None:
    path = save_state(state, tmp_path / "nested" / "studio.json")

    assert path.exists()
    assert asdict(load_state(path).library) == asdict(state.library)


def test_missing_file(tmp_path) -> None:
    missing = tmp_path / "nope.json"

    assert load_state(missing) == StudioState()
    with pytest.raises(StateError) as exc:
        load_state(missing, missing_ok=False)
    assert exc.value.error_type == "file_not_found"


def test_older_snapshot_missing_fields_gets_defaults() -> None:
    old = {
        "library": {
            "bolts": [
                {
                    "name": "M10",
                    "length": 40.0,
                    "thread": {"major_diameter": 10.0, "minor_diameter": 8.16, "pitch": 1.5},
                }
            ]
        },
        "ui": {"show_settings": True},
    }

    s = loads(json.dumps(old))

    bolt = s.library.bolts[0]
    assert bolt.head_type == "hex"
    assert bolt.material is None
    assert bolt.thread.unit == "metric"
    assert bolt.thread.hand == "right"
    assert bolt.thread.angle == 60.0
    assert s.ui.show_nav_panel is True
    assert s.ui.show_settings is True
    assert s.joint == BoltedJoint()


def test_unknown_keys_from_newer_snapshot_are_ignored() -> None:
    newer = {"schema_version": "1.4", "theme": "dark", "joint": {"name": "J1", "washer": 2}}

    s = loads(json.dumps(newer))

    assert s.joint.name == "J1"


def test_invalid_json() -> None:
    with pytest.raises(StateError) as exc:
        loads("{not json")
    assert exc.value.error_type == "json_parse"


def test_schema_violation_reports_path() -> None:
    bad = {"library": {"clamped": [{"inner_diameter": 13.0, "thickness": -2.0}]}}

    with pytest.raises(StateError) as exc:
        loads(json.dumps(bad))

    assert exc.value.error_type == "validation"
    assert exc.value.details[0]["path"] == "library.clamped[0].thickness"


def test_unsupported_major_version() -> None:
    with pytest.raises(StateError) as exc:
        loads(json.dumps({"schema_version": "2.0"}))
    assert exc.value.error_type == "validation"


def test_domain_inconsistency_is_reported() -> None:
    # schema-valid, but the bolt references a material that does not exist
    bad = {
        "library": {
            "bolts": [
                {
                    "name": "M10",
                    "length": 40.0,
                    "material": 3,
                    "thread": {"major_diameter": 10.0, "minor_diameter": 8.16, "pitch": 1.5},
                }
            ]
        }
    }

    with pytest.raises(StateError) as exc:
        loads(json.dumps(bad))
    assert exc.value.error_type == "domain"


def test_out_of_range_material_values_are_reported() -> None:
    bad = {
        "library": {
            "materials": [{"name": "bad", "density": -7850.0, "poisson_ratio": 3.0}],
            "bolts": [
                {
                    "name": "M10",
                    "length": 40.0,
                    "material": 0,
                    "thread": {"major_diameter": 10.0, "minor_diameter": 8.16, "pitch": 1.5},
                }
            ],
        }
    }

    with pytest.raises(StateError) as exc:
        loads(json.dumps(bad))
    assert exc.value.error_type == "domain"
