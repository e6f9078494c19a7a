import pytest

from jointy import BoltedJoint, DanglingReferenceError, InvalidReferenceError, Library


def test_empty_joint_resolves_to_nothing(library: Library) -> None:
    joint = BoltedJoint()

    resolved = library.resolve(joint)

    assert joint.is_empty
    assert resolved.is_empty
    assert resolved.elements == {}
    assert resolved.grip_length is None
    assert library.dangling_references(joint) == []


def test_empty_joint_resolves_in_empty_library() -> None:
    assert Library().resolve(BoltedJoint("nothing")).is_empty


def test_resolve_returns_referenced_elements(library: Library, joint: BoltedJoint) -> None:
    resolved = library.resolve(joint)

    assert resolved.joint is joint
    assert resolved.bolt is library.bolts[0]
    assert resolved.nut is library.nuts[0]
    assert resolved.clamped is library.clamped[0]
    assert resolved.stud is None
    assert set(resolved.elements) == {"bolt", "nut", "clamped"}
    assert resolved.grip_length == pytest.approx(20.0)


def test_dangling_reference_detected_not_index_zero(library: Library, joint: BoltedJoint) -> None:
    joint.assign("nut", 3)

    with pytest.raises(DanglingReferenceError, match=r"nut\[3\]"):
        library.resolve(joint)
    assert library.dangling_references(joint) == [("nut", 3)]


def test_negative_index_set_directly_is_dangling(library: Library, joint: BoltedJoint) -> None:
    joint.bolt = -1

    assert library.dangling_references(joint) == [("bolt", -1)]
    with pytest.raises(DanglingReferenceError, match=r"bolt\[-1\]"):
        library.resolve(joint)


def test_reassign_and_detach(library: Library, joint: BoltedJoint) -> None:
    joint.assign("stud", 0)
    joint.assign("bolt", None)

    assert joint.references() == {"stud": 0, "nut": 0, "clamped": 0}
    resolved = library.resolve(joint)
    assert resolved.bolt is None
    assert resolved.stud is library.studs[0]


def test_negative_or_unknown_references_rejected() -> None:
    with pytest.raises(InvalidReferenceError):
        BoltedJoint(bolt=-1)

    joint = BoltedJoint()
    with pytest.raises(InvalidReferenceError):
        joint.assign("washer", 0)  # type: ignore[arg-type]
    with pytest.raises(InvalidReferenceError):
        joint.assign("clamped", -2)
