"""Conversion between the domain model and the snapshot schema."""

from __future__ import annotations

from dataclasses import asdict

from ..elements import Bolt, Clamped, Nut, Stud, ThreadedInsert
from ..joint import BoltedJoint
from ..library import Library
from ..material import Material, MaterialStandard
from ..state import StudioState, UIState
from ..thread import Thread
from .schemas import (
    SCHEMA_VERSION,
    BoltSchema,
    BoltedJointSchema,
    LibrarySchema,
    MaterialSchema,
    StudioSnapshot,
    ThreadSchema,
)


def to_snapshot(state: StudioState) -> StudioSnapshot:
    """Build the schema model for `state`."""
    return StudioSnapshot.model_validate(
        {
            "schema_version": SCHEMA_VERSION,
            "joint": asdict(state.joint),
            "library": asdict(state.library),
            "ui": asdict(state.ui),
        }
    )


def _thread(schema: ThreadSchema) -> Thread:
    return Thread(**schema.model_dump())


def _material(schema: MaterialSchema) -> Material:
    data = schema.model_dump(exclude={"standard"})
    material = Material(**data)
    if schema.standard is not None:
        material.standard = MaterialStandard(**schema.standard.model_dump())
    return material


def _bolt(schema: BoltSchema) -> Bolt:
    data = schema.model_dump(exclude={"thread"})
    return Bolt(thread=_thread(schema.thread), **data)


def _joint(schema: BoltedJointSchema) -> BoltedJoint:
    return BoltedJoint(**schema.model_dump())


def library_from_schema(schema: LibrarySchema) -> Library:
    """Rebuild a library; materials go first so element references can be checked."""
    library = Library()
    for material in schema.materials:
        library.add_material(_material(material))
    for bolt in schema.bolts:
        library.add_bolt(_bolt(bolt))
    for stud in schema.studs:
        data = stud.model_dump(exclude={"thread_a", "thread_b"})
        library.add_stud(Stud(thread_a=_thread(stud.thread_a), thread_b=_thread(stud.thread_b), **data))
    for nut in schema.nuts:
        library.add_nut(Nut(thread=_thread(nut.thread), **nut.model_dump(exclude={"thread"})))
    for insert in schema.threaded:
        library.add_threaded(
            ThreadedInsert(thread=_thread(insert.thread), **insert.model_dump(exclude={"thread"}))
        )
    for clamped in schema.clamped:
        library.add_clamped(Clamped(**clamped.model_dump()))
    for joint in schema.joints:
        library.add_joint(_joint(joint))
    return library


def from_snapshot(snapshot: StudioSnapshot) -> StudioState:
    """Build domain state from a validated snapshot (domain invariants re-checked)."""
    return StudioState(
        joint=_joint(snapshot.joint),
        library=library_from_schema(snapshot.library),
        ui=UIState(**snapshot.ui.model_dump()),
    )


__all__ = ["to_snapshot", "from_snapshot", "library_from_schema"]
