"""Pydantic models describing the saved-state JSON format.

Optional fields carry defaults and unknown keys are ignored, so a snapshot
written by an older or newer version loads field by field instead of failing
as a whole.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Version 1.0: library, current joint and UI flags
SCHEMA_VERSION = "1.0"
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class _Snapshot(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ThreadSchema(_Snapshot):
    unit: Literal["metric", "imperial"] = "metric"
    form: Literal["ISO", "UNC", "UNF", "Acme", "Trapezoidal", "Custom"] = "ISO"
    major_diameter: float = Field(..., gt=0)
    minor_diameter: float = Field(..., gt=0)
    pitch: float = Field(..., gt=0)
    threads_per_unit: float | None = Field(default=None, gt=0)
    length: float | None = Field(default=None, gt=0)
    hand: Literal["right", "left"] = "right"
    angle: float = 60.0
    tolerance_class: str | None = None
    note: str | None = None


class MaterialStandardSchema(_Snapshot):
    designation: str = ""
    organization: str = ""
    note: str | None = None


class MaterialSchema(_Snapshot):
    name: str = ""
    material_type: Literal["metal", "polymer", "ceramic", "composite", "wood", "other"] = "metal"
    standard: MaterialStandardSchema | None = None

    density: float | None = None
    youngs_modulus: float | None = None
    shear_modulus: float | None = None
    poisson_ratio: float | None = None
    tensile_strength: float | None = None
    yield_strength: float | None = None
    hardness: float | None = None

    thermal_conductivity: float | None = None
    thermal_expansion: float | None = None
    specific_heat: float | None = None
    melting_point: float | None = None

    electrical_conductivity: float | None = None
    resistivity: float | None = None

    cost_per_kg: float | None = None
    note: str | None = None


class BoltSchema(_Snapshot):
    name: str = ""
    thread: ThreadSchema
    length: float = Field(..., gt=0)
    material: int | None = Field(default=None, ge=0)
    grade: str | None = None
    head_type: Literal["hex", "hex_flange", "socket_cap", "countersunk", "pan", "button", "other"] = "hex"
    drive_type: Literal["hex", "allen", "torx", "slotted", "phillips", "other"] = "hex"
    thread_length: float | None = None
    head_thickness: float | None = None
    bearing_diameter: float | None = None
    root_fillet: float | None = None
    head_diameter: float | None = None
    shank_diameter: float | None = None
    washer_face_diameter: float | None = None
    note: str | None = None


class StudSchema(_Snapshot):
    thread_a: ThreadSchema
    thread_length_a: float = Field(..., gt=0)
    thread_b: ThreadSchema
    thread_length_b: float = Field(..., gt=0)
    shank_diameter: float = Field(..., gt=0)
    shank_length: float = Field(..., gt=0)
    nipple_inner_diameter: float | None = None
    nipple_outer_diameter: float | None = None
    nipple_angle: float | None = None
    material: int | None = Field(default=None, ge=0)


class NutSchema(_Snapshot):
    thread: ThreadSchema
    bearing_inner_diameter: float = Field(..., gt=0)
    bearing_outer_diameter: float = Field(..., gt=0)
    thickness: float = Field(..., gt=0)
    prevailing_torque: float | None = None
    mass: float | None = None
    drive: Literal["hex", "bihex"] = "hex"
    material: int | None = Field(default=None, ge=0)


class ThreadedInsertSchema(_Snapshot):
    thread: ThreadSchema
    thread_length: float = Field(..., gt=0)
    stud_bearing: float | None = None
    material: int | None = Field(default=None, ge=0)


class ClampedSchema(_Snapshot):
    inner_diameter: float = Field(..., gt=0)
    thickness: float = Field(..., gt=0)
    outer_diameter: float | None = None
    material: int | None = Field(default=None, ge=0)


class BoltedJointSchema(_Snapshot):
    name: str = ""
    description: str = ""
    bolt: int | None = Field(default=None, ge=0)
    stud: int | None = Field(default=None, ge=0)
    nut: int | None = Field(default=None, ge=0)
    threaded: int | None = Field(default=None, ge=0)
    clamped: int | None = Field(default=None, ge=0)


class LibrarySchema(_Snapshot):
    materials: list[MaterialSchema] = Field(default_factory=list)
    bolts: list[BoltSchema] = Field(default_factory=list)
    studs: list[StudSchema] = Field(default_factory=list)
    nuts: list[NutSchema] = Field(default_factory=list)
    threaded: list[ThreadedInsertSchema] = Field(default_factory=list)
    clamped: list[ClampedSchema] = Field(default_factory=list)
    joints: list[BoltedJointSchema] = Field(default_factory=list)


class UIStateSchema(_Snapshot):
    show_nav_panel: bool = True
    show_prop_panel: bool = True
    show_settings: bool = False


class StudioSnapshot(_Snapshot):
    """Root of the saved-state document."""

    schema_version: str = Field(default=SCHEMA_VERSION, pattern=r"^\d+\.\d+$")
    joint: BoltedJointSchema = Field(default_factory=BoltedJointSchema)
    library: LibrarySchema = Field(default_factory=LibrarySchema)
    ui: UIStateSchema = Field(default_factory=UIStateSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minor versions of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        supported_majors = {int(s.split(".")[0]) for s in SUPPORTED_VERSIONS}
        if int(v.split(".")[0]) in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )


__all__ = [
    "SCHEMA_VERSION",
    "SUPPORTED_VERSIONS",
    "ThreadSchema",
    "MaterialStandardSchema",
    "MaterialSchema",
    "BoltSchema",
    "StudSchema",
    "NutSchema",
    "ThreadedInsertSchema",
    "ClampedSchema",
    "BoltedJointSchema",
    "LibrarySchema",
    "UIStateSchema",
    "StudioSnapshot",
]
