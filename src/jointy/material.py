"""
Engineering materials.

A `Material` starts with only a name and type; property groups are filled in
afterwards, one whole group per call, as they usually come from one datasheet.
Every property is ``None`` until known. Units are SI (kg/m³, Pa, W/(m·K), 1/K,
J/(kg·K), °C, S/m, Ω·m).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import InvalidMaterialError

MaterialType = Literal["metal", "polymer", "ceramic", "composite", "wood", "other"]

MATERIAL_TYPES: frozenset[str] = frozenset({"metal", "polymer", "ceramic", "composite", "wood", "other"})

ABSOLUTE_ZERO_C = -273.15


def _require_positive(value: float | None, label: str) -> None:
    if value is not None and not value > 0.0:
        raise InvalidMaterialError(f"{label} must be positive (got {value})")


def _check_mechanical(
    density: float | None,
    youngs_modulus: float | None,
    shear_modulus: float | None,
    poisson_ratio: float | None,
    tensile_strength: float | None,
    yield_strength: float | None,
    hardness: float | None,
) -> None:
    _require_positive(density, "Density")
    _require_positive(youngs_modulus, "Young's modulus")
    _require_positive(shear_modulus, "Shear modulus")
    _require_positive(tensile_strength, "Tensile strength")
    _require_positive(yield_strength, "Yield strength")
    _require_positive(hardness, "Hardness")
    if poisson_ratio is not None and not -1.0 < poisson_ratio <= 0.5:
        raise InvalidMaterialError(f"Poisson ratio must be in (-1, 0.5] (got {poisson_ratio})")


def _check_thermal(
    thermal_conductivity: float | None,
    specific_heat: float | None,
    melting_point: float | None,
) -> None:
    # expansion may be negative
    _require_positive(thermal_conductivity, "Thermal conductivity")
    _require_positive(specific_heat, "Specific heat")
    if melting_point is not None and not melting_point > ABSOLUTE_ZERO_C:
        raise InvalidMaterialError(f"Melting point must be above absolute zero (got {melting_point} °C)")


def _check_electrical(conductivity: float | None, resistivity: float | None) -> None:
    _require_positive(conductivity, "Electrical conductivity")
    _require_positive(resistivity, "Resistivity")


def _check_cost(cost_per_kg: float | None) -> None:
    if cost_per_kg is not None and not cost_per_kg >= 0.0:
        raise InvalidMaterialError(f"Cost per kg cannot be negative (got {cost_per_kg})")


@dataclass(frozen=True)
class MaterialStandard:
    """Designation of the standard a material conforms to (e.g. "ISO 898-1", "ISO")."""

    designation: str
    organization: str
    note: str | None = None


@dataclass
class Material:
    """Physical substance with independently optional property groups.

    Properties passed to the constructor are checked like those given to the
    group setters.
    """

    name: str
    material_type: MaterialType = "metal"
    standard: MaterialStandard | None = None

    # Mechanical
    density: float | None = None
    youngs_modulus: float | None = None
    shear_modulus: float | None = None
    poisson_ratio: float | None = None
    tensile_strength: float | None = None
    yield_strength: float | None = None
    hardness: float | None = None

    # Thermal
    thermal_conductivity: float | None = None
    thermal_expansion: float | None = None
    specific_heat: float | None = None
    melting_point: float | None = None

    # Electrical
    electrical_conductivity: float | None = None
    resistivity: float | None = None

    cost_per_kg: float | None = None
    note: str | None = None

    def __post_init__(self) -> None:
        if self.material_type not in MATERIAL_TYPES:
            raise InvalidMaterialError(f"Unsupported material type: {self.material_type!r}")
        _check_mechanical(
            self.density,
            self.youngs_modulus,
            self.shear_modulus,
            self.poisson_ratio,
            self.tensile_strength,
            self.yield_strength,
            self.hardness,
        )
        _check_thermal(self.thermal_conductivity, self.specific_heat, self.melting_point)
        _check_electrical(self.electrical_conductivity, self.resistivity)
        _check_cost(self.cost_per_kg)

    def set_standard(self, designation: str, organization: str, note: str | None = None) -> None:
        self.standard = MaterialStandard(designation=designation, organization=organization, note=note)

    def set_mechanical(
        self,
        density: float,
        youngs_modulus: float,
        shear_modulus: float,
        poisson_ratio: float,
        tensile_strength: float,
        yield_strength: float,
        hardness: float,
    ) -> None:
        """Set the mechanical group (density, moduli, Poisson ratio, strengths, hardness)."""
        _check_mechanical(
            density, youngs_modulus, shear_modulus, poisson_ratio, tensile_strength, yield_strength, hardness
        )

        self.density = float(density)
        self.youngs_modulus = float(youngs_modulus)
        self.shear_modulus = float(shear_modulus)
        self.poisson_ratio = float(poisson_ratio)
        self.tensile_strength = float(tensile_strength)
        self.yield_strength = float(yield_strength)
        self.hardness = float(hardness)

    def set_thermal(
        self,
        thermal_conductivity: float,
        thermal_expansion: float,
        specific_heat: float,
        melting_point: float,
    ) -> None:
        """Set the thermal group. Expansion may be negative; melting point is in °C."""
        _check_thermal(thermal_conductivity, specific_heat, melting_point)

        self.thermal_conductivity = float(thermal_conductivity)
        self.thermal_expansion = float(thermal_expansion)
        self.specific_heat = float(specific_heat)
        self.melting_point = float(melting_point)

    def set_electrical(self, conductivity: float, resistivity: float) -> None:
        _check_electrical(conductivity, resistivity)
        self.electrical_conductivity = float(conductivity)
        self.resistivity = float(resistivity)

    def set_cost(self, cost_per_kg: float) -> None:
        _check_cost(cost_per_kg)
        self.cost_per_kg = float(cost_per_kg)

    def set_note(self, note: str) -> None:
        self.note = note

    @property
    def has_mechanical(self) -> bool:
        return self.density is not None

    @property
    def has_thermal(self) -> bool:
        return self.thermal_conductivity is not None

    @property
    def has_electrical(self) -> bool:
        return self.electrical_conductivity is not None


# Typical handbook values for general use.


def structural_steel() -> Material:
    """Structural carbon steel (ASTM A36)."""
    mat = Material("Steel A36", "metal")
    mat.set_standard("ASTM A36", "ASTM")
    mat.set_mechanical(
        density=7850.0,
        youngs_modulus=200e9,
        shear_modulus=79.3e9,
        poisson_ratio=0.26,
        tensile_strength=400e6,
        yield_strength=250e6,
        hardness=119.0,
    )
    mat.set_thermal(thermal_conductivity=51.9, thermal_expansion=11.7e-6, specific_heat=486.0, melting_point=1425.0)
    mat.set_electrical(conductivity=5.9e6, resistivity=1.7e-7)
    return mat


def stainless_steel_304() -> Material:
    """Austenitic stainless steel (AISI 304 / EN 1.4301)."""
    mat = Material("Stainless 304", "metal")
    mat.set_standard("EN 1.4301", "EN", note="AISI 304")
    mat.set_mechanical(
        density=8000.0,
        youngs_modulus=193e9,
        shear_modulus=77.2e9,
        poisson_ratio=0.29,
        tensile_strength=505e6,
        yield_strength=215e6,
        hardness=201.0,
    )
    mat.set_thermal(thermal_conductivity=16.2, thermal_expansion=17.3e-6, specific_heat=500.0, melting_point=1400.0)
    mat.set_electrical(conductivity=1.39e6, resistivity=7.2e-7)
    return mat


def aluminium_6061_t6() -> Material:
    """Aluminium alloy 6061 in the T6 temper."""
    mat = Material("Aluminium 6061-T6", "metal")
    mat.set_standard("ASTM B209 6061-T6", "ASTM")
    mat.set_mechanical(
        density=2700.0,
        youngs_modulus=68.9e9,
        shear_modulus=26e9,
        poisson_ratio=0.33,
        tensile_strength=310e6,
        yield_strength=276e6,
        hardness=95.0,
    )
    mat.set_thermal(thermal_conductivity=167.0, thermal_expansion=23.6e-6, specific_heat=896.0, melting_point=582.0)
    mat.set_electrical(conductivity=2.5e7, resistivity=4.0e-8)
    return mat


def bolt_steel_8_8() -> Material:
    """Quenched and tempered bolt steel, property class 8.8."""
    mat = Material("Bolt steel 8.8", "metal")
    mat.set_standard("ISO 898-1 8.8", "ISO")
    mat.set_mechanical(
        density=7850.0,
        youngs_modulus=205e9,
        shear_modulus=80e9,
        poisson_ratio=0.29,
        tensile_strength=800e6,
        yield_strength=640e6,
        hardness=250.0,
    )
    return mat


__all__ = [
    "MaterialType",
    "MaterialStandard",
    "Material",
    "structural_steel",
    "stainless_steel_304",
    "aluminium_6061_t6",
    "bolt_steel_8_8",
]
