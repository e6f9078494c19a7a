"""End-to-end joint example: build a library, assemble a joint, derive values, plot, save.

Outputs (created under `gallery/joint/`):
- 01_library.txt
- joint_section.svg
- thread_profile.svg
- studio.json
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # non-interactive backend for scripts/CI

from jointy import (
    Bolt,
    BoltedJoint,
    Clamped,
    Library,
    Nut,
    StudioState,
    Thread,
    bolt_steel_8_8,
    plot_joint,
    plot_thread_profile,
    save_state,
    structural_steel,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _out_dir() -> Path:
    out_dir = _project_root() / "gallery" / "joint"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def _write_text(path: Path, text: str) -> None:
    path.write_text(text.rstrip() + "\n", encoding="utf-8")
    print(f"Saved: {path}")


def _build_library() -> tuple[Library, BoltedJoint]:
    library = Library()
    bolt_steel = library.add_material(bolt_steel_8_8())
    plate_steel = library.add_material(structural_steel())

    thread = Thread.metric_coarse(12, tolerance_class="6g")
    bolt = Bolt("M12x50 hex", thread, length=50.0, material=bolt_steel, grade="8.8", thread_length=30.0)
    bolt.set_head_geometry("hex", "hex", height=7.5, diameter=18.0)

    b = library.add_bolt(bolt)
    n = library.add_nut(Nut(thread, 13.0, 18.0, 10.8, material=bolt_steel))
    c = library.add_clamped(Clamped(inner_diameter=13.0, thickness=20.0, outer_diameter=40.0, material=plate_steel))

    joint = BoltedJoint("Flange", "Two 10 mm plates, through-bolted", bolt=b, nut=n, clamped=c)
    library.add_joint(joint)
    return library, joint


def _format_library(library: Library, joint: BoltedJoint) -> str:
    resolved = library.resolve(joint)
    bolt = resolved.bolt
    assert bolt is not None

    weight = library.bolt_weight(joint.bolt)  # type: ignore[arg-type]
    uts = bolt.ultimate_tensile_load

    lines: list[str] = []
    lines.append("JOINT EXAMPLE - LIBRARY")
    lines.append("=" * 80)
    lines.append(f"Collections: {library.counts()}")
    lines.append("")
    lines.append(f"Joint: {joint.name} ({joint.description})")
    lines.append(f"References: {joint.references()}")
    lines.append("")
    lines.append(f"Thread: {bolt.thread.designation}")
    lines.append(f"  minor diameter = {bolt.thread.minor_diameter:.3f} mm")
    lines.append(f"  depth          = {bolt.thread.depth():.4f} mm")
    lines.append(f"Tensile area (minor-diameter approximation) = {bolt.tensile_area:.1f} mm²")
    lines.append(f"Weight (solid cylinder) = {weight:.4f} kg" if weight is not None else "Weight = unknown")
    if uts is not None:
        lines.append(f"Ultimate tensile load (grade {bolt.grade}) = {uts / 1000.0:.1f} kN")
    lines.append(f"Grip length = {resolved.grip_length:g} mm")
    return "\n".join(lines)


def main() -> None:
    out_dir = _out_dir()
    library, joint = _build_library()

    _write_text(out_dir / "01_library.txt", _format_library(library, joint))

    resolved = library.resolve(joint)
    plot_joint(resolved, show=False, save_path=out_dir / "joint_section.svg")
    print(f"Saved: {out_dir / 'joint_section.svg'}")

    plot_thread_profile(resolved.bolt.thread, show=False, save_path=out_dir / "thread_profile.svg")  # type: ignore[union-attr]
    print(f"Saved: {out_dir / 'thread_profile.svg'}")

    path = save_state(StudioState(joint=joint, library=library), out_dir / "studio.json")
    print(f"Saved: {path}")


if __name__ == "__main__":
    main()
