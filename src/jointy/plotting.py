"""
Plotting helpers for joints and threads.

Sketches are schematic: a longitudinal section through the joint axis, drawn
to the stored dimensions where known and to rough proportions of the thread
diameter where not. All save outputs are forced to `.svg` when `save_path` is
provided.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .joint import ResolvedJoint
from .thread import Thread

_BOLT_COLOR = "steelblue"
_NUT_COLOR = "slategray"
_CLAMPED_COLOR = "lightgray"


def _save_and_show(fig: plt.Figure, save_path: str | Path | None, show: bool) -> None:
    plt.tight_layout()

    if save_path is not None:
        out = Path(save_path)
        if out.suffix.lower() != ".svg":
            out = out.with_suffix(".svg")
        fig.savefig(str(out), format="svg", bbox_inches="tight")

    if show:
        plt.show()


def _thread_edges(thread: Thread, y_start: float, y_end: float) -> tuple[np.ndarray, np.ndarray]:
    """Zig-zag radius (x) against axial position (y) between crest and root."""
    half_pitch = thread.pitch / 2.0
    span = abs(y_end - y_start)
    n = max(2, int(round(span / half_pitch)) + 1)
    ys = np.linspace(y_start, y_end, n)
    xs = np.where(np.arange(n) % 2 == 0, thread.major_diameter / 2.0, thread.minor_diameter / 2.0)
    return xs, ys


def _draw_symmetric_rect(ax: plt.Axes, x_in: float, x_out: float, y0: float, height: float, **kwargs) -> None:
    """Rectangle at ±[x_in, x_out] (both sides of the axis)."""
    label = kwargs.pop("label", None)
    for sign, lab in ((1.0, label), (-1.0, None)):
        x = x_in if sign > 0 else -x_out
        ax.add_patch(Rectangle((x, y0), x_out - x_in, height, label=lab, **kwargs))


def _draw_threaded_rod(ax: plt.Axes, thread: Thread, y_top: float, y_bottom: float, threaded_from: float) -> None:
    """Solid rod from y_top to y_bottom; threads drawn below `threaded_from`."""
    r = thread.major_diameter / 2.0
    ax.add_patch(
        Rectangle(
            (-r, y_bottom),
            2.0 * r,
            y_top - y_bottom,
            facecolor=_BOLT_COLOR,
            edgecolor="black",
            linewidth=1.0,
            alpha=0.6,
            zorder=3,
        )
    )
    if threaded_from > y_bottom:
        xs, ys = _thread_edges(thread, threaded_from, y_bottom)
        ax.plot(xs, ys, color="black", linewidth=0.8, zorder=4)
        ax.plot(-xs, ys, color="black", linewidth=0.8, zorder=4)


def plot_joint(
    resolved: ResolvedJoint,
    *,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
    length_unit: str = "mm",
) -> plt.Axes:
    """Plot a section through a resolved joint (clamped member, bolt or stud, nut).

    The clamped member sits between y = 0 and y = thickness; the bolt head
    bears on its top face and the nut on its bottom face.
    """
    bolt = resolved.bolt
    stud = resolved.stud
    if bolt is None and stud is None:
        raise ValueError("Joint has no bolt or stud to plot")

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 8))
    else:
        fig = ax.figure

    thread = bolt.thread if bolt is not None else stud.thread_a  # type: ignore[union-attr]
    d = thread.major_diameter

    clamped = resolved.clamped
    grip = clamped.thickness if clamped is not None else 2.0 * d
    if clamped is not None:
        outer = clamped.outer_diameter if clamped.outer_diameter is not None else 3.0 * clamped.inner_diameter
        _draw_symmetric_rect(
            ax,
            clamped.inner_diameter / 2.0,
            outer / 2.0,
            0.0,
            clamped.thickness,
            facecolor=_CLAMPED_COLOR,
            edgecolor="darkgray",
            linewidth=1.5,
            hatch="//",
            zorder=1,
            label="Clamped",
        )

    if bolt is not None:
        head_h = bolt.head_thickness if bolt.head_thickness is not None else 0.7 * d
        head_d = bolt.head_diameter or bolt.bearing_diameter or 1.6 * d
        ax.add_patch(
            Rectangle(
                (-head_d / 2.0, grip),
                head_d,
                head_h,
                facecolor=_BOLT_COLOR,
                edgecolor="black",
                linewidth=1.5,
                zorder=3,
                label=bolt.name or "Bolt",
            )
        )
        bottom = grip - bolt.length
        thread_len = bolt.thread_length if bolt.thread_length is not None else bolt.length
        _draw_threaded_rod(ax, bolt.thread, grip, bottom, bottom + thread_len)
        top = grip + head_h
    else:
        # stud: end b below the grip, shank through it, end a above
        y_b = grip - stud.shank_length  # type: ignore[union-attr]
        bottom = y_b - stud.thread_length_b  # type: ignore[union-attr]
        top = grip + stud.thread_length_a  # type: ignore[union-attr]
        _draw_threaded_rod(ax, stud.thread_b, y_b, bottom, y_b)  # type: ignore[union-attr]
        r_shank = stud.shank_diameter / 2.0  # type: ignore[union-attr]
        ax.add_patch(
            Rectangle(
                (-r_shank, y_b),
                2.0 * r_shank,
                grip - y_b,
                facecolor=_BOLT_COLOR,
                edgecolor="black",
                linewidth=1.0,
                alpha=0.6,
                zorder=3,
                label="Stud",
            )
        )
        _draw_threaded_rod(ax, stud.thread_a, top, grip, top)  # type: ignore[union-attr]

    nut = resolved.nut
    if nut is not None:
        _draw_symmetric_rect(
            ax,
            nut.thread.major_diameter / 2.0,
            nut.bearing_outer_diameter / 2.0,
            -nut.thickness,
            nut.thickness,
            facecolor=_NUT_COLOR,
            edgecolor="black",
            linewidth=1.5,
            zorder=2,
            label="Nut",
        )
        bottom = min(bottom, -nut.thickness)

    ax.axvline(0.0, color="black", linestyle="-.", linewidth=0.8, alpha=0.7, zorder=5)

    half_width = max(
        d,
        (clamped.outer_diameter or 3.0 * clamped.inner_diameter) / 2.0 if clamped is not None else d,
        nut.bearing_outer_diameter / 2.0 if nut is not None else d,
    )
    margin = 0.2 * (top - bottom)
    ax.set_xlim(-half_width * 1.3, half_width * 1.3)
    ax.set_ylim(bottom - margin, top + margin)
    ax.set_aspect("equal")
    ax.set_xlabel(f"r ({length_unit})", fontsize=11)
    ax.set_ylabel(f"axial ({length_unit})", fontsize=11)
    ax.grid(True, alpha=0.3, linestyle="--")
    ax.legend(loc="upper right")

    title = resolved.joint.name or "Bolted joint"
    title += f"\n{thread.designation}"
    if resolved.grip_length is not None:
        title += f" | grip {resolved.grip_length:g} {length_unit}"
    ax.set_title(title, fontsize=12)

    _save_and_show(fig, save_path, show)
    return ax


def plot_thread_profile(
    thread: Thread,
    *,
    n_pitches: int = 4,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
) -> plt.Axes:
    """Plot the basic triangular profile of `thread` over `n_pitches` pitches."""
    if n_pitches < 1:
        raise ValueError("n_pitches must be at least 1")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    r_major = thread.major_diameter / 2.0
    r_minor = thread.minor_diameter / 2.0
    unit = "mm" if thread.unit == "metric" else "in"

    n = 2 * n_pitches + 1
    x = np.arange(n) * thread.pitch / 2.0
    r = np.where(np.arange(n) % 2 == 0, r_major, r_minor)

    ax.fill_between(x, 0.0, r, color=_BOLT_COLOR, alpha=0.4, zorder=1)
    ax.plot(x, r, color="black", linewidth=1.5, zorder=3)
    ax.axhline(r_major, color="green", linestyle="--", linewidth=1.0, label=f"major ⌀{thread.major_diameter:.3f}")
    ax.axhline(r_minor, color="red", linestyle="--", linewidth=1.0, label=f"minor ⌀{thread.minor_diameter:.3f}")

    ax.set_xlim(x[0], x[-1])
    ax.set_ylim(r_minor - 2.0 * thread.depth(), r_major + thread.depth())
    ax.set_xlabel(f"axial ({unit})", fontsize=11)
    ax.set_ylabel(f"radius ({unit})", fontsize=11)
    ax.grid(True, alpha=0.3, linestyle="--")
    ax.legend(loc="lower right")
    ax.set_title(f"Thread {thread.designation} | depth {thread.depth():.4f} {unit}", fontsize=12)

    _save_and_show(fig, save_path, show)
    return ax


__all__ = ["plot_joint", "plot_thread_profile"]
