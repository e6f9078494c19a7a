from __future__ import annotations

import matplotlib.pyplot as plt
import pytest

from jointy import BoltedJoint, Library, Thread, plot_joint, plot_thread_profile


def test_plot_bolted_joint_smoke(library: Library, joint: BoltedJoint, tmp_path) -> None:
    ax = plot_joint(library.resolve(joint), show=False, save_path=tmp_path / "joint.png")

    assert (tmp_path / "joint.svg").exists()
    assert "Flange" in ax.get_title()
    plt.close("all")


def test_plot_stud_joint_smoke(library: Library) -> None:
    joint = BoltedJoint("Stud joint", stud=0, nut=0, clamped=0)

    ax = plot_joint(library.resolve(joint), show=False)

    assert ax.patches
    plt.close("all")


def test_plot_joint_requires_bolt_or_stud(library: Library) -> None:
    with pytest.raises(ValueError, match="no bolt or stud"):
        plot_joint(library.resolve(BoltedJoint(clamped=0)), show=False)


def test_plot_thread_profile_smoke(m12: Thread) -> None:
    ax = plot_thread_profile(m12, n_pitches=3, show=False)

    assert "M12x1.75-6g" in ax.get_title()
    plt.close("all")

    with pytest.raises(ValueError):
        plot_thread_profile(m12, n_pitches=0, show=False)
