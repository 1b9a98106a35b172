# tests/test_viz.py
"""
Smoke tests for the bind-pose plot. Uses the Agg backend so no display is
needed.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from anatomy_forge.generative import generate_body
from anatomy_forge.model import BodyDNA
from anatomy_forge.viz import plot_skeleton


@pytest.fixture(scope="module")
def adult():
    return generate_body(BodyDNA.average_adult())


@pytest.mark.parametrize("color_by", ["side", "mass"])
def test_plot_saves_png(adult, tmp_path, color_by):
    outpath = tmp_path / f"skeleton_{color_by}.png"
    result = plot_skeleton(adult, outpath=str(outpath), color_by=color_by)

    assert result is None
    assert outpath.exists()
    assert outpath.stat().st_size > 0

    print(f"✓ Saved {outpath.name}")


def test_plot_returns_figure(adult):
    fig = plot_skeleton(adult, title="Average adult")
    try:
        ax = fig.axes[0]
        assert ax.get_title() == "Average adult"
        # One line per joint
        assert len(ax.lines) == 205
    finally:
        plt.close(fig)


def test_unknown_color_mode(adult):
    with pytest.raises(ValueError):
        plot_skeleton(adult, color_by="density")


def test_empty_skeleton_is_rejected(tmp_path):
    outpath = tmp_path / "empty.png"
    with pytest.raises(ValueError, match="empty"):
        plot_skeleton({}, outpath=str(outpath))
    assert not outpath.exists()
