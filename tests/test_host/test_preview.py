"""Tests for the matplotlib preview helpers (Agg backend, no window)."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from epicycles.models.frame import FrameOutput, PivotModel, TrailPointModel
from epicycles.preview import _RING_RESOLUTION, _circle_paths, _trail_segments, build_animation
from epicycles.engine.sketch import FourierSketch
from tests.conftest import SQUARE


def test_circle_paths_empty():
    xs, ys = _circle_paths(FrameOutput())
    assert len(xs) == 0 and len(ys) == 0


def test_circle_paths_ring_and_radius():
    frame = FrameOutput(pivots=[PivotModel(x=1.0, y=2.0, radius=3.0, angle=0.0)])
    xs, ys = _circle_paths(frame)
    # ring + gap + radius line + gap
    assert len(xs) == _RING_RESOLUTION + 1 + 1 + 2 + 1
    assert np.nanmax(xs) == np.float64(4.0)
    assert xs[_RING_RESOLUTION + 3] == 4.0


def test_trail_segments_colors():
    trail = [TrailPointModel(x=float(i), y=0.0, opacity=1.0 - i / 10) for i in range(4)]
    segments, colors = _trail_segments(FrameOutput(trail=trail))
    assert segments.shape == (3, 2, 2)
    assert colors.shape == (3, 4)
    assert colors[:, 3].tolist() == [1.0, 0.9, 0.8]


def test_trail_segments_too_short():
    segments, colors = _trail_segments(FrameOutput(trail=[TrailPointModel(x=0, y=0)]))
    assert segments.shape == (0, 2, 2)


def test_build_animation():
    sketch = FourierSketch(SQUARE, vector_count=4)
    fig, anim = build_animation(sketch, max_frames=10)
    assert anim is not None
    plt.close(fig)
