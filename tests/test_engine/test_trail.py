"""Tests for the bounded tip trail."""

import pytest

from epicycles.engine.context import Point
from epicycles.engine.trail import TrailBuffer


def _filled(n: int, solid: int = 50, fade: int = 100) -> TrailBuffer:
    trail = TrailBuffer(fade_count=fade, warmup=0.05)
    for i in range(n):
        trail.record(Point(float(i), 0.0), elapsed=1.0)
        trail.trim(solid)
    return trail


def test_warmup_skips_early_points():
    trail = TrailBuffer(warmup=0.05)
    assert not trail.record(Point(1.0, 1.0), elapsed=0.0)
    assert not trail.record(Point(1.0, 1.0), elapsed=0.05)
    assert len(trail) == 0
    assert trail.record(Point(1.0, 1.0), elapsed=0.06)
    assert len(trail) == 1


def test_newest_first():
    trail = _filled(3)
    assert [p.x for p in trail] == [2.0, 1.0, 0.0]
    assert trail[0].x == 2.0


def test_bound_holds_every_frame():
    trail = TrailBuffer(fade_count=100)
    for i in range(1000):
        trail.record(Point(float(i), 0.0), elapsed=1.0)
        trail.trim(50)
        assert len(trail) <= 150
    assert len(trail) == 150
    # Tail drops the oldest
    assert trail[0].x == 999.0
    assert trail[-1].x == 850.0


def test_shrinking_solid_count_trims_tail():
    trail = _filled(400, solid=200)
    assert len(trail) == 300
    trail.trim(50)
    assert len(trail) == 150
    assert trail[0].x == 399.0


def test_opacity_profile():
    trail = _filled(150)
    assert trail.opacity(0, 50) == 1.0
    assert trail.opacity(49, 50) == 1.0
    assert trail.opacity(50, 50) == 1.0
    assert trail.opacity(100, 50) == pytest.approx(0.5)
    assert trail.opacity(149, 50) == pytest.approx(0.01)
    assert trail.opacity(200, 50) == 0.0


def test_opacity_non_increasing_past_solid():
    trail = _filled(150)
    values = trail.opacities(50)
    assert len(values) == 150
    tail = values[50:]
    assert all(a >= b for a, b in zip(tail, tail[1:]))


def test_fade_alpha_multiplies():
    trail = _filled(150)
    assert trail.opacity(10, 50, fade_alpha=0.4) == pytest.approx(0.4)
    assert trail.opacity(100, 50, fade_alpha=0.4) == pytest.approx(0.2)


def test_points_snapshot():
    trail = _filled(3)
    points = trail.points
    trail.record(Point(9.0, 0.0), elapsed=1.0)
    assert [p.x for p in points] == [2.0, 1.0, 0.0]
    assert len(trail.points) == 4
