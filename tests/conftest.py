"""Shared test fixtures."""

from __future__ import annotations

import pytest

from epicycles.engine.lifecycle import SimulationState
from epicycles.engine.sketch import FourierSketch


# The default "1" polygon; ends on its first vertex, so closing it
# adds a zero-length edge (12 edges → 83 samples each → 996 samples).
DEFAULT_POINTS = (
    "547.14 196.31 547.14 276.39 684.84 207.54 684.84 742.7 538.84 742.7 "
    "538.84 812.53 901.16 812.53 901.16 742.7 764.3 742.52 763.8 119.47 "
    "698.4 119.47 547.14 196.31"
)

SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]

SQUARE_POINTS = "0 0 10 0 10 10 0 10"

POLYGON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <polygon points="10 10 90 10 90 90 10 90" fill="#ffffff"/>
</svg>'''

LINE_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M0 0 H10 V10 H0 Z"/>
</svg>'''

CURVED_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M522.87,299.21h98.81s9.48-104.77,100.94-102.64Z"/>
</svg>'''


def lock_sketch(sketch: FourierSketch) -> None:
    """Hold the target configuration for 0.2s of lock time."""
    sketch.step(elapsed=0.1)
    sketch.step(elapsed=0.1)
    assert sketch.state == SimulationState.LOCKED


@pytest.fixture
def default_sketch() -> FourierSketch:
    return FourierSketch(DEFAULT_POINTS, vector_count=100, frequency=1.0)


@pytest.fixture
def square_sketch() -> FourierSketch:
    return FourierSketch(SQUARE, vector_count=4, frequency=1.0)
