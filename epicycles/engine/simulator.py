"""EpicycleSimulator — sum of rotating vectors from a center to the traced tip."""

from __future__ import annotations

import numpy as np

from epicycles.engine.context import CoefficientSet, PivotInfo, Point, StepResult


def step(
    center: Point,
    rotation: float,
    coefficients: CoefficientSet,
    effective_frequency: float,
) -> StepResult:
    """Place every vector of the chain at ``rotation`` and return the tip.

    Vector ``i`` points at ``frequency_i · rotation · effective_frequency +
    phase_i`` with length ``amplitude_i``; its pivot is the running sum of
    all vectors before it. An empty chain leaves the tip on ``center``.
    """
    if len(coefficients) == 0:
        return StepResult(tip=center, pivots=[])

    radii = coefficients.amplitudes
    angles = coefficients.frequencies * rotation * effective_frequency + coefficients.phases
    vectors = radii * np.exp(1j * angles)

    origin = complex(center.x, center.y)
    ends = origin + np.cumsum(vectors)
    starts = np.concatenate([[origin], ends[:-1]])

    pivots = [
        PivotInfo(x=float(s.real), y=float(s.imag), radius=float(r), angle=float(a))
        for s, r, a in zip(starts, radii, angles)
    ]
    tip = ends[-1]
    return StepResult(tip=Point(float(tip.real), float(tip.imag)), pivots=pivots)


def time_step(effective_frequency: float, base_dt: float) -> float:
    """Rotation advance for one frame.

    Dividing by the frequency keeps the visible angular speed of the chain
    roughly constant; a non-positive frequency falls back to ``base_dt``.
    """
    if effective_frequency > 0:
        return base_dt / effective_frequency
    return base_dt
