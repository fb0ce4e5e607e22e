"""Epicycle reconstruction engine."""

from epicycles.engine.config import SketchConfig
from epicycles.engine.context import (
    CoefficientSet,
    FourierCoefficient,
    LockSnapshot,
    PivotInfo,
    Point,
    SampledPath,
    SampledPoint,
    StepResult,
    TrailPoint,
)
from epicycles.engine.fourier import CoefficientCache, frequency_indices, transform
from epicycles.engine.lifecycle import AnimationStateMachine, SimulationState
from epicycles.engine.lock import LockController
from epicycles.engine.sampler import center_and_scale, close_polygon, sample_polygon
from epicycles.engine.trail import TrailBuffer

__all__ = [
    "AnimationStateMachine",
    "CoefficientCache",
    "CoefficientSet",
    "FourierCoefficient",
    "LockController",
    "LockSnapshot",
    "PivotInfo",
    "Point",
    "SampledPath",
    "SampledPoint",
    "SimulationState",
    "SketchConfig",
    "StepResult",
    "TrailBuffer",
    "TrailPoint",
    "center_and_scale",
    "close_polygon",
    "frequency_indices",
    "sample_polygon",
    "transform",
]
