"""Per-frame output consumed by renderers."""

from __future__ import annotations

from pydantic import BaseModel, Field

from epicycles.engine.lifecycle import SimulationState


class PivotModel(BaseModel):
    x: float
    y: float
    radius: float
    angle: float


class TrailPointModel(BaseModel):
    x: float
    y: float
    opacity: float = 1.0


class FillInstruction(BaseModel):
    points: list[tuple[float, float]] = Field(default_factory=list)
    alpha: float = 0.0


class FrameOutput(BaseModel):
    """Everything a renderer needs to draw one frame."""

    frame: int = 0
    state: SimulationState = SimulationState.DRAWING
    locked: bool = False
    effective_frequency: float = 1.0
    vector_count: int = 0

    tip: tuple[float, float] = (0.0, 0.0)
    pivots: list[PivotModel] = Field(default_factory=list)
    trail: list[TrailPointModel] = Field(default_factory=list)
    fill: FillInstruction | None = None

    # Draw hints: circles need a real chain, the tip dot at least two vectors
    show_circles: bool = False
    show_tip: bool = False
