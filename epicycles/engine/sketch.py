"""FourierSketch — the single owner of all per-run simulation state.

One ``step()`` per displayed frame:

1. feed live parameters to the lock controller (may leave DRAWING)
2. place the epicycle chain at the current rotation
3. record the tip into the trail and trim it
4. build the FrameOutput for the renderer
5. advance rotation and the animation lifecycle
"""

from __future__ import annotations

import logging
from typing import Callable

from epicycles.engine import simulator
from epicycles.engine.config import SketchConfig
from epicycles.engine.context import CoefficientSet, Point, SampledPath, StepResult
from epicycles.engine.fourier import CoefficientCache
from epicycles.engine.lifecycle import AnimationStateMachine, SimulationState
from epicycles.engine.lock import LockController
from epicycles.engine.sampler import center_and_scale, close_polygon, sample_polygon
from epicycles.engine.trail import TrailBuffer
from epicycles.models.frame import FillInstruction, FrameOutput, PivotModel, TrailPointModel
from epicycles.svg.parser import load_shape

logger = logging.getLogger(__name__)


class FourierSketch:
    def __init__(
        self,
        shape=None,
        *,
        vector_count: int = 100,
        frequency: float = 1.0,
        center: Point | None = None,
        config: SketchConfig | None = None,
        on_finish: Callable[[], None] | None = None,
    ) -> None:
        self.config = config or SketchConfig()
        self.center = center or Point(0.0, 0.0)

        self._vector_count = int(vector_count)
        self._frequency = float(frequency)

        # Rotation parameter fed to the chain, and the base_dt clock
        self.rotation = 0.0
        self.elapsed = 0.0
        self.frame = 0

        self.trail = TrailBuffer(fade_count=self.config.fade_points, warmup=self.config.warmup)
        self.lock_controller = LockController(self.config)
        self.lifecycle = AnimationStateMachine(self.config, on_complete=on_finish)

        self._cache = CoefficientCache()
        self.coefficients = CoefficientSet()

        if shape is not None:
            self.load_shape(shape)

    # ── Shape ──

    @property
    def samples(self) -> SampledPath:
        return self._cache.samples

    def load_shape(self, shape) -> None:
        """Replace the traced polygon without resetting rotation, trail or state."""
        vertices = load_shape(shape)
        path = sample_polygon(close_polygon(vertices), self.config.num_samples)
        path = center_and_scale(path, self.config.shape_scale)
        if not path.is_shape:
            logger.warning("Shape has %d vertices; nothing to trace", len(vertices))
        self._cache.reset(path)
        self._refresh_coefficients()

    def _refresh_coefficients(self) -> None:
        if self.samples.is_shape:
            self.coefficients = self._cache.get(self.effective_vector_count)
        else:
            self.coefficients = CoefficientSet()

    # ── Live parameters ──

    @property
    def vector_count(self) -> int:
        return self._vector_count

    @vector_count.setter
    def vector_count(self, value: int) -> None:
        if self.is_locked:
            logger.debug("Ignoring vector_count=%s: parameters are locked", value)
            return
        value = int(value)
        if value == self._vector_count:
            return
        self._vector_count = value
        self._refresh_coefficients()

    @property
    def frequency(self) -> float:
        return self._frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        if self.is_locked:
            logger.debug("Ignoring frequency=%s: parameters are locked", value)
            return
        self._frequency = float(value)

    # ── Lock ──

    @property
    def is_locked(self) -> bool:
        return self.lock_controller.locked

    @property
    def locked_frequency(self) -> float | None:
        snapshot = self.lock_controller.snapshot
        return snapshot.frequency if snapshot else None

    @property
    def locked_vectors(self) -> int | None:
        snapshot = self.lock_controller.snapshot
        return snapshot.vector_count if snapshot else None

    @property
    def effective_frequency(self) -> float:
        snapshot = self.lock_controller.snapshot
        return snapshot.frequency if snapshot else self._frequency

    @property
    def effective_vector_count(self) -> int:
        snapshot = self.lock_controller.snapshot
        return snapshot.vector_count if snapshot else self._vector_count

    # ── Lifecycle ──

    @property
    def state(self) -> SimulationState:
        return self.lifecycle.state

    @property
    def finished(self) -> bool:
        return self.lifecycle.finished

    @property
    def solid_count(self) -> int:
        """Fully opaque trail length; longer while at the target configuration."""
        if self.config.is_at_target(self.effective_vector_count, self.effective_frequency):
            return self.config.solid_points_at_target
        return self.config.solid_points

    def step(self, elapsed: float | None = None) -> FrameOutput:
        """Advance one frame.

        ``elapsed`` is the real time credited to the lock timer; hosts without
        a clock leave it unset and get ``config.lock_tick`` per frame.
        """
        tick = self.config.lock_tick if elapsed is None else elapsed
        if self.lock_controller.update(self._vector_count, self._frequency, tick):
            self.lifecycle.lock()

        frequency = self.effective_frequency
        result = simulator.step(self.center, self.rotation, self.coefficients, frequency)

        if self.lifecycle.recording:
            self.trail.record(result.tip, self.elapsed)
        solid = self.solid_count
        self.trail.trim(solid)

        output = self._frame_output(result, solid)

        dt = simulator.time_step(frequency, self.config.base_dt)
        self.rotation += dt
        self.elapsed += self.config.base_dt
        self.lifecycle.advance(dt * frequency)
        self.frame += 1
        return output

    def _frame_output(self, result: StepResult, solid: int) -> FrameOutput:
        fade_alpha = self.lifecycle.trail_alpha
        points = self.trail.points
        opacities = self.trail.opacities(solid, fade_alpha)
        trail = [TrailPointModel(x=p.x, y=p.y, opacity=o) for p, o in zip(points, opacities)]

        fill = None
        fill_alpha = self.lifecycle.fill_opacity
        if fill_alpha is not None and len(points) > 2:
            fill = FillInstruction(points=[(p.x, p.y) for p in points], alpha=fill_alpha)

        n_vectors = len(self.coefficients)
        return FrameOutput(
            frame=self.frame,
            state=self.state,
            locked=self.is_locked,
            effective_frequency=self.effective_frequency,
            vector_count=n_vectors,
            tip=(result.tip.x, result.tip.y),
            pivots=[
                PivotModel(x=p.x, y=p.y, radius=p.radius, angle=p.angle) for p in result.pivots
            ],
            trail=trail,
            fill=fill,
            show_circles=n_vectors >= self.config.min_vectors_for_circles,
            show_tip=n_vectors >= self.config.min_vectors_for_tip,
        )
