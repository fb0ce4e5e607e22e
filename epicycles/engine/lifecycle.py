"""AnimationStateMachine — drawing → locked → filling → fading → complete.

States only move forward. Entering COMPLETE fires the terminal callback once;
later frames are no-ops.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable

from epicycles.engine.config import SketchConfig

logger = logging.getLogger(__name__)


class SimulationState(enum.IntEnum):
    DRAWING = 0
    LOCKED = 1
    FILLING = 2
    FADING = 3
    COMPLETE = 4


class AnimationStateMachine:
    def __init__(
        self,
        config: SketchConfig | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> None:
        self.config = config or SketchConfig()
        self.on_complete = on_complete
        self.state = SimulationState.DRAWING
        self.fill_alpha = 0.0
        self.fade_alpha = 1.0
        self.rotation_since_lock = 0.0
        self._has_finished = False

    @property
    def finished(self) -> bool:
        return self._has_finished

    @property
    def fill_opacity(self) -> float | None:
        """Alpha of the filled outline, or None while no fill is shown."""
        if self.state == SimulationState.FILLING:
            return self.fill_alpha
        if self.state == SimulationState.FADING:
            return self.fill_alpha * self.fade_alpha
        return None

    @property
    def trail_alpha(self) -> float:
        """Global multiplier on trail opacity."""
        return self.fade_alpha if self.state == SimulationState.FADING else 1.0

    @property
    def recording(self) -> bool:
        """Whether the trail should still take new points."""
        return self.state < SimulationState.FADING

    def lock(self) -> None:
        """Leave DRAWING; any other state ignores the call."""
        if self.state != SimulationState.DRAWING:
            return
        self.rotation_since_lock = 0.0
        self._enter(SimulationState.LOCKED)

    def advance(self, rotation_delta: float) -> SimulationState:
        """Account one frame: ``rotation_delta`` is ``dt · effective_frequency``."""
        if self.state == SimulationState.LOCKED:
            self.rotation_since_lock += rotation_delta
            if self.rotation_since_lock > self.config.rotation_needed:
                self._enter(SimulationState.FILLING)
        elif self.state == SimulationState.FILLING:
            self.fill_alpha += self.config.alpha_step
            if self.fill_alpha >= self.config.fill_cap:
                self.fill_alpha = self.config.fill_cap
                self._enter(SimulationState.FADING)
        elif self.state == SimulationState.FADING:
            self.fade_alpha -= self.config.alpha_step
            if self.fade_alpha <= 0:
                self.fade_alpha = 0.0
                self._enter(SimulationState.COMPLETE)
                self._finish()
        return self.state

    def _enter(self, state: SimulationState) -> None:
        if state <= self.state:
            raise ValueError(f"Invalid transition {self.state.name} -> {state.name}")
        logger.info("State %s -> %s", self.state.name, state.name)
        self.state = state

    def _finish(self) -> None:
        if self._has_finished:
            return
        # Latch before calling out so a raising callback is never retried.
        self._has_finished = True
        logger.info("finish")
        if self.on_complete is not None:
            self.on_complete()
