"""Sketch configuration — engine constants for sampling, locking and the lifecycle."""

from __future__ import annotations

import math
from dataclasses import dataclass

# One frame of rotation: 6 of 1000 steps around the circle.
BASE_DT = (2 * math.pi / 1000) * 6


@dataclass
class SketchConfig:
    """Controls sampling density, lock hysteresis and lifecycle pacing."""

    # Path sampling
    num_samples: int = 1000
    shape_scale: float = 1.5

    # Frame clock
    base_dt: float = BASE_DT
    lock_tick: float = BASE_DT / 60  # seconds credited to the lock timer per frame
    warmup: float = 0.05  # base_dt clock before the trail starts recording

    # Target configuration and lock hysteresis
    target_vectors: int = 100
    target_frequency: float = 1.0
    frequency_tolerance: float = 0.1
    lock_duration: float = 0.2

    # Lifecycle
    cycles_needed: int = 3
    fill_rate: float = 0.15  # multiplied by base_dt each frame
    fill_cap: float = 0.3

    # Trail
    solid_points: int = 50
    solid_points_at_target: int = 200
    fade_points: int = 100

    # Draw hints
    min_vectors_for_circles: int = 3
    min_vectors_for_tip: int = 2

    @property
    def alpha_step(self) -> float:
        """Per-frame change of fill and fade alpha."""
        return self.base_dt * self.fill_rate

    @property
    def rotation_needed(self) -> float:
        return self.cycles_needed * 2 * math.pi

    def is_at_target(self, vector_count: int, frequency: float) -> bool:
        return (
            vector_count == self.target_vectors
            and abs(frequency - self.target_frequency) < self.frequency_tolerance
        )
