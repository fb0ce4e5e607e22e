"""LockController — freezes live parameters after they dwell at the target."""

from __future__ import annotations

import logging

from epicycles.engine.config import SketchConfig
from epicycles.engine.context import LockSnapshot

logger = logging.getLogger(__name__)


class LockController:
    """Hysteresis lock on (vector count, frequency).

    Time only accumulates while both parameters stay at the target; any
    excursion resets it to zero. After locking the controller ignores input.
    """

    def __init__(self, config: SketchConfig | None = None) -> None:
        self.config = config or SketchConfig()
        self.time_in_target = 0.0
        self._snapshot: LockSnapshot | None = None

    @property
    def locked(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> LockSnapshot | None:
        return self._snapshot

    def update(self, vector_count: int, frequency: float, elapsed: float) -> LockSnapshot | None:
        """Feed one frame; returns the snapshot on the frame the lock engages."""
        if self.locked:
            return None

        if not self.config.is_at_target(vector_count, frequency):
            self.time_in_target = 0.0
            return None

        self.time_in_target += elapsed
        if self.time_in_target < self.config.lock_duration:
            return None

        self._snapshot = LockSnapshot(frequency=frequency, vector_count=vector_count)
        logger.info(
            "Parameters locked: frequency=%.3f vectors=%d after %.3fs at target",
            frequency,
            vector_count,
            self.time_in_target,
        )
        return self._snapshot
