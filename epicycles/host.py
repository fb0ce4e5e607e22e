"""Headless host loop — drives FourierSketch.step() the way a display loop would."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator

from epicycles.engine.lifecycle import SimulationState
from epicycles.engine.sketch import FourierSketch
from epicycles.models.frame import FrameOutput

logger = logging.getLogger(__name__)

# ~60 Hz display, ten minutes
_MAX_FRAMES = 36_000


def frames(
    sketch: FourierSketch,
    max_frames: int = _MAX_FRAMES,
    elapsed: float | None = None,
) -> Generator[FrameOutput, None, None]:
    """Yield one FrameOutput per step until COMPLETE or ``max_frames``."""
    for _ in range(max_frames):
        if sketch.state == SimulationState.COMPLETE:
            return
        yield sketch.step(elapsed)


def run_until_complete(
    sketch: FourierSketch,
    max_frames: int = _MAX_FRAMES,
    elapsed: float | None = None,
) -> int:
    """Step ``sketch`` until it completes; returns the number of frames run."""
    start = time.perf_counter()
    count = 0
    for _ in frames(sketch, max_frames, elapsed):
        count += 1

    logger.info(
        "Host loop: %d frames in %.0fms, state %s",
        count,
        (time.perf_counter() - start) * 1000,
        sketch.state.name,
    )
    return count
