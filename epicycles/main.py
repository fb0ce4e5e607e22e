"""Sketch factory — loads settings, configures logging, builds a FourierSketch."""

from __future__ import annotations

import logging
from typing import Callable

from dotenv import load_dotenv

from epicycles.config import settings
from epicycles.engine.config import SketchConfig
from epicycles.engine.context import Point
from epicycles.engine.sketch import FourierSketch

load_dotenv()


def configure_logging(level: str | None = None) -> None:
    level_name = (level or settings.epicycles_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_sketch(
    shape=None,
    *,
    vector_count: int = 100,
    frequency: float = 1.0,
    on_finish: Callable[[], None] | None = None,
    config: SketchConfig | None = None,
) -> FourierSketch:
    """Build a sketch centered on the configured canvas.

    ``shape`` defaults to ``settings.default_shape``.
    """
    configure_logging()
    return FourierSketch(
        shape if shape is not None else settings.default_shape,
        vector_count=vector_count,
        frequency=frequency,
        center=Point(settings.canvas_width / 2, settings.canvas_height / 2),
        config=config,
        on_finish=on_finish,
    )
