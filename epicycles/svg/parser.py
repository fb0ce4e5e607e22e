"""Shape input — coordinate strings and SVG polygons → vertex arrays.

Accepts the flat ``"x1 y1 x2 y2 ..."`` format, an SVG ``<polygon points>``
element, or an SVG ``<path d>`` made only of straight segments (parsed with
svgpathtools). Curved paths are outside what the engine traces.
"""

from __future__ import annotations

import logging
import math
import re

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Line, parse_path

from epicycles.utils.geometry import as_vertex_array

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[\s,]+")
_POLYGON_POINTS_RE = re.compile(r'<polygon[^>]*\spoints\s*=\s*"([^"]*)"', re.IGNORECASE)
_PATH_D_RE = re.compile(r'<path[^>]*\sd\s*=\s*"([^"]+)"', re.IGNORECASE)
_MARKUP_RE = re.compile(r"<\s*(svg|polygon|path)\b", re.IGNORECASE)


def parse_points(text: str) -> NDArray[np.float64]:
    """Parse ``"x1 y1 x2 y2 ..."`` into an Nx2 array.

    An odd number of values drops the trailing unpaired one. Tokens that are
    not finite numbers are skipped.
    """
    values: list[float] = []
    for token in _SEPARATOR_RE.split(text.strip()):
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            value = math.nan
        if not math.isfinite(value):
            logger.warning("Skipping non-numeric coordinate %r", token)
            continue
        values.append(value)

    if len(values) % 2:
        values.pop()
    if not values:
        return np.empty((0, 2))
    return np.array(values, dtype=np.float64).reshape(-1, 2)


def polygon_from_path(d: str) -> NDArray[np.float64]:
    """Vertices of a straight-segment SVG path; empty if it contains curves."""
    try:
        path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path: %s", e)
        return np.empty((0, 2))

    if len(path) == 0:
        return np.empty((0, 2))
    if not all(isinstance(seg, Line) for seg in path):
        logger.warning("Path contains curved segments; only polygons can be traced")
        return np.empty((0, 2))

    vertices = [path[0].start] + [seg.end for seg in path]
    return np.array([[v.real, v.imag] for v in vertices], dtype=np.float64)


def polygon_from_svg(svg_text: str) -> NDArray[np.float64]:
    """Vertices of the first ``<polygon>``, else the first ``<path>``, in ``svg_text``."""
    match = _POLYGON_POINTS_RE.search(svg_text)
    if match:
        return parse_points(match.group(1))

    match = _PATH_D_RE.search(svg_text)
    if match:
        return polygon_from_path(match.group(1))

    logger.warning("No <polygon> or <path> element found")
    return np.empty((0, 2))


def load_shape(shape) -> NDArray[np.float64]:
    """Open vertex list from any supported shape input."""
    if isinstance(shape, str):
        if _MARKUP_RE.search(shape):
            vertices = polygon_from_svg(shape)
        else:
            vertices = parse_points(shape)
    else:
        vertices = as_vertex_array(shape)

    logger.debug("Loaded shape with %d vertices", len(vertices))
    return vertices
