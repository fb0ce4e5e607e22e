"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def as_vertex_array(vertices) -> NDArray[np.float64]:
    """Coerce a vertex list (pairs, Points or an array) to an Nx2 float array.

    A 1-D array is read as flat ``x1, y1, x2, y2, ...`` values and loses an
    unpaired trailing value. Extra columns of a 2-D array are ignored.
    """
    if isinstance(vertices, np.ndarray):
        arr = vertices.astype(np.float64)
        if arr.ndim == 1:
            if len(arr) % 2:
                arr = arr[:-1]
            return arr.reshape(-1, 2)
        if arr.ndim != 2 or arr.shape[1] < 2:
            logger.warning("Cannot read vertices from array of shape %s", vertices.shape)
            return np.empty((0, 2))
        return arr[:, :2]
    rows = [(v.x, v.y) if hasattr(v, "x") else tuple(v) for v in vertices]
    if not rows:
        return np.empty((0, 2))
    return np.array(rows, dtype=np.float64).reshape(-1, 2)


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))

