"""PathSampler — closed polygon → evenly-counted-per-edge samples.

Every edge gets the same number of samples regardless of its length. This is
not arc-length resampling and must stay that way: the coefficient set, and so
the timing character of the traced animation, depends on it.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.context import SampledPath
from epicycles.utils.geometry import as_vertex_array, centroid


def close_polygon(vertices) -> NDArray[np.float64]:
    """Append the first vertex so the last edge returns to the start.

    The first vertex is appended even when the list already ends on it, which
    adds a zero-length edge. Fewer than two vertices are returned unchanged.
    """
    pts = as_vertex_array(vertices)
    if len(pts) < 2:
        return pts
    return np.vstack([pts, pts[:1]])


def sample_polygon(vertices, num_samples: int = 1000) -> SampledPath:
    """Linearly interpolate ``num_samples // num_edges`` points along each edge.

    ``vertices`` is the closed vertex list (see :func:`close_polygon`). The
    remainder of the division is dropped, so the result may be shorter than
    ``num_samples``. A single vertex yields a single-point path and no
    vertices an empty one; callers treat both as "no shape".
    """
    pts = as_vertex_array(vertices)
    n_edges = len(pts) - 1
    if n_edges < 1:
        return SampledPath(points=pts.copy(), times=np.zeros(len(pts)))

    per_edge = num_samples // n_edges
    if per_edge == 0:
        return SampledPath()

    t = np.arange(per_edge) / per_edge
    starts = pts[:-1]
    deltas = pts[1:] - starts
    # (edges, per_edge, 2)
    samples = starts[:, None, :] + deltas[:, None, :] * t[None, :, None]
    points = samples.reshape(-1, 2)
    times = np.arange(len(points)) / num_samples
    return SampledPath(points=points, times=times)


def center_and_scale(path: SampledPath, scale: float = 1.0) -> SampledPath:
    """Move the sample centroid to the origin, then scale about it."""
    if len(path) == 0:
        return path
    cx, cy = centroid(path.points)
    points = (path.points - np.array([cx, cy])) * scale
    return SampledPath(points=points, times=path.times.copy())
