"""Matplotlib preview of a sketch run, shown live or saved as a GIF.

Usage:
  epicycles-preview                          # default shape, shown in a window
  epicycles-preview shape.svg --save out.gif # polygon from an SVG file
  epicycles-preview points.txt --vectors 15 --frequency 0.5 --frames 600
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import animation
from matplotlib.collections import LineCollection
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon

from epicycles.config import settings
from epicycles.engine.lifecycle import SimulationState
from epicycles.engine.sketch import FourierSketch
from epicycles.main import create_sketch
from epicycles.models.frame import FrameOutput

logger = logging.getLogger(__name__)

# Points per drawn circle outline
_RING_RESOLUTION = 48
_RING = np.exp(2j * np.pi * np.arange(_RING_RESOLUTION + 1) / _RING_RESOLUTION)


def _circle_paths(frame: FrameOutput) -> tuple[np.ndarray, np.ndarray]:
    """All circles and radius lines as one NaN-separated polyline."""
    xs: list[np.ndarray] = []
    ys: list[np.ndarray] = []
    gap = np.array([np.nan])
    for p in frame.pivots:
        ring = complex(p.x, p.y) + p.radius * _RING
        end = complex(p.x, p.y) + p.radius * np.exp(1j * p.angle)
        xs.extend([ring.real, gap, np.array([p.x, end.real]), gap])
        ys.extend([ring.imag, gap, np.array([p.y, end.imag]), gap])
    if not xs:
        return np.empty(0), np.empty(0)
    return np.concatenate(xs), np.concatenate(ys)


def _trail_segments(frame: FrameOutput) -> tuple[np.ndarray, np.ndarray]:
    pts = np.array([(p.x, p.y) for p in frame.trail]).reshape(-1, 2)
    if len(pts) < 2:
        return np.empty((0, 2, 2)), np.empty((0, 4))
    segments = np.stack([pts[:-1], pts[1:]], axis=1)
    colors = np.ones((len(segments), 4))
    colors[:, 3] = [p.opacity for p in frame.trail[:-1]]
    return segments, colors


def build_animation(sketch: FourierSketch, max_frames: int, interval: int = 16):
    """FuncAnimation stepping ``sketch`` once per animation frame."""
    fig = plt.figure(figsize=(settings.canvas_width / 160, settings.canvas_height / 160))
    fig.patch.set_facecolor("black")
    ax = plt.axes([0, 0, 1, 1])
    ax.set_facecolor("black")
    ax.set_xlim(0, settings.canvas_width)
    ax.set_ylim(settings.canvas_height, 0)
    ax.set_aspect("equal")
    ax.set_axis_off()

    circles = Line2D([], [], color="white", alpha=0.3, lw=1)
    ax.add_line(circles)
    trail = LineCollection([], linewidths=2)
    ax.add_collection(trail)
    fill = Polygon(np.zeros((3, 2)), closed=True, facecolor="white", edgecolor="none", alpha=0.0)
    ax.add_patch(fill)
    tip = Line2D([], [], marker="o", color="#ff0000", markersize=4, linestyle="none")
    ax.add_line(tip)

    def frames():
        count = 0
        while count < max_frames and sketch.state != SimulationState.COMPLETE:
            yield sketch.step()
            count += 1

    def animate(frame: FrameOutput):
        if frame.show_circles:
            circles.set_data(*_circle_paths(frame))
        else:
            circles.set_data([], [])

        segments, colors = _trail_segments(frame)
        trail.set_segments(segments)
        trail.set_color(colors)

        if frame.fill is not None and len(frame.fill.points) >= 3:
            fill.set_xy(np.array(frame.fill.points))
            fill.set_alpha(frame.fill.alpha)
        else:
            fill.set_alpha(0.0)

        if frame.show_tip:
            tip.set_data([frame.tip[0]], [frame.tip[1]])
        else:
            tip.set_data([], [])
        return circles, trail, fill, tip

    anim = animation.FuncAnimation(
        fig,
        animate,
        frames=frames,
        interval=interval,
        blit=False,
        repeat=False,
        cache_frame_data=False,
        save_count=max_frames,
    )
    return fig, anim


def _read_shape(path: str | None) -> str | None:
    if path is None:
        return None
    if not os.path.exists(path):
        print(f"File not found: {path}")
        sys.exit(1)
    with open(path, encoding="utf-8") as f:
        return f.read()


def main() -> None:
    parser = argparse.ArgumentParser(description="Fourier epicycle preview")
    parser.add_argument("shape", nargs="?", help="SVG file or text file of 'x1 y1 x2 y2 ...'")
    parser.add_argument("--vectors", type=int, default=100, help="Number of rotating vectors")
    parser.add_argument("--frequency", type=float, default=1.0, help="Frequency multiplier")
    parser.add_argument("--frames", type=int, default=2000, help="Frame limit")
    parser.add_argument("-o", "--save", help="Save to a GIF instead of showing a window")
    args = parser.parse_args()

    sketch = create_sketch(
        _read_shape(args.shape),
        vector_count=args.vectors,
        frequency=args.frequency,
        on_finish=lambda: logger.info("Sketch complete"),
    )
    fig, anim = build_animation(sketch, args.frames)

    if args.save:
        anim.save(args.save, writer=animation.PillowWriter(fps=60))
        print(f"Saved {sketch.frame} frames → {args.save}")
    else:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
