"""Render one FrameOutput as a standalone SVG document.

Mirrors what the canvas renderer draws: nested circles with radius lines,
the fading trail, the fill polygon and the red tip dot.
"""

from __future__ import annotations

import math

from epicycles.models.frame import FrameOutput

_CIRCLE_STROKE = "#ffffff"
_CIRCLE_OPACITY = 0.3
_TIP_COLOR = "#ff0000"
_TIP_RADIUS = 4


def _svg_wrap(content: str, cw: float, ch: float) -> str:
    """Wrap SVG content in a standalone SVG document."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {cw:.1f} {ch:.1f}"'
        f' width="{cw:.1f}" height="{ch:.1f}"'
        ' style="background:#000000">'
        f'\n{content}\n</svg>'
    )


def _render_chain(frame: FrameOutput) -> list[str]:
    parts: list[str] = []
    for p in frame.pivots:
        ex = p.x + p.radius * math.cos(p.angle)
        ey = p.y + p.radius * math.sin(p.angle)
        parts.append(
            f'<circle cx="{p.x:.2f}" cy="{p.y:.2f}" r="{p.radius:.2f}" fill="none" '
            f'stroke="{_CIRCLE_STROKE}" stroke-opacity="{_CIRCLE_OPACITY}" stroke-width="1"/>'
        )
        parts.append(
            f'<line x1="{p.x:.2f}" y1="{p.y:.2f}" x2="{ex:.2f}" y2="{ey:.2f}" '
            f'stroke="{_CIRCLE_STROKE}" stroke-opacity="{_CIRCLE_OPACITY}" stroke-width="1"/>'
        )
    return parts


def _render_trail(frame: FrameOutput) -> list[str]:
    parts: list[str] = []
    trail = frame.trail
    if len(trail) <= 2:
        return parts
    for point, nxt in zip(trail, trail[1:]):
        if point.opacity <= 0:
            continue
        parts.append(
            f'<line x1="{point.x:.2f}" y1="{point.y:.2f}" x2="{nxt.x:.2f}" y2="{nxt.y:.2f}" '
            f'stroke="#ffffff" stroke-opacity="{point.opacity:.3f}" stroke-width="2"/>'
        )
    return parts


def _render_fill(frame: FrameOutput) -> str:
    if frame.fill is None or len(frame.fill.points) < 3:
        return ""
    coords = frame.fill.points
    d = f"M {coords[0][0]:.1f},{coords[0][1]:.1f}"
    for x, y in coords[1:]:
        d += f" L {x:.1f},{y:.1f}"
    d += " Z"
    return f'<path d="{d}" fill="#ffffff" fill-opacity="{frame.fill.alpha:.3f}" stroke="none"/>'


def render_frame_svg(frame: FrameOutput, cw: float, ch: float) -> str:
    """One frame on a ``cw`` × ``ch`` canvas."""
    parts: list[str] = []
    if frame.show_circles:
        parts.extend(_render_chain(frame))
    parts.extend(_render_trail(frame))
    fill = _render_fill(frame)
    if fill:
        parts.append(fill)
    if frame.show_tip:
        tx, ty = frame.tip
        parts.append(f'<circle cx="{tx:.2f}" cy="{ty:.2f}" r="{_TIP_RADIUS}" fill="{_TIP_COLOR}"/>')
    return _svg_wrap("\n".join(parts), cw, ch)
