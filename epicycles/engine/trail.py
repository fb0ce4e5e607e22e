"""TrailBuffer — bounded newest-first history of tip positions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from epicycles.engine.context import Point, TrailPoint


class TrailBuffer:
    """Newest point first; the tail fades out over ``fade_count`` points."""

    def __init__(self, fade_count: int = 100, warmup: float = 0.05) -> None:
        self.fade_count = fade_count
        self.warmup = warmup
        self._points: deque[TrailPoint] = deque()

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> TrailPoint:
        return self._points[index]

    def __iter__(self) -> Iterator[TrailPoint]:
        return iter(self._points)

    @property
    def points(self) -> list[TrailPoint]:
        return list(self._points)

    def record(self, tip: Point, elapsed: float) -> bool:
        """Prepend ``tip`` once ``elapsed`` has passed the warm-up.

        Before the warm-up the tip still sits on its unset starting position,
        which would draw a straight line into the outline.
        """
        if elapsed <= self.warmup:
            return False
        self._points.appendleft(TrailPoint(tip.x, tip.y))
        return True

    def trim(self, solid_count: int) -> None:
        """Drop the oldest points beyond ``solid_count + fade_count``."""
        limit = solid_count + self.fade_count
        while len(self._points) > limit:
            self._points.pop()

    def opacity(self, index: int, solid_count: int, fade_alpha: float = 1.0) -> float:
        if index < solid_count:
            value = 1.0
        else:
            value = max(0.0, 1.0 - (index - solid_count) / self.fade_count)
        return value * fade_alpha

    def opacities(self, solid_count: int, fade_alpha: float = 1.0) -> list[float]:
        return [self.opacity(i, solid_count, fade_alpha) for i in range(len(self._points))]
