"""Engine value types — points, sampled paths, coefficients and per-step results.

Sample sequences and coefficient sets are stored column-wise in numpy arrays;
indexing them yields the per-item records below.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class SampledPoint:
    x: float
    y: float
    # Fractional position along the closed path, in [0, 1)
    normalized_time: float


@dataclass(frozen=True)
class SampledPath:
    """Dense samples of a closed polygon: Nx2 points plus N normalized times."""

    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    times: NDArray[np.float64] = field(default_factory=lambda: np.empty(0))

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> SampledPoint:
        x, y = self.points[index]
        return SampledPoint(float(x), float(y), float(self.times[index]))

    def __iter__(self) -> Iterator[SampledPoint]:
        for i in range(len(self)):
            yield self[i]

    @property
    def is_shape(self) -> bool:
        """Fewer than two samples means there is nothing to trace."""
        return len(self) >= 2

    def as_complex(self) -> NDArray[np.complex128]:
        return self.points[:, 0] + 1j * self.points[:, 1]


@dataclass(frozen=True)
class FourierCoefficient:
    real: float
    imag: float
    frequency: int
    amplitude: float
    phase: float


@dataclass(frozen=True)
class CoefficientSet:
    """Frequency components ordered by descending amplitude."""

    frequencies: NDArray[np.int64] = field(default_factory=lambda: np.empty(0, dtype=np.int64))
    real: NDArray[np.float64] = field(default_factory=lambda: np.empty(0))
    imag: NDArray[np.float64] = field(default_factory=lambda: np.empty(0))

    def __len__(self) -> int:
        return len(self.frequencies)

    def __getitem__(self, index: int) -> FourierCoefficient:
        return FourierCoefficient(
            real=float(self.real[index]),
            imag=float(self.imag[index]),
            frequency=int(self.frequencies[index]),
            amplitude=float(self.amplitudes[index]),
            phase=float(self.phases[index]),
        )

    def __iter__(self) -> Iterator[FourierCoefficient]:
        for i in range(len(self)):
            yield self[i]

    @property
    def amplitudes(self) -> NDArray[np.float64]:
        return np.sqrt(self.real**2 + self.imag**2)

    @property
    def phases(self) -> NDArray[np.float64]:
        return np.arctan2(self.imag, self.real)


@dataclass(frozen=True)
class PivotInfo:
    """Base of one rotating vector: where its circle is drawn from."""

    x: float
    y: float
    radius: float
    angle: float

    @property
    def end(self) -> Point:
        return Point(
            self.x + self.radius * float(np.cos(self.angle)),
            self.y + self.radius * float(np.sin(self.angle)),
        )


@dataclass(frozen=True)
class StepResult:
    tip: Point
    pivots: list[PivotInfo] = field(default_factory=list)


@dataclass(frozen=True)
class TrailPoint:
    x: float
    y: float


@dataclass(frozen=True)
class LockSnapshot:
    """Parameters frozen at the moment of locking."""

    frequency: float
    vector_count: int
