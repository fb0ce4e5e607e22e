"""FourierTransformer — DFT of a sampled closed path into rotating-vector coefficients."""

from __future__ import annotations

import logging
import time

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.context import CoefficientSet, SampledPath

logger = logging.getLogger(__name__)


def frequency_indices(count: int) -> NDArray[np.int64]:
    """First ``count`` entries of 0, 1, -1, 2, -2, ..."""
    if count < 1:
        return np.empty(0, dtype=np.int64)
    i = np.arange(count)
    magnitude = (i + 1) // 2
    sign = np.where(i % 2 == 1, 1, -1)
    return (magnitude * sign).astype(np.int64)


def transform(samples: SampledPath, vector_count: int) -> CoefficientSet:
    """Compute ``vector_count`` DFT coefficients of ``samples``.

    Each sample is taken as ``x + iy``; coefficient ``n`` is the mean of
    ``z_k * exp(-2πi·n·k/N)``. The result is ordered by amplitude, largest
    first; equal amplitudes keep the order the frequencies were generated in.
    """
    n_samples = len(samples)
    freqs = frequency_indices(vector_count)
    if n_samples == 0 or len(freqs) == 0:
        return CoefficientSet()

    z = samples.as_complex()
    k = np.arange(n_samples)
    phi = 2 * np.pi * np.outer(freqs, k) / n_samples
    coeffs = (np.exp(-1j * phi) @ z) / n_samples

    order = np.argsort(-np.abs(coeffs), kind="stable")
    coeffs = coeffs[order]
    return CoefficientSet(
        frequencies=freqs[order],
        real=coeffs.real.copy(),
        imag=coeffs.imag.copy(),
    )


class CoefficientCache:
    """Memoizes :func:`transform` per vector count for one sample path."""

    def __init__(self, samples: SampledPath | None = None) -> None:
        self._samples = samples if samples is not None else SampledPath()
        self._by_count: dict[int, CoefficientSet] = {}

    @property
    def samples(self) -> SampledPath:
        return self._samples

    def reset(self, samples: SampledPath) -> None:
        self._samples = samples
        self._by_count.clear()

    def get(self, vector_count: int) -> CoefficientSet:
        cached = self._by_count.get(vector_count)
        if cached is not None:
            return cached

        t0 = time.perf_counter()
        coeffs = transform(self._samples, vector_count)
        self._by_count[vector_count] = coeffs
        logger.debug(
            "DFT: %d coefficients from %d samples in %.1fms",
            len(coeffs),
            len(self._samples),
            (time.perf_counter() - t0) * 1000,
        )
        return coeffs

    def __len__(self) -> int:
        return len(self._by_count)
