"""Interpolation helpers shared by the fitter and the resampler."""

from __future__ import annotations

from typing import Sequence

import numpy as np


class FirstOrderHold:
    """Piecewise-linear trajectory through ``samples`` at ``breaks``.

    Parameters
    ----------
    breaks:
        Strictly increasing sample times, at least two of them.
    samples:
        One vector per break, all of the same length.

    Queries outside ``[start_time(), end_time()]`` are clamped to the nearest
    end. Derivatives are constant per segment; at an interior break the
    segment that starts there is used, and at ``end_time()`` the last one.
    """

    def __init__(self, breaks: Sequence[float], samples: Sequence[Sequence[float]]):
        b = np.asarray(breaks, dtype=float)
        s = np.asarray(samples, dtype=float)
        if b.ndim != 1 or b.shape[0] < 2:
            raise ValueError(f"At least two breaks are required. Got {b.shape[0] if b.ndim == 1 else b.shape}")
        if not np.all(np.isfinite(b)):
            raise ValueError("breaks must be finite")
        if np.any(np.diff(b) <= 0.0):
            raise ValueError(f"breaks must be strictly increasing. Got {b.tolist()}")
        if s.ndim != 2 or s.shape[0] != b.shape[0]:
            raise ValueError(
                f"samples must have shape ({b.shape[0]}, n). Got {s.shape}"
            )

        self._breaks = b
        self._samples = s
        self._slopes = np.diff(s, axis=0) / np.diff(b)[:, None]

    @property
    def breaks(self) -> np.ndarray:
        return self._breaks.copy()

    def rows(self) -> int:
        return int(self._samples.shape[1])

    def start_time(self) -> float:
        return float(self._breaks[0])

    def end_time(self) -> float:
        return float(self._breaks[-1])

    def segment_index(self, t: float) -> int:
        i = int(np.searchsorted(self._breaks, t, side="right")) - 1
        return int(np.clip(i, 0, len(self._breaks) - 2))

    def value(self, t: float) -> np.ndarray:
        t = float(np.clip(t, self._breaks[0], self._breaks[-1]))
        i = self.segment_index(t)
        t0, t1 = self._breaks[i], self._breaks[i + 1]
        s0, s1 = self._samples[i], self._samples[i + 1]
        return s0 + (t - t0) / (t1 - t0) * (s1 - s0)

    def derivative(self, t: float, order: int = 1) -> np.ndarray:
        if order < 0:
            raise ValueError(f"derivative order must be non-negative. Got {order}")
        if order == 0:
            return self.value(t)
        if order > 1:
            return np.zeros(self.rows(), dtype=float)
        t = float(np.clip(t, self._breaks[0], self._breaks[-1]))
        return self._slopes[self.segment_index(t)].copy()
