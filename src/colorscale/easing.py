from __future__ import annotations

"""Cubic bezier easing curves.

A :class:`CurveSpec` is the CSS ``cubic-bezier(x1, y1, x2, y2)`` timing
function: a curve through (0, 0) and (1, 1) whose two inner control points
shape how quickly it moves between them. ``y`` values may leave [0, 1]
(overshoot); ``x`` values may not, so the curve stays a function of ``x``.
"""

from dataclasses import dataclass
from typing import Sequence, Union, overload

import numpy as np


@dataclass(frozen=True)
class CurveSpec:
    """Control points of a cubic bezier easing function."""

    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise ValueError("Bezier x values must be in [0, 1].")

    @classmethod
    def coerce(cls, curve: "CurveLike") -> "CurveSpec":
        """Accept a CurveSpec or a 4-sequence (x1, y1, x2, y2)."""
        if isinstance(curve, CurveSpec):
            return curve
        values = tuple(float(v) for v in curve)
        if len(values) != 4:
            raise ValueError("A curve needs exactly four control parameters.")
        return cls(*values)

    @property
    def is_linear(self) -> bool:
        return self.x1 == self.y1 and self.x2 == self.y2

    @overload
    def __call__(self, x: float) -> float: ...

    @overload
    def __call__(self, x: np.ndarray) -> np.ndarray: ...

    def __call__(self, x):
        arr = np.clip(np.asarray(x, dtype=float), 0.0, 1.0)
        if self.is_linear:
            y = np.array(arr, dtype=float)
        else:
            t = self._solve_t(arr)
            y = _bezier(t, self.y1, self.y2)
            # Exact endpoints.
            y = np.where(arr <= 0.0, 0.0, np.where(arr >= 1.0, 1.0, y))
        if np.ndim(x) == 0:
            return float(y)
        return y

    def _solve_t(self, x: np.ndarray, iterations: int = 48) -> np.ndarray:
        # x(t) is monotonic on [0, 1] because x1, x2 are in [0, 1].
        lo = np.zeros_like(x)
        hi = np.ones_like(x)
        for _ in range(iterations):
            mid = (lo + hi) / 2.0
            below = _bezier(mid, self.x1, self.x2) < x
            lo = np.where(below, mid, lo)
            hi = np.where(below, hi, mid)
        return (lo + hi) / 2.0


def _bezier(t: np.ndarray, p1: float, p2: float) -> np.ndarray:
    u = 1.0 - t
    return 3.0 * u * u * t * p1 + 3.0 * u * t * t * p2 + t * t * t


CurveLike = Union[CurveSpec, Sequence[float]]

LIGHT_MODE_EASING = CurveSpec(0.0, 2.0, 0.0, 2.0)
DARK_MODE_EASING = CurveSpec(1.0, 0.0, 1.0, 0.0)


__all__ = ["CurveSpec", "CurveLike", "LIGHT_MODE_EASING", "DARK_MODE_EASING"]
