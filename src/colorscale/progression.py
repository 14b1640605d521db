from __future__ import annotations

"""Endpoint transposition of numeric progressions.

A progression (for instance the 12 lightness values of a scale) is re-anchored
so that one endpoint lands exactly on a new value. The displacement of that
endpoint is spread over the other steps through an easing curve, which decides
how fast the perturbation decays towards the opposite end.
"""

from typing import List, Sequence

import numpy as np

from .easing import CurveLike, CurveSpec


Progression = List[float]


def transpose_progression_start(
    to: float, progression: Sequence[float], curve: CurveLike
) -> Progression:
    """Move the first element of ``progression`` to ``to``.

    Element ``i`` becomes ``p[i] - (p[0] - to) * curve(1 - i / last)``.

    Parameters
    ----------
    to:
        New value of the first element.
    progression:
        At least two numbers.
    curve:
        CurveSpec or (x1, y1, x2, y2) easing parameters.

    Returns
    -------
    list of float
        A progression of the same length whose first element is ``to`` and
        whose last element is unchanged. A monotonic input gives a monotonic
        output running from ``to`` towards that last element.
    """
    arr = _as_array(progression)
    ease = CurveSpec.coerce(curve)
    last = len(arr) - 1
    positions = 1.0 - np.arange(len(arr)) / last
    out = arr - (arr[0] - to) * ease(positions)
    out[0] = to
    return _keep_direction(arr, out, anchor="start").tolist()


def transpose_progression_end(
    to: float, progression: Sequence[float], curve: CurveLike
) -> Progression:
    """Move the last element of ``progression`` to ``to``.

    Element ``i`` becomes ``p[i] - (p[last] - to) * curve(i / last)``.
    """
    arr = _as_array(progression)
    ease = CurveSpec.coerce(curve)
    last = len(arr) - 1
    positions = np.arange(len(arr)) / last
    out = arr - (arr[last] - to) * ease(positions)
    out[last] = to
    return _keep_direction(arr, out, anchor="end").tolist()


def _as_array(progression: Sequence[float]) -> np.ndarray:
    arr = np.asarray(progression, dtype=float)
    if arr.ndim != 1 or arr.size < 2:
        raise ValueError("A progression needs at least two values.")
    return arr


def _keep_direction(src: np.ndarray, out: np.ndarray, anchor: str) -> np.ndarray:
    diffs = np.diff(src)
    if not (np.all(diffs >= 0) or np.all(diffs <= 0)):
        return out
    # Sweep from the anchored end towards the untouched far end. Clipping to
    # the span between them keeps both endpoints where they are.
    swept = out if anchor == "start" else out[::-1]
    to, far = swept[0], swept[-1]
    swept = np.clip(swept, min(to, far), max(to, far))
    accumulate = np.maximum if far >= to else np.minimum
    swept = accumulate.accumulate(swept)
    return swept if anchor == "start" else swept[::-1].copy()


__all__ = ["Progression", "transpose_progression_start", "transpose_progression_end"]
