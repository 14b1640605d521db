from __future__ import annotations

"""イージング曲線と進行列の端点移動（transpose）のテスト。"""

import numpy as np
import pytest

from colorscale import CurveSpec, transpose_progression_end, transpose_progression_start
from colorscale.easing import DARK_MODE_EASING, LIGHT_MODE_EASING
from colorscale.reference import neutral_reference


LIGHT_L = [c.oklch[0] for c in neutral_reference("light")]
DARK_L = [c.oklch[0] for c in neutral_reference("dark")]


def _is_monotonic(values) -> bool:
    d = np.diff(values)
    return bool(np.all(d >= 0) or np.all(d <= 0))


@pytest.mark.parametrize("curve", [LIGHT_MODE_EASING, DARK_MODE_EASING, CurveSpec(0.25, 0.1, 0.25, 1.0)])
def test_curve_endpoints_are_exact(curve: CurveSpec) -> None:
    assert curve(0.0) == 0.0
    assert curve(1.0) == 1.0


def test_css_ease_midpoint() -> None:
    ease = CurveSpec(0.25, 0.1, 0.25, 1.0)
    assert ease(0.5) == pytest.approx(0.8024, abs=1e-3)


def test_linear_curve_is_identity() -> None:
    linear = CurveSpec(0.3, 0.3, 0.6, 0.6)
    xs = np.linspace(0.0, 1.0, 7)
    np.testing.assert_allclose(linear(xs), xs)


def test_curve_validation() -> None:
    with pytest.raises(ValueError):
        CurveSpec(1.5, 0.0, 0.5, 1.0)
    with pytest.raises(ValueError):
        CurveSpec.coerce([0.0, 1.0, 1.0])


def test_reference_progressions_are_monotonic() -> None:
    assert len(LIGHT_L) == 12 and len(DARK_L) == 12
    assert all(a > b for a, b in zip(LIGHT_L, LIGHT_L[1:]))
    assert all(a < b for a, b in zip(DARK_L, DARK_L[1:]))


def test_transpose_start_anchors_first_value() -> None:
    out = transpose_progression_start(0.15, DARK_L, DARK_MODE_EASING)
    assert len(out) == 12
    assert out[0] == pytest.approx(0.15, abs=1e-6)
    assert _is_monotonic(out)
    # The dark easing barely touches the far end.
    assert out[-1] == pytest.approx(DARK_L[-1], abs=1e-3)


def test_transpose_end_anchors_last_value() -> None:
    out = transpose_progression_end(0.3, LIGHT_L, [0.0, 2.0, 0.0, 2.0])
    assert len(out) == 12
    assert out[11] == pytest.approx(0.3, abs=1e-6)
    assert _is_monotonic(out)
    assert out[0] == LIGHT_L[0]


def test_transpose_start_with_zero_delta_is_identity() -> None:
    out = transpose_progression_start(LIGHT_L[0], LIGHT_L, LIGHT_MODE_EASING)
    np.testing.assert_allclose(out, LIGHT_L)


def test_transpose_keeps_direction_on_overshooting_curve() -> None:
    # (0, 2, 0, 2) overshoots 1 and would fold the start over its neighbours.
    prog = [1.0 - i * 0.05 for i in range(12)]
    out = transpose_progression_start(0.7, prog, LIGHT_MODE_EASING)
    assert out[0] == 0.7
    assert out[-1] == prog[-1]
    assert all(a >= b for a, b in zip(out, out[1:]))


def test_transpose_rejects_short_progressions() -> None:
    with pytest.raises(ValueError):
        transpose_progression_start(0.5, [0.1], LIGHT_MODE_EASING)
    with pytest.raises(ValueError):
        transpose_progression_end(0.5, [], LIGHT_MODE_EASING)


def test_transpose_does_not_mutate_input() -> None:
    prog = list(DARK_L)
    transpose_progression_end(0.99, prog, DARK_MODE_EASING)
    assert prog == DARK_L


def test_overshoot_stays_between_the_two_endpoints() -> None:
    # Easing past 1 would otherwise push the far end above its original value.
    out = transpose_progression_end(0.3, LIGHT_L, LIGHT_MODE_EASING)
    assert out[0] == LIGHT_L[0]
    assert all(0.3 <= v <= LIGHT_L[0] for v in out)


def test_anchor_past_far_end_reverses_direction() -> None:
    prog = [0.1, 0.2, 0.3, 0.4]
    out = transpose_progression_start(0.9, prog, LIGHT_MODE_EASING)
    assert out[0] == 0.9
    assert out[-1] == 0.4
    assert all(a >= b for a, b in zip(out, out[1:]))
