from __future__ import annotations

import numpy as np

from shadow_weave.util.misc import clamp, smoothstep


def test_clamp_scalar() -> None:
    assert clamp(-0.5) == 0.0
    assert clamp(1.5) == 1.0
    assert clamp(0.25) == 0.25
    assert clamp(5, 0, 3) == 3


def test_clamp_array() -> None:
    values = clamp(np.array([-1.0, 0.5, 2.0]))
    np.testing.assert_array_equal(values, [0.0, 0.5, 1.0])


def test_smoothstep_endpoints_and_midpoint() -> None:
    assert smoothstep(0.2, 0.8, 0.1) == 0.0
    assert smoothstep(0.2, 0.8, 0.9) == 1.0
    assert abs(smoothstep(0.0, 1.0, 0.5) - 0.5) < 1e-9


def test_smoothstep_is_monotonic_on_arrays() -> None:
    xs = np.linspace(-0.5, 1.5, 50)
    ys = smoothstep(0.15, 0.85, xs)
    assert np.all(np.diff(ys) >= 0.0)
    assert ys.min() >= 0.0
    assert ys.max() <= 1.0


def test_smoothstep_zero_width_is_a_step() -> None:
    """A degenerate range never divides by zero."""
    assert smoothstep(0.5, 0.5, 0.4) == 0.0
    assert smoothstep(0.5, 0.5, 0.5) == 1.0
    steps = smoothstep(0.5, 0.5, np.array([0.1, 0.5, 0.9]))
    np.testing.assert_array_equal(steps, [0.0, 1.0, 1.0])
