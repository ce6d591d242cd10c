import math

import pytest

from mandelbrot_boundary.bisection import bisect


def test_finds_root_of_continuous_function():
    root = bisect(lambda x: x * x - 2.0, 0.0, 2.0, tol=1e-10)
    assert root == pytest.approx(math.sqrt(2.0), abs=1e-9)


def test_decreasing_function():
    root = bisect(lambda x: 1.0 - x, 0.0, 3.0, tol=1e-8)
    assert root == pytest.approx(1.0, abs=1e-7)


def test_no_sign_change_returns_none():
    assert bisect(lambda x: x * x + 1.0, -1.0, 1.0) is None


def test_root_at_endpoint_returns_none():
    assert bisect(lambda x: x, 0.0, 1.0) is None


def test_nan_endpoint_returns_none():
    assert bisect(lambda x: math.nan if x > 0.5 else -1.0, 0.0, 1.0) is None


def test_value_tolerance_stops_early():
    calls = []

    def linear(x):
        calls.append(x)
        return x - 0.5

    # first midpoint is the exact root
    assert bisect(linear, 0.0, 1.0) == 0.5
    assert len(calls) == 3


def test_step_function_runs_to_width_tolerance():
    step = lambda x: 1.0 if x > 0.3 else -1.0
    root = bisect(step, 0.0, 1.0, tol=1e-6)
    assert abs(root - 0.3) < 1e-6


def test_iteration_cap_bounds_the_work():
    calls = []

    def step(x):
        calls.append(x)
        return 1.0 if x > 0.3 else -1.0

    bisect(step, 0.0, 1.0, tol=1e-15, max_iter=5)
    assert len(calls) == 2 + 5


def test_reversed_interval_rejected():
    with pytest.raises(ValueError):
        bisect(lambda x: x - 0.1, 1.0, 0.0)
