import numpy as np
import pytest

from mandelbrot_boundary.locate import (
    boundary_series,
    locate_boundary,
    membership_indicator,
    probe_positions,
)


def test_indicator_signs():
    indicator = membership_indicator(-1.0)
    assert indicator(0.0) == -1.0
    assert indicator(1.5) == 1.0


def test_probe_outside_set_is_undefined():
    assert locate_boundary(1.0, 0.0, 1.5) is None


def test_probe_crossing_boundary_is_found():
    y = locate_boundary(-1.0, 0.0, 1.5)
    assert y is not None
    assert np.isfinite(y)
    assert 0.0 <= y <= 1.5


def test_tighter_tolerance_converges():
    loose = locate_boundary(-1.0, 0.0, 1.5, tol=1e-4)
    tight = locate_boundary(-1.0, 0.0, 1.5, tol=1e-8)
    assert abs(tight - loose) <= 1e-4


def test_probe_positions():
    probes = probe_positions(-2.0, 1.0, 103)
    assert probes.size == 103
    assert probes[0] == -2.0
    assert probes[-1] == 1.0
    np.testing.assert_allclose(np.diff(probes), 3.0 / 102)


def test_probe_positions_rejects_bad_input():
    with pytest.raises(ValueError):
        probe_positions(1.0, -2.0, 10)
    with pytest.raises(ValueError):
        probe_positions(-2.0, 1.0, 1)


def test_series_matches_single_calls_in_order():
    probes = [0.9, -1.0, -0.5, 1.0, -1.8]
    df = boundary_series(probes, search=(0.0, 1.5))
    assert list(df.columns) == ["probe", "boundary", "valid"]
    assert df["probe"].tolist() == probes
    for probe, boundary, valid in df.itertuples(index=False):
        expected = locate_boundary(probe, 0.0, 1.5)
        if expected is None:
            assert np.isnan(boundary)
            assert not valid
        else:
            assert boundary == expected
            assert valid


def test_series_outside_probes_are_invalid():
    df = boundary_series([0.6, 0.8, 1.0])
    assert not df["valid"].any()


def test_parallel_series_matches_serial():
    probes = probe_positions(-2.0, 1.0, 12)
    serial = boundary_series(probes)
    parallel = boundary_series(probes, workers=2)
    np.testing.assert_array_equal(serial["probe"], parallel["probe"])
    np.testing.assert_array_equal(serial["boundary"], parallel["boundary"])


def test_series_rejects_reversed_search():
    with pytest.raises(ValueError):
        boundary_series([-1.0], search=(1.5, 0.0))


def test_reversed_search_interval_rejected():
    with pytest.raises(ValueError):
        locate_boundary(-1.0, 1.5, 0.0)
