import numpy as np
import pandas as pd
import pytest

from mandelbrot_boundary.fit import fit_boundary
from mandelbrot_boundary.io import load_results, load_samples, save_results, save_samples
from mandelbrot_boundary.validation import generate_polynomial_samples


def test_results_round_trip(tmp_path):
    coefficients = np.array([1.0 / 3.0, -2.5e-7, np.pi, 0.0, 1e12])
    path = save_results(tmp_path / "results.mat", coefficients, 2.718281828459045)
    loaded, length = load_results(path)
    np.testing.assert_array_equal(loaded, coefficients)
    assert length == 2.718281828459045


def test_results_accept_polynomial_fit(tmp_path):
    samples = generate_polynomial_samples([1.0, 0.0, 0.0], np.linspace(-1.0, 1.0, 9))
    fit = fit_boundary(samples, domain=(-1.0, 1.0), degree=2)
    loaded, _ = load_results(save_results(tmp_path / "out" / "fit.mat", fit, 1.0))
    np.testing.assert_array_equal(loaded, fit.coefficients)


def test_load_results_requires_variables(tmp_path):
    from scipy import io as sio

    path = tmp_path / "other.mat"
    sio.savemat(str(path), {"x": np.ones(3)})
    with pytest.raises(ValueError):
        load_results(path)


def test_samples_round_trip(tmp_path):
    samples = pd.DataFrame(
        {
            "probe": [-2.0, -1.0, 0.1 + 0.2, 0.9],
            "boundary": [0.1234567890123456789, 1.0 / 3.0, 0.7071067811865476, np.nan],
        }
    )
    loaded = load_samples(save_samples(samples, tmp_path / "samples.csv"))
    np.testing.assert_array_equal(loaded["probe"], samples["probe"])
    np.testing.assert_array_equal(loaded["boundary"], samples["boundary"])
    assert loaded["valid"].tolist() == [True, True, True, False]
