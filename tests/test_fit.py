import numpy as np
import pandas as pd
import pytest

from mandelbrot_boundary.fit import (
    InsufficientSamplesError,
    PolynomialFit,
    evaluate_fit,
    fit_boundary,
    select_fit_samples,
)
from mandelbrot_boundary.validation import generate_polynomial_samples


@pytest.fixture
def parabola_samples():
    return generate_polynomial_samples([1.0, 0.0, 0.0], np.linspace(-1.0, 1.0, 21))


def test_recovers_parabola(parabola_samples):
    fit = fit_boundary(parabola_samples, domain=(-1.0, 1.0), degree=2)
    np.testing.assert_allclose(fit.coefficients, [1.0, 0.0, 0.0], atol=1e-10)
    np.testing.assert_allclose(fit.residuals, 0.0, atol=1e-10)
    assert fit.r2 == pytest.approx(1.0)


def test_higher_degree_recovers_parabola(parabola_samples):
    fit = fit_boundary(parabola_samples, domain=(-1.0, 1.0), degree=4)
    np.testing.assert_allclose(fit.coefficients, [0.0, 0.0, 1.0, 0.0, 0.0], atol=1e-8)


def test_coefficient_count_is_fixed_by_degree():
    samples = generate_polynomial_samples([2.0, -1.0], np.linspace(-2.0, 0.25, 80))
    fit = fit_boundary(samples, degree=15)
    assert fit.coefficients.shape == (16,)
    assert fit.degree == 15
    assert fit.n_samples == 80


def test_invalid_and_out_of_domain_samples_are_dropped():
    samples = pd.DataFrame(
        {
            "probe": [-2.0, -1.0, 0.0, 0.25, 0.5, 1.0],
            "boundary": [0.0, np.nan, 0.5, 0.6, 0.7, np.nan],
        }
    )
    selected = select_fit_samples(samples, (-2.0, 0.25))
    assert selected["probe"].tolist() == [-2.0, 0.0, 0.25]

    fit = fit_boundary(samples, domain=(-2.0, 0.25), degree=1)
    assert fit.n_samples == 3
    assert fit.domain == (-2.0, 0.25)


def test_insufficient_samples_raise():
    samples = generate_polynomial_samples([1.0, 0.0], np.linspace(-1.0, 0.0, 10))
    with pytest.raises(InsufficientSamplesError):
        fit_boundary(samples, domain=(-1.0, 0.0), degree=15)
    with pytest.raises(ValueError):
        fit_boundary(samples, domain=(-1.0, 0.0), degree=15)


def test_exactly_degree_plus_one_samples_fit():
    samples = generate_polynomial_samples([1.0, 0.0, 0.0], [-1.0, 0.0, 1.0])
    fit = fit_boundary(samples, domain=(-1.0, 1.0), degree=2)
    np.testing.assert_allclose(fit.coefficients, [1.0, 0.0, 0.0], atol=1e-12)


def test_reversed_domain_rejected(parabola_samples):
    with pytest.raises(ValueError):
        fit_boundary(parabola_samples, domain=(1.0, -1.0), degree=2)


def test_selection_does_not_touch_input(parabola_samples):
    before = parabola_samples.copy()
    select_fit_samples(parabola_samples, (0.0, 1.0))
    pd.testing.assert_frame_equal(parabola_samples, before)


def test_evaluate_fit_spans_domain(parabola_samples):
    fit = fit_boundary(parabola_samples, domain=(-0.5, 1.0), degree=2)
    xs, ys = evaluate_fit(fit)
    assert xs.size == 200
    assert xs[0] == fit.domain[0]
    assert xs[-1] == fit.domain[1]
    np.testing.assert_allclose(ys, xs**2, atol=1e-10)


def test_fit_is_callable():
    fit = PolynomialFit(
        coefficients=np.array([3.0, 1.0]),
        degree=1,
        domain=(0.0, 1.0),
        n_samples=2,
        residuals=np.zeros(2),
        r2=1.0,
    )
    assert fit(2.0) == 7.0


def test_fits_compare_by_identity(parabola_samples):
    first = fit_boundary(parabola_samples, domain=(-1.0, 1.0), degree=2)
    second = fit_boundary(parabola_samples, domain=(-1.0, 1.0), degree=2)
    assert first == first
    assert first != second
    assert len({first, second}) == 2
