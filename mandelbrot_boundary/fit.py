r"""Polynomial approximation of the located boundary.

The valid boundary samples inside a sub-domain of the probe range are fitted
with a least-squares polynomial \(y = \sum_k p_k x^{d-k}\) of fixed degree
\(d\). Coefficients are stored highest power first, the order used by
:func:`numpy.polyval`.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

from .logging import logger


__all__ = [
    "InsufficientSamplesError",
    "PolynomialFit",
    "select_fit_samples",
    "fit_boundary",
    "evaluate_fit",
]


class InsufficientSamplesError(ValueError):
    """Raised when too few valid samples remain for the requested degree."""


@dataclass(frozen=True, eq=False)
class PolynomialFit:
    r"""Least-squares polynomial model of the boundary.

    Attributes:
        coefficients: Polynomial coefficients, highest power first. Always
            ``degree + 1`` long.
        degree: Polynomial degree \(d\).
        domain: (min, max) probe position among the fitted samples.
        n_samples: Number of samples used in the fit.
        residuals: Residual vector \(r_i = y_i - p(x_i)\).
        r2: Coefficient of determination \(R^2\).
    """

    coefficients: np.ndarray
    degree: int
    domain: Tuple[float, float]
    n_samples: int
    residuals: np.ndarray
    r2: float

    def __call__(self, x):
        return np.polyval(self.coefficients, x)


def select_fit_samples(samples: pd.DataFrame, domain: Tuple[float, float]) -> pd.DataFrame:
    """Valid samples whose probe lies inside ``domain`` (bounds inclusive)."""

    low, high = domain
    mask = (
        samples["boundary"].notna()
        & (samples["probe"] >= low)
        & (samples["probe"] <= high)
    )
    return samples.loc[mask].copy()


def fit_boundary(
    samples: pd.DataFrame,
    domain: Tuple[float, float] = (-2.0, 0.25),
    degree: int = 15,
) -> PolynomialFit:
    """Fit a polynomial of fixed degree to the boundary samples.

    Args:
        samples: DataFrame with columns probe and boundary.
        domain: (low, high) sub-interval of the probe range to fit over.
        degree: Polynomial degree.

    Returns:
        PolynomialFit for the filtered samples.

    Raises:
        InsufficientSamplesError: If fewer than ``degree + 1`` samples remain.
        ValueError: If ``degree`` is negative or ``domain`` is not increasing.
    """

    if degree < 0:
        raise ValueError("Polynomial degree must be non-negative")
    if domain[0] > domain[1]:
        raise ValueError("Fit domain must be increasing")

    selected = select_fit_samples(samples, domain)
    n = len(selected)
    if n < degree + 1:
        raise InsufficientSamplesError(
            f"{n} valid samples in [{domain[0]}, {domain[1]}], "
            f"a degree {degree} fit needs at least {degree + 1}"
        )

    x = selected["probe"].to_numpy(dtype=float)
    y = selected["boundary"].to_numpy(dtype=float)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", np.exceptions.RankWarning)
        coefficients = np.polyfit(x, y, degree)
    for warning in caught:
        logger.warning(f"{warning.category.__name__} in polynomial fit: {warning.message}")

    residuals = y - np.polyval(coefficients, x)
    ss_res = np.sum(residuals**2)
    ss_tot = np.sum((y - y.mean()) ** 2)
    r2 = 1 - ss_res / ss_tot if ss_tot > 0 else 0.0
    fit = PolynomialFit(
        coefficients=coefficients,
        degree=degree,
        domain=(float(x.min()), float(x.max())),
        n_samples=n,
        residuals=residuals,
        r2=float(r2),
    )
    logger.info(f"Fitted degree {degree} polynomial to {n} samples, R2={fit.r2:.6f}")
    return fit


def evaluate_fit(fit: PolynomialFit, n_points: int = 200) -> Tuple[np.ndarray, np.ndarray]:
    """Sample the fitted curve on ``n_points`` evenly spaced points of its domain."""

    xs = np.linspace(fit.domain[0], fit.domain[1], n_points)
    return xs, fit(xs)
