r"""Arc length of a polynomial curve.

For \(y = p(x)\) on \([a, b]\) the length is

\[
    L = \int_a^b \sqrt{1 + p'(x)^2}\, dx,
\]

evaluated with adaptive Gauss–Kronrod quadrature. The derivative is taken
analytically from the coefficients.
"""

from __future__ import annotations

from math import isfinite
from typing import Callable, Sequence, Union

import numpy as np
from scipy import integrate

from .fit import PolynomialFit
from .logging import logger


__all__ = ["MalformedIntervalError", "arc_length_integrand", "arc_length"]

EPSREL = 1e-6
EPSABS = 1e-10

PolynomialLike = Union[PolynomialFit, Sequence[float], np.ndarray]


class MalformedIntervalError(ValueError):
    """Raised when the integration bounds are reversed or not finite."""


def _coefficients(model: PolynomialLike) -> np.ndarray:
    if isinstance(model, PolynomialFit):
        return np.asarray(model.coefficients, dtype=float)
    coefficients = np.atleast_1d(np.asarray(model, dtype=float))
    if coefficients.ndim != 1 or coefficients.size == 0:
        raise ValueError("Coefficients must be a non-empty 1-D sequence")
    return coefficients


def arc_length_integrand(model: PolynomialLike) -> Callable[[float], float]:
    r"""Return \(x \mapsto \sqrt{1 + p'(x)^2}\) for the polynomial ``model``."""

    derivative = np.polyder(_coefficients(model))

    def integrand(x):
        return np.sqrt(1.0 + np.polyval(derivative, x) ** 2)

    return integrand


def arc_length(
    model: PolynomialLike,
    lower: float,
    upper: float,
    epsrel: float = EPSREL,
    epsabs: float = EPSABS,
    limit: int = 200,
) -> float:
    """Length of the curve ``y = p(x)`` for ``lower <= x <= upper``.

    Args:
        model: PolynomialFit or coefficients, highest power first.
        lower: Left integration bound.
        upper: Right integration bound.
        epsrel: Relative error tolerance of the quadrature.
        epsabs: Absolute error tolerance of the quadrature.
        limit: Maximum number of adaptive subintervals.

    Returns:
        Non-negative arc length.

    Raises:
        MalformedIntervalError: If a bound is not finite or ``lower > upper``.
    """

    if not (isfinite(lower) and isfinite(upper)):
        raise MalformedIntervalError("Integration bounds must be finite")
    if lower > upper:
        raise MalformedIntervalError(
            f"Lower bound {lower} exceeds upper bound {upper}"
        )
    if lower == upper:
        return 0.0

    coefficients = _coefficients(model)
    derivative = np.polyder(coefficients)
    if not np.any(derivative):
        # flat line
        return float(upper - lower)

    value, abserr = integrate.quad(
        arc_length_integrand(coefficients),
        lower,
        upper,
        epsabs=epsabs,
        epsrel=epsrel,
        limit=limit,
    )
    logger.debug(f"Arc length on [{lower}, {upper}]: {value:.6f} (abserr {abserr:.2e})")
    return float(value)
