r"""Validation helpers for the boundary-length workflow.

The routines in this module build curves with closed-form arc lengths and run
the fitting and length stages on them, and probe the boundary locator on lines
whose behaviour is known. They provide numerical checks against theoretical
expectations before the pipeline is trusted on the fractal boundary.
"""

from __future__ import annotations

from math import asinh, hypot, isfinite, sqrt
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .fit import fit_boundary
from .length import arc_length
from .locate import locate_boundary


__all__ = [
    "generate_polynomial_samples",
    "parabola_length",
    "run_sanity_checks",
]


def generate_polynomial_samples(
    coefficients: Sequence[float], probes: Iterable[float]
) -> pd.DataFrame:
    """Create exact samples of a known polynomial.

    Args:
        coefficients: Polynomial coefficients, highest power first.
        probes: Probe positions.

    Returns:
        DataFrame shaped like the boundary locator output.
    """

    xs = np.asarray(list(probes), dtype=float)
    df = pd.DataFrame({"probe": xs, "boundary": np.polyval(coefficients, xs)})
    df["valid"] = True
    return df


def parabola_length(a: float, b: float) -> float:
    r"""Closed-form length of \(y = x^2\) on \([a, b]\).

    Uses the antiderivative \(F(x) = \tfrac{x}{2}\sqrt{1 + 4x^2} +
    \tfrac{1}{4}\operatorname{arsinh}(2x)\).
    """

    def antiderivative(x: float) -> float:
        return 0.5 * x * sqrt(1 + 4 * x * x) + 0.25 * asinh(2 * x)

    return antiderivative(b) - antiderivative(a)


def run_sanity_checks(
    degree: int = 15,
    probes: Sequence[float] | None = None,
    tol: float = 1e-6,
) -> pd.DataFrame:
    r"""Run each stage on inputs with known answers.

    Checks performed:

    * a straight line \(y = 0.5x + 1\) on \([-2, 1]\) has length
      \(3\sqrt{1.25}\);
    * \(y = x^2\) on \([0, 1]\) matches :func:`parabola_length`;
    * a degree ``degree`` fit to exact samples of \(y = x^2\) recovers the
      curve (maximum absolute residual);
    * the probe line ``Re(c) = 1`` has no boundary crossing in \([0, 1.5]\);
    * the probe line ``Re(c) = -1`` has one.

    Args:
        degree: Degree used for the fit recovery check.
        probes: Probe positions for the fit check, default 103 points on
            \([-1, 1]\).
        tol: Bisection tolerance for the locator checks.

    Returns:
        DataFrame with columns check, expected, observed, abs_error, passed.
    """

    if probes is None:
        probes = np.linspace(-1.0, 1.0, 103)

    rows = []

    def record(check: str, expected: float, observed: float, atol: float):
        error = abs(observed - expected)
        rows.append(
            {
                "check": check,
                "expected": expected,
                "observed": observed,
                "abs_error": error,
                "passed": bool(error <= atol),
            }
        )

    record("line_length", 3 * hypot(1.0, 0.5), arc_length([0.5, 1.0], -2.0, 1.0), 1e-8)
    record("parabola_length", parabola_length(0.0, 1.0), arc_length([1.0, 0.0, 0.0], 0.0, 1.0), 1e-6)

    samples = generate_polynomial_samples([1.0, 0.0, 0.0], probes)
    fit = fit_boundary(samples, domain=(min(probes), max(probes)), degree=degree)
    record("parabola_fit_residual", 0.0, float(np.max(np.abs(fit.residuals))), 1e-6)

    outside = locate_boundary(1.0, 0.0, 1.5, tol=tol)
    record("probe_outside_undefined", 1.0, float(outside is None), 0.0)

    crossing = locate_boundary(-1.0, 0.0, 1.5, tol=tol)
    found = crossing is not None and isfinite(crossing) and 0.0 <= crossing <= 1.5
    record("probe_crossing_found", 1.0, float(found), 0.0)

    return pd.DataFrame(rows)
