"""Bisection root finding over a signed function."""

from __future__ import annotations

from math import isnan
from typing import Callable, Optional

from .logging import logger


__all__ = ["bisect"]


def bisect(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    tol: float = 1e-6,
    max_iter: int = 100,
) -> Optional[float]:
    r"""Locate a sign change of ``func`` on ``[lower, upper]``.

    The interval is halved until its width drops to ``tol`` or ``max_iter``
    halvings have been made; the midpoint replaces whichever endpoint has the
    same sign, so the bracket always straddles a sign change. A midpoint with
    \(|f(m)| < tol\) is accepted immediately; this only triggers for
    continuous functions, never for a \(\pm 1\) step indicator.

    Args:
        func: Signed function of one variable.
        lower: Left end of the search interval.
        upper: Right end of the search interval.
        tol: Interval width (and value magnitude) tolerance.
        max_iter: Maximum number of halvings.

    Returns:
        The last midpoint, or ``None`` when the endpoints show no sign change
        or either endpoint evaluates to NaN.

    Raises:
        ValueError: If ``lower > upper``.
    """

    if lower > upper:
        raise ValueError(f"Lower bound {lower} exceeds upper bound {upper}")

    f_lower = func(lower)
    f_upper = func(upper)
    if isnan(f_lower) or isnan(f_upper) or f_lower * f_upper >= 0:
        return None

    mid = 0.5 * (lower + upper)
    iterations = 0
    while (upper - lower) > tol and iterations < max_iter:
        mid = 0.5 * (lower + upper)
        f_mid = func(mid)
        if abs(f_mid) < tol:
            return mid
        if (f_mid > 0) == (f_lower > 0):
            lower, f_lower = mid, f_mid
        else:
            upper = mid
        iterations += 1

    if iterations == max_iter:
        logger.debug(f"Bisection stopped at iteration cap, width {upper - lower:.3g}")
    return mid
