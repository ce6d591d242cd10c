r"""Escape-time membership test for the Mandelbrot set.

A parameter \(c\) belongs to the Mandelbrot set when the orbit of
\(z_{n+1} = z_n^2 + c\), started at \(z_0 = 0\), stays bounded. In practice the
orbit is followed for a fixed number of steps and declared unbounded the first
time \(|z_n| > 2\). The helpers below expose that test for a single point and
for a rectangular grid of points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np


__all__ = [
    "ESCAPE_RADIUS",
    "EscapeResult",
    "classify",
    "escape_time",
    "PlaneGrid",
    "escape_grid",
]

ESCAPE_RADIUS = 2.0


class EscapeResult(NamedTuple):
    r"""Outcome of the escape-time test.

    Attributes:
        bounded: ``True`` when the orbit stayed inside \(|z| \le 2\) for the
            whole iteration budget.
        iterations: Number of steps taken before escaping. Always ``0`` for
            bounded points.
    """

    bounded: bool
    iterations: int

    @property
    def escaped(self) -> bool:
        return not self.bounded


def classify(c: complex, max_iter: int = 100) -> EscapeResult:
    r"""Classify ``c`` as bounded or unbounded.

    The orbit is advanced while \(|z| \le 2\) and fewer than ``max_iter``
    steps have been taken. A point whose step count reaches ``max_iter`` is
    reported as bounded, including the case where the final step lands
    outside the escape radius.

    Behaviour for non-finite ``c`` (infinite or NaN components) is undefined.

    Args:
        c: Parameter in the complex plane.
        max_iter: Iteration budget.

    Returns:
        EscapeResult with ``iterations`` in ``[1, max_iter - 1]`` for
        unbounded points and ``0`` for bounded ones.
    """

    z = 0j
    steps = 0
    while abs(z) <= ESCAPE_RADIUS and steps < max_iter:
        z = z * z + c
        steps += 1
    if steps == max_iter:
        return EscapeResult(True, 0)
    return EscapeResult(False, steps)


def escape_time(c: complex, max_iter: int = 100) -> int:
    """Escape iteration count for ``c``, ``0`` meaning inside the set."""

    return classify(c, max_iter).iterations


@dataclass(frozen=True)
class PlaneGrid:
    r"""Rectangular lattice of parameters in the complex plane.

    Attributes:
        real: (min, max) of the real axis.
        imag: (min, max) of the imaginary axis.
        shape: Number of points (n_real, n_imag).
    """

    real: Tuple[float, float] = (-2.0, 1.0)
    imag: Tuple[float, float] = (-1.5, 1.5)
    shape: Tuple[int, int] = (500, 500)

    def __post_init__(self):
        if self.real[0] >= self.real[1] or self.imag[0] >= self.imag[1]:
            raise ValueError("Grid ranges must be increasing")
        if min(self.shape) < 1:
            raise ValueError("Grid shape must be positive")

    @property
    def xs(self) -> np.ndarray:
        return np.linspace(self.real[0], self.real[1], self.shape[0])

    @property
    def ys(self) -> np.ndarray:
        return np.linspace(self.imag[0], self.imag[1], self.shape[1])

    def points(self) -> np.ndarray:
        """Complex parameters with rows along the imaginary axis."""
        X, Y = np.meshgrid(self.xs, self.ys)
        return X + 1j * Y


def escape_grid(grid: PlaneGrid, max_iter: int = 100) -> np.ndarray:
    r"""Escape counts over ``grid``, shaped (n_imag, n_real).

    Vectorised version of :func:`escape_time`: only points whose orbit is still
    inside the escape radius are advanced, so the counts agree exactly with the
    scalar test and escaped orbits never overflow.

    Args:
        grid: Lattice to evaluate.
        max_iter: Iteration budget.

    Returns:
        Integer array of escape counts, ``0`` for points inside the set.
    """

    c = grid.points()
    z = np.zeros_like(c)
    counts = np.zeros(c.shape, dtype=np.int64)
    active = np.ones(c.shape, dtype=bool)
    for _ in range(max_iter):
        if not active.any():
            break
        z_active = z[active]
        z[active] = z_active * z_active + c[active]
        counts[active] += 1
        active &= np.abs(z) <= ESCAPE_RADIUS
    counts[counts == max_iter] = 0
    return counts
