r"""Boundary localisation along vertical probe lines.

For a fixed real part \(x\) the membership test is recast as a step function
of the imaginary part \(y\): \(+1\) when \(x + iy\) escapes and \(-1\) when it
stays bounded. A bisection on that indicator finds where the probe line
crosses the boundary of the set.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from .bisection import bisect
from .escape import classify
from .logging import logger


__all__ = [
    "membership_indicator",
    "locate_boundary",
    "probe_positions",
    "boundary_series",
]


def membership_indicator(probe: float, max_iter: int = 100) -> Callable[[float], float]:
    """Signed indicator along the line ``Re(c) = probe``.

    Args:
        probe: Real part of the probe line.
        max_iter: Escape-time iteration budget.

    Returns:
        Function of the imaginary part returning ``+1.0`` outside the set and
        ``-1.0`` inside.
    """

    def indicator(q: float) -> float:
        return 1.0 if classify(complex(probe, q), max_iter).escaped else -1.0

    return indicator


def locate_boundary(
    probe: float,
    lower: float = 0.0,
    upper: float = 1.5,
    tol: float = 1e-6,
    max_iter: int = 100,
    escape_iter: int = 100,
) -> Optional[float]:
    """Imaginary part where the line ``Re(c) = probe`` crosses the boundary.

    Args:
        probe: Real part of the probe line.
        lower: Lower end of the search interval on the imaginary axis.
        upper: Upper end of the search interval.
        tol: Bisection width tolerance.
        max_iter: Bisection iteration cap.
        escape_iter: Escape-time iteration budget.

    Returns:
        The located imaginary part, or ``None`` when both ends of the search
        interval fall on the same side of the boundary.

    Raises:
        ValueError: If ``lower > upper``.
    """

    return bisect(
        membership_indicator(probe, escape_iter),
        lower,
        upper,
        tol=tol,
        max_iter=max_iter,
    )


def probe_positions(start: float = -2.0, stop: float = 1.0, count: int = 103) -> np.ndarray:
    """Evenly spaced probe positions on the real axis, endpoints included."""

    if count < 2:
        raise ValueError("At least two probe positions are required")
    if start >= stop:
        raise ValueError("Probe range must be increasing")
    return np.linspace(start, stop, count)


def boundary_series(
    probes: Iterable[float],
    search: Tuple[float, float] = (0.0, 1.5),
    tol: float = 1e-6,
    max_iter: int = 100,
    escape_iter: int = 100,
    workers: Optional[int] = None,
) -> pd.DataFrame:
    """Locate the boundary on every probe line.

    Each probe is independent. With ``workers`` set, probes are distributed
    over a process pool; the output keeps the input order either way.

    Args:
        probes: Real parts of the probe lines.
        search: (lower, upper) search interval on the imaginary axis.
        tol: Bisection width tolerance.
        max_iter: Bisection iteration cap.
        escape_iter: Escape-time iteration budget.
        workers: Number of worker processes, ``None`` or ``1`` for serial.

    Returns:
        DataFrame with columns probe, boundary (NaN when undefined), valid.
    """

    probes = [float(p) for p in probes]
    lower, upper = search
    if lower >= upper:
        raise ValueError("Search interval must be increasing")

    task = partial(
        locate_boundary,
        lower=lower,
        upper=upper,
        tol=tol,
        max_iter=max_iter,
        escape_iter=escape_iter,
    )
    if workers and workers > 1:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            located: List[Optional[float]] = list(pool.map(task, probes))
    else:
        located = [task(probe) for probe in probes]

    df = pd.DataFrame(
        {
            "probe": probes,
            "boundary": [np.nan if y is None else y for y in located],
        },
        dtype=float,
    )
    df["valid"] = df["boundary"].notna()
    logger.info(
        f"Located boundary on {int(df['valid'].sum())} of {len(df)} probe lines"
    )
    return df
