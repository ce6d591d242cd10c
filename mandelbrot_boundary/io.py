"""Persistence of the fitted model, its arc length and the boundary samples."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple, Union

import numpy as np
import pandas as pd
from scipy import io as sio

from .fit import PolynomialFit
from .logging import logger


__all__ = ["save_results", "load_results", "save_samples", "load_samples"]

PathLike = Union[str, Path]


def save_results(
    path: PathLike,
    coefficients: Union[PolynomialFit, Sequence[float], np.ndarray],
    length: float,
) -> Path:
    """Write coefficients and arc length to a MATLAB ``.mat`` file.

    The file holds a row vector ``p`` (highest power first) and a scalar
    ``arcLength``.

    Args:
        path: Destination file.
        coefficients: PolynomialFit or coefficient sequence.
        length: Arc length.

    Returns:
        The written path.
    """

    if isinstance(coefficients, PolynomialFit):
        coefficients = coefficients.coefficients
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    sio.savemat(
        str(path),
        {
            "p": np.asarray(coefficients, dtype=np.float64).reshape(1, -1),
            "arcLength": np.float64(length),
        },
        appendmat=False,
    )
    logger.info(f"Saved results to {path}")
    return path


def load_results(path: PathLike) -> Tuple[np.ndarray, float]:
    """Read ``(coefficients, arc_length)`` back from :func:`save_results` output.

    Raises:
        ValueError: If the file lacks the expected variables.
    """

    data = sio.loadmat(str(path), appendmat=False)
    if "p" not in data or "arcLength" not in data:
        raise ValueError(f"{path} does not contain 'p' and 'arcLength'")
    return np.asarray(data["p"], dtype=float).ravel(), float(np.asarray(data["arcLength"]).squeeze())


def save_samples(samples: pd.DataFrame, path: PathLike) -> Path:
    """Write the probe/boundary table to CSV; undefined boundaries are left empty."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    samples[["probe", "boundary"]].to_csv(path, index=False, float_format="%.17g")
    return path


def load_samples(path: PathLike) -> pd.DataFrame:
    df = pd.read_csv(path, dtype=float, float_precision="round_trip")
    missing = {"probe", "boundary"} - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns in {path}: {', '.join(sorted(missing))}")
    df["valid"] = df["boundary"].notna()
    return df
