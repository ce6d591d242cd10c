"""Plotting utilities for the boundary-length workflow."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .escape import PlaneGrid
from .fit import PolynomialFit, evaluate_fit, select_fit_samples


__all__ = ["report_plots", "plot_escape_grid", "plot_boundary_fit"]


def _ensure_output_dir(path: Path | None) -> Path:
    """Ensure the output directory exists and return it.

    Args:
        path: The directory path, or None for current working directory.

    Returns:
        The ensured directory path.
    """
    if path is None:
        return Path.cwd()
    path.mkdir(parents=True, exist_ok=True)
    return path


def _finish(fig, save_path: Path | None):
    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")
        plt.close(fig)
    else:
        plt.show()


def plot_escape_grid(
    grid: PlaneGrid,
    counts: np.ndarray,
    title: str = "Mandelbrot Set",
    save_path: Path | None = None,
):
    """Show escape counts as a colour-mapped image.

    Args:
        grid: Lattice the counts were computed on.
        counts: Escape counts shaped (n_imag, n_real).
        title: Plot title.
        save_path: Optional save path.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    image = ax.imshow(
        counts,
        cmap="jet",
        origin="lower",
        extent=(grid.real[0], grid.real[1], grid.imag[0], grid.imag[1]),
    )
    fig.colorbar(image, ax=ax, label="Escape iteration (0 = inside)")
    ax.set_title(title)
    ax.set_xlabel("Real part (x)")
    ax.set_ylabel("Imaginary part (y)")
    _finish(fig, save_path)


def plot_boundary_fit(
    samples: pd.DataFrame,
    fit: PolynomialFit,
    domain: tuple[float, float] | None = None,
    title: str = "Boundary Approximation along y",
    save_path: Path | None = None,
):
    """Plot the fitted boundary samples and the polynomial through them.

    Args:
        samples: Probe/boundary table.
        fit: Fitted polynomial.
        domain: Probe sub-domain used for the fit, default the fit's own domain.
        title: Plot title.
        save_path: Optional save path.
    """
    fitted = select_fit_samples(samples, domain or fit.domain)
    xs, ys = evaluate_fit(fit)
    fig, ax = plt.subplots(figsize=(7, 5))
    ax.plot(
        fitted["probe"],
        fitted["boundary"],
        "o",
        markerfacecolor="b",
        label="Boundary points",
    )
    ax.plot(xs, ys, "-", linewidth=1.5, label=f"Polynomial fit (order {fit.degree})")
    ax.set_xlabel("Real part (x)")
    ax.set_ylabel("Imaginary part (y)")
    ax.set_title(title)
    ax.legend(loc="best")
    ax.grid(True)
    _finish(fig, save_path)


def report_plots(
    grid: PlaneGrid | None,
    counts: np.ndarray | None,
    samples: pd.DataFrame,
    fit: PolynomialFit,
    domain: tuple[float, float] | None = None,
    output_dir: Path | None = None,
) -> Dict[str, Path]:
    """Create report figures.

    Args:
        grid: Escape-time lattice, or None to skip the set image.
        counts: Escape counts on ``grid``.
        samples: Probe/boundary table.
        fit: Fitted polynomial.
        domain: Fit sub-domain.
        output_dir: Save dir, default cwd.

    Returns:
        Dict of figure names to paths.
    """

    output_path = _ensure_output_dir(output_dir)
    figures = {}

    if grid is not None and counts is not None:
        figures["figure1"] = output_path / "figure1_mandelbrot.png"
        plot_escape_grid(grid, counts, save_path=figures["figure1"])

    figures["figure2"] = output_path / "figure2_boundary_fit.png"
    plot_boundary_fit(samples, fit, domain=domain, save_path=figures["figure2"])

    return figures
