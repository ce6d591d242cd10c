"""High-level workflow orchestration for the boundary-length pipeline."""

from __future__ import annotations

from pathlib import Path

from .config import PipelineConfig
from .escape import PlaneGrid, escape_grid
from .fit import fit_boundary
from .io import save_results, save_samples
from .length import arc_length
from .locate import boundary_series, probe_positions
from .logging import logger
from .plots import report_plots


__all__ = ["run_workflow"]


def run_workflow(
    config: PipelineConfig | None = None,
    output_dir: Path | None = None,
    render: bool = True,
) -> dict:
    """Run the pipeline end to end.

    Steps: escape-time grid (only when rendering), boundary search on every
    probe line, polynomial fit over the fit domain, and arc length of the fit
    between the outermost fitted probes.

    Args:
        config: Pipeline parameters, defaults when None.
        output_dir: Directory for figures and result files. Nothing is
            written when None.
        render: Compute the escape-time grid, and draw figures when
            ``output_dir`` is given.

    Returns:
        Dict with config, grid, escape_counts, samples, fit, length, figures,
        results_path, samples_path.
    """

    config = config or PipelineConfig()
    if output_dir is not None:
        output_dir = Path(output_dir)

    grid = counts = None
    if render:
        grid = PlaneGrid(config.grid_real, config.grid_imag, config.grid_shape)
        counts = escape_grid(grid, config.escape_max_iter)
        logger.info(f"Escape-time grid computed, {int((counts == 0).sum())} points inside")

    probes = probe_positions(*config.probe_range, count=config.probe_count)
    samples = boundary_series(
        probes,
        search=config.search_interval,
        tol=config.bisection_tol,
        max_iter=config.bisection_max_iter,
        escape_iter=config.escape_max_iter,
        workers=config.workers,
    )
    fit = fit_boundary(samples, domain=config.fit_domain, degree=config.degree)
    length = arc_length(fit, *fit.domain)
    logger.info(f"Approximated boundary length: {length:.4f}")

    figures = {}
    results_path = samples_path = None
    if output_dir is not None:
        if render:
            figures = report_plots(
                grid, counts, samples, fit, domain=config.fit_domain, output_dir=output_dir
            )
        results_path = save_results(output_dir / "mandelbrot_results.mat", fit, length)
        samples_path = save_samples(samples, output_dir / "boundary_samples.csv")

    return {
        "config": config,
        "grid": grid,
        "escape_counts": counts,
        "samples": samples,
        "fit": fit,
        "length": length,
        "figures": figures,
        "results_path": results_path,
        "samples_path": samples_path,
    }
