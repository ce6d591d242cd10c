"""Locate, fit and measure the boundary of the Mandelbrot set."""

from .escape import EscapeResult, PlaneGrid, classify, escape_time, escape_grid
from .bisection import bisect
from .locate import (
    membership_indicator,
    locate_boundary,
    probe_positions,
    boundary_series,
)
from .fit import (
    InsufficientSamplesError,
    PolynomialFit,
    select_fit_samples,
    fit_boundary,
    evaluate_fit,
)
from .length import MalformedIntervalError, arc_length, arc_length_integrand
from .config import PipelineConfig, load_config
from .io import save_results, load_results, save_samples, load_samples
from .plots import report_plots, plot_escape_grid, plot_boundary_fit
from .validation import (
    generate_polynomial_samples,
    parabola_length,
    run_sanity_checks,
)
from .workflow import run_workflow

__all__ = [
    "EscapeResult",
    "PlaneGrid",
    "classify",
    "escape_time",
    "escape_grid",
    "bisect",
    "membership_indicator",
    "locate_boundary",
    "probe_positions",
    "boundary_series",
    "InsufficientSamplesError",
    "PolynomialFit",
    "select_fit_samples",
    "fit_boundary",
    "evaluate_fit",
    "MalformedIntervalError",
    "arc_length",
    "arc_length_integrand",
    "PipelineConfig",
    "load_config",
    "save_results",
    "load_results",
    "save_samples",
    "load_samples",
    "report_plots",
    "plot_escape_grid",
    "plot_boundary_fit",
    "generate_polynomial_samples",
    "parabola_length",
    "run_sanity_checks",
    "run_workflow",
]
