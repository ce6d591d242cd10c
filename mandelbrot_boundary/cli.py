"""Command-line entry point for the boundary-length pipeline."""

from pathlib import Path
from typing import Optional

import typer

from .config import PipelineConfig, load_config
from .logging import set_level, setup_logfile
from .validation import run_sanity_checks
from .workflow import run_workflow

app = typer.Typer(
    help="Mandelbrot boundary length: locate, fit and measure the boundary curve",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also log to this file"),
):
    """Locate the Mandelbrot boundary along probe lines and measure it."""
    set_level("DEBUG" if verbose else "INFO")
    if log_file is not None:
        setup_logfile(str(log_file), level="DEBUG" if verbose else "INFO")


@app.command("run")
def run(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with parameter overrides"),
    output: Optional[Path] = typer.Option(Path("output"), "--output", "-o", help="Directory for figures and results"),
    probe_count: Optional[int] = typer.Option(None, "--probe-count", help="Number of probe lines"),
    degree: Optional[int] = typer.Option(None, "--degree", help="Polynomial degree"),
    workers: Optional[int] = typer.Option(None, "--workers", "-j", help="Worker processes for the probe lines"),
    no_plots: bool = typer.Option(False, "--no-plots", help="Skip the escape-time grid and figures"),
):
    """Run the whole pipeline and save coefficients and arc length."""
    cfg = load_config(config) if config else PipelineConfig()
    overrides = {
        key: value
        for key, value in {"probe_count": probe_count, "degree": degree, "workers": workers}.items()
        if value is not None
    }
    try:
        cfg = cfg.replace(**overrides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    results = run_workflow(cfg, output_dir=output, render=not no_plots)
    typer.echo(f"Approximated boundary length: {results['length']:.4f}")
    if results["results_path"] is not None:
        typer.echo(f"Results written to {results['results_path']}")


@app.command("check")
def check():
    """Run the sanity checks against closed-form answers."""
    summary = run_sanity_checks()
    typer.echo(summary.to_string(index=False))
    if not summary["passed"].all():
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
