"""Pipeline parameters and their validation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

import yaml


__all__ = ["MIN_PROBE_COUNT", "PipelineConfig", "load_config"]

MIN_PROBE_COUNT = 103

_PAIR_FIELDS = (
    "probe_range",
    "search_interval",
    "fit_domain",
    "grid_real",
    "grid_imag",
    "grid_shape",
)


@dataclass(frozen=True)
class PipelineConfig:
    """Parameters of the boundary-length pipeline.

    Attributes:
        probe_range: (start, stop) of the probe positions on the real axis.
        probe_count: Number of evenly spaced probe lines.
        degree: Degree of the fitted polynomial.
        search_interval: (lower, upper) bisection interval on the imaginary axis.
        fit_domain: (low, high) sub-interval of the probe range used in the fit.
        bisection_tol: Bisection width tolerance.
        bisection_max_iter: Bisection iteration cap.
        escape_max_iter: Escape-time iteration budget.
        grid_real: Real range of the rendered escape-time grid.
        grid_imag: Imaginary range of the rendered escape-time grid.
        grid_shape: Points (n_real, n_imag) of the rendered grid.
        workers: Worker processes for the probe lines, ``None`` for serial.
    """

    probe_range: Tuple[float, float] = (-2.0, 1.0)
    probe_count: int = MIN_PROBE_COUNT
    degree: int = 15
    search_interval: Tuple[float, float] = (0.0, 1.5)
    fit_domain: Tuple[float, float] = (-2.0, 0.25)
    bisection_tol: float = 1e-6
    bisection_max_iter: int = 100
    escape_max_iter: int = 100
    grid_real: Tuple[float, float] = (-2.0, 1.0)
    grid_imag: Tuple[float, float] = (-1.5, 1.5)
    grid_shape: Tuple[int, int] = (500, 500)
    workers: Optional[int] = None

    def __post_init__(self):
        for name in _PAIR_FIELDS:
            value = tuple(getattr(self, name))
            if len(value) != 2:
                raise ValueError(f"{name} must have exactly two entries")
            object.__setattr__(self, name, value)

        if self.probe_range[0] >= self.probe_range[1]:
            raise ValueError("probe_range must be increasing")
        if self.probe_count < MIN_PROBE_COUNT:
            raise ValueError(f"probe_count must be at least {MIN_PROBE_COUNT}")
        if self.degree < 0:
            raise ValueError("degree must be non-negative")
        if self.search_interval[0] >= self.search_interval[1]:
            raise ValueError("search_interval must be increasing")
        if self.fit_domain[0] >= self.fit_domain[1]:
            raise ValueError("fit_domain must be increasing")
        if self.bisection_tol <= 0:
            raise ValueError("bisection_tol must be positive")
        if self.bisection_max_iter < 1 or self.escape_max_iter < 1:
            raise ValueError("Iteration caps must be positive")
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be positive")

    def to_dict(self) -> dict:
        return asdict(self)

    def replace(self, **changes: Any) -> "PipelineConfig":
        """Copy with ``changes`` applied and validated."""
        return from_mapping({**self.to_dict(), **changes})


def from_mapping(values: Mapping[str, Any]) -> PipelineConfig:
    known = {f.name for f in fields(PipelineConfig)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    return PipelineConfig(**values)


def load_config(path: Union[str, Path]) -> PipelineConfig:
    """Read a YAML mapping of overrides on top of the defaults.

    Raises:
        ValueError: If the document is not a mapping or has unknown keys.
    """

    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Configuration file must contain a mapping")
    return from_mapping(data)
