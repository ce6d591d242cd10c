r"""Example script demonstrating validation utilities.

The script compares the fitting and length stages against curves with
closed-form answers: a straight line, whose length is the hypotenuse of its
extent, and the parabola \(y = x^2\), whose length follows from its
antiderivative.
"""

from pathlib import Path

import numpy as np

from mandelbrot_boundary import (
    arc_length,
    fit_boundary,
    generate_polynomial_samples,
    parabola_length,
    plot_boundary_fit,
    run_sanity_checks,
)

PROBES = np.linspace(-1.0, 1.0, 103)
DEGREE = 15


def main():
    # A degree-15 fit to exact parabola samples should collapse onto the
    # parabola; the higher coefficients come out at round-off level.
    samples = generate_polynomial_samples([1.0, 0.0, 0.0], PROBES)
    fit = fit_boundary(samples, domain=(-1.0, 1.0), degree=DEGREE)
    plot_boundary_fit(samples, fit, title="Parabola Fit", save_path=Path("parabola_fit.png"))

    observed = arc_length(fit, -1.0, 1.0)
    expected = parabola_length(-1.0, 1.0)
    print(f"Parabola length: observed {observed:.8f}, expected {expected:.8f}")

    summary = run_sanity_checks(degree=DEGREE)
    print("Sanity checks (expect all passed):\n", summary)


if __name__ == "__main__":
    main()
