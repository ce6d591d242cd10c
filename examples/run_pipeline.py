"""Run the boundary-length pipeline with the documented constants.

Renders the escape-time image, locates the boundary on 103 probe lines over
[-2, 1], fits a degree-15 polynomial on [-2, 0.25] and prints the length of
the fitted curve. Figures and ``mandelbrot_results.mat`` go to ``output/``.
"""

from pathlib import Path

from mandelbrot_boundary import PipelineConfig, run_workflow


def main():
    config = PipelineConfig()
    results = run_workflow(config, output_dir=Path("output"))
    print(f"Approximated boundary length: {results['length']:.4f}")
    print("Coefficients (highest power first):")
    print(results["fit"].coefficients)


if __name__ == "__main__":
    main()
