import matplotlib

matplotlib.use("Agg")

import pytest

from mandelbrot_boundary import PipelineConfig, run_workflow


@pytest.fixture(scope="session")
def pipeline_run():
    """One end-to-end run with the documented constants, shared across tests."""
    return run_workflow(PipelineConfig(), render=False)
