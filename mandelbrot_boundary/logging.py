"""
Logging for the mandelbrot_boundary package.

Exports:
    - logger: Global Loguru logger.
    - setup_logfile: Add a file sink.
    - set_level: Replace the console sink with one at the given level.
"""

import sys

from loguru import logger

__all__ = ["logger", "setup_logfile", "set_level"]


def set_level(level: str = "INFO") -> None:
    """Reset the console sink to ``level``."""
    logger.remove()
    # look up sys.stderr per message so redirected streams are honoured
    logger.add(lambda message: sys.stderr.write(message), level=level.upper())


def setup_logfile(log_path: str, level: str = "INFO", rotation: str = "10 MB") -> int:
    """
    Add a file sink to the global logger.

    Args:
        log_path (str): Path to the log file.
        level (str): Logging level (DEBUG, INFO, etc.).
        rotation (str): Size or time string for log rotation.

    Returns:
        int: Handler id, usable with ``logger.remove``.
    """
    handler_id = logger.add(
        log_path,
        rotation=rotation,
        level=level.upper(),
        colorize=False,
        backtrace=True,
        diagnose=False,
    )
    logger.info(f"File logging initialized: {log_path}")
    return handler_id
