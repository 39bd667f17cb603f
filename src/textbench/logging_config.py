"""
Logging configuration for textbench.

Records go to stderr through a rich handler so stdout stays reserved for
the run summary. Per-file timings ("Time taken for ...") have their own
logger, ``textbench.timing``, which stays at INFO unless the run is quiet:
the tools announce each file as it finishes, while library chatter is held
back to WARNING.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "textbench"
TIMING_LOGGER = f"{ROOT_LOGGER}.timing"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach textbench's handlers and set its levels.

    Calling it again replaces the previous handlers, so several tool runs
    in one process (as in the tests) do not stack duplicate output.

    Args:
        verbose: DEBUG for everything, including dropped word-count lines
        quiet: ERROR only, per-file timings included
        log_file: Also append plain-text records to this file

    Returns:
        The ``textbench`` package logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
            log_time_format="[%X]",
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logging.getLogger(TIMING_LOGGER).setLevel(logging.ERROR if quiet else min(level, logging.INFO))

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the ``textbench`` namespace.

    Args:
        name: Module name (e.g., 'textbench.runner'); bare names are prefixed.
              If None, returns the package logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
