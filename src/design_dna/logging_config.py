"""
Logging for Design DNA.

Engine modules only emit records (color merges, skipped values, scale
fallbacks) through ``get_logger``; nothing is printed until the CLI calls
``configure_logging`` with the run's ``NormalizationConfig``. Records always
go to stderr so JSON written to stdout stays machine-readable.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import NormalizationConfig, Verbosity

ROOT_LOGGER = "design_dna"

LEVELS: dict[Verbosity, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def configure_logging(
    config: NormalizationConfig, log_file: Optional[str] = None
) -> logging.Logger:
    """Install handlers on the ``design_dna`` logger for one run.

    Args:
        config: Run configuration; its ``verbosity`` picks the level
        log_file: Optional path that also receives every record

    Returns:
        The configured ``design_dna`` logger
    """
    level = LEVELS[config.verbosity]
    verbose = config.verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``design_dna`` namespace (``__name__`` works as-is)."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
