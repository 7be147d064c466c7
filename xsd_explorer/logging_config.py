"""Logging setup for xsd_explorer.

All modules obtain their logger through :func:`get_logger` so that a single
call to :func:`setup_logging` controls the whole package.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "xsd_explorer"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    level: int | str = logging.WARNING, log_file: str | Path | None = None
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level name or number.
        log_file: Optional path of a file that receives the same records.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        rich_tracebacks=True, show_path=False, markup=False
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(Path(log_file), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the package hierarchy."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
