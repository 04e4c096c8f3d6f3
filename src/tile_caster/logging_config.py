"""Logging setup for the caster."""

import logging
import sys
from typing import Optional

__all__ = ["setup_logging"]


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
) -> None:
    """Configure the `tile_caster` package logger.

    Calling this again replaces (and closes) the handlers of an earlier call.

    Parameters
    ----------
    level : int, default: logging.INFO
        Level for the logger and its handlers.
    log_file : str | None, default: None
        Path of a file to log to, truncated on open.
    console : bool, default: True
        Whether to log to stdout. The terminal frontend turns this off since
        curses owns the screen.
    """
    logger = logging.getLogger("tile_caster")
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if not handlers:
        logger.addHandler(logging.NullHandler())

    logger.info("Logging initialized.")
