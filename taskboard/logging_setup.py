"""Logging setup for Taskboard."""

import logging
from typing import Union

from rich.logging import RichHandler


def setup_logging(level: Union[int, str] = logging.INFO, debug: bool = False) -> logging.Logger:
    """Route taskboard logs to the terminal through rich.

    Safe to call more than once; the handler is installed only once.
    werkzeug request logs are limited to warnings unless ``debug`` is set.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("taskboard")
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("werkzeug").setLevel(logging.INFO if debug else logging.WARNING)
    return logger
