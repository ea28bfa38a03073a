from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import LOG_DATE_FORMAT, LOG_FORMAT


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """
    Route the package loggers through a RichHandler on stderr.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logger = logging.getLogger("schedsim")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
