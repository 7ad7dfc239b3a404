"""Logging configuration for benchviz."""

import logging
import sys

logger = logging.getLogger("benchviz")


def setup_logger(level: int = logging.INFO, handler: logging.Handler | None = None) -> None:
    """Attach a single handler to the benchviz logger.

    ``benchviz serve`` logs to stdout. The TUI passes a ``TextualHandler`` so
    messages reach the textual console instead of being drawn over the screen.
    Calling again replaces the previously attached handler.

    Args:
        level: Logging level (default: INFO)
        handler: Handler to use. Defaults to a stdout stream handler.
    """
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("benchviz: %(message)s"))
    handler.setLevel(level)

    for previous in list(logger.handlers):
        logger.removeHandler(previous)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
