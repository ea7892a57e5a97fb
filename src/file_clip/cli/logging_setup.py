"""Logging configuration for a single CLI invocation.

Library modules only ever call ``logging.getLogger(__name__)``; this is
the one place that attaches a handler.  Records are rendered by Rich on
standard error.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from file_clip.cli.console import get_rich_console

LOGGER_NAME: str = "file_clip"


def level_for(verbosity: int) -> int:
    """Map the number of ``-v`` flags to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """Attach a :class:`RichHandler` to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    level = level_for(verbosity)
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=get_rich_console(),
        level=level,
        show_time=False,
        show_path=verbosity >= 2,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False
    return root
