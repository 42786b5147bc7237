"""Logging setup.

Modules obtain a logger with ``get_logger(__name__)``. The CLI calls
``configure_logging`` once to route records through rich.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "conventional_release"


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, kept under the package logger.

    Names outside the package (``__main__`` when a module is run directly)
    are nested under ``ROOT_LOGGER`` so ``configure_logging`` still applies.
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> None:
    """Attach a RichHandler to the package logger.

    Args:
        verbose: Log at DEBUG instead of WARNING
        console: Console to write to (stderr by default)
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
