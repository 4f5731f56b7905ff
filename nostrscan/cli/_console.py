"""Shared Rich console instances and logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str | int) -> None:
    """Route nostrscan log records through Rich on stderr."""
    logger = logging.getLogger("nostrscan")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))
