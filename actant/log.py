"""Logging setup for the command line front end."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        show_time=False,
        rich_tracebacks=verbose,
    )
    handler.setLevel(level)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
