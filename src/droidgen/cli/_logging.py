"""Rich logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Route library logs through a single RichHandler on stderr."""
    root_logger = logging.getLogger()
    level = logging.DEBUG if verbose else logging.WARNING
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
        markup=False,
        rich_tracebacks=True,
    )
    root_logger.addHandler(handler)
