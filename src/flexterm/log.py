"""Logging setup for flexterm, backed by stdlib logging + rich."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_flexterm_root = logging.getLogger("flexterm")


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    """
    Route flexterm's log records through a RichHandler.

    Library modules only ever call ``logging.getLogger(__name__)``; this is
    for applications (the CLI) that want to see them. Calling it again
    replaces the previously installed handler.
    """
    for handler in list(_flexterm_root.handlers):
        if isinstance(handler, RichHandler):
            _flexterm_root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    _flexterm_root.addHandler(handler)
    _flexterm_root.setLevel(level.upper())
    _flexterm_root.propagate = False
