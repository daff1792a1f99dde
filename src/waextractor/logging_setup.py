"""Logging configuration shared by the CLI and library callers."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

LOG_LEVEL_ENV = "WAEXTRACTOR_LOG_LEVEL"

# Log output goes to stderr so previews and JSON dumps on stdout stay clean.
console = Console(stderr=True)

_HANDLER_MARKER = "_waextractor_managed"


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _managed_handler(root: logging.Logger) -> RichHandler | None:
    for handler in root.handlers:
        if isinstance(handler, RichHandler) and getattr(handler, _HANDLER_MARKER, False):
            return handler
    return None


def configure_logging() -> None:
    """Install a single Rich handler on the root logger and apply the env level.

    Calling it again only refreshes the level.
    """
    root = logging.getLogger()
    if _managed_handler(root) is None:
        handler = RichHandler(console=console, rich_tracebacks=True, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(handler, _HANDLER_MARKER, True)
        root.handlers.clear()
        root.addHandler(handler)
    root.setLevel(_level_from_env())
    logging.captureWarnings(True)
