"""Logging setup for the CLI and web entry points."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "faqrender"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach one rich handler (stderr) to the package logger.

    Debug mode shows per-call traces; otherwise only warnings and errors.
    Calling it again only adjusts the level.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("[faqrender] %(name)s: %(message)s"))
        root.addHandler(handler)
    return root
