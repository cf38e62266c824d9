"""Logging setup for the command line. The library itself never adds handlers."""

from __future__ import annotations

import logging


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the ``styletree`` logger at *level*."""
    log = logging.getLogger("styletree")
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        log.addHandler(handler)
    log.setLevel(level.upper())
    return log
