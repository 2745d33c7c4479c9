"""Logging configuration for the command line."""

from __future__ import annotations

import logging
import sys
from typing import Iterable

# Pillow logs every PNG chunk it writes at DEBUG.
NOISY_LOGGERS = ("PIL",)


def setup_logging(level: str = "INFO", quiet: Iterable[str] = NOISY_LOGGERS) -> None:
    """Send ``grid_pursuit`` records at ``level`` to stdout.

    Loggers named in ``quiet`` are held at WARNING so ``--log-level DEBUG``
    shows search traces rather than image encoder chatter.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
