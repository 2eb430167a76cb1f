"""Logging configuration helpers for the math game."""

from __future__ import annotations

import logging
import sys
from logging import Logger


def configure_logging(level: str = "WARNING") -> Logger:
    """Configure basic logging on stderr and return the package logger.

    Stdout belongs to the game itself, so log records never go there.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )
    return logging.getLogger("simple_math_game")
