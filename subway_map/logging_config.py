"""Logging setup for the subway map application."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config

LOGGER_NAME = "subway_map"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this more than once keeps a single handler; only the level
    and format are refreshed.
    """
    config = config or get_config().observability
    logger = logging.getLogger(LOGGER_NAME)

    level = getattr(logging, config.level.upper(), logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=config.format)
    handler = next(
        (h for h in logger.handlers if getattr(h, "_subway_map", False)), None
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler._subway_map = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    handler.setLevel(level)
    handler.setFormatter(formatter)
    return logger
