"""Structured logging configuration for ContentForge."""

from __future__ import annotations

import logging
import sys
from typing import TextIO


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "contentforge",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Output goes to stderr by default: in stdio mode stdout carries the
    MCP protocol stream and must stay clean.

    Args:
        level: Logging level (default INFO).
        module_name: Name for the logger instance.
        stream: Optional stream override for the handler.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def set_level(level: int) -> None:
    """Apply a level to every ContentForge logger configured so far."""
    for name in list(logging.root.manager.loggerDict):
        if name == "contentforge" or name.startswith("contentforge."):
            logger = logging.getLogger(name)
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
