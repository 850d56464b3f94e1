"""Shared runtime exception policy helpers."""

from __future__ import annotations

import logging


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit observability for a tolerated exception from user-supplied code."""
    logger.log(level, message, exc_info=True)
