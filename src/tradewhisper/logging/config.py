# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""structlog setup for the overlay.

Trade events go to stderr so ``tradewhisper`` command output on stdout stays
clean. ``log_format`` picks between the console renderer (interactive use)
and one JSON object per line (overlay log files).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Literal

import structlog

if TYPE_CHECKING:
    from tradewhisper.settings import Settings

__all__ = ["get_logger", "configure_logging"]

LogFormat = Literal["console", "json"]


def _renderer(log_format: LogFormat) -> structlog.typing.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from settings.

    Args:
        settings: Settings instance (read from the environment if None)
    """
    if settings is None:
        from tradewhisper.settings import Settings

        settings = Settings()

    level = logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger for a module, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)
