"""Logging infrastructure for sqlfragments.

This module provides structured logging with JSON output, context tracking,
and OpenTelemetry trace correlation.
"""

from sqlfragments.logging.filters import (
    ContextFilter,
    set_logging_context,
)
from sqlfragments.logging.logger import (
    CustomJsonFormatter,
    configure_from_settings,
    get_logger,
    setup_logging,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "configure_from_settings",
    "CustomJsonFormatter",
    "ContextFilter",
    "set_logging_context",
]
