"""Logging filters for context injection.

This module provides a filter that stamps the package identity and a static
context (environment, caller supplied keys) onto every log record.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlfragments.__version__ import __version__

_static_context: Dict[str, Any] = {}


class ContextFilter(logging.Filter):
    """Logging filter that adds the static context to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context values to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "sdk_name", "sqlfragments")
        setattr(record, "sdk_version", __version__)

        for key, value in _static_context.items():
            setattr(record, key, value)

        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Replace the static context stamped onto every record.

    Args:
        environment: Deployment environment name, omitted when None
        extra: Additional key/value pairs to attach
    """
    _static_context.clear()
    if environment is not None:
        _static_context["environment"] = environment
    if extra:
        _static_context.update(extra)
