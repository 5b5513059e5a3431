"""Settings module for sqlfragments.

Configuration is built on Pydantic Settings. Values come from environment
variables prefixed with ``SQLFRAGMENTS_`` (case-insensitive), then an
optional ``.env`` file, then the defaults in code.

Available Settings:
    - SQLFRAGMENTS_ENVIRONMENT: Environment name stamped onto log records
    - SQLFRAGMENTS_LOG_LEVEL: Level for the ``sqlfragments`` logger
    - SQLFRAGMENTS_JSON_LOGS: JSON (true) or plain text (false) log output
    - SQLFRAGMENTS_SUBQUERY_BORDERS: JSON pair used to frame sub-queries,
      e.g. ``'["(", ")"]'``

Quick Start:
    >>> from sqlfragments.settings import get_settings
    >>>
    >>> settings = get_settings()
    >>> settings.subquery_borders
    ('(', ')')
"""

from .main import get_settings, _reload_settings
from .base import BuilderSettings

__all__ = [
    "get_settings",
    "BuilderSettings",
]
