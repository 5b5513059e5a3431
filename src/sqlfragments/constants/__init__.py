"""Constants module for sqlfragments.

This module contains the constant values and enumerations used throughout
the package. It has no dependencies on other sqlfragments modules.

Organization:
    - sql: Statement types, join types, clause group names and their
      canonical render order
"""

from sqlfragments.constants.sql import (
    CLAUSE_ORDER,
    DEFAULT_SUBQUERY_BORDERS,
    JOIN_ORDER,
    ClauseGroup,
    JoinGroup,
    JoinType,
    QueryType,
)

__all__ = [
    "QueryType",
    "JoinType",
    "ClauseGroup",
    "JoinGroup",
    "CLAUSE_ORDER",
    "JOIN_ORDER",
    "DEFAULT_SUBQUERY_BORDERS",
]
