"""SQL clause and statement constants.

This module contains the clause group names the query builder attaches to
its root fragment, the canonical order those groups render in, and the
enumerations for statement and join types.

These constants sit at the bottom of the dependency graph: they import
nothing from the rest of the package, so both the fragment tree and the
query builder can use them without circular imports.
"""

from enum import Enum
from typing import Tuple


class QueryType(str, Enum):
    """SQL statement type enumeration.

    Identifies which start operation created the builder's current root.
    The value doubles as the root fragment's name, so it is the exact
    keyword text emitted at the start of the statement.
    """

    SELECT = "SELECT"
    SELECT_DISTINCT = "SELECT DISTINCT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class JoinType(str, Enum):
    """Join variant enumeration.

    Values are the keyword placed before ``JOIN``; the plain join has no
    qualifier.
    """

    JOIN = ""
    LEFT = "LEFT"
    INNER = "INNER"
    RIGHT = "RIGHT"

    @property
    def keyword(self) -> str:
        """Full join keyword, e.g. ``LEFT JOIN``."""
        if self is JoinType.JOIN:
            return "JOIN"
        return f"{self.value} JOIN"


class ClauseGroup(str, Enum):
    """Group names used on the statement root fragment.

    Groups whose name is printed in the output (``FROM``, ``WHERE``, ...)
    carry their SQL keyword as the value; the rest are internal labels
    rendered with the name suppressed.
    """

    SELECT_FIELDS = "selectFields"
    FROM = "FROM"
    UPDATE = "UPDATE"
    INSERT = "INSERT"
    INTO = "INTO"
    TABLE = "table"
    FIELDS = "fields"
    VALUES = "VALUES"
    SET = "SET"
    JOIN = "join"
    WHERE = "WHERE"
    OR_WHERE = "OR"
    GROUP_BY = "GROUP BY"
    HAVING = "HAVING"
    OR_HAVING = "ORHAVING"
    ORDER_BY = "ORDER BY"
    LIMIT = "LIMIT"
    OFFSET = "OFFSET"


# Render order of the root groups. Groups missing from this list are dropped
# when the builder finalizes the statement.
CLAUSE_ORDER: Tuple[str, ...] = tuple(group.value for group in ClauseGroup)


class JoinGroup(str, Enum):
    """Group names used inside a single JOIN fragment."""

    TABLE = "table"
    ON = "ON"
    OR = "OR"


JOIN_ORDER: Tuple[str, ...] = tuple(group.value for group in JoinGroup)


DEFAULT_SUBQUERY_BORDERS: Tuple[str, str] = ("(", ")")
