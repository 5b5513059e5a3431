"""Query builder module for SQL generation.

This module maps SQL clause semantics onto the fragment tree. Builders only
produce SQL text; nothing here connects to a database or executes a
statement.

Components:
    - builder.py: ``QueryBuilder``, the stateful statement builder
    - rules.py: ``RuleExpressionBuilder``, comparison and logical operators
    - join.py: ``JoinRouter``, routing of JOIN conditions to ON / OR

Example:
    >>> from sqlfragments.query_builder import QueryBuilder, RuleExpressionBuilder
    >>>
    >>> adults = RuleExpressionBuilder.more_or_equal("u.age", 18)
    >>> sql = (
    ...     QueryBuilder()
    ...     .select({"user_name": "u.name"})
    ...     .from_({"u": "users"})
    ...     .join("orders", "o", {"o.user_id": "= u.id"}, "LEFT")
    ...     .where([adults])
    ...     .order_by({"u.name": "ASC"})
    ...     .get_raw()
    ... )
    >>> print(sql)
    SELECT u.name AS user_name FROM users u LEFT JOIN orders o ON o.user_id = u.id WHERE u.age >= 18 ORDER BY u.name ASC

Security:
    Values are inserted into the SQL text exactly as given. There is no
    quoting, escaping or parameter binding; callers must pass safe text.
"""

from sqlfragments.query_builder.builder import QueryBuilder
from sqlfragments.query_builder.join import JoinRouter
from sqlfragments.query_builder.rules import RuleExpressionBuilder

__all__ = [
    "QueryBuilder",
    "RuleExpressionBuilder",
    "JoinRouter",
]
