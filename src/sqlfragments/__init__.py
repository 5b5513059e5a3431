from sqlfragments.__version__ import __version__

from sqlfragments.fragment import Fragment, GroupFormat, Literal, Node, resolve_operand
from sqlfragments.query_builder import QueryBuilder, RuleExpressionBuilder
from sqlfragments.constants import JoinType, QueryType

from sqlfragments.common.exceptions import FragmentError, ErrorCode

from sqlfragments.logging import setup_logging, get_logger


__all__ = [
    "__version__",

    # Rendering engine
    "Fragment",
    "GroupFormat",
    "Literal",
    "Node",
    "resolve_operand",

    # SQL builder
    "QueryBuilder",
    "RuleExpressionBuilder",
    "JoinType",
    "QueryType",

    # Exceptions (public API)
    "FragmentError",
    "ErrorCode",

    # Logging
    "setup_logging",
    "get_logger",
]
