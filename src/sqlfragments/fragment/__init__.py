"""Fragment tree: the rendering engine behind the query builder.

Components:
    - node: ``Fragment`` and its per-group ``GroupFormat`` policy
    - operand: the ``Literal`` / ``Node`` operand union and its resolver
"""

from sqlfragments.fragment.node import Fragment, GroupFormat
from sqlfragments.fragment.operand import (
    Literal,
    Node,
    Operand,
    OperandLike,
    as_fragment,
    resolve_operand,
)

__all__ = [
    "Fragment",
    "GroupFormat",
    "Literal",
    "Node",
    "Operand",
    "OperandLike",
    "as_fragment",
    "resolve_operand",
]
