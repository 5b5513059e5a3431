"""Operand values accepted by the builders.

Builder methods take either raw text (or a number) or a pre-built
``Fragment``. ``resolve_operand`` turns such a value into one of two
variants once, at the call boundary, so the rest of the code only deals
with ``Literal`` or ``Node``:

    >>> resolve_operand("users")
    Literal(text='users')
    >>> resolve_operand(10).to_fragment().render()
    '10'
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from sqlfragments.common.exceptions import invalid_operand_error
from sqlfragments.fragment.node import Fragment


@dataclass(frozen=True)
class Literal:
    """Raw SQL text, emitted as-is."""

    text: str

    def to_fragment(self) -> Fragment:
        return Fragment(self.text)


@dataclass(frozen=True)
class Node:
    """A caller supplied fragment, attached by reference."""

    fragment: Fragment

    def to_fragment(self) -> Fragment:
        return self.fragment


Operand = Union[Literal, Node]

# What callers may pass wherever an operand is expected.
OperandLike = Union[str, int, float, Decimal, Fragment, Literal, Node]


def resolve_operand(value: OperandLike) -> Operand:
    """Classify ``value`` as a ``Literal`` or a ``Node``.

    Numbers are rendered with ``str()``. No quoting or escaping is applied.
    ``bool`` values are rejected.

    Raises:
        FragmentError: With ``INVALID_OPERAND`` when ``value`` is of any
            other type (``None``, ``bool``, mappings, ...).
    """
    if isinstance(value, (Literal, Node)):
        return value
    if isinstance(value, Fragment):
        return Node(value)
    if isinstance(value, str):
        return Literal(value)
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return Literal(str(value))
    raise invalid_operand_error(value)


def as_fragment(value: OperandLike) -> Fragment:
    """Shortcut for ``resolve_operand(value).to_fragment()``."""
    return resolve_operand(value).to_fragment()
