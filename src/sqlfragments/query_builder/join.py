"""Routing of JOIN conditions between the ON and OR groups.

A JOIN fragment keeps its conditions in two groups: ``ON`` (joined with
``AND``) and ``OR`` (joined with ``OR``). Which group a condition lands in
is decided by a two-state machine. The state starts at ``ON``; a condition
written as a ``(directive, rule)`` pair moves the state, and every plain
condition after it stays in the current state:

    >>> router = JoinRouter()
    >>> router.route("a = b")
    (<JoinGroup.ON: 'ON'>, 'a = b')
    >>> router.route(("or", "c = d"))
    (<JoinGroup.OR: 'OR'>, 'c = d')
    >>> router.route("e = f")
    (<JoinGroup.OR: 'OR'>, 'e = f')
"""

from typing import Any, Optional, Tuple

from sqlfragments.constants import JoinGroup

_DIRECTIVES = {
    "AND": JoinGroup.ON,
    "OR": JoinGroup.OR,
}


def split_directive(entry: Any) -> Tuple[Optional[str], Any]:
    """Separate an optional routing directive from a condition.

    Only a two-element list or tuple whose first element is text counts as
    ``(directive, rule)``. Anything else is returned as the rule unchanged.
    """
    if isinstance(entry, (list, tuple)) and len(entry) == 2 and isinstance(entry[0], str):
        return entry[0], entry[1]
    return None, entry


class JoinRouter:
    """Two-state machine over {ON, OR} for one JOIN's conditions."""

    def __init__(self) -> None:
        self.state = JoinGroup.ON

    def advance(self, directive: Optional[str]) -> JoinGroup:
        """Apply ``directive`` and return the resulting state.

        ``None`` keeps the state. ``"OR"`` moves to OR, any other text
        (``"AND"`` included) moves back to ON. Matching ignores case.
        """
        if directive is not None:
            self.state = _DIRECTIVES.get(directive.strip().upper(), JoinGroup.ON)
        return self.state

    def route(self, entry: Any) -> Tuple[JoinGroup, Any]:
        """Return the target group and the bare rule for ``entry``."""
        directive, rule = split_directive(entry)
        return self.advance(directive), rule
