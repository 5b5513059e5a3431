"""Fragment tree node and per-group formatting policy.

A ``Fragment`` is a piece of literal text framing (``prefix``, ``name``,
``inner_prefix``, ``postfix``) plus an ordered collection of named child
groups. Each group carries its own ``GroupFormat`` that decides how its
children are joined and framed. Rendering walks the tree depth-first and
concatenates everything into a single string:

    prefix + name + inner_prefix + <group>... + postfix

where each non-empty group renders as

    group.prefix + (name unless suppressed) + group.name_separator
        + separator.join(children) + group.postfix

Example:
    >>> where = (
    ...     Fragment("id")
    ...     .add_children("rule", Fragment("= 5"))
    ...     .set_group_format("rule", prefix=" ", suppress_name=True)
    ... )
    >>> where.render()
    'id = 5'

The tree performs no validation. A group that was never filled, or that
received an empty list, contributes nothing to the output, not even its
framing text.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class GroupFormat:
    """Formatting policy for one named child group.

    Attributes:
        separator: Text placed between sibling children
        prefix: Text emitted before the group name
        name_separator: Text emitted between the group name and its children
        postfix: Text emitted after the last child
        suppress_name: Omit the group name from the output
    """

    separator: str = ""
    prefix: str = ""
    name_separator: str = ""
    postfix: str = ""
    suppress_name: bool = False

    def wrap(self, name: str, body: str) -> str:
        """Frame an already joined group body."""
        label = "" if self.suppress_name else name
        return f"{self.prefix}{label}{self.name_separator}{body}{self.postfix}"


_DEFAULT_FORMAT = GroupFormat()


class Fragment:
    """A node of the SQL fragment tree.

    Child groups keep the order in which each group name was first used.
    Adding to an existing group appends to it. Every mutating method
    returns ``self`` so calls can be chained.
    """

    def __init__(
        self,
        name: str = "",
        prefix: str = "",
        inner_prefix: str = "",
        postfix: str = "",
    ):
        self.name = name
        self.prefix = prefix
        self.inner_prefix = inner_prefix
        self.postfix = postfix
        self._groups: Dict[str, List[Fragment]] = {}
        self._formats: Dict[str, GroupFormat] = {}

    def add_children(
        self,
        group: str,
        children: Union[Fragment, Sequence[Fragment]],
    ) -> Fragment:
        """Append one or more children to ``group``.

        The group is created at the end of the current order when it does
        not exist yet.
        """
        members = self._groups.setdefault(group, [])
        if isinstance(children, Fragment):
            members.append(children)
        else:
            members.extend(children)
        return self

    def set_group_format(
        self,
        group: str,
        separator: Optional[str] = None,
        prefix: Optional[str] = None,
        name_separator: Optional[str] = None,
        postfix: Optional[str] = None,
        suppress_name: Optional[bool] = None,
    ) -> Fragment:
        """Update the formatting policy of ``group``.

        Only the arguments that are not None change; the rest keep their
        previous value. Formatting a group that has no children yet is
        allowed and takes effect once children are added.
        """
        changes = {
            "separator": separator,
            "prefix": prefix,
            "name_separator": name_separator,
            "postfix": postfix,
            "suppress_name": suppress_name,
        }
        current = self._formats.get(group, _DEFAULT_FORMAT)
        self._formats[group] = replace(
            current, **{k: v for k, v in changes.items() if v is not None}
        )
        return self

    def reorder_groups(self, order: Iterable[str]) -> Fragment:
        """Replace the group order with ``order``.

        Only groups that exist and have children are kept. Any group whose
        name is missing from ``order`` is dropped from this node for good;
        its formatting policy is kept in case the group is filled again.
        """
        reordered: Dict[str, List[Fragment]] = {}
        for group in order:
            members = self._groups.get(group)
            if members:
                reordered[group] = members
        self._groups = reordered
        return self

    @property
    def group_names(self) -> Tuple[str, ...]:
        """Group names in current render order."""
        return tuple(self._groups)

    def children(self, group: str) -> Tuple[Fragment, ...]:
        return tuple(self._groups.get(group, ()))

    def group_format(self, group: str) -> GroupFormat:
        return self._formats.get(group, _DEFAULT_FORMAT)

    def render(self) -> str:
        """Render the subtree to a string without modifying it."""
        rendered_groups = "".join(
            self._render_group(group, members)
            for group, members in self._groups.items()
        )
        return f"{self.prefix}{self.name}{self.inner_prefix}{rendered_groups}{self.postfix}"

    def _render_group(self, group: str, members: List[Fragment]) -> str:
        if not members:
            return ""
        fmt = self.group_format(group)
        body = fmt.separator.join(child.render() for child in members)
        return fmt.wrap(group, body)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Fragment(name={self.name!r}, prefix={self.prefix!r}, "
            f"inner_prefix={self.inner_prefix!r}, postfix={self.postfix!r}, "
            f"groups={list(self._groups)!r})"
        )
