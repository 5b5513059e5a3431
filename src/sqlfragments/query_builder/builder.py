"""SQL statement builder on top of the fragment tree.

``QueryBuilder`` owns one root ``Fragment`` per statement. A start
operation (``select``, ``insert``, ``update``, ``delete``) creates the root;
every clause operation adds children to a named group of that root with the
punctuation of the clause. Clause operations can be called in any order and
can be repeated: a second ``where`` call appends to the same WHERE group.
When the statement is finalized the root groups are put into the canonical
clause order, so the output does not depend on call order.

Example:
    >>> QueryBuilder().select(["id", "name"]).from_("users").where({"id": 5}).get_raw()
    'SELECT id, name FROM users WHERE id = 5'

Condition mappings (``where``, ``having``, ``or_where``, ``or_having``):
    - ``{"age": "> 18"}``: text is raw rule text, rendered ``age > 18``
    - ``{"id": 5}``: a number is shorthand for equality, ``id = 5``
    - ``{"ignored": fragment}``: a Fragment is inserted verbatim, e.g. the
      output of ``RuleExpressionBuilder.between(...)``

No value is quoted or escaped. Callers are responsible for safe values.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any, List, Optional, Sequence, Tuple, Union

from sqlfragments.common.exceptions import builder_not_started_error, validation_error
from sqlfragments.constants import (
    CLAUSE_ORDER,
    JOIN_ORDER,
    ClauseGroup,
    JoinGroup,
    JoinType,
    QueryType,
)
from sqlfragments.fragment import Fragment, Node, OperandLike, as_fragment
from sqlfragments.logging import get_logger
from sqlfragments.query_builder.join import JoinRouter
from sqlfragments.query_builder.rules import RuleExpressionBuilder
from sqlfragments.settings import BuilderSettings, get_settings
from sqlfragments.utils.decorators import traced

logger = get_logger(__name__)

Fields = Union[OperandLike, Sequence[OperandLike], Mapping]
Conditions = Union[Mapping, Sequence[OperandLike]]


def _entries(values: Any) -> List[Tuple[Optional[str], Any]]:
    """Normalize a field argument into ``(key, value)`` pairs.

    A single operand gives one pair with no key, a sequence gives one pair
    per item, a mapping gives its items.
    """
    if isinstance(values, Mapping):
        return list(values.items())
    if isinstance(values, (str, Fragment)) or not isinstance(values, Iterable):
        return [(None, values)]
    return [(None, value) for value in values]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _is_node(value: Any) -> bool:
    """True for values that resolve to a caller supplied fragment."""
    return isinstance(value, (Fragment, Node))


def _field_rule(field: str, rule: OperandLike) -> Fragment:
    """``field`` followed by ``rule``; numbers become ``= number``."""
    if _is_number(rule):
        rule = RuleExpressionBuilder.equal_right(rule)
    return (
        Fragment(field)
        .add_children("rule", as_fragment(rule))
        .set_group_format("rule", prefix=" ", suppress_name=True)
    )


def _aliased(value: OperandLike, alias: Optional[str], group: str, **group_format: Any) -> Fragment:
    """``value`` followed by ``alias`` in ``group``.

    The alias goes on a new node rather than on ``value`` itself, so a
    bordered sub-query keeps the alias outside its closing border.
    """
    expression = as_fragment(value)
    if not isinstance(alias, str):
        return expression
    return (
        Fragment()
        .add_children("expression", expression)
        .set_group_format("expression", suppress_name=True)
        .add_children(group, Fragment(alias))
        .set_group_format(group, **group_format)
    )


def _condition(field: Optional[str], rule: OperandLike) -> Fragment:
    """One WHERE/HAVING entry. Fragments and Nodes are used verbatim."""
    if field is None or _is_node(rule):
        return as_fragment(rule)
    return _field_rule(field, rule)


class QueryBuilder:
    """Stateful SQL statement builder.

    Every method returns the builder, so a statement is usually written as
    one chain ending in ``get_raw()``. Starting a new statement discards the
    previous one.

    Args:
        settings: Builder settings; the process-wide settings are used when
            omitted.
    """

    def __init__(self, settings: Optional[BuilderSettings] = None):
        self.settings = settings or get_settings()
        self._root: Optional[Fragment] = None
        self.query_type: Optional[QueryType] = None

    # Statement starts

    def select(self, fields: Fields, distinct: bool = False) -> "QueryBuilder":
        """Start a SELECT statement.

        Args:
            fields: One expression, a sequence of expressions, or a mapping
                ``alias -> expression`` rendered as ``expression AS alias``.
            distinct: Emit ``SELECT DISTINCT``.
        """
        query_type = QueryType.SELECT_DISTINCT if distinct else QueryType.SELECT
        group = ClauseGroup.SELECT_FIELDS.value

        expressions = [
            _aliased(field, alias, "AS", prefix=" ", name_separator=" ")
            for alias, field in _entries(fields)
        ]

        self._start(query_type).add_children(group, expressions).set_group_format(
            group, separator=", ", postfix=" ", suppress_name=True
        )
        return self

    def update(self, table: OperandLike, values: Mapping) -> "QueryBuilder":
        """Start an UPDATE statement.

        Args:
            table: Table to update.
            values: Mapping ``column -> value`` rendered as ``column = value``.
        """
        table_group = ClauseGroup.TABLE.value
        set_group = ClauseGroup.SET.value

        assignments = [
            RuleExpressionBuilder.equal(column, value)
            for column, value in values.items()
        ]

        (
            self._start(QueryType.UPDATE)
            .add_children(table_group, as_fragment(table))
            .set_group_format(table_group, suppress_name=True)
            .add_children(set_group, assignments)
            .set_group_format(set_group, separator=", ", prefix=" ", name_separator=" ")
        )
        return self

    def insert(
        self,
        into: OperandLike,
        fields: Sequence[OperandLike],
        values: Union[Fragment, Node, Sequence[Sequence[OperandLike]]],
    ) -> "QueryBuilder":
        """Start an INSERT statement.

        Args:
            into: Target table.
            fields: Column names, rendered as ``(a, b)``.
            values: Rows of values, rendered as ``VALUES (1, 2), (3, 4)``,
                or a single Fragment or Node (e.g. a sub-query) placed after
                ``VALUES``.
        """
        into_group = ClauseGroup.INTO.value
        fields_group = ClauseGroup.FIELDS.value
        values_group = ClauseGroup.VALUES.value

        field_list = (
            Fragment(prefix="(", postfix=")")
            .add_children("fields", [as_fragment(field) for field in fields])
            .set_group_format("fields", separator=", ", suppress_name=True)
        )

        root = (
            self._start(QueryType.INSERT)
            .add_children(into_group, as_fragment(into))
            .set_group_format(into_group, name_separator=" ")
            .add_children(fields_group, field_list)
            .set_group_format(fields_group, suppress_name=True)
        )

        if _is_node(values):
            root.add_children(values_group, as_fragment(values)).set_group_format(
                values_group, prefix=" ", name_separator=" "
            )
            return self

        rows = []
        for row in values:
            rows.append(
                Fragment(prefix="(", postfix=")")
                .add_children("values", [as_fragment(value) for value in row])
                .set_group_format("values", separator=", ", suppress_name=True)
            )
        root.add_children(values_group, rows).set_group_format(
            values_group, separator=", ", prefix=" ", name_separator=" "
        )
        return self

    def delete(self) -> "QueryBuilder":
        """Start a DELETE statement; add the table with ``from_``."""
        self._start(QueryType.DELETE)
        return self

    # Clauses

    def from_(self, tables: Fields) -> "QueryBuilder":
        """Add tables to FROM.

        Args:
            tables: One table, a sequence of tables, or a mapping
                ``alias -> table`` rendered as ``table alias``.
        """
        group = ClauseGroup.FROM.value

        sources = [
            _aliased(table, alias, "as", prefix=" ", suppress_name=True)
            for alias, table in _entries(tables)
        ]

        self._require_root("from_").add_children(group, sources).set_group_format(
            group, separator=", ", name_separator=" "
        )
        return self

    def where(self, conditions: Conditions) -> "QueryBuilder":
        """Add conditions to WHERE, joined with AND."""
        return self._add_conditions(
            "where", ClauseGroup.WHERE.value, conditions,
            separator=" AND ", prefix=" ", name_separator=" ",
        )

    def or_where(self, conditions: Conditions) -> "QueryBuilder":
        """Add conditions after WHERE, each introduced by OR."""
        return self._add_conditions(
            "or_where", ClauseGroup.OR_WHERE.value, conditions,
            separator=" OR ", prefix=" ", name_separator=" ",
        )

    def having(self, conditions: Conditions) -> "QueryBuilder":
        """Add conditions to HAVING, joined with AND."""
        return self._add_conditions(
            "having", ClauseGroup.HAVING.value, conditions,
            separator=" AND ", prefix=" ", name_separator=" ",
        )

    def or_having(self, conditions: Conditions) -> "QueryBuilder":
        """Add conditions after HAVING, each introduced by OR."""
        return self._add_conditions(
            "or_having", ClauseGroup.OR_HAVING.value, conditions,
            separator=" OR ", prefix=" OR", name_separator=" ", suppress_name=True,
        )

    def join(
        self,
        table: OperandLike,
        alias: Optional[str] = None,
        on_rules: Conditions = (),
        join_type: Union[JoinType, str] = JoinType.JOIN,
    ) -> "QueryBuilder":
        """Add a JOIN.

        Args:
            table: Joined table or sub-query.
            alias: Optional alias written after the table.
            on_rules: Mapping ``field -> rule`` rendered as ``field rule``,
                or a sequence of rules. Any entry may be an
                ``("OR", rule)`` / ``("AND", rule)`` pair that switches the
                group the entry and all later entries go to.
            join_type: JoinType member or its value (``"LEFT"``, ...).
        """
        root = self._require_root("join")
        join_type = self._join_type(join_type)

        table_group = JoinGroup.TABLE.value
        node = (
            Fragment(join_type.keyword, inner_prefix=" ")
            .add_children(table_group, as_fragment(table))
            .set_group_format(table_group, separator=" ", suppress_name=True)
        )
        if alias is not None:
            node.add_children(table_group, Fragment(alias))

        router = JoinRouter()
        for field, entry in _entries(on_rules):
            target, rule = router.route(entry)
            if isinstance(field, str):
                condition = _field_rule(field, rule)
            else:
                condition = as_fragment(rule)
            node.add_children(target.value, condition)

        (
            node
            .set_group_format(JoinGroup.ON.value, separator=" AND ", prefix=" ", name_separator=" ")
            .set_group_format(JoinGroup.OR.value, separator=" OR ", prefix=" ", name_separator=" ")
            .reorder_groups(JOIN_ORDER)
        )

        group = ClauseGroup.JOIN.value
        root.add_children(group, node).set_group_format(
            group, separator=" ", prefix=" ", suppress_name=True
        )
        return self

    def group_by(self, fields: Union[OperandLike, Sequence[OperandLike]]) -> "QueryBuilder":
        """Add expressions to GROUP BY."""
        group = ClauseGroup.GROUP_BY.value
        expressions = [as_fragment(field) for _, field in _entries(fields)]
        self._require_root("group_by").add_children(group, expressions).set_group_format(
            group, separator=", ", prefix=" ", name_separator=" "
        )
        return self

    def order_by(self, order: Fields) -> "QueryBuilder":
        """Add expressions to ORDER BY.

        Args:
            order: Mapping ``field -> direction`` rendered as
                ``field DIRECTION`` (a Fragment or Node value is used verbatim), or
                one or more fields without a direction.
        """
        group = ClauseGroup.ORDER_BY.value

        expressions = []
        for field, direction in _entries(order):
            if field is None or _is_node(direction):
                expressions.append(as_fragment(direction))
                continue
            expressions.append(
                Fragment(field, inner_prefix=" ")
                .add_children("order", as_fragment(direction))
                .set_group_format("order", suppress_name=True)
            )

        self._require_root("order_by").add_children(group, expressions).set_group_format(
            group, separator=", ", prefix=" ", name_separator=" "
        )
        return self

    def limit(self, limit: int, offset: Optional[int] = None) -> "QueryBuilder":
        group = ClauseGroup.LIMIT.value
        self._require_root("limit").add_children(group, as_fragment(limit)).set_group_format(
            group, prefix=" ", name_separator=" "
        )
        if offset is not None:
            self.offset(offset)
        return self

    def offset(self, offset: int) -> "QueryBuilder":
        group = ClauseGroup.OFFSET.value
        self._require_root("offset").add_children(group, as_fragment(offset)).set_group_format(
            group, prefix=" ", name_separator=" "
        )
        return self

    # Finalization

    def get_expression(self) -> Fragment:
        """Return the root fragment with its clauses in canonical order."""
        return self._require_root("get_expression").reorder_groups(CLAUSE_ORDER)

    @traced(
        "sqlfragments.query_builder.get_raw",
        attribute_getter=lambda self: {
            "sqlfragments.query_type": self.query_type.value if self.query_type else None,
        },
    )
    def get_raw(self) -> str:
        """Render the statement to SQL text."""
        sql = self.get_expression().render()
        logger.debug(
            "Rendered %s statement",
            self.query_type.value,
            extra={"query_type": self.query_type.value, "sql_length": len(sql)},
        )
        return sql

    def get_as_subquery(self, borders: Optional[Sequence[str]] = None) -> Fragment:
        """Wrap the statement so it can be used as a value elsewhere.

        Args:
            borders: Opening and closing text. When omitted, or when not a
                pair of strings, the configured ``subquery_borders`` are
                used.
        """
        opening, closing = self._subquery_borders(borders)
        wrapper = Fragment(prefix=opening, postfix=closing)
        return wrapper.add_children("sub_expression", self.get_expression()).set_group_format(
            "sub_expression", suppress_name=True
        )

    def __str__(self) -> str:
        return self.get_raw()

    # Internals

    def _start(self, query_type: QueryType) -> Fragment:
        if self._root is not None:
            logger.debug(
                "Discarding %s statement, starting %s",
                self.query_type.value,
                query_type.value,
            )
        self._root = Fragment(query_type.value, inner_prefix=" ")
        self.query_type = query_type
        logger.debug("Started %s statement", query_type.value)
        return self._root

    def _require_root(self, operation: str) -> Fragment:
        if self._root is None:
            raise builder_not_started_error(operation)
        return self._root

    def _add_conditions(
        self,
        operation: str,
        group: str,
        conditions: Conditions,
        **group_format: Any,
    ) -> "QueryBuilder":
        root = self._require_root(operation)
        rules = [_condition(field, rule) for field, rule in _entries(conditions)]
        root.add_children(group, rules).set_group_format(group, **group_format)
        return self

    def _subquery_borders(self, borders: Optional[Sequence[str]]) -> Tuple[str, str]:
        default = tuple(self.settings.subquery_borders)
        if borders is None:
            return default
        if (
            isinstance(borders, (list, tuple))
            and len(borders) == 2
            and all(isinstance(border, str) for border in borders)
        ):
            return borders[0], borders[1]
        logger.warning(
            "Invalid sub-query borders %r, falling back to %r",
            borders,
            default,
        )
        return default

    @staticmethod
    def _join_type(join_type: Union[JoinType, str]) -> JoinType:
        if isinstance(join_type, JoinType):
            return join_type
        try:
            return JoinType(join_type.strip().upper())
        except (AttributeError, ValueError):
            raise validation_error(
                f"Unknown join type {join_type!r}. "
                f"Use one of {', '.join(repr(t.value) for t in JoinType)}",
                field="join_type",
                value=join_type,
            ) from None
