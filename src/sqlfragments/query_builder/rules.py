"""Comparison and logical operator fragments.

``RuleExpressionBuilder`` builds the small subtrees used as conditions in
WHERE, HAVING and JOIN clauses. Every operand may be raw text, a number or
a ``Fragment``; raw values become leaf fragments.

Examples:
    >>> RuleExpressionBuilder.equal("u.id", "o.user_id").render()
    'u.id = o.user_id'
    >>> RuleExpressionBuilder.between("age", "18", "30").render()
    'age BETWEEN 18 AND 30'
    >>> RuleExpressionBuilder.in_("id", "1, 2, 3").render()
    'id IN(1, 2, 3)'

``in_``, ``like`` and ``between`` attach their right hand side as a named
group of the left operand. When the left operand is a ``Fragment`` it is
extended in place and returned.
"""

from sqlfragments.fragment import Fragment, OperandLike, as_fragment


class RuleExpressionBuilder:
    """Stateless constructors for operator fragments."""

    @staticmethod
    def rule(left: OperandLike, right: OperandLike, operation: str) -> Fragment:
        """Binary rule rendered as ``left OPERATION right``."""
        return (
            Fragment()
            .add_children("operands", [as_fragment(left), as_fragment(right)])
            .set_group_format("operands", separator=f" {operation} ", suppress_name=True)
        )

    @staticmethod
    def equal(left: OperandLike, right: OperandLike) -> Fragment:
        return RuleExpressionBuilder.rule(left, right, "=")

    @staticmethod
    def not_equal(left: OperandLike, right: OperandLike) -> Fragment:
        return RuleExpressionBuilder.rule(left, right, "<>")

    @staticmethod
    def less(left: OperandLike, right: OperandLike) -> Fragment:
        return RuleExpressionBuilder.rule(left, right, "<")

    @staticmethod
    def less_or_equal(left: OperandLike, right: OperandLike) -> Fragment:
        return RuleExpressionBuilder.rule(left, right, "<=")

    @staticmethod
    def more(left: OperandLike, right: OperandLike) -> Fragment:
        return RuleExpressionBuilder.rule(left, right, ">")

    @staticmethod
    def more_or_equal(left: OperandLike, right: OperandLike) -> Fragment:
        return RuleExpressionBuilder.rule(left, right, ">=")

    @staticmethod
    def equal_right(right: OperandLike) -> Fragment:
        """Right half of an equality, ``= right``.

        Meant as the rule value of a WHERE mapping entry, where the field
        name supplies the left side.
        """
        return (
            Fragment()
            .add_children("=", as_fragment(right))
            .set_group_format("=", name_separator=" ")
        )

    @staticmethod
    def in_(left: OperandLike, values: OperandLike) -> Fragment:
        """``left IN(values)``; ``values`` may be a list text or a sub-query."""
        return (
            as_fragment(left)
            .add_children("IN", as_fragment(values))
            .set_group_format("IN", prefix=" ", name_separator="(", postfix=")")
        )

    @staticmethod
    def in_right(values: OperandLike) -> Fragment:
        """``IN(values)`` without a left operand."""
        return (
            Fragment()
            .add_children("IN", as_fragment(values))
            .set_group_format("IN", name_separator="(", postfix=")")
        )

    @staticmethod
    def like(left: OperandLike, pattern: OperandLike) -> Fragment:
        return (
            as_fragment(left)
            .add_children("LIKE", as_fragment(pattern))
            .set_group_format("LIKE", prefix=" ", name_separator=" ")
        )

    @staticmethod
    def between(left: OperandLike, start: OperandLike, end: OperandLike) -> Fragment:
        return (
            as_fragment(left)
            .add_children("BETWEEN", [as_fragment(start), as_fragment(end)])
            .set_group_format("BETWEEN", separator=" AND ", prefix=" ", name_separator=" ")
        )

    @staticmethod
    def not_(operand: OperandLike) -> Fragment:
        """``NOT operand``."""
        return (
            Fragment()
            .add_children("NOT", as_fragment(operand))
            .set_group_format("NOT", name_separator=" ")
        )
