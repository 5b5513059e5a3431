"""Unit tests for SELECT statements."""

import itertools

import pytest

from sqlfragments.common.exceptions import ErrorCode, FragmentError
from sqlfragments.constants import QueryType
from sqlfragments.fragment import Fragment, Literal, Node
from sqlfragments.query_builder import RuleExpressionBuilder as Rules


class TestSelect:
    """Test the SELECT start operation."""

    def test_basic_select(self, builder):
        sql = builder.select(["id", "name"]).from_("users").where({"id": 5}).get_raw()
        assert sql == "SELECT id, name FROM users WHERE id = 5"

    def test_single_field(self, builder):
        assert builder.select("*").from_("t").get_raw() == "SELECT * FROM t"

    def test_distinct(self, builder):
        sql = builder.select(["city"], distinct=True).from_("users").get_raw()
        assert sql == "SELECT DISTINCT city FROM users"
        assert builder.query_type is QueryType.SELECT_DISTINCT

    def test_aliases(self, builder):
        sql = builder.select({"user_id": "u.id", "total": "SUM(o.amount)"}).from_({"u": "users"}).get_raw()
        assert sql == "SELECT u.id AS user_id, SUM(o.amount) AS total FROM users u"

    def test_fragment_field(self, builder):
        case = Fragment("CASE WHEN a THEN 1 ELSE 0 END")
        assert builder.select([case, "b"]).from_("t").get_raw() == (
            "SELECT CASE WHEN a THEN 1 ELSE 0 END, b FROM t"
        )

    def test_select_without_from_keeps_trailing_space(self, builder):
        assert builder.select("1").get_raw() == "SELECT 1 "

    def test_multiple_from_calls_append(self, builder):
        sql = builder.select("*").from_("a").from_(["b", "c"]).get_raw()
        assert sql == "SELECT * FROM a, b, c"

    def test_new_start_replaces_statement(self, builder):
        builder.select("a").from_("t").where({"x": 1})
        sql = builder.select("b").from_("u").get_raw()
        assert sql == "SELECT b FROM u"


class TestConditions:
    """Test WHERE, OR, HAVING and OR HAVING."""

    def test_raw_rule_text(self, builder):
        sql = builder.select("*").from_("t").where({"age": "> 18", "name": "IS NOT NULL"}).get_raw()
        assert sql == "SELECT * FROM t WHERE age > 18 AND name IS NOT NULL"

    def test_fragment_rule_is_verbatim(self, builder):
        sql = (
            builder.select("*").from_("t")
            .where({"ignored": Rules.between("age", 18, 30)})
            .get_raw()
        )
        assert sql == "SELECT * FROM t WHERE age BETWEEN 18 AND 30"

    def test_sequence_of_rules(self, builder):
        sql = (
            builder.select("*").from_("t")
            .where([Rules.equal("a", 1), Rules.in_("b", "1, 2")])
            .get_raw()
        )
        assert sql == "SELECT * FROM t WHERE a = 1 AND b IN(1, 2)"

    def test_fragment_value_ignores_field_name(self, builder):
        sql = builder.select("*").from_("t").where({"id": Rules.in_right("1, 2")}).get_raw()
        assert sql == "SELECT * FROM t WHERE IN(1, 2)"

    def test_node_rule_is_verbatim(self, builder):
        sql = builder.select("*").from_("t").where({"k": Node(Rules.equal("a", 1))}).get_raw()
        assert sql == "SELECT * FROM t WHERE a = 1"

    def test_literal_rule_is_rule_text(self, builder):
        sql = builder.select("*").from_("t").having({"COUNT(*)": Literal("> 2")}).get_raw()
        assert sql == "SELECT * FROM t HAVING COUNT(*) > 2"

    def test_bool_value_is_rejected(self, builder):
        builder.select("*").from_("t")
        with pytest.raises(FragmentError) as exc_info:
            builder.where({"active": True})
        assert exc_info.value.error_code is ErrorCode.INVALID_OPERAND

    def test_repeated_where_appends(self, builder):
        sql = builder.select("*").from_("t").where({"a": 1}).where({"b": 2}).get_raw()
        assert sql == "SELECT * FROM t WHERE a = 1 AND b = 2"

    def test_or_where(self, builder):
        sql = builder.select("*").from_("t").where({"a": 1}).or_where({"b": 2, "c": 3}).get_raw()
        assert sql == "SELECT * FROM t WHERE a = 1 OR b = 2 OR c = 3"

    def test_having_and_or_having(self, builder):
        sql = (
            builder.select({"n": "COUNT(*)"}).from_("t")
            .group_by(["city", "country"])
            .having({"COUNT(*)": "> 1"})
            .or_having({"MAX(age)": "> 60", "MIN(age)": "< 18"})
            .get_raw()
        )
        assert sql == (
            "SELECT COUNT(*) AS n FROM t GROUP BY city, country "
            "HAVING COUNT(*) > 1 OR MAX(age) > 60 OR MIN(age) < 18"
        )

    def test_empty_where_renders_nothing(self, builder):
        assert builder.select("*").from_("t").where({}).get_raw() == "SELECT * FROM t"


class TestOrderingAndPaging:
    def test_order_by_directions(self, builder):
        sql = builder.select("*").from_("t").order_by({"name": "ASC", "age": "DESC"}).get_raw()
        assert sql == "SELECT * FROM t ORDER BY name ASC, age DESC"

    def test_order_by_fields_and_fragment(self, builder):
        sql = builder.select("*").from_("t").order_by(["name", Fragment("RANDOM()")]).get_raw()
        assert sql == "SELECT * FROM t ORDER BY name, RANDOM()"

    def test_order_by_node_is_verbatim(self, builder):
        sql = builder.select("*").from_("t").order_by({"k": Node(Fragment("RANDOM()"))}).get_raw()
        assert sql == "SELECT * FROM t ORDER BY RANDOM()"

    def test_limit_offset(self, builder):
        sql = builder.select("*").from_("t").limit(10, 5).get_raw()
        assert sql.endswith(" LIMIT 10 OFFSET 5")
        assert sql == "SELECT * FROM t LIMIT 10 OFFSET 5"

    def test_offset_alone(self, builder):
        assert builder.select("*").from_("t").offset(20).get_raw() == "SELECT * FROM t OFFSET 20"


class TestClauseOrder:
    """Output order is fixed regardless of call order."""

    CLAUSES = [
        lambda b: b.from_({"u": "users"}),
        lambda b: b.join("orders", "o", {"o.user_id": "= u.id"}),
        lambda b: b.where({"u.active": 1}),
        lambda b: b.or_where({"u.admin": 1}),
        lambda b: b.group_by("u.id"),
        lambda b: b.having({"COUNT(o.id)": "> 2"}),
        lambda b: b.order_by({"u.id": "DESC"}),
        lambda b: b.limit(5, 10),
    ]

    EXPECTED = (
        "SELECT u.id FROM users u JOIN orders o ON o.user_id = u.id "
        "WHERE u.active = 1 OR u.admin = 1 GROUP BY u.id HAVING COUNT(o.id) > 2 "
        "ORDER BY u.id DESC LIMIT 5 OFFSET 10"
    )

    def test_canonical_order(self, builder):
        builder.select("u.id")
        for clause in self.CLAUSES:
            clause(builder)
        assert builder.get_raw() == self.EXPECTED

    @pytest.mark.parametrize("seed", range(6))
    def test_permutations_render_identically(self, builder, seed):
        permutation = list(itertools.permutations(self.CLAUSES))[seed * 997]
        builder.select("u.id")
        for clause in permutation:
            clause(builder)
        assert builder.get_raw() == self.EXPECTED

    def test_get_raw_is_repeatable(self, builder):
        builder.select("u.id")
        for clause in reversed(self.CLAUSES):
            clause(builder)
        assert builder.get_raw() == builder.get_raw() == self.EXPECTED
        assert builder.get_expression().render() == self.EXPECTED


class TestBuilderState:
    @pytest.mark.parametrize(
        "call",
        [
            lambda b: b.where({"a": 1}),
            lambda b: b.from_("t"),
            lambda b: b.join("t", None, []),
            lambda b: b.limit(1),
            lambda b: b.get_raw(),
        ],
    )
    def test_clause_before_start_raises(self, builder, call):
        with pytest.raises(FragmentError) as exc_info:
            call(builder)
        assert exc_info.value.error_code is ErrorCode.BUILDER_NOT_STARTED

    def test_str_renders_statement(self, builder):
        builder.select("a").from_("t")
        assert str(builder) == "SELECT a FROM t"
