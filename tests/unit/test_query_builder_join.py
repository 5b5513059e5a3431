"""Unit tests for JOIN clauses and their ON / OR routing."""

import pytest

from sqlfragments.common.exceptions import ErrorCode, FragmentError
from sqlfragments.constants import JoinGroup, JoinType
from sqlfragments.query_builder import JoinRouter, QueryBuilder, RuleExpressionBuilder as Rules
from sqlfragments.query_builder.join import split_directive


class TestJoinRouter:
    """Test the ON/OR state machine."""

    def test_starts_in_on(self):
        assert JoinRouter().state is JoinGroup.ON

    def test_plain_entries_stay_in_current_state(self):
        router = JoinRouter()
        assert router.route("a") == (JoinGroup.ON, "a")
        assert router.route("b") == (JoinGroup.ON, "b")

    def test_or_directive_persists(self):
        router = JoinRouter()
        assert router.route(("OR", "a")) == (JoinGroup.OR, "a")
        assert router.route("b") == (JoinGroup.OR, "b")

    def test_and_directive_returns_to_on(self):
        router = JoinRouter()
        router.route(["or", "a"])
        assert router.route(["And", "b"]) == (JoinGroup.ON, "b")
        assert router.route("c") == (JoinGroup.ON, "c")

    def test_unknown_directive_means_on(self):
        router = JoinRouter()
        router.advance("OR")
        assert router.advance("XOR") is JoinGroup.ON

    @pytest.mark.parametrize(
        "entry, expected",
        [
            (("OR", "a"), ("OR", "a")),
            ("a = b", (None, "a = b")),
            (("a", "b", "c"), (None, ("a", "b", "c"))),
            ((1, "b"), (None, (1, "b"))),
        ],
    )
    def test_split_directive(self, entry, expected):
        assert split_directive(entry) == expected


class TestJoin:
    """Test rendering of JOIN clauses."""

    def test_plain_join(self, builder):
        sql = builder.select("*").from_({"u": "users"}).join("orders", "o", {"o.user_id": "= u.id"}).get_raw()
        assert sql == "SELECT * FROM users u JOIN orders o ON o.user_id = u.id"

    @pytest.mark.parametrize(
        "join_type, keyword",
        [
            (JoinType.LEFT, "LEFT JOIN"),
            (JoinType.INNER, "INNER JOIN"),
            (JoinType.RIGHT, "RIGHT JOIN"),
            ("left", "LEFT JOIN"),
            ("", "JOIN"),
        ],
    )
    def test_join_types(self, builder, join_type, keyword):
        sql = builder.select("*").from_("a").join("b", None, ["a.id = b.id"], join_type).get_raw()
        assert sql == f"SELECT * FROM a {keyword} b ON a.id = b.id"

    def test_unknown_join_type_raises(self, builder):
        builder.select("*").from_("a")
        with pytest.raises(FragmentError) as exc_info:
            builder.join("b", None, [], "CROSS")
        assert exc_info.value.error_code is ErrorCode.VALIDATION_ERROR

    def test_multiple_on_rules_joined_with_and(self, builder):
        sql = (
            builder.select("*").from_("a")
            .join("b", None, {"b.a_id": "= a.id", "b.active": 1})
            .get_raw()
        )
        assert sql == "SELECT * FROM a JOIN b ON b.a_id = a.id AND b.active = 1"

    def test_or_routing(self, builder):
        sql = (
            builder.select("*").from_("a")
            .join("b", None, ["b.x = a.x", ("OR", "b.y = a.y"), "b.z = a.z"])
            .get_raw()
        )
        assert sql == "SELECT * FROM a JOIN b ON b.x = a.x OR b.y = a.y OR b.z = a.z"

    def test_or_routing_with_field_keys(self, builder):
        sql = (
            builder.select("*").from_("a")
            .join("b", "bb", {"bb.x": ("or", "= a.x"), "bb.y": "= a.y", "bb.k": ("AND", "= a.k")})
            .get_raw()
        )
        assert sql == "SELECT * FROM a JOIN b bb ON bb.k = a.k OR bb.x = a.x OR bb.y = a.y"

    def test_rule_fragments(self, builder):
        sql = (
            builder.select("*").from_("a")
            .join("b", None, [Rules.equal("a.id", "b.id"), ("OR", Rules.not_("b.deleted"))])
            .get_raw()
        )
        assert sql == "SELECT * FROM a JOIN b ON a.id = b.id OR NOT b.deleted"

    def test_join_without_conditions(self, builder):
        assert builder.select("*").from_("a").join("b").get_raw() == "SELECT * FROM a JOIN b"

    def test_multiple_joins_are_space_separated(self, builder):
        sql = (
            builder.select("*").from_("a")
            .join("b", None, ["b.a = a.id"], JoinType.LEFT)
            .join("c", None, ["c.b = b.id"], JoinType.INNER)
            .get_raw()
        )
        assert sql == "SELECT * FROM a LEFT JOIN b ON b.a = a.id INNER JOIN c ON c.b = b.id"

    def test_join_subquery(self, builder, settings):
        recent = QueryBuilder(settings).select("*").from_("orders").where({"year": 2024}).get_as_subquery()
        sql = builder.select("*").from_("users").join(recent, "r", ["r.user_id = users.id"]).get_raw()
        assert sql == (
            "SELECT * FROM users JOIN (SELECT * FROM orders WHERE year = 2024) r "
            "ON r.user_id = users.id"
        )
