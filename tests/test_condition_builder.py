"""Unit tests for ConditionBuilder."""
from __future__ import annotations

import pytest

from litecrud.compile.condition_builder import ConditionBuilder
from litecrud.compile.sqlite import SQLiteCompiler
from litecrud.errors import ConditionError

WHERE = ConditionBuilder(SQLiteCompiler())


@pytest.mark.parametrize("where", [None, {}])
def test_empty_condition_compiles_to_nothing(where):
    r = WHERE.build(where)
    assert r.sql == ""
    assert r.params == []
    assert not r


def test_literal_means_equality():
    r = WHERE.build({"username": "alice"})
    assert r.sql == ' WHERE "username" = ?'
    assert r.params == ["alice"]


@pytest.mark.parametrize(
    ("op", "sql_op"),
    [
        ("eq", "="),
        ("neq", "!="),
        ("gt", ">"),
        ("gte", ">="),
        ("lt", "<"),
        ("lte", "<="),
        ("like", "LIKE"),
    ],
)
def test_comparison_operators(op, sql_op):
    r = WHERE.build({"age": {op: 30}})
    assert r.sql == f' WHERE "age" {sql_op} ?'
    assert r.params == [30]


def test_in_list_expands_placeholders_in_order():
    r = WHERE.build({"role": {"in": ["admin", "owner", "viewer"]}})
    assert r.sql == ' WHERE "role" IN (?, ?, ?)'
    assert r.params == ["admin", "owner", "viewer"]


def test_in_empty_list():
    r = WHERE.build({"role": {"in": []}})
    assert r.sql == ' WHERE "role" IN ()'
    assert r.params == []


def test_between_binds_both_bounds():
    r = WHERE.build({"age": {"between": [18, 30]}})
    assert r.sql == ' WHERE "age" BETWEEN ? AND ?'
    assert r.params == [18, 30]


def test_is_null_true_and_false():
    assert WHERE.build({"email": {"isNull": True}}).sql == ' WHERE "email" IS NULL'
    r = WHERE.build({"email": {"isNull": False}})
    assert r.sql == ' WHERE "email" IS NOT NULL'
    assert r.params == []


def test_is_null_snake_case_key():
    assert WHERE.build({"email": {"is_null": True}}).sql == ' WHERE "email" IS NULL'


def test_fields_joined_with_and_in_map_order():
    r = WHERE.build({
        "status": "active",
        "age": {"gte": 18},
        "email": {"isNull": False},
        "role": {"in": ["a", "b"]},
    })
    assert r.sql == (
        ' WHERE "status" = ? AND "age" >= ? AND "email" IS NOT NULL'
        ' AND "role" IN (?, ?)'
    )
    assert r.params == ["active", 18, "a", "b"]


def test_qualified_field_quotes_each_part():
    r = WHERE.build({"users.id": 1})
    assert r.sql == ' WHERE "users"."id" = ?'


def test_reserved_word_field_is_quoted():
    assert WHERE.build({"order": 1}).sql == ' WHERE "order" = ?'


def test_embedded_quote_in_field_is_escaped():
    r = WHERE.build({'na"me': "x"})
    assert r.sql == ' WHERE "na""me" = ?'


def test_values_are_never_interpolated():
    hostile = "x'; DROP TABLE users; --"
    r = WHERE.build({"username": hostile})
    assert hostile not in r.sql
    assert r.params == [hostile]


def test_eq_none_binds_null():
    r = WHERE.build({"email": {"eq": None}})
    assert r.sql == ' WHERE "email" = ?'
    assert r.params == [None]


def test_multiple_operators_rejected():
    with pytest.raises(ConditionError) as exc_info:
        WHERE.build({"age": {"gt": 1, "lt": 10}})
    err = exc_info.value
    assert err.code == "INVALID_CONDITION"
    assert err.details["field"] == "age"
    assert err.details["operators"] == ["gt", "lt"]


def test_unknown_operator_rejected():
    with pytest.raises(ConditionError):
        WHERE.build({"age": {"approx": 3}})


def test_empty_operator_object_rejected():
    with pytest.raises(ConditionError, match="no operator"):
        WHERE.build({"age": {}})


def test_between_requires_two_bounds():
    with pytest.raises(ConditionError):
        WHERE.build({"age": {"between": [1, 2, 3]}})


def test_error_response_shape():
    with pytest.raises(ConditionError) as exc_info:
        WHERE.build({"age": {"eq": 1, "neq": 2}})
    resp = exc_info.value.to_error_response()
    assert resp["error"] == "INVALID_CONDITION"
    assert "age" in resp["message"]


def test_field_condition_instance_accepted():
    from litecrud.schema.conditions import FieldCondition

    r = WHERE.build({"age": FieldCondition(gte=18)})
    assert r.sql == ' WHERE "age" >= ?'
    assert r.params == [18]
