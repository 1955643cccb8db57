"""Unit tests for the schema models and the QueryResult envelope."""
from __future__ import annotations

import pydantic
import pytest

from litecrud.drivers.base import QueryResult
from litecrud.errors import NotConnectedError
from litecrud.schema.conditions import OPERATOR_KEYS, FieldCondition
from litecrud.schema.connection import ConnectionConfig
from litecrud.schema.table import ColumnDefinition, TableSchema


def test_column_accepts_camel_and_snake_case():
    camel = ColumnDefinition.model_validate(
        {"name": "id", "type": "INTEGER", "primaryKey": True, "autoIncrement": True}
    )
    snake = ColumnDefinition(name="id", type="INTEGER", primary_key=True, auto_increment=True)
    assert camel == snake
    assert camel.nullable is True
    assert camel.unique is False


def test_column_name_must_be_non_empty():
    with pytest.raises(pydantic.ValidationError):
        ColumnDefinition(name="", type="TEXT")


def test_column_extra_keys_rejected():
    with pytest.raises(pydantic.ValidationError):
        ColumnDefinition.model_validate({"name": "a", "type": "TEXT", "indexed": True})


def test_has_default_tracks_explicit_value():
    assert not ColumnDefinition(name="a", type="TEXT").has_default
    assert ColumnDefinition(name="a", type="TEXT", default=None).has_default
    assert ColumnDefinition(name="a", type="TEXT", default=0).has_default


def test_duplicate_column_names_rejected():
    with pytest.raises(pydantic.ValidationError, match="more than once"):
        TableSchema(
            name="t",
            columns=[
                ColumnDefinition(name="a", type="TEXT"),
                ColumnDefinition(name="a", type="INTEGER"),
            ],
        )


def test_table_schema_lookup():
    schema = TableSchema(
        name="t",
        columns=[ColumnDefinition(name="a", type="TEXT"), ColumnDefinition(name="b", type="INTEGER")],
    )
    assert schema.column_names == ["a", "b"]
    assert schema.get_column("b").type == "INTEGER"
    assert schema.get_column("zzz") is None


def test_field_condition_operators_follow_scan_order():
    cond = FieldCondition.model_validate({"isNull": True, "like": "a%", "eq": 1})
    assert cond.operators == ["eq", "like", "isNull"]
    assert cond.operand("isNull") is True
    assert cond.operand("like") == "a%"


def test_field_condition_in_alias():
    cond = FieldCondition.model_validate({"in": (1, 2)})
    assert cond.operators == ["in"]
    assert cond.operand("in") == [1, 2]


def test_operator_keys_scan_order():
    assert OPERATOR_KEYS == (
        "eq", "neq", "gt", "gte", "lt", "lte", "like", "in", "between", "isNull",
    )


def test_connection_config_reserved_fields():
    cfg = ConnectionConfig(filename="app.db", host="db.local", port=5432, password="s3cret")
    assert cfg.filename == "app.db"
    assert "s3cret" not in repr(cfg)
    with pytest.raises(pydantic.ValidationError):
        ConnectionConfig(port=0)


def test_query_result_unwrap():
    assert QueryResult.ok({"id": 1}).unwrap() == {"id": 1}
    failed = QueryResult.fail(NotConnectedError())
    assert failed.success is False
    with pytest.raises(NotConnectedError):
        failed.unwrap()
