from __future__ import annotations

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from streamsql_tck.domain.models import Column, Insert, Script, SqlType, Stream


def _orders_script() -> Script:
    return (
        Script.builder()
        .definitions()
        .stream("ORDERS")
        .timestamp("rowtime").not_null()
        .binary("tag", 2)
        .end()
        .end()
        .query("Q", "select tag from orders")
        .input()
        .insert("ORDERS", 0, b"\x00\x01")
        .end()
        .expect()
        .row("Q", None)
        .end()
        .build()
    )


class TestColumn:
    def test_with_nullable_returns_new_column(self):
        column = Column(name="x", type="INTEGER")
        changed = column.with_nullable(False)
        assert column.nullable is True
        assert changed.nullable is False
        assert changed is not column
        assert (changed.name, changed.type, changed.precision, changed.scale) == (
            "x",
            "INTEGER",
            None,
            None,
        )

    def test_column_is_frozen(self):
        column = Column(name="x", type="INTEGER")
        with pytest.raises(ValidationError):
            column.nullable = False  # type: ignore[misc]

    @pytest.mark.parametrize("name, type_", [("", "INTEGER"), ("x", "")])
    def test_blank_name_or_type_rejected(self, name, type_):
        with pytest.raises(ValidationError):
            Column(name=name, type=type_)

    @pytest.mark.parametrize(
        "column, expected",
        [
            (Column(name="a", type="INTEGER"), "INTEGER"),
            (Column(name="a", type="VARCHAR", precision=20), "VARCHAR(20)"),
            (Column(name="a", type="DECIMAL", precision=10, scale=2), "DECIMAL(10, 2)"),
            (Column(name="a", type="TIMESTAMP", scale=3), "TIMESTAMP(3)"),
        ],
    )
    def test_type_name(self, column: Column, expected: str):
        assert column.type_name == expected

    def test_describe(self):
        assert Column(name="p", type="VARCHAR", precision=20).describe() == "p VARCHAR(20)"
        assert (
            Column(name="id", type="INTEGER", nullable=False).describe() == "id INTEGER NOT NULL"
        )

    def test_sql_type_is_a_string(self):
        assert SqlType.VARCHAR == "VARCHAR"
        assert SqlType("DECIMAL") is SqlType.DECIMAL


class TestStreamAndInsert:
    def test_stream_columns_are_a_tuple(self):
        stream = Stream(name="S", columns=[Column(name="a", type="INTEGER")])
        assert isinstance(stream.columns, tuple)
        assert stream.column_names == ("a",)

    def test_insert_rejects_unsupported_literal(self):
        with pytest.raises(ValidationError):
            Insert(stream="S", values=(object(),))

    @pytest.mark.parametrize("value", [Decimal("0.10"), bytearray(b"ab"), bytearray(b"\x00\xff")])
    def test_insert_does_not_coerce_other_literals(self, value):
        with pytest.raises(ValidationError):
            Insert(stream="S", values=(value,))

    def test_values_are_hashable(self):
        insert = Insert(stream="S", values=(1, "a", None))
        assert hash(insert) == hash(Insert(stream="S", values=(1, "a", None)))


class TestScript:
    def test_script_is_hashable(self):
        assert hash(_orders_script()) == hash(_orders_script())
        assert hash(Script()) == hash(Script())
        assert len({_orders_script(), _orders_script(), Script()}) == 2

    def test_expectations_reject_other_literals(self):
        with pytest.raises(ValidationError):
            Script(expectations={"Q": (Decimal("1.5"),)})

    def test_collections_are_read_only(self):
        script = _orders_script()
        with pytest.raises(TypeError):
            script.definitions["OTHER"] = script.definitions["ORDERS"]  # type: ignore[index]
        with pytest.raises(TypeError):
            script.queries["Q2"] = "values 1"  # type: ignore[index]
        with pytest.raises(TypeError):
            script.expectations["Q"] = ()  # type: ignore[index]
        with pytest.raises(AttributeError):
            script.inputs.append(script.inputs[0])  # type: ignore[attr-defined]
        with pytest.raises(ValidationError):
            script.inputs = ()  # type: ignore[misc]

    def test_does_not_alias_caller_collections(self):
        definitions = {"S": Stream(name="S")}
        script = Script(definitions=definitions)
        definitions["T"] = Stream(name="T")
        assert list(script.definitions) == ["S"]

    def test_default_collections_are_empty(self):
        script = Script()
        assert len(script.definitions) == 0
        assert len(script.queries) == 0
        assert script.inputs == ()
        assert len(script.expectations) == 0
        with pytest.raises(TypeError):
            script.queries["Q"] = "values 1"  # type: ignore[index]

    def test_json_dump(self):
        payload = json.loads(_orders_script().model_dump_json())
        assert [c["name"] for c in payload["definitions"]["ORDERS"]["columns"]] == [
            "rowtime",
            "tag",
        ]
        assert payload["queries"] == {"Q": "select tag from orders"}
        assert payload["inputs"][0]["stream"] == "ORDERS"
        assert payload["inputs"][0]["values"] == [0, "AAE="]
        assert payload["expectations"] == {"Q": [None]}
