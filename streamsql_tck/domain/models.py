"""
Domain models for streamsql-tck.

A `Script` is the finished, immutable test fixture: stream schemas, named
queries, the ordered input records and the expected output per query. Scripts
are produced by `ScriptBuilder.build()` and read by whatever harness runs the
queries; nothing here executes SQL or checks values against column types.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    Field,
    StrictBool,
    StrictBytes,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    field_serializer,
    field_validator,
)

if TYPE_CHECKING:
    from streamsql_tck.builder import ScriptBuilder

# Literal kinds a record or an expected row may hold. Strict: no coercion between
# kinds, so Decimal or bytearray values are rejected rather than converted.
Value = Union[None, StrictBool, StrictInt, StrictFloat, StrictStr, StrictBytes]

_VALUES = TypeAdapter(Tuple[Value, ...])


def validate_values(values: Any) -> Tuple[Value, ...]:
    """Validate a row of literals, raising pydantic.ValidationError on other kinds."""
    return _VALUES.validate_python(tuple(values))


class SqlType(str, Enum):
    """
    SQL type names used by the column shortcuts of `StreamBuilder`.

    `StreamBuilder.column` accepts any other type name as a plain string.
    """

    BOOLEAN = "BOOLEAN"
    CHAR = "CHAR"
    VARCHAR = "VARCHAR"
    BINARY = "BINARY"
    VARBINARY = "VARBINARY"
    BIGINT = "BIGINT"
    INTEGER = "INTEGER"
    SMALLINT = "SMALLINT"
    TINYINT = "TINYINT"
    DOUBLE = "DOUBLE"
    REAL = "REAL"
    DECIMAL = "DECIMAL"
    DATE = "DATE"
    TIME = "TIME"
    TIMESTAMP = "TIMESTAMP"


class _FrozenModel(BaseModel):
    model_config = {
        "frozen": True,
        "ser_json_bytes": "base64",
        "arbitrary_types_allowed": False,
    }


class Column(_FrozenModel):
    """
    Definition of one column of a stream.
    """

    name: str = Field(..., min_length=1, description="Column name.")
    type: str = Field(..., min_length=1, description="SQL type name, e.g. VARCHAR.")
    precision: Optional[int] = Field(None, description="Type precision, if any.")
    scale: Optional[int] = Field(None, description="Type scale, if any.")
    nullable: bool = Field(True, description="Whether the column accepts NULL.")

    def with_nullable(self, nullable: bool) -> Column:
        """Return a copy of this column with the given nullability."""
        return self.model_copy(update={"nullable": nullable})

    @property
    def type_name(self) -> str:
        """The type with its precision and scale, e.g. ``DECIMAL(10, 2)``."""
        if self.precision is not None and self.scale is not None:
            return f"{self.type}({self.precision}, {self.scale})"
        if self.precision is not None:
            return f"{self.type}({self.precision})"
        if self.scale is not None:
            return f"{self.type}({self.scale})"
        return self.type

    def describe(self) -> str:
        text = f"{self.name} {self.type_name}"
        return text if self.nullable else f"{text} NOT NULL"


class Stream(_FrozenModel):
    """
    A named stream and its columns, in declaration order.
    """

    name: str = Field(..., min_length=1)
    columns: Tuple[Column, ...] = ()

    @property
    def column_names(self) -> Tuple[str, ...]:
        return tuple(column.name for column in self.columns)


class Insert(_FrozenModel):
    """
    One input record, appended to the stream named by `stream`.
    """

    stream: str = Field(..., min_length=1, description="Target stream name.")
    values: Tuple[Value, ...] = ()


class Script(_FrozenModel):
    """
    A complete test script: definitions, queries, inputs and expectations.

    Every collection is a private, read-only copy. Mappings keep insertion
    order. End users create scripts with `Script.builder()`.
    """

    definitions: Mapping[str, Stream] = Field(default_factory=dict, validate_default=True)
    queries: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    inputs: Tuple[Insert, ...] = ()
    expectations: Mapping[str, Tuple[Value, ...]] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("definitions", "queries", "expectations", mode="after")
    @classmethod
    def freeze_mapping(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("definitions", "queries", "expectations")
    def dump_mapping(self, value: Mapping[str, Any]) -> dict:
        return dict(value)

    def __hash__(self) -> int:
        return hash(
            (
                tuple(self.definitions.items()),
                tuple(self.queries.items()),
                self.inputs,
                tuple(self.expectations.items()),
            )
        )

    @staticmethod
    def builder() -> ScriptBuilder:
        """Create a builder that you can use to create a Script."""
        from streamsql_tck.builder import ScriptBuilder

        return ScriptBuilder()


__all__ = ["Value", "validate_values", "SqlType", "Column", "Stream", "Insert", "Script"]
