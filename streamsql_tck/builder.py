"""
Fluent builder for `Script`.

Example:
    script = (
        Script.builder()
        .definitions()
        .stream("ORDERS")
        .timestamp("rowtime").not_null()
        .integer("orderId").not_null()
        .varchar("product", 20).not_null()
        .end()
        .end()
        .query("Q", "select orderId from orders where product = 'milk'")
        .input()
        .insert("ORDERS", 0, 100, "beer")
        .insert("ORDERS", 1, 101, "milk")
        .end()
        .expect()
        .row("Q", 101)
        .end()
        .build()
    )

All mutable state lives in the `ScriptBuilder`. Each scope holds a reference to
the builder that owns it and `end()` returns the enclosing scope. Scopes are
not closed by `end()`: a scope used afterwards keeps writing into its owner.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple, Union

from streamsql_tck.domain.errors import (
    DuplicateNameError,
    MissingArgumentError,
    UnknownReferenceError,
)
from streamsql_tck.domain.models import (
    Column,
    Insert,
    Script,
    SqlType,
    Stream,
    Value,
    validate_values,
)
from streamsql_tck.utils.logging import get_logger

log = get_logger(__name__)


def _require(value: Optional[str], what: str) -> str:
    if value is None or value == "":
        raise MissingArgumentError(f"{what} is required")
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, not {type(value).__name__}")
    return value


class ScriptBuilder:
    """
    Accumulates definitions, queries, inputs and expectations for a Script.

    Not thread-safe; a builder is meant to be driven by one piece of fixture
    code.
    """

    def __init__(self) -> None:
        self._definitions: Dict[str, Stream] = {}
        self._queries: Dict[str, str] = {}
        self._inputs: List[Insert] = []
        self._expectations: Dict[str, Tuple[Value, ...]] = {}

    def definitions(self) -> DefinitionsBuilder:
        """
        Start the definitions section. Add any number of
        `DefinitionsBuilder.stream` elements, followed by `end()`.
        """
        return DefinitionsBuilder(self)

    def query(self, name: str, sql: str) -> ScriptBuilder:
        """
        Add a named query.

        Raises
        ------
        DuplicateNameError
            If a query with this name is already registered; the first SQL
            text is kept.
        """
        _require(name, "query name")
        _require(sql, "query sql")
        if name in self._queries:
            raise DuplicateNameError(f"duplicate query {name}")
        self._queries[name] = sql
        log.debug("Registered query", extra={"query": name})
        return self

    def input(self) -> InputsBuilder:
        """
        Start the inputs section. Add any number of `InputsBuilder.insert`
        elements, followed by `end()`.
        """
        return InputsBuilder(self)

    def expect(self) -> ExpectationsBuilder:
        """
        Start the expectations section. Add any number of
        `ExpectationsBuilder.row` elements, followed by `end()`.
        """
        return ExpectationsBuilder(self)

    def build(self) -> Script:
        """
        Snapshot the current state into an immutable Script.

        The builder is left untouched and may be extended and built again.
        """
        script = Script(
            definitions=self._definitions,
            queries=self._queries,
            inputs=tuple(self._inputs),
            expectations=self._expectations,
        )
        log.debug(
            "Built script",
            extra={
                "streams": len(script.definitions),
                "queries": len(script.queries),
                "inputs": len(script.inputs),
                "expectations": len(script.expectations),
            },
        )
        return script

    def _add_stream(self, name: str, columns: List[Column]) -> None:
        if name in self._definitions:
            raise DuplicateNameError(f"duplicate stream {name}")
        self._definitions[name] = Stream(name=name, columns=tuple(columns))
        log.debug("Registered stream", extra={"stream": name, "columns": len(columns)})


class DefinitionsBuilder:
    """Builds the definitions section of a script."""

    def __init__(self, script: ScriptBuilder) -> None:
        self._script = script

    def stream(self, name: str) -> StreamBuilder:
        """
        Start a stream definition. The name is checked for duplicates when
        the stream's `end()` is called.
        """
        return StreamBuilder(self, _require(name, "stream name"))

    def apply(self, action: Callable[[DefinitionsBuilder], object]) -> DefinitionsBuilder:
        """Call `action` with this builder, e.g. to add a shared stream."""
        action(self)
        return self

    def end(self) -> ScriptBuilder:
        """End the definitions section and return the parent ScriptBuilder."""
        return self._script

    def _add_stream(self, name: str, columns: List[Column]) -> None:
        self._script._add_stream(name, columns)


class StreamBuilder:
    """
    Builds the column list of one stream.

    Created via `DefinitionsBuilder.stream`. Every type shortcut adds a
    nullable column; follow it with `not_null()` to change that.
    """

    def __init__(self, definitions: DefinitionsBuilder, name: str) -> None:
        self._definitions = definitions
        self.stream_name = name
        self.columns: List[Column] = []

    def end(self) -> DefinitionsBuilder:
        """
        Register this stream and return the parent DefinitionsBuilder.

        Raises
        ------
        DuplicateNameError
            If a stream with the same name is already defined.
        """
        self._definitions._add_stream(self.stream_name, self.columns)
        return self._definitions

    def apply(self, action: Callable[[StreamBuilder], object]) -> StreamBuilder:
        """Call `action` with this builder, e.g. to add shared columns."""
        action(self)
        return self

    def column(
        self,
        name: str,
        type: Union[SqlType, str],
        precision: Optional[int] = None,
        scale: Optional[int] = None,
        nullable: bool = True,
    ) -> StreamBuilder:
        """Add a column."""
        _require(name, "column name")
        type_name = type.value if isinstance(type, SqlType) else _require(type, "column type")
        self.columns.append(
            Column(
                name=name,
                type=type_name,
                precision=precision,
                scale=scale,
                nullable=nullable,
            )
        )
        return self

    def not_null(self) -> StreamBuilder:
        """
        Make the previously added column NOT NULL.

        Raises
        ------
        IndexError
            If no column has been added yet.
        """
        if not self.columns:
            raise IndexError(f"stream {self.stream_name} has no column to make NOT NULL")
        self.columns[-1] = self.columns[-1].with_nullable(False)
        return self

    def boolean(self, name: str) -> StreamBuilder:
        return self.column(name, SqlType.BOOLEAN)

    def char(self, name: str, precision: int) -> StreamBuilder:
        return self.column(name, SqlType.CHAR, precision)

    def varchar(self, name: str, precision: int) -> StreamBuilder:
        return self.column(name, SqlType.VARCHAR, precision)

    def binary(self, name: str, precision: int) -> StreamBuilder:
        return self.column(name, SqlType.BINARY, precision)

    def varbinary(self, name: str, precision: int) -> StreamBuilder:
        return self.column(name, SqlType.VARBINARY, precision)

    def bigint(self, name: str) -> StreamBuilder:
        return self.column(name, SqlType.BIGINT)

    def integer(self, name: str) -> StreamBuilder:
        return self.column(name, SqlType.INTEGER)

    def smallint(self, name: str) -> StreamBuilder:
        return self.column(name, SqlType.SMALLINT)

    def tinyint(self, name: str) -> StreamBuilder:
        return self.column(name, SqlType.TINYINT)

    def double(self, name: str) -> StreamBuilder:
        return self.column(name, SqlType.DOUBLE)

    def real(self, name: str) -> StreamBuilder:
        return self.column(name, SqlType.REAL)

    def decimal(self, name: str, precision: int, scale: int) -> StreamBuilder:
        return self.column(name, SqlType.DECIMAL, precision, scale)

    def date(self, name: str) -> StreamBuilder:
        return self.column(name, SqlType.DATE)

    def time(self, name: str, scale: Optional[int] = None) -> StreamBuilder:
        """Add a TIME column, optionally with fractional-second scale."""
        return self.column(name, SqlType.TIME, scale=scale)

    def timestamp(self, name: str, scale: Optional[int] = None) -> StreamBuilder:
        """Add a TIMESTAMP column, optionally with fractional-second scale."""
        return self.column(name, SqlType.TIMESTAMP, scale=scale)


class InputsBuilder:
    """Builds the inputs section of a script."""

    def __init__(self, script: ScriptBuilder) -> None:
        self._script = script

    def insert(self, stream_name: str, *values: Value) -> InputsBuilder:
        """
        Append a record to the inputs.

        Values are not checked against the stream's columns.

        Raises
        ------
        UnknownReferenceError
            If `stream_name` is not defined yet.
        """
        _require(stream_name, "stream name")
        if stream_name not in self._script._definitions:
            raise UnknownReferenceError(
                f"unknown target {stream_name}; must occur in the definitions"
            )
        self._script._inputs.append(Insert(stream=stream_name, values=values))
        log.debug("Recorded insert", extra={"stream": stream_name, "width": len(values)})
        return self

    def apply(self, action: Callable[[InputsBuilder], object]) -> InputsBuilder:
        action(self)
        return self

    def end(self) -> ScriptBuilder:
        """End the inputs section and return the parent ScriptBuilder."""
        return self._script


class ExpectationsBuilder:
    """Builds the expectations section of a script."""

    def __init__(self, script: ScriptBuilder) -> None:
        self._script = script

    def row(self, query_name: str, *values: Value) -> ExpectationsBuilder:
        """
        Set the expected output of a query.

        A second call for the same query replaces the first.

        Raises
        ------
        UnknownReferenceError
            If `query_name` is not a registered query.
        """
        _require(query_name, "query name")
        if query_name not in self._script._queries:
            raise UnknownReferenceError(f"unknown query {query_name}")
        self._script._expectations[query_name] = validate_values(values)
        log.debug("Recorded expectation", extra={"query": query_name, "width": len(values)})
        return self

    def apply(self, action: Callable[[ExpectationsBuilder], object]) -> ExpectationsBuilder:
        action(self)
        return self

    def end(self) -> ScriptBuilder:
        """End the expectations section and return the parent ScriptBuilder."""
        return self._script


__all__ = [
    "ScriptBuilder",
    "DefinitionsBuilder",
    "StreamBuilder",
    "InputsBuilder",
    "ExpectationsBuilder",
]
