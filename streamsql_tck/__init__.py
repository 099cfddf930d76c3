"""
streamsql-tck - declarative test fixtures for streaming SQL engines.

A fixture (`Script`) bundles stream schemas, named queries, ordered input
records and the expected output of each query. Scripts are authored with the
fluent `ScriptBuilder` and are immutable once built; running them against an
engine is left to the harness that consumes them.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "Apache-2.0"

# Public API exports
from streamsql_tck.builder import (
    DefinitionsBuilder,
    ExpectationsBuilder,
    InputsBuilder,
    ScriptBuilder,
    StreamBuilder,
)
from streamsql_tck.catalog import available_catalogs, get_catalog, get_script
from streamsql_tck.config import Settings, get_settings
from streamsql_tck.domain.errors import (
    DuplicateNameError,
    MissingArgumentError,
    ScriptError,
    UnknownReferenceError,
)
from streamsql_tck.domain.models import Column, Insert, Script, SqlType, Stream, Value
from streamsql_tck.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Model
    "Column",
    "Insert",
    "Script",
    "SqlType",
    "Stream",
    "Value",
    # Builder
    "ScriptBuilder",
    "DefinitionsBuilder",
    "StreamBuilder",
    "InputsBuilder",
    "ExpectationsBuilder",
    # Errors
    "ScriptError",
    "DuplicateNameError",
    "MissingArgumentError",
    "UnknownReferenceError",
    # Catalogs
    "available_catalogs",
    "get_catalog",
    "get_script",
    # Configuration
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
]
