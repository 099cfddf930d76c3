"""
Domain package for streamsql-tck.

Exports the immutable script model and the errors raised while building one.
"""

from streamsql_tck.domain.errors import (
    DuplicateNameError,
    MissingArgumentError,
    ScriptError,
    UnknownReferenceError,
)
from streamsql_tck.domain.models import Column, Insert, Script, SqlType, Stream, Value

__all__ = [
    "Column",
    "Insert",
    "Script",
    "SqlType",
    "Stream",
    "Value",
    "ScriptError",
    "DuplicateNameError",
    "MissingArgumentError",
    "UnknownReferenceError",
]
