"""
Errors raised while authoring a script.

They are usage errors raised at the offending builder call; nothing in this
package catches them.
"""

from __future__ import annotations


class ScriptError(ValueError):
    """Base class for script-building errors."""


class DuplicateNameError(ScriptError):
    """A stream or query name was registered twice."""


class UnknownReferenceError(ScriptError):
    """An insert or expectation refers to a stream or query that is not defined."""


class MissingArgumentError(ScriptError):
    """A required name or SQL text was None or empty."""


__all__ = [
    "ScriptError",
    "DuplicateNameError",
    "UnknownReferenceError",
    "MissingArgumentError",
]
