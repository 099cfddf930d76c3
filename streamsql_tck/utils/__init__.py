"""
Cross-cutting helpers for streamsql-tck.

Keep this package free of script-building logic.
"""

from streamsql_tck.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
