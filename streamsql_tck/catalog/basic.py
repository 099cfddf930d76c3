"""
Scripts that test basic streaming SQL functionality: projection and filtering
over a single ORDERS stream.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from streamsql_tck.builder import DefinitionsBuilder
from streamsql_tck.domain.models import Script


def define_orders(definitions: DefinitionsBuilder) -> None:
    """Add the ORDERS stream shared by the basic scripts."""
    (
        definitions.stream("ORDERS")
        .timestamp("rowtime").not_null()
        .integer("orderId").not_null()
        .varchar("product", 20).not_null()
        .end()
    )


def select() -> Script:
    # Expectations hold one value list per query; the second row replaces the first.
    return (
        Script.builder()
        .definitions()
        .apply(define_orders)
        .end()
        .query("Q", "select * from Orders")
        .input()
        .insert("ORDERS", 0, 100, "beer")
        .insert("ORDERS", 1, 101, "milk")
        .end()
        .expect()
        .row("Q", 0, 100, "beer")
        .row("Q", 1, 101, "milk")
        .end()
        .build()
    )


def select_where() -> Script:
    return (
        Script.builder()
        .definitions()
        .apply(define_orders)
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


SCRIPTS: Mapping[str, Script] = MappingProxyType(
    {
        "select": select(),
        "select_where": select_where(),
    }
)

__all__ = ["SCRIPTS", "define_orders", "select", "select_where"]
