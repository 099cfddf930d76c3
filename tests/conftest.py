"""
Pytest configuration for streamsql-tck.

Provides fixtures for:
- A fresh ScriptBuilder
- The ORDERS stream shared by several scripts
- Settings isolated from the developer's environment
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import pytest

from streamsql_tck.builder import DefinitionsBuilder, ScriptBuilder
from streamsql_tck.config import get_settings
from streamsql_tck.domain.models import Script


@pytest.fixture
def builder() -> ScriptBuilder:
    return Script.builder()


@pytest.fixture(scope="session")
def define_orders() -> Callable[[DefinitionsBuilder], None]:
    """
    Definitions fragment: ORDERS(rowtime, orderId NOT NULL, comments VARCHAR(1000)).
    """

    def _define(definitions: DefinitionsBuilder) -> None:
        (
            definitions.stream("ORDERS")
            .timestamp("rowtime").not_null()
            .integer("orderId").not_null()
            .varchar("comments", 1000)
            .end()
        )

    return _define


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Clear TCK_* variables and the settings cache around a test.
    """
    for var in ("TCK_LOG_LEVEL", "TCK_JSON_LOGS", "TCK_DEFAULT_CATALOG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)  # no stray .env
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
