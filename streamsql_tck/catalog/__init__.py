"""
Registry of fixture catalogs.

A catalog is a read-only mapping of script name to a prebuilt `Script`. The
scripts are built once, when the catalog module is imported.

Usage:
    from streamsql_tck.catalog import get_script

    script = get_script("basic", "select_where")
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from streamsql_tck.catalog import basic
from streamsql_tck.domain.models import Script
from streamsql_tck.utils.logging import get_logger

log = get_logger(__name__)

CATALOGS: Mapping[str, Mapping[str, Script]] = MappingProxyType(
    {
        "basic": basic.SCRIPTS,
    }
)

log.debug(
    "Catalogs loaded",
    extra={"catalogs": {name: len(scripts) for name, scripts in CATALOGS.items()}},
)


def available_catalogs() -> List[str]:
    """List catalog names."""
    return sorted(CATALOGS)


def get_catalog(name: str) -> Mapping[str, Script]:
    if name not in CATALOGS:
        raise ValueError(f"Unknown catalog '{name}'. Available: {', '.join(available_catalogs())}")
    return CATALOGS[name]


def get_script(catalog: str, name: str) -> Script:
    scripts = get_catalog(catalog)
    if name not in scripts:
        raise ValueError(
            f"Unknown script '{name}' in catalog '{catalog}'. Available: {', '.join(scripts)}"
        )
    return scripts[name]


__all__ = [
    "CATALOGS",
    "available_catalogs",
    "get_catalog",
    "get_script",
]
