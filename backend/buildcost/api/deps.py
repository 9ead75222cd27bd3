"""Dependency wiring for the FastAPI application.

Configuration comes from the environment (``.env`` files are loaded by
``buildcost.api.app``):

``BUILDCOST_DATA_FILE``
    Path of the JSON cost tables document. When unset the built-in tables
    are served from memory and edits last only for the process lifetime.
``BUILDCOST_ALLOCATION``
    ``dimensions`` (default) or ``percentages``: which built-in room tables
    to use, and to seed a new data file with.
``BUILDCOST_CORS_ORIGINS``
    Comma-separated list of allowed origins.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from buildcost.data.repository import JsonTableProvider, StaticTableProvider, TableProvider
from buildcost.factory import default_tables
from buildcost.models.enums import AllocationStrategyName

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:3000"


def allocation_strategy() -> AllocationStrategyName:
    raw = os.environ.get("BUILDCOST_ALLOCATION", AllocationStrategyName.DIMENSIONS)
    try:
        return AllocationStrategyName(raw.strip().lower())
    except ValueError:
        msg = (
            f"BUILDCOST_ALLOCATION must be one of "
            f"{', '.join(s.value for s in AllocationStrategyName)}; got '{raw}'"
        )
        raise ValueError(msg) from None


def cors_origins() -> list[str]:
    raw = os.environ.get("BUILDCOST_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_table_provider() -> TableProvider:
    """Create the table provider described by the environment."""
    tables = default_tables(allocation_strategy())
    data_file = os.environ.get("BUILDCOST_DATA_FILE", "").strip()
    if data_file:
        logger.info("Using cost tables file %s", data_file)
        return JsonTableProvider(Path(data_file), default=tables)
    logger.info("Using built-in %s cost tables", tables.version)
    return StaticTableProvider(tables)
