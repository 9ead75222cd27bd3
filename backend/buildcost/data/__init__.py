"""Reference data layer for the buildcost estimation engine."""

from buildcost.data.percentages import PERCENTAGE_TABLES
from buildcost.data.quality import check_tables
from buildcost.data.repository import (
    JsonTableProvider,
    StaticTableProvider,
    TableProvider,
    validate_tables,
)
from buildcost.data.seed import SEED_TABLES

__all__ = [
    "JsonTableProvider",
    "PERCENTAGE_TABLES",
    "SEED_TABLES",
    "StaticTableProvider",
    "TableProvider",
    "check_tables",
    "validate_tables",
]
