"""Factory functions for creating pre-configured CostEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildcost.engine import CostEngine
from buildcost.models.enums import AllocationStrategyName

if TYPE_CHECKING:
    from buildcost.data.repository import TableProvider
    from buildcost.models.tables import CostTables


def default_tables(
    strategy: AllocationStrategyName | str = AllocationStrategyName.DIMENSIONS,
) -> CostTables:
    """Return the built-in tables for the given room allocation strategy."""
    strategy = AllocationStrategyName(strategy)
    if strategy == AllocationStrategyName.PERCENTAGES:
        from buildcost.data.percentages import PERCENTAGE_TABLES

        return PERCENTAGE_TABLES
    from buildcost.data.seed import SEED_TABLES

    return SEED_TABLES


def create_default_engine(
    strategy: AllocationStrategyName | str = AllocationStrategyName.DIMENSIONS,
) -> CostEngine:
    """Create a CostEngine wired up with the built-in seed tables.

    Args:
        strategy: ``"dimensions"`` (fixed room sizes, the default) or
            ``"percentages"`` (rooms as shares of floor area).

    Example::

        from buildcost import CalculationRequest, create_default_engine

        engine = create_default_engine()
        outcome = engine.calculate(request)
    """
    return CostEngine(default_tables(strategy))


def create_engine(provider: TableProvider) -> CostEngine:
    """Create a CostEngine from whatever snapshot a provider currently holds."""
    return CostEngine(provider.fetch_tables())
