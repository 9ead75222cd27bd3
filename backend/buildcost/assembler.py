"""Result assembly — packages the pipeline's pieces into one result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildcost.models.result import CalculationResult

if TYPE_CHECKING:
    from buildcost.allocation import Allocation
    from buildcost.models.enums import BuildingType
    from buildcost.models.result import WorkItemCost


def assemble(
    building_type: BuildingType,
    category: str,
    strategy: str,
    land_area: float,
    allocation: Allocation,
    total_cost: float,
    work_items: list[WorkItemCost],
    tables_version: str,
) -> CalculationResult:
    """Build the immutable CalculationResult. Inputs are copied, not mutated."""
    total_area = allocation.total_area
    return CalculationResult(
        building_type=building_type.value,
        category=category,
        strategy=strategy,
        land_area=land_area,
        total_area=total_area,
        total_cost=total_cost,
        cost_per_area=total_cost / total_area if total_area > 0 else 0.0,
        room_areas=list(allocation.rooms),
        work_item_costs=list(work_items),
        tables_version=tables_version,
    )
