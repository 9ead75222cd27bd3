"""Cost calculation.

Total cost is linear in floor area::

    total = base cost per m² x material coefficient x design coefficient x area

Each work item is then a fixed share of that total. Shares are taken as
they are stored; they are not required to add up to 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildcost.exceptions import MissingCostTableEntryError
from buildcost.models.result import WorkItemCost

if TYPE_CHECKING:
    from buildcost.models.enums import BuildingType
    from buildcost.models.tables import CostTables


def _lookup(table: dict[str, float], key: str, what: str) -> float:
    value = table.get(key)
    if value is None:
        msg = f"No {what} for '{key}' in the cost tables"
        raise MissingCostTableEntryError(msg)
    return value


def compute_total_cost(
    tables: CostTables,
    building_type: BuildingType,
    material: str,
    design: str,
    total_area: float,
) -> float:
    """Return the total construction cost in rupiah.

    Raises:
        MissingCostTableEntryError: If the base cost, material coefficient or
            design coefficient is missing.
    """
    base_cost = _lookup(tables.base_costs, building_type, "base cost")
    material_coef = _lookup(tables.material_coefficients, material, "material coefficient")
    design_coef = _lookup(tables.design_coefficients, design, "design coefficient")
    return base_cost * material_coef * design_coef * total_area


def compute_work_item_costs(
    tables: CostTables,
    building_type: BuildingType,
    category: str,
    total_cost: float,
) -> list[WorkItemCost]:
    """Break the total cost into work items, most expensive first.

    Equal costs keep the table's order.

    Raises:
        MissingCostTableEntryError: If the category has no work-item table.
    """
    percentages = tables.work_items(building_type, category)
    if percentages is None:
        msg = f"No work item percentages for {building_type}/{category}"
        raise MissingCostTableEntryError(msg)

    items = [
        WorkItemCost(name=name, percentage=pct, cost=pct * total_cost)
        for name, pct in percentages.items()
    ]
    return sorted(items, key=lambda item: item.cost, reverse=True)
