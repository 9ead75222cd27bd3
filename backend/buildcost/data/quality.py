"""Data-quality checks for cost tables.

These never block a calculation: work-item shares that don't add up to
100% may be intentional (items that don't cover the whole cost), so they
are reported as warnings for whoever maintains the tables.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildcost.models.enums import CATEGORIES_BY_TYPE, BuildingType
from buildcost.models.tables import PercentageRoomSchema

if TYPE_CHECKING:
    from buildcost.models.tables import CostTables

PERCENTAGE_SUM_TOLERANCE = 0.001


def check_work_item_sums(tables: CostTables) -> list[str]:
    warnings: list[str] = []
    for building_type, categories in tables.work_item_percentages.items():
        for category, items in categories.items():
            total = sum(items.values())
            if abs(total - 1.0) > PERCENTAGE_SUM_TOLERANCE:
                warnings.append(
                    f"Work items for {building_type}/{category} sum to "
                    f"{total * 100:.1f}% of total cost"
                )
    return warnings


def check_category_coverage(tables: CostTables) -> list[str]:
    warnings: list[str] = []
    for building_type in BuildingType:
        room_categories = set(tables.room_schemas.get(building_type, {}))
        item_categories = set(tables.work_item_percentages.get(building_type, {}))
        for category in sorted(room_categories - item_categories):
            warnings.append(
                f"{building_type}/{category} has a room schema but no work items"
            )
        for category in sorted(item_categories - room_categories):
            warnings.append(
                f"{building_type}/{category} has work items but no room schema"
            )
        if (room_categories or item_categories) and building_type not in tables.base_costs:
            warnings.append(f"{building_type} has no base cost")
    return warnings


def check_category_names(tables: CostTables) -> list[str]:
    warnings: list[str] = []
    for building_type in BuildingType:
        known = {str(category) for category in CATEGORIES_BY_TYPE[building_type]}
        used = set(tables.room_schemas.get(building_type, {})) | set(
            tables.work_item_percentages.get(building_type, {})
        )
        for category in sorted(used - known):
            warnings.append(
                f"{building_type}/{category} is not a category the classifier produces"
            )
    return warnings


def check_room_shares(tables: CostTables) -> list[str]:
    warnings: list[str] = []
    for building_type, categories in tables.room_schemas.items():
        for category, schema in categories.items():
            if not isinstance(schema, PercentageRoomSchema):
                continue
            total = sum(schema.rooms.values())
            if total > 1.0 + PERCENTAGE_SUM_TOLERANCE:
                warnings.append(
                    f"Room shares for {building_type}/{category} sum to "
                    f"{total * 100:.1f}% of floor area; every calculation will fail"
                )
    return warnings


def check_tables(tables: CostTables) -> list[str]:
    """Return human-readable warnings about suspicious table contents."""
    return [
        *check_work_item_sums(tables),
        *check_category_coverage(tables),
        *check_category_names(tables),
        *check_room_shares(tables),
    ]
