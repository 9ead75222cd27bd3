"""Domain models for the buildcost estimation engine."""

from buildcost.models.enums import (
    CATEGORIES_BY_TYPE,
    AllocationStrategyName,
    BoardingHouseCategory,
    BuildingType,
    DesignStyle,
    ErrorCode,
    HouseCategory,
    MaterialGrade,
    RoomName,
    RoomRole,
    ShophouseCategory,
    WarehouseCategory,
)
from buildcost.models.request import CalculationRequest, UnitCounts
from buildcost.models.result import (
    CalculationFailure,
    CalculationOutcome,
    CalculationResult,
    RoomArea,
    WorkItemCost,
)
from buildcost.models.tables import (
    CostTables,
    DimensionRoomSchema,
    PercentageRoomSchema,
    RoomDimensions,
)

__all__ = [
    "AllocationStrategyName",
    "BoardingHouseCategory",
    "BuildingType",
    "CATEGORIES_BY_TYPE",
    "CalculationFailure",
    "CalculationOutcome",
    "CalculationRequest",
    "CalculationResult",
    "CostTables",
    "DesignStyle",
    "DimensionRoomSchema",
    "ErrorCode",
    "HouseCategory",
    "MaterialGrade",
    "PercentageRoomSchema",
    "RoomArea",
    "RoomDimensions",
    "RoomName",
    "RoomRole",
    "ShophouseCategory",
    "UnitCounts",
    "WarehouseCategory",
    "WorkItemCost",
]
