"""buildcost — construction cost estimation engine.

Usage::

    from buildcost import CalculationRequest, create_default_engine

    engine = create_default_engine()
    outcome = engine.calculate(
        CalculationRequest(
            building_type="house", material="standard", design="minimalist",
            length=10, width=10, floors=1, rooms=3, bathrooms=2,
        )
    )
"""

from buildcost.classifier import classify
from buildcost.engine import CostEngine
from buildcost.exceptions import (
    BuildCostError,
    CalculationError,
    InsufficientBuildingSizeError,
    InvalidBuildingTypeError,
    InvalidInputError,
    MissingCostTableEntryError,
)
from buildcost.factory import create_default_engine, create_engine
from buildcost.models.enums import (
    BuildingType,
    DesignStyle,
    ErrorCode,
    MaterialGrade,
    RoomName,
)
from buildcost.models.request import CalculationRequest
from buildcost.models.result import (
    CalculationFailure,
    CalculationOutcome,
    CalculationResult,
    RoomArea,
    WorkItemCost,
)
from buildcost.models.tables import CostTables

__all__ = [
    "BuildCostError",
    "BuildingType",
    "CalculationError",
    "CalculationFailure",
    "CalculationOutcome",
    "CalculationRequest",
    "CalculationResult",
    "CostEngine",
    "CostTables",
    "DesignStyle",
    "ErrorCode",
    "InsufficientBuildingSizeError",
    "InvalidBuildingTypeError",
    "InvalidInputError",
    "MaterialGrade",
    "MissingCostTableEntryError",
    "RoomArea",
    "RoomName",
    "WorkItemCost",
    "classify",
    "create_default_engine",
    "create_engine",
]
