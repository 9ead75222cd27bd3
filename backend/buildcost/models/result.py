"""Calculation output models for the buildcost engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from buildcost.models.enums import ErrorCode, RoomName


class RoomArea(BaseModel):
    """Allocated floor area for one named room slot."""

    model_config = ConfigDict(frozen=True)

    name: RoomName
    label: str
    count: int
    unit_area: float | None = None
    area: float
    recommended_size: str | None = None

    @property
    def is_used(self) -> bool:
        return self.area > 0


class WorkItemCost(BaseModel):
    """Absolute cost of one work item."""

    model_config = ConfigDict(frozen=True)

    name: str
    percentage: float
    cost: float


class CalculationResult(BaseModel):
    """Complete, immutable result of one calculation.

    ``room_areas`` keeps schema order with the residual free space last;
    ``work_item_costs`` is sorted by cost, highest first.
    """

    model_config = ConfigDict(frozen=True)

    building_type: str
    category: str
    strategy: str
    land_area: float
    total_area: float
    total_cost: float
    cost_per_area: float
    room_areas: list[RoomArea]
    work_item_costs: list[WorkItemCost]
    tables_version: str

    @property
    def room_area_map(self) -> dict[str, float]:
        """Room name -> area, in display order."""
        return {r.name.value: r.area for r in self.room_areas}

    @property
    def free_space(self) -> float:
        for room in self.room_areas:
            if room.name == RoomName.FREE_SPACE:
                return room.area
        return 0.0

    @property
    def work_item_total(self) -> float:
        return sum(item.cost for item in self.work_item_costs)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce display-ready strings for the presentation layer."""
        from buildcost.formatting import format_area, format_rupiah

        return {
            "building_type": self.building_type,
            "category": self.category,
            "total_cost_formatted": format_rupiah(self.total_cost),
            "cost_per_area_formatted": f"{format_rupiah(self.cost_per_area)} / m²",
            "total_area_formatted": f"{format_area(self.total_area)} m²",
            "rooms": [
                {
                    "name": r.name.value,
                    "label": f"{r.label} ({r.count} {'room' if r.count == 1 else 'rooms'})",
                    "area_formatted": format_area(r.area),
                    "recommended_size": r.recommended_size,
                    "used": r.is_used,
                }
                for r in self.room_areas
            ],
            "work_items": [
                {
                    "name": item.name,
                    "cost_formatted": format_rupiah(item.cost),
                }
                for item in self.work_item_costs
            ],
        }


class CalculationFailure(BaseModel):
    """Why a calculation failed."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str


class CalculationOutcome(BaseModel):
    """Result-or-error value returned from the engine boundary.

    Exactly one of ``result`` and ``error`` is set; a failed calculation never
    carries a partial result.
    """

    model_config = ConfigDict(frozen=True)

    result: CalculationResult | None = None
    error: CalculationFailure | None = None

    @model_validator(mode="after")
    def exactly_one_of_result_or_error(self) -> CalculationOutcome:
        if (self.result is None) == (self.error is None):
            msg = "CalculationOutcome needs exactly one of result or error"
            raise ValueError(msg)
        return self

    @property
    def ok(self) -> bool:
        return self.result is not None

    def unwrap(self) -> CalculationResult:
        """Return the result, or raise the exception matching the error code."""
        from buildcost.exceptions import ERRORS_BY_CODE

        if self.error is not None:
            raise ERRORS_BY_CODE[self.error.code](self.error.message)
        if self.result is None:
            msg = "CalculationOutcome has neither result nor error"
            raise ValueError(msg)
        return self.result
