"""Cost table models — the reference data every calculation reads.

A ``CostTables`` snapshot is a nested key-value document::

    building type -> category -> room / work item name -> number

It is frozen once built so a calculation can never observe a half-applied
edit, and it round-trips through JSON with ``model_dump_json`` /
``model_validate_json``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from buildcost.models.enums import BuildingType, RoomName


class RoomDimensions(BaseModel):
    """Recommended rectangle for one unit of a room, in metres."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    length: float = Field(gt=0)
    width: float = Field(gt=0)

    @property
    def area(self) -> float:
        return self.length * self.width


class DimensionRoomSchema(BaseModel):
    """Rooms sized from fixed rectangles multiplied by a unit count.

    ``open_space_fraction`` optionally reserves a share of the *land* area
    (length x width) as open space before the residual is computed.
    """

    model_config = ConfigDict(frozen=True)

    strategy: Literal["dimensions"] = "dimensions"
    rooms: dict[RoomName, RoomDimensions]
    open_space_fraction: float | None = Field(default=None, ge=0, le=1)

    @field_validator("rooms")
    @classmethod
    def no_fixed_residual(
        cls, v: dict[RoomName, RoomDimensions]
    ) -> dict[RoomName, RoomDimensions]:
        for name in (RoomName.FREE_SPACE, RoomName.OPEN_SPACE):
            if name in v:
                msg = f"'{name}' cannot be given fixed dimensions"
                raise ValueError(msg)
        return v


class PercentageRoomSchema(BaseModel):
    """Rooms sized as a share of the total floor area."""

    model_config = ConfigDict(frozen=True)

    strategy: Literal["percentages"] = "percentages"
    rooms: dict[RoomName, Annotated[float, Field(ge=0, le=1)]]

    @field_validator("rooms")
    @classmethod
    def no_fixed_residual(cls, v: dict[RoomName, float]) -> dict[RoomName, float]:
        if RoomName.FREE_SPACE in v:
            msg = f"'{RoomName.FREE_SPACE}' is always the residual area"
            raise ValueError(msg)
        return v


RoomSchema = Annotated[
    DimensionRoomSchema | PercentageRoomSchema,
    Field(discriminator="strategy"),
]

Coefficient = Annotated[float, Field(gt=0, allow_inf_nan=False)]
Percentage = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class CostTables(BaseModel):
    """A complete, read-only snapshot of the estimator's reference data."""

    model_config = ConfigDict(frozen=True)

    version: str = "1"
    base_costs: dict[BuildingType, Coefficient]
    material_coefficients: dict[str, Coefficient]
    design_coefficients: dict[str, Coefficient]
    room_schemas: dict[BuildingType, dict[str, RoomSchema]]
    work_item_percentages: dict[BuildingType, dict[str, dict[str, Percentage]]]

    @model_validator(mode="after")
    def categories_are_not_empty(self) -> CostTables:
        for building_type, categories in self.work_item_percentages.items():
            for category, items in categories.items():
                if not items:
                    msg = (
                        f"Work item table for {building_type}/{category} "
                        f"has no entries"
                    )
                    raise ValueError(msg)
        return self

    def room_schema(
        self, building_type: BuildingType, category: str
    ) -> DimensionRoomSchema | PercentageRoomSchema | None:
        """Return the room schema for a category, or None if absent."""
        return self.room_schemas.get(building_type, {}).get(category)

    def work_items(
        self, building_type: BuildingType, category: str
    ) -> dict[str, float] | None:
        """Return the work-item percentage table for a category, or None."""
        return self.work_item_percentages.get(building_type, {}).get(category)
