"""Calculation request model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Upper bounds keep every derived area and cost a finite float.
MAX_DIMENSION_M = 10_000.0
MAX_FLOORS = 200
MAX_UNITS = 1_000


class UnitCounts(BaseModel):
    """Floor and room counts entered by the user."""

    model_config = ConfigDict(frozen=True)

    floors: int = Field(default=1, ge=1, le=MAX_FLOORS)
    rooms: int = Field(default=0, ge=0, le=MAX_UNITS)
    bathrooms: int = Field(default=0, ge=0, le=MAX_UNITS)


class CalculationRequest(BaseModel):
    """Input to ``CostEngine.calculate``.

    ``building_type``, ``material`` and ``design`` are kept as plain strings:
    an unknown building type is reported as ``InvalidBuildingType`` and an
    unknown material or design as ``MissingCostTableEntry`` rather than as a
    parse error.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    building_type: str
    material: str
    design: str
    length: float = Field(gt=0, le=MAX_DIMENSION_M)
    width: float = Field(gt=0, le=MAX_DIMENSION_M)
    floors: int = Field(default=1, ge=1, le=MAX_FLOORS)
    rooms: int = Field(default=0, ge=0, le=MAX_UNITS)
    bathrooms: int = Field(default=0, ge=0, le=MAX_UNITS)
    subtype: str | None = None

    @property
    def land_area(self) -> float:
        return self.length * self.width

    @property
    def total_area(self) -> float:
        return self.length * self.width * self.floors

    @property
    def counts(self) -> UnitCounts:
        return UnitCounts(floors=self.floors, rooms=self.rooms, bathrooms=self.bathrooms)
