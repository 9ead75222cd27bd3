"""Area allocation — spreading a building's floor area across named rooms.

Two interchangeable strategies share one interface:

1. **Dimensions** — each room has a recommended rectangle; its area is the
   rectangle times a multiplicity derived from the room/bathroom counts.
2. **Percentages** — each room takes a fixed share of the total floor area.

Whatever the strategy, whatever area is left over becomes the
``free_space`` residual. A residual below ``-AREA_TOLERANCE`` means the
rooms do not fit and the allocation fails; small negative drift from
floating-point arithmetic is reported as zero.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from buildcost.exceptions import InsufficientBuildingSizeError
from buildcost.formatting import format_area, format_dimensions
from buildcost.models.enums import (
    ROOM_LABELS,
    ROOM_ROLES,
    AllocationStrategyName,
    RoomName,
    RoomRole,
)
from buildcost.models.result import RoomArea
from buildcost.models.tables import DimensionRoomSchema, PercentageRoomSchema

if TYPE_CHECKING:
    from buildcost.models.request import UnitCounts

AREA_TOLERANCE = 0.01


@dataclass(frozen=True)
class Allocation:
    """Room areas for one building, residual free space last."""

    rooms: list[RoomArea]
    total_area: float

    @property
    def allocated_area(self) -> float:
        return sum(r.area for r in self.rooms if r.name != RoomName.FREE_SPACE)

    @property
    def free_space(self) -> float:
        return self.rooms[-1].area if self.rooms else 0.0


def room_multiplicity(name: RoomName, counts: UnitCounts) -> int:
    """How many units of a room a dimension-based schema allocates."""
    role = ROOM_ROLES[name]
    if role == RoomRole.SECONDARY_BEDROOM:
        # The master bedroom takes one unit of the room count.
        return max(0, counts.rooms - 1)
    if role == RoomRole.BATHROOM:
        return counts.bathrooms
    return 1


def with_free_space(rooms: list[RoomArea], total_area: float) -> Allocation:
    """Append the residual free-space entry, failing if the rooms don't fit.

    Raises:
        InsufficientBuildingSizeError: If the rooms need more than
            ``total_area`` (beyond the tolerance).
    """
    allocated = sum(r.area for r in rooms)
    residual = total_area - allocated
    if residual < -AREA_TOLERANCE:
        msg = (
            f"Building too small: rooms need {format_area(allocated)} m² "
            f"but only {format_area(total_area)} m² is available"
        )
        raise InsufficientBuildingSizeError(msg, deficit=-residual)

    free_space = RoomArea(
        name=RoomName.FREE_SPACE,
        label=ROOM_LABELS[RoomName.FREE_SPACE],
        count=1,
        area=max(residual, 0.0),
    )
    return Allocation(rooms=[*rooms, free_space], total_area=total_area)


class AllocationStrategy(ABC):
    """Turns a room schema plus counts into room areas."""

    name: AllocationStrategyName

    @abstractmethod
    def allocate(
        self,
        schema: DimensionRoomSchema | PercentageRoomSchema,
        total_area: float,
        land_area: float,
        counts: UnitCounts,
    ) -> Allocation:
        """Allocate ``total_area`` across the schema's rooms."""


class DimensionAllocator(AllocationStrategy):
    """Fixed room rectangles times per-room multiplicity."""

    name = AllocationStrategyName.DIMENSIONS

    def allocate(
        self,
        schema: DimensionRoomSchema | PercentageRoomSchema,
        total_area: float,
        land_area: float,
        counts: UnitCounts,
    ) -> Allocation:
        if not isinstance(schema, DimensionRoomSchema):
            msg = f"{type(self).__name__} needs a dimension room schema"
            raise TypeError(msg)

        rooms: list[RoomArea] = []
        for name, dims in schema.rooms.items():
            count = room_multiplicity(name, counts)
            rooms.append(RoomArea(
                name=name,
                label=ROOM_LABELS[name],
                count=count,
                unit_area=dims.area,
                area=dims.area * count,
                recommended_size=format_dimensions(dims.length, dims.width),
            ))

        if schema.open_space_fraction is not None:
            rooms.append(RoomArea(
                name=RoomName.OPEN_SPACE,
                label=ROOM_LABELS[RoomName.OPEN_SPACE],
                count=1,
                area=land_area * schema.open_space_fraction,
            ))

        return with_free_space(rooms, total_area)


class PercentageAllocator(AllocationStrategy):
    """Every room is a share of total floor area; counts are ignored."""

    name = AllocationStrategyName.PERCENTAGES

    def allocate(
        self,
        schema: DimensionRoomSchema | PercentageRoomSchema,
        total_area: float,
        land_area: float,
        counts: UnitCounts,
    ) -> Allocation:
        if not isinstance(schema, PercentageRoomSchema):
            msg = f"{type(self).__name__} needs a percentage room schema"
            raise TypeError(msg)

        rooms = [
            RoomArea(
                name=name,
                label=ROOM_LABELS[name],
                count=1,
                unit_area=total_area * fraction,
                area=total_area * fraction,
            )
            for name, fraction in schema.rooms.items()
        ]
        return with_free_space(rooms, total_area)


STRATEGIES: dict[AllocationStrategyName, AllocationStrategy] = {
    AllocationStrategyName.DIMENSIONS: DimensionAllocator(),
    AllocationStrategyName.PERCENTAGES: PercentageAllocator(),
}


def allocate(
    schema: DimensionRoomSchema | PercentageRoomSchema,
    total_area: float,
    land_area: float,
    counts: UnitCounts,
) -> Allocation:
    """Allocate floor area with whichever strategy the schema declares.

    Raises:
        InsufficientBuildingSizeError: If the rooms do not fit.
    """
    strategy = STRATEGIES[AllocationStrategyName(schema.strategy)]
    return strategy.allocate(schema, total_area, land_area, counts)
