"""Enums for the buildcost domain models.

Building types, material grades and design styles mirror the options
offered by the calculator form; categories are scoped per building type.
"""

from enum import StrEnum


class BuildingType(StrEnum):
    """Building types the estimator knows how to price."""

    HOUSE = "house"
    BOARDING_HOUSE = "boardingHouse"
    SHOPHOUSE = "shophouse"
    WAREHOUSE = "warehouse"


class MaterialGrade(StrEnum):
    """Material quality grades."""

    STANDARD = "standard"
    MEDIUM = "medium"
    PREMIUM = "premium"


class DesignStyle(StrEnum):
    """Architectural design styles."""

    MINIMALIST = "minimalist"
    SCANDINAVIAN = "scandinavian"
    TROPICAL = "tropical"
    MODERN = "modern"
    CLASSIC = "classic"


class HouseCategory(StrEnum):
    """House categories keyed by land area in m²."""

    UP_TO_100 = "<100"
    UP_TO_200 = ">100"
    OVER_200 = ">200"


class BoardingHouseCategory(StrEnum):
    """Boarding house categories keyed by material grade."""

    ECONOMY = "economy"
    EXECUTIVE = "executive"


class ShophouseCategory(StrEnum):
    """Shophouse categories: fitted out for living, or an empty shell."""

    FURNISHED = "furnished"
    EMPTY = "empty"


class WarehouseCategory(StrEnum):
    """Warehouses have a single category."""

    EMPTY = "empty"


CATEGORIES_BY_TYPE: dict[BuildingType, type[StrEnum]] = {
    BuildingType.HOUSE: HouseCategory,
    BuildingType.BOARDING_HOUSE: BoardingHouseCategory,
    BuildingType.SHOPHOUSE: ShophouseCategory,
    BuildingType.WAREHOUSE: WarehouseCategory,
}


class RoomName(StrEnum):
    """Named room slots that can appear in a room schema."""

    MASTER_BEDROOM = "master_bedroom"
    CHILD_BEDROOM = "child_bedroom"
    BATHROOM = "bathroom"
    DINING_ROOM = "dining_room"
    KITCHEN = "kitchen"
    LIVING_ROOM = "living_room"
    FAMILY_ROOM = "family_room"
    LAUNDRY = "laundry"
    STORAGE = "storage"
    ROOM = "room"
    OPEN_SPACE = "open_space"
    FREE_SPACE = "free_space"


class RoomRole(StrEnum):
    """How a room's multiplicity is derived from the unit counts."""

    PRIMARY_BEDROOM = "primary_bedroom"
    SECONDARY_BEDROOM = "secondary_bedroom"
    BATHROOM = "bathroom"
    SINGLE = "single"
    OPEN_SPACE = "open_space"
    RESIDUAL = "residual"


ROOM_ROLES: dict[RoomName, RoomRole] = {
    RoomName.MASTER_BEDROOM: RoomRole.PRIMARY_BEDROOM,
    RoomName.CHILD_BEDROOM: RoomRole.SECONDARY_BEDROOM,
    RoomName.BATHROOM: RoomRole.BATHROOM,
    RoomName.DINING_ROOM: RoomRole.SINGLE,
    RoomName.KITCHEN: RoomRole.SINGLE,
    RoomName.LIVING_ROOM: RoomRole.SINGLE,
    RoomName.FAMILY_ROOM: RoomRole.SINGLE,
    RoomName.LAUNDRY: RoomRole.SINGLE,
    RoomName.STORAGE: RoomRole.SINGLE,
    RoomName.ROOM: RoomRole.SINGLE,
    RoomName.OPEN_SPACE: RoomRole.OPEN_SPACE,
    RoomName.FREE_SPACE: RoomRole.RESIDUAL,
}

ROOM_LABELS: dict[RoomName, str] = {
    RoomName.MASTER_BEDROOM: "Master Bedroom",
    RoomName.CHILD_BEDROOM: "Child Bedroom",
    RoomName.BATHROOM: "Bathroom",
    RoomName.DINING_ROOM: "Dining Room",
    RoomName.KITCHEN: "Kitchen",
    RoomName.LIVING_ROOM: "Living Room",
    RoomName.FAMILY_ROOM: "Family Room",
    RoomName.LAUNDRY: "Laundry Room",
    RoomName.STORAGE: "Storage Room",
    RoomName.ROOM: "Hall",
    RoomName.OPEN_SPACE: "Open Space",
    RoomName.FREE_SPACE: "Remaining Free Space",
}


class AllocationStrategyName(StrEnum):
    """Room allocation policies a room schema can use."""

    DIMENSIONS = "dimensions"
    PERCENTAGES = "percentages"


class ErrorCode(StrEnum):
    """Machine-readable calculation failure codes."""

    INVALID_INPUT = "InvalidInput"
    INVALID_BUILDING_TYPE = "InvalidBuildingType"
    INSUFFICIENT_BUILDING_SIZE = "InsufficientBuildingSize"
    MISSING_COST_TABLE_ENTRY = "MissingCostTableEntry"
