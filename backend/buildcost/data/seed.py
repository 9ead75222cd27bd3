"""Seed cost tables for the buildcost estimation engine.

Unit costs are Indonesian rupiah per m² of floor area; room dimensions are
the recommended rectangle (length x width, metres) for one unit of each
room.
"""

from buildcost.models.enums import (
    BoardingHouseCategory,
    BuildingType,
    DesignStyle,
    HouseCategory,
    MaterialGrade,
    RoomName,
    ShophouseCategory,
    WarehouseCategory,
)
from buildcost.models.tables import CostTables, DimensionRoomSchema, RoomDimensions

SEED_TABLES_VERSION = "2025.1"


def _dims(length: float, width: float) -> RoomDimensions:
    return RoomDimensions(length=length, width=width)


BASE_COSTS: dict[BuildingType, float] = {
    BuildingType.HOUSE: 3_500_000.0,
    BuildingType.BOARDING_HOUSE: 4_500_000.0,
    BuildingType.SHOPHOUSE: 3_000_000.0,
    BuildingType.WAREHOUSE: 2_500_000.0,
}

MATERIAL_COEFFICIENTS: dict[str, float] = {
    MaterialGrade.STANDARD: 1.0,
    MaterialGrade.MEDIUM: 1.2,
    MaterialGrade.PREMIUM: 1.5,
}

DESIGN_COEFFICIENTS: dict[str, float] = {
    DesignStyle.MINIMALIST: 1.0,
    DesignStyle.SCANDINAVIAN: 1.1,
    DesignStyle.TROPICAL: 1.2,
    DesignStyle.MODERN: 1.25,
    DesignStyle.CLASSIC: 1.65,
}

# ---------------------------------------------------------------------------
# Room sizes
# ---------------------------------------------------------------------------

DIMENSION_ROOM_SCHEMAS: dict[BuildingType, dict[str, DimensionRoomSchema]] = {
    BuildingType.HOUSE: {
        HouseCategory.UP_TO_100: DimensionRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: _dims(4, 3),
            RoomName.CHILD_BEDROOM: _dims(3, 2.5),
            RoomName.BATHROOM: _dims(1.2, 1.5),
            RoomName.DINING_ROOM: _dims(3, 2.5),
            RoomName.KITCHEN: _dims(3, 2.5),
            RoomName.LIVING_ROOM: _dims(3, 2.8),
            RoomName.FAMILY_ROOM: _dims(3, 3),
        }),
        HouseCategory.UP_TO_200: DimensionRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: _dims(4, 4),
            RoomName.CHILD_BEDROOM: _dims(3, 3),
            RoomName.BATHROOM: _dims(2, 1.5),
            RoomName.DINING_ROOM: _dims(3, 3),
            RoomName.KITCHEN: _dims(3, 2.5),
            RoomName.LIVING_ROOM: _dims(4, 4),
            RoomName.FAMILY_ROOM: _dims(5, 4),
        }),
        HouseCategory.OVER_200: DimensionRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: _dims(5, 5),
            RoomName.CHILD_BEDROOM: _dims(3, 5),
            RoomName.BATHROOM: _dims(2.5, 3),
            RoomName.DINING_ROOM: _dims(4, 4),
            RoomName.KITCHEN: _dims(3, 4),
            RoomName.LIVING_ROOM: _dims(6, 6),
            RoomName.FAMILY_ROOM: _dims(5, 5),
        }),
    },
    BuildingType.BOARDING_HOUSE: {
        BoardingHouseCategory.EXECUTIVE: DimensionRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: _dims(3, 4),
            RoomName.STORAGE: _dims(2, 2),
            RoomName.BATHROOM: _dims(1.5, 1.5),
            RoomName.DINING_ROOM: _dims(3, 2.5),
            RoomName.KITCHEN: _dims(3, 2.5),
            RoomName.LIVING_ROOM: _dims(4, 4),
            RoomName.LAUNDRY: _dims(3, 2.5),
        }),
        BoardingHouseCategory.ECONOMY: DimensionRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: _dims(3, 2.5),
            RoomName.STORAGE: _dims(2, 2),
            RoomName.BATHROOM: _dims(1.5, 1.2),
            RoomName.DINING_ROOM: _dims(2, 2),
            RoomName.KITCHEN: _dims(2, 1.5),
            RoomName.LIVING_ROOM: _dims(4, 4),
            RoomName.LAUNDRY: _dims(1.5, 1.2),
        }),
    },
    BuildingType.SHOPHOUSE: {
        ShophouseCategory.FURNISHED: DimensionRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: _dims(3, 4),
            RoomName.CHILD_BEDROOM: _dims(3, 3),
            RoomName.BATHROOM: _dims(1.5, 1.5),
            RoomName.DINING_ROOM: _dims(3, 3),
            RoomName.KITCHEN: _dims(3, 2),
            RoomName.LIVING_ROOM: _dims(4, 4),
            RoomName.FAMILY_ROOM: _dims(5, 4),
        }),
        ShophouseCategory.EMPTY: DimensionRoomSchema(rooms={
            RoomName.BATHROOM: _dims(1.5, 1.5),
        }),
    },
    BuildingType.WAREHOUSE: {
        WarehouseCategory.EMPTY: DimensionRoomSchema(rooms={
            RoomName.ROOM: _dims(3, 4),
            RoomName.BATHROOM: _dims(1.5, 1.5),
        }),
    },
}

# ---------------------------------------------------------------------------
# Work items (share of total cost)
# ---------------------------------------------------------------------------

WORK_ITEM_PERCENTAGES: dict[BuildingType, dict[str, dict[str, float]]] = {
    BuildingType.HOUSE: {
        HouseCategory.UP_TO_100: {
            "River Stone Foundation": 0.1,
            "Reinforced Concrete Columns & Beams": 0.25,
            "Red Brick Walls": 0.19,
            "Solid Wood Doors": 0.035,
            "Glass Windows, Solid Wood Frame": 0.04,
            "Ceramic Tile Flooring": 0.2,
            "Spandek Zinc Roofing": 0.073,
            "Gypsum Ceiling": 0.037,
            "Standard Paint": 0.03,
            "Standard Brand Sanitary Fixtures": 0.025,
            "Setting-out Boards": 0.005,
            "Site Clearing": 0.015,
        },
        HouseCategory.UP_TO_200: {
            "Reinforced Concrete Pad Foundation": 0.1,
            "Reinforced Concrete Columns & Beams": 0.25,
            "Red Brick Walls": 0.19,
            "Solid Wood Doors": 0.035,
            "Glass Windows, Aluminium Frame": 0.04,
            "Granite Flooring": 0.2,
            "Metal Roof Tiles": 0.073,
            "Gypsum Ceiling": 0.037,
            "Medium Quality Paint": 0.03,
            "Medium Brand Sanitary Fixtures": 0.025,
            "Setting-out Boards": 0.005,
            "Site Clearing": 0.015,
        },
        HouseCategory.OVER_200: {
            "Bored Pile Foundation": 0.1,
            "Reinforced Concrete Columns & Beams": 0.25,
            "Hebel Block Walls": 0.19,
            "Solid Wood Doors": 0.035,
            "Glass Windows, uPVC Frame": 0.04,
            "Marble Flooring": 0.2,
            "Bitumen Roofing": 0.073,
            "Gypsum Ceiling": 0.037,
            "High Quality Paint": 0.03,
            "Premium Brand Sanitary Fixtures": 0.025,
            "Setting-out Boards": 0.005,
            "Site Clearing": 0.015,
        },
    },
    BuildingType.BOARDING_HOUSE: {
        BoardingHouseCategory.EXECUTIVE: {
            "Reinforced Concrete Pad Foundation": 0.1,
            "Reinforced Concrete Columns & Beams": 0.25,
            "Red Brick Walls": 0.19,
            "Solid Wood Doors": 0.035,
            "Glass Windows, uPVC Frame": 0.04,
            "Granite Flooring": 0.2,
            "Cast Concrete Slab Roof": 0.073,
            "PVC Ceiling": 0.037,
            "Medium Quality Paint": 0.03,
            "Medium Brand Sanitary Fixtures": 0.025,
            "Setting-out Boards": 0.005,
            "Site Clearing": 0.015,
        },
        BoardingHouseCategory.ECONOMY: {
            "River Stone Foundation": 0.1,
            "Reinforced Concrete Columns & Beams": 0.25,
            "Red Brick Walls": 0.19,
            "Solid Wood Doors": 0.035,
            "Glass Windows, Solid Wood Frame": 0.04,
            "Ceramic Tile Flooring": 0.2,
            "Spandek Zinc Roofing": 0.073,
            "PVC Ceiling": 0.037,
            "Standard Paint": 0.03,
            "Standard Brand Sanitary Fixtures": 0.025,
            "Setting-out Boards": 0.005,
            "Site Clearing": 0.015,
        },
    },
    BuildingType.SHOPHOUSE: {
        ShophouseCategory.FURNISHED: {
            "Reinforced Concrete Pad Foundation": 0.1,
            "Reinforced Concrete Columns & Beams": 0.25,
            "Red Brick Walls": 0.19,
            "Custom Steel Doors": 0.035,
            "Glass Windows, Aluminium Frame": 0.04,
            "Ceramic Tile Flooring": 0.2,
            "Cast Concrete Slab Roof": 0.073,
            "Gypsum Ceiling": 0.037,
            "Medium Quality Paint": 0.03,
            "Medium Brand Sanitary Fixtures": 0.025,
            "Setting-out Boards": 0.005,
            "Site Clearing": 0.015,
        },
        # An empty shell has no flooring, ceiling, paint or fixtures.
        ShophouseCategory.EMPTY: {
            "Reinforced Concrete Pad Foundation": 0.1,
            "Reinforced Concrete Columns & Beams": 0.25,
            "Red Brick Walls": 0.19,
            "Custom Steel Doors": 0.035,
            "Glass Windows, Aluminium Frame": 0.04,
            "Cast Concrete Slab Roof": 0.073,
            "Setting-out Boards": 0.005,
            "Site Clearing": 0.015,
        },
    },
    BuildingType.WAREHOUSE: {
        WarehouseCategory.EMPTY: {
            "Bored Pile Foundation": 0.1,
            "WF Steel Columns & Beams": 0.287,
            "Hebel Block Walls": 0.19,
            "Custom Steel Doors": 0.035,
            "Glass Windows, Aluminium Frame": 0.04,
            "Lean Concrete Flooring": 0.2,
            "Spandek Zinc Roofing": 0.073,
            "Standard Paint": 0.03,
            "Standard Brand Sanitary Fixtures": 0.025,
            "Setting-out Boards": 0.005,
            "Site Clearing": 0.015,
        },
    },
}

SEED_TABLES = CostTables(
    version=SEED_TABLES_VERSION,
    base_costs=BASE_COSTS,
    material_coefficients=MATERIAL_COEFFICIENTS,
    design_coefficients=DESIGN_COEFFICIENTS,
    room_schemas=DIMENSION_ROOM_SCHEMAS,
    work_item_percentages=WORK_ITEM_PERCENTAGES,
)
