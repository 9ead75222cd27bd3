"""Percentage-of-area room tables.

An alternative to the fixed-dimension room sizes in ``seed``: every room
is a share of total floor area and the residual becomes free space. The
cost tables are shared with the seed data.
"""

from buildcost.data.seed import SEED_TABLES
from buildcost.models.enums import (
    BoardingHouseCategory,
    BuildingType,
    HouseCategory,
    RoomName,
    ShophouseCategory,
    WarehouseCategory,
)
from buildcost.models.tables import CostTables, PercentageRoomSchema

PERCENTAGE_ROOM_SCHEMAS: dict[BuildingType, dict[str, PercentageRoomSchema]] = {
    BuildingType.HOUSE: {
        HouseCategory.UP_TO_100: PercentageRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: 0.12,
            RoomName.CHILD_BEDROOM: 0.09,
            RoomName.BATHROOM: 0.04,
            RoomName.DINING_ROOM: 0.08,
            RoomName.KITCHEN: 0.07,
            RoomName.LIVING_ROOM: 0.10,
            RoomName.FAMILY_ROOM: 0.10,
            RoomName.OPEN_SPACE: 0.25,
        }),
        HouseCategory.UP_TO_200: PercentageRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: 0.12,
            RoomName.CHILD_BEDROOM: 0.10,
            RoomName.BATHROOM: 0.05,
            RoomName.DINING_ROOM: 0.08,
            RoomName.KITCHEN: 0.06,
            RoomName.LIVING_ROOM: 0.10,
            RoomName.FAMILY_ROOM: 0.12,
            RoomName.OPEN_SPACE: 0.25,
        }),
        HouseCategory.OVER_200: PercentageRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: 0.10,
            RoomName.CHILD_BEDROOM: 0.10,
            RoomName.BATHROOM: 0.05,
            RoomName.DINING_ROOM: 0.07,
            RoomName.KITCHEN: 0.06,
            RoomName.LIVING_ROOM: 0.12,
            RoomName.FAMILY_ROOM: 0.12,
            RoomName.OPEN_SPACE: 0.25,
        }),
    },
    BuildingType.BOARDING_HOUSE: {
        BoardingHouseCategory.EXECUTIVE: PercentageRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: 0.32,
            RoomName.STORAGE: 0.03,
            RoomName.BATHROOM: 0.10,
            RoomName.DINING_ROOM: 0.06,
            RoomName.KITCHEN: 0.06,
            RoomName.LIVING_ROOM: 0.10,
            RoomName.LAUNDRY: 0.05,
            RoomName.OPEN_SPACE: 0.20,
        }),
        BoardingHouseCategory.ECONOMY: PercentageRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: 0.35,
            RoomName.STORAGE: 0.03,
            RoomName.BATHROOM: 0.10,
            RoomName.DINING_ROOM: 0.05,
            RoomName.KITCHEN: 0.05,
            RoomName.LIVING_ROOM: 0.08,
            RoomName.LAUNDRY: 0.04,
            RoomName.OPEN_SPACE: 0.25,
        }),
    },
    BuildingType.SHOPHOUSE: {
        ShophouseCategory.FURNISHED: PercentageRoomSchema(rooms={
            RoomName.MASTER_BEDROOM: 0.10,
            RoomName.CHILD_BEDROOM: 0.08,
            RoomName.BATHROOM: 0.04,
            RoomName.DINING_ROOM: 0.06,
            RoomName.KITCHEN: 0.05,
            RoomName.LIVING_ROOM: 0.12,
            RoomName.FAMILY_ROOM: 0.10,
        }),
        ShophouseCategory.EMPTY: PercentageRoomSchema(rooms={
            RoomName.BATHROOM: 0.03,
        }),
    },
    BuildingType.WAREHOUSE: {
        WarehouseCategory.EMPTY: PercentageRoomSchema(rooms={
            RoomName.ROOM: 0.10,
            RoomName.BATHROOM: 0.02,
        }),
    },
}

PERCENTAGE_TABLES: CostTables = SEED_TABLES.model_copy(
    update={
        "version": f"{SEED_TABLES.version}-percentages",
        "room_schemas": PERCENTAGE_ROOM_SCHEMAS,
    }
)
