"""Building classification.

Maps a building type plus the inputs that matter for it onto the category
key used to index the room schema and work-item tables:

- house: land area (length x width) in m², inclusive on the low side —
  ``<100`` up to and including 100, ``>100`` up to and including 200,
  ``>200`` beyond that.
- boarding house: ``economy`` for standard material, ``executive``
  otherwise.
- shophouse: the requested subtype, ``empty`` when none is given.
- warehouse: always ``empty``.
"""

from __future__ import annotations

from buildcost.exceptions import InvalidBuildingTypeError
from buildcost.models.enums import (
    BoardingHouseCategory,
    BuildingType,
    HouseCategory,
    MaterialGrade,
    ShophouseCategory,
    WarehouseCategory,
)

HOUSE_SMALL_MAX_AREA = 100.0
HOUSE_MEDIUM_MAX_AREA = 200.0


def parse_building_type(value: str) -> BuildingType:
    """Return the BuildingType for a raw string, or raise InvalidBuildingTypeError."""
    try:
        return BuildingType(value)
    except ValueError:
        msg = f"Unknown building type '{value}'"
        raise InvalidBuildingTypeError(msg) from None


def classify_house(land_area: float) -> HouseCategory:
    if land_area <= HOUSE_SMALL_MAX_AREA:
        return HouseCategory.UP_TO_100
    if land_area <= HOUSE_MEDIUM_MAX_AREA:
        return HouseCategory.UP_TO_200
    return HouseCategory.OVER_200


def classify_boarding_house(material: str) -> BoardingHouseCategory:
    if material == MaterialGrade.STANDARD:
        return BoardingHouseCategory.ECONOMY
    return BoardingHouseCategory.EXECUTIVE


def classify_shophouse(subtype: str | None) -> ShophouseCategory:
    if subtype is None or subtype == "":
        return ShophouseCategory.EMPTY
    try:
        return ShophouseCategory(subtype)
    except ValueError:
        allowed = ", ".join(c.value for c in ShophouseCategory)
        msg = f"Unknown shophouse subtype '{subtype}' (expected one of: {allowed})"
        raise InvalidBuildingTypeError(msg) from None


def classify(
    building_type: BuildingType | str,
    material: str,
    length: float,
    width: float,
    floors: int = 1,
    subtype: str | None = None,
) -> str:
    """Return the category key for a building.

    ``floors`` does not influence any category today; it is accepted so
    callers can pass the full building description.

    Raises:
        InvalidBuildingTypeError: For an unknown building type or shophouse
            subtype.
    """
    if not isinstance(building_type, BuildingType):
        building_type = parse_building_type(building_type)

    if building_type == BuildingType.HOUSE:
        return classify_house(length * width).value
    if building_type == BuildingType.BOARDING_HOUSE:
        return classify_boarding_house(material).value
    if building_type == BuildingType.SHOPHOUSE:
        return classify_shophouse(subtype).value
    if building_type == BuildingType.WAREHOUSE:
        return WarehouseCategory.EMPTY.value

    msg = f"No classification rule for building type '{building_type}'"
    raise InvalidBuildingTypeError(msg)
