"""Tests for building classification."""

from __future__ import annotations

import pytest

from buildcost.classifier import classify, classify_house, parse_building_type
from buildcost.exceptions import InvalidBuildingTypeError
from buildcost.models.enums import BuildingType, HouseCategory


class TestHouse:
    """House categories follow land area, inclusive on the low side."""

    @pytest.mark.parametrize(
        ("length", "width", "expected"),
        [
            (5.0, 5.0, "<100"),
            (10.0, 10.0, "<100"),
            (10.0, 10.1, ">100"),
            (10.0, 20.0, ">100"),
            (10.0, 20.1, ">200"),
            (20.0, 30.0, ">200"),
        ],
    )
    def test_land_area_bands(self, length: float, width: float, expected: str) -> None:
        assert classify("house", "standard", length, width) == expected

    def test_boundary_100_is_small(self) -> None:
        assert classify_house(100.0) == HouseCategory.UP_TO_100

    def test_boundary_200_is_medium(self) -> None:
        assert classify_house(200.0) == HouseCategory.UP_TO_200

    def test_floors_do_not_change_category(self) -> None:
        assert classify("house", "standard", 10, 10, floors=3) == "<100"


class TestBoardingHouse:
    def test_standard_material_is_economy(self) -> None:
        assert classify("boardingHouse", "standard", 10, 10) == "economy"

    @pytest.mark.parametrize("material", ["medium", "premium"])
    def test_better_material_is_executive(self, material: str) -> None:
        assert classify("boardingHouse", material, 10, 10) == "executive"


class TestShophouse:
    def test_defaults_to_empty(self) -> None:
        assert classify("shophouse", "standard", 5, 15) == "empty"

    def test_blank_subtype_defaults_to_empty(self) -> None:
        assert classify("shophouse", "standard", 5, 15, subtype="") == "empty"

    def test_furnished_subtype(self) -> None:
        assert classify("shophouse", "standard", 5, 15, subtype="furnished") == "furnished"

    def test_unknown_subtype_fails(self) -> None:
        with pytest.raises(InvalidBuildingTypeError, match="subtype"):
            classify("shophouse", "standard", 5, 15, subtype="garage")


class TestWarehouse:
    def test_always_empty(self) -> None:
        assert classify("warehouse", "premium", 40, 50, floors=2) == "empty"


class TestInvalid:
    def test_unknown_building_type(self) -> None:
        with pytest.raises(InvalidBuildingTypeError, match="office"):
            classify("office", "standard", 10, 10)

    def test_parse_building_type(self) -> None:
        assert parse_building_type("boardingHouse") is BuildingType.BOARDING_HOUSE

    def test_classification_is_stable(self) -> None:
        first = classify("house", "medium", 12.5, 9.0)
        assert all(classify("house", "medium", 12.5, 9.0) == first for _ in range(5))
