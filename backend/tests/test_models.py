"""Tests for request, table and result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildcost.data.percentages import PERCENTAGE_TABLES
from buildcost.data.seed import SEED_TABLES
from buildcost.engine import CostEngine
from buildcost.exceptions import InsufficientBuildingSizeError
from buildcost.models.enums import ErrorCode, RoomName
from buildcost.models.request import CalculationRequest
from buildcost.models.result import (
    CalculationFailure,
    CalculationOutcome,
)
from buildcost.models.tables import (
    CostTables,
    DimensionRoomSchema,
    PercentageRoomSchema,
    RoomDimensions,
)


def _request(**overrides: object) -> CalculationRequest:
    fields: dict[str, object] = {
        "building_type": "house",
        "material": "standard",
        "design": "minimalist",
        "length": 8.0,
        "width": 12.0,
        "floors": 2,
        "rooms": 2,
        "bathrooms": 1,
    }
    fields.update(overrides)
    return CalculationRequest(**fields)


class TestCalculationRequest:
    def test_areas(self) -> None:
        request = _request()
        assert request.land_area == pytest.approx(96.0)
        assert request.total_area == pytest.approx(192.0)

    def test_counts(self) -> None:
        counts = _request().counts
        assert (counts.floors, counts.rooms, counts.bathrooms) == (2, 2, 1)

    def test_defaults(self) -> None:
        request = CalculationRequest(
            building_type="warehouse", material="standard", design="minimalist",
            length=10, width=10,
        )
        assert request.floors == 1
        assert request.rooms == 0
        assert request.bathrooms == 0
        assert request.subtype is None

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("length", 0.0),
            ("width", -1.0),
            ("floors", 0),
            ("rooms", -1),
            ("floors", 201),
            ("bathrooms", 1001),
            ("length", float("inf")),
            ("width", float("nan")),
        ],
    )
    def test_rejects_out_of_range(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            _request(**{field: value})

    def test_is_frozen(self) -> None:
        request = _request()
        with pytest.raises(ValidationError):
            request.length = 20.0  # type: ignore[misc]


class TestCostTables:
    def test_json_round_trip(self) -> None:
        for tables in (SEED_TABLES, PERCENTAGE_TABLES):
            restored = CostTables.model_validate_json(tables.model_dump_json())
            assert restored.model_dump(mode="json") == tables.model_dump(mode="json")

    def test_round_trip_keeps_work_item_order(self) -> None:
        restored = CostTables.model_validate_json(SEED_TABLES.model_dump_json())
        original = list(SEED_TABLES.work_item_percentages["house"]["<100"])
        assert list(restored.work_item_percentages["house"]["<100"]) == original

    def test_schema_discriminator(self) -> None:
        data = SEED_TABLES.model_dump(mode="json")
        data["room_schemas"]["warehouse"]["empty"] = {
            "strategy": "percentages",
            "rooms": {"room": 0.2},
        }
        tables = CostTables.model_validate(data)
        assert isinstance(tables.room_schema("warehouse", "empty"), PercentageRoomSchema)
        assert isinstance(tables.room_schema("house", "<100"), DimensionRoomSchema)

    def test_rejects_negative_coefficient(self) -> None:
        data = SEED_TABLES.model_dump(mode="json")
        data["material_coefficients"]["standard"] = -1
        with pytest.raises(ValidationError):
            CostTables.model_validate(data)

    def test_rejects_negative_work_item(self) -> None:
        data = SEED_TABLES.model_dump(mode="json")
        data["work_item_percentages"]["house"]["<100"]["Site Clearing"] = -0.1
        with pytest.raises(ValidationError):
            CostTables.model_validate(data)

    def test_rejects_empty_work_item_table(self) -> None:
        data = SEED_TABLES.model_dump(mode="json")
        data["work_item_percentages"]["warehouse"]["empty"] = {}
        with pytest.raises(ValidationError, match="no entries"):
            CostTables.model_validate(data)

    def test_rejects_unknown_building_type(self) -> None:
        data = SEED_TABLES.model_dump(mode="json")
        data["base_costs"]["office"] = 1_000_000
        with pytest.raises(ValidationError):
            CostTables.model_validate(data)

    def test_free_space_cannot_be_fixed(self) -> None:
        with pytest.raises(ValidationError):
            DimensionRoomSchema(
                rooms={RoomName.FREE_SPACE: RoomDimensions(length=1, width=1)}
            )
        with pytest.raises(ValidationError):
            PercentageRoomSchema(rooms={RoomName.FREE_SPACE: 0.5})

    def test_share_must_be_a_fraction(self) -> None:
        with pytest.raises(ValidationError):
            PercentageRoomSchema(rooms={RoomName.KITCHEN: 1.5})

    def test_lookup_helpers(self) -> None:
        assert SEED_TABLES.room_schema("house", ">500") is None
        assert SEED_TABLES.work_items("warehouse", "furnished") is None
        items = SEED_TABLES.work_items("warehouse", "empty")
        assert items is not None
        assert "WF Steel Columns & Beams" in items


class TestCalculationOutcome:
    def test_requires_exactly_one(self) -> None:
        with pytest.raises(ValidationError):
            CalculationOutcome()
        result = CostEngine(SEED_TABLES).calculate(_request()).unwrap()
        with pytest.raises(ValidationError):
            CalculationOutcome(
                result=result,
                error=CalculationFailure(code=ErrorCode.INVALID_INPUT, message="x"),
            )

    def test_unwrap(self) -> None:
        outcome = CostEngine(SEED_TABLES).calculate(_request())
        assert outcome.unwrap() is outcome.result
        failed = CalculationOutcome(
            error=CalculationFailure(
                code=ErrorCode.INSUFFICIENT_BUILDING_SIZE, message="too small"
            )
        )
        with pytest.raises(InsufficientBuildingSizeError, match="too small"):
            failed.unwrap()


class TestSummaryDict:
    def test_formatted_values(self) -> None:
        result = CostEngine(SEED_TABLES).calculate(
            _request(length=10.0, width=10.0, floors=1, rooms=3, bathrooms=2)
        ).unwrap()
        summary = result.to_summary_dict()

        assert summary["total_cost_formatted"] == "Rp 350.000.000"
        assert summary["total_area_formatted"] == "100.00 m²"
        assert summary["cost_per_area_formatted"] == "Rp 3.500.000 / m²"
        assert summary["rooms"][0]["label"] == "Master Bedroom (1 room)"
        assert summary["rooms"][1]["label"] == "Child Bedroom (2 rooms)"
        assert summary["rooms"][-1]["area_formatted"] == "37.00"
        assert summary["work_items"][0]["cost_formatted"] == "Rp 87.500.000"

    def test_unused_rooms_are_flagged(self) -> None:
        result = CostEngine(SEED_TABLES).calculate(
            _request(rooms=1, bathrooms=0)
        ).unwrap()
        rooms = {r["name"]: r for r in result.to_summary_dict()["rooms"]}
        assert rooms["child_bedroom"]["used"] is False
        assert rooms["bathroom"]["used"] is False
        assert rooms["master_bedroom"]["used"] is True
