"""Tests for the FastAPI application."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest
from fastapi.testclient import TestClient

from buildcost.api.app import create_app
from buildcost.data.repository import JsonTableProvider, StaticTableProvider
from buildcost.data.seed import SEED_TABLES

if TYPE_CHECKING:
    from pathlib import Path

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def client() -> TestClient:
    app = create_app(provider=StaticTableProvider(SEED_TABLES))
    return TestClient(app)


def _payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "building_type": "house",
        "material": "standard",
        "design": "minimalist",
        "length": 10,
        "width": 10,
        "floors": 1,
        "rooms": 3,
        "bathrooms": 2,
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# GET /api/health
# ---------------------------------------------------------------------------


class TestHealth:
    def test_ok(self, client: TestClient) -> None:
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": "0.1.0"}


# ---------------------------------------------------------------------------
# POST /api/calculate-cost
# ---------------------------------------------------------------------------


class TestCalculateCost:
    def test_success(self, client: TestClient) -> None:
        resp = client.post("/api/calculate-cost", json=_payload())
        assert resp.status_code == 200

        data = resp.json()
        assert data["result"]["total_cost"] == pytest.approx(350_000_000.0)
        assert data["result"]["category"] == "<100"
        assert data["summary"]["total_cost_formatted"] == "Rp 350.000.000"
        assert data["result"]["room_areas"][-1]["name"] == "free_space"

    def test_work_items_sorted(self, client: TestClient) -> None:
        data = client.post("/api/calculate-cost", json=_payload()).json()
        costs = [item["cost"] for item in data["result"]["work_item_costs"]]
        assert costs == sorted(costs, reverse=True)

    def test_invalid_building_type(self, client: TestClient) -> None:
        resp = client.post("/api/calculate-cost", json=_payload(building_type="office"))
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "InvalidBuildingType"

    def test_insufficient_size(self, client: TestClient) -> None:
        resp = client.post(
            "/api/calculate-cost",
            json=_payload(length=1, width=1, rooms=5, bathrooms=5),
        )
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "InsufficientBuildingSize"

    def test_invalid_input(self, client: TestClient) -> None:
        resp = client.post("/api/calculate-cost", json=_payload(length=-1))
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "InvalidInput"

    def test_huge_floor_count(self, client: TestClient) -> None:
        resp = client.post("/api/calculate-cost", json=_payload(floors=10**400))
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "InvalidInput"

    def test_infinite_length(self, client: TestClient) -> None:
        body = json.dumps(_payload()).replace('"length": 10', '"length": Infinity')
        resp = client.post(
            "/api/calculate-cost",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "InvalidInput"

    def test_missing_table_entry_is_server_error(self, client: TestClient) -> None:
        resp = client.post("/api/calculate-cost", json=_payload(material="gold"))
        assert resp.status_code == 500
        assert resp.json()["detail"]["code"] == "MissingCostTableEntry"

    def test_shophouse_subtype(self, client: TestClient) -> None:
        resp = client.post(
            "/api/calculate-cost",
            json=_payload(building_type="shophouse", subtype="furnished"),
        )
        assert resp.status_code == 200
        assert resp.json()["result"]["category"] == "furnished"


# ---------------------------------------------------------------------------
# /api/calculator-data
# ---------------------------------------------------------------------------


class TestCalculatorData:
    def test_get(self, client: TestClient) -> None:
        resp = client.get("/api/calculator-data")
        assert resp.status_code == 200

        data = resp.json()
        assert data["tables"]["base_costs"]["house"] == 3_500_000
        values = [o["value"] for o in data["options"]["building_types"]]
        assert values == ["house", "boardingHouse", "shophouse", "warehouse"]
        assert {"value": "premium", "label": "Premium"} in data["options"]["materials"]
        assert len(data["warnings"]) == 1

    def test_put_updates_calculations(self, client: TestClient) -> None:
        tables = client.get("/api/calculator-data").json()["tables"]
        tables["base_costs"]["house"] = 4_000_000
        tables["version"] = "2025.2"

        resp = client.put("/api/calculator-data", json=tables)
        assert resp.status_code == 200
        assert resp.json()["version"] == "2025.2"

        result = client.post("/api/calculate-cost", json=_payload()).json()["result"]
        assert result["total_cost"] == pytest.approx(400_000_000.0)
        assert result["tables_version"] == "2025.2"

    def test_put_rejects_invalid(self, client: TestClient) -> None:
        tables = client.get("/api/calculator-data").json()["tables"]
        tables["material_coefficients"]["standard"] = -1

        resp = client.put("/api/calculator-data", json=tables)
        assert resp.status_code == 422

        result = client.post("/api/calculate-cost", json=_payload()).json()["result"]
        assert result["total_cost"] == pytest.approx(350_000_000.0)

    def test_put_persists_to_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tables.json"
        provider = JsonTableProvider(path, default=SEED_TABLES)
        client = TestClient(create_app(provider=provider))

        tables = client.get("/api/calculator-data").json()["tables"]
        tables["design_coefficients"]["industrial"] = 1.3
        assert client.put("/api/calculator-data", json=tables).status_code == 200

        reloaded = JsonTableProvider(path).fetch_tables()
        assert reloaded.design_coefficients["industrial"] == pytest.approx(1.3)

    def test_unreadable_tables_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tables.json"
        path.write_text("[]", encoding="utf-8")
        client = TestClient(create_app(provider=JsonTableProvider(path)))

        resp = client.post("/api/calculate-cost", json=_payload())
        assert resp.status_code == 503


class TestEnvironmentConfig:
    def test_percentage_tables_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUILDCOST_ALLOCATION", "percentages")
        monkeypatch.delenv("BUILDCOST_DATA_FILE", raising=False)
        client = TestClient(create_app())

        result = client.post("/api/calculate-cost", json=_payload()).json()["result"]
        assert result["strategy"] == "percentages"

    def test_data_file_from_env(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        path = tmp_path / "tables.json"
        monkeypatch.setenv("BUILDCOST_DATA_FILE", str(path))
        monkeypatch.delenv("BUILDCOST_ALLOCATION", raising=False)
        client = TestClient(create_app())

        assert client.get("/api/calculator-data").status_code == 200
        assert path.exists()

    def test_bad_allocation_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from buildcost.api.deps import allocation_strategy

        monkeypatch.setenv("BUILDCOST_ALLOCATION", "random")
        with pytest.raises(ValueError, match="BUILDCOST_ALLOCATION"):
            allocation_strategy()
