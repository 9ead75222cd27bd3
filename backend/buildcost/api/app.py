"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from buildcost.data.quality import check_tables
from buildcost.engine import ENGINE_VERSION, CostEngine
from buildcost.exceptions import TableLoadError, TableValidationError
from buildcost.models.enums import BuildingType, ErrorCode, ShophouseCategory

if TYPE_CHECKING:
    from buildcost.data.repository import TableProvider
    from buildcost.models.tables import CostTables

logger = logging.getLogger(__name__)

# Errors the user can fix by changing their input; anything else is a
# problem with the cost tables.
_USER_ERRORS = {
    ErrorCode.INVALID_INPUT,
    ErrorCode.INVALID_BUILDING_TYPE,
    ErrorCode.INSUFFICIENT_BUILDING_SIZE,
}


def _label(value: str) -> str:
    return value.replace("_", " ").capitalize()


def option_lists(tables: CostTables) -> dict[str, list[dict[str, str]]]:
    """Select options for the calculator form, derived from the tables."""
    labels = {
        BuildingType.HOUSE: "House",
        BuildingType.BOARDING_HOUSE: "Boarding house",
        BuildingType.SHOPHOUSE: "Shophouse",
        BuildingType.WAREHOUSE: "Warehouse",
    }
    return {
        "building_types": [
            {"value": bt.value, "label": labels[bt]}
            for bt in BuildingType
            if bt in tables.base_costs
        ],
        "materials": [
            {"value": key, "label": _label(key)} for key in tables.material_coefficients
        ],
        "designs": [
            {"value": key, "label": _label(key)} for key in tables.design_coefficients
        ],
        "shophouse_categories": [
            {"value": c.value, "label": _label(c.value)} for c in ShophouseCategory
        ],
    }


def create_app(
    *,
    provider: TableProvider | None = None,
    cost_engine: CostEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    provider
        Optional table provider (e.g. tests). If not provided, one is
        created from environment variables on first use.
    cost_engine
        Optional pre-built engine. If not provided, one is created from the
        provider's current tables on first request.
    """
    from buildcost.api.deps import cors_origins

    app = FastAPI(title="buildcost", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.provider = provider
    app.state.cost_engine = cost_engine

    def _get_provider() -> TableProvider:
        prov: TableProvider | None = app.state.provider
        if prov is not None:
            return prov
        from buildcost.api.deps import create_table_provider

        prov = create_table_provider()
        app.state.provider = prov
        return prov

    def _get_cost_engine() -> CostEngine:
        eng: CostEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        try:
            eng = CostEngine(_get_provider().fetch_tables())
        except TableLoadError as exc:
            logger.exception("Could not load cost tables")
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        app.state.cost_engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/calculate-cost
    # ------------------------------------------------------------------

    @app.post("/api/calculate-cost")
    def calculate_cost(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        engine = _get_cost_engine()
        outcome = engine.calculate(payload)
        if outcome.error is not None:
            error = outcome.error
            if error.code in _USER_ERRORS:
                logger.warning("Calculation rejected (%s): %s", error.code, error.message)
                status_code = 422
            else:
                logger.error("Cost table problem (%s): %s", error.code, error.message)
                status_code = 500
            raise HTTPException(
                status_code=status_code,
                detail=error.model_dump(mode="json"),
            )

        result = outcome.unwrap()
        return {
            "result": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/calculator-data
    # ------------------------------------------------------------------

    @app.get("/api/calculator-data")
    def get_calculator_data() -> dict[str, Any]:
        tables = _get_cost_engine().tables
        return {
            "tables": tables.model_dump(mode="json"),
            "options": option_lists(tables),
            "warnings": check_tables(tables),
        }

    # ------------------------------------------------------------------
    # PUT /api/calculator-data
    # ------------------------------------------------------------------

    @app.put("/api/calculator-data")
    def update_calculator_data(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        try:
            tables = _get_provider().save_tables(payload)
        except TableValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        # Swap in a new engine; in-flight calculations keep the old snapshot.
        app.state.cost_engine = CostEngine(tables)
        logger.info("Cost tables updated to version %s", tables.version)
        return {
            "message": "Calculator data updated",
            "version": tables.version,
            "warnings": check_tables(tables),
        }

    return app
