"""Core calculation engine for the buildcost library.

The CostEngine prices a building in four steps:

1. **Classify** — pick the category (land-area band, economy/executive,
   furnished/empty) that indexes the room and work-item tables.
2. **Allocate area** — spread length x width x floors across the
   category's rooms with the schema's allocation strategy; whatever is left
   becomes free space. Rooms that don't fit stop the calculation.
3. **Compute cost** — base cost per m² x material coefficient x design
   coefficient x total area, then split into work items.
4. **Assemble** — package everything into an immutable CalculationResult.

Errors never escape ``calculate``: each step raises a
:class:`~buildcost.exceptions.CalculationError`, and the engine turns it
into a ``CalculationOutcome`` carrying only the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from buildcost.allocation import allocate
from buildcost.assembler import assemble
from buildcost.classifier import classify, parse_building_type
from buildcost.exceptions import (
    CalculationError,
    InvalidInputError,
    MissingCostTableEntryError,
)
from buildcost.models.request import CalculationRequest
from buildcost.models.result import (
    CalculationFailure,
    CalculationOutcome,
    CalculationResult,
)
from buildcost.pricing import compute_total_cost, compute_work_item_costs

if TYPE_CHECKING:
    from collections.abc import Mapping

    from buildcost.models.tables import CostTables

ENGINE_VERSION = "0.1.0"


class CostEngine:
    """Turns a CalculationRequest into a CalculationOutcome.

    Args:
        tables: The cost table snapshot every calculation reads. It is never
            modified; use :meth:`with_tables` to price against new data.

    Example::

        from buildcost.data.seed import SEED_TABLES

        engine = CostEngine(SEED_TABLES)
        outcome = engine.calculate(request)
        if outcome.ok:
            print(outcome.result.total_cost)
    """

    def __init__(self, tables: CostTables) -> None:
        self._tables = tables

    @property
    def tables(self) -> CostTables:
        return self._tables

    def with_tables(self, tables: CostTables) -> CostEngine:
        """Return a new engine bound to another table snapshot."""
        return CostEngine(tables)

    def calculate(
        self, request: CalculationRequest | Mapping[str, Any]
    ) -> CalculationOutcome:
        """Run a calculation and return either the result or the error.

        Args:
            request: A CalculationRequest, or a mapping of its fields which is
                validated first (constraint violations become InvalidInput).

        Returns:
            A CalculationOutcome with exactly one of ``result`` / ``error``.
        """
        try:
            result = self._calculate(self._coerce_request(request))
        except CalculationError as exc:
            return CalculationOutcome(
                error=CalculationFailure(code=exc.code, message=str(exc)),
            )
        return CalculationOutcome(result=result)

    def calculate_or_raise(
        self, request: CalculationRequest | Mapping[str, Any]
    ) -> CalculationResult:
        """Like :meth:`calculate` but raise the CalculationError on failure."""
        return self.calculate(request).unwrap()

    @staticmethod
    def _coerce_request(
        request: CalculationRequest | Mapping[str, Any],
    ) -> CalculationRequest:
        if isinstance(request, CalculationRequest):
            return request
        try:
            return CalculationRequest.model_validate(request)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            msg = f"Invalid calculation request: {problems}"
            raise InvalidInputError(msg) from exc

    def _calculate(self, request: CalculationRequest) -> CalculationResult:
        tables = self._tables

        # 1. Classify
        building_type = parse_building_type(request.building_type)
        category = classify(
            building_type,
            material=request.material,
            length=request.length,
            width=request.width,
            floors=request.floors,
            subtype=request.subtype,
        )

        # 2. Allocate area
        schema = tables.room_schema(building_type, category)
        if schema is None:
            msg = f"No room schema for {building_type}/{category}"
            raise MissingCostTableEntryError(msg)
        allocation = allocate(
            schema,
            total_area=request.total_area,
            land_area=request.land_area,
            counts=request.counts,
        )

        # 3. Compute cost
        total_cost = compute_total_cost(
            tables,
            building_type,
            material=request.material,
            design=request.design,
            total_area=request.total_area,
        )
        work_items = compute_work_item_costs(
            tables, building_type, category, total_cost
        )

        # 4. Assemble
        return assemble(
            building_type,
            category=category,
            strategy=schema.strategy,
            land_area=request.land_area,
            allocation=allocation,
            total_cost=total_cost,
            work_items=work_items,
            tables_version=tables.version,
        )
