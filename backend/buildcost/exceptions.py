"""Custom exception hierarchy for the buildcost engine."""

from __future__ import annotations

from buildcost.models.enums import ErrorCode


class BuildCostError(Exception):
    """Base exception for all buildcost errors."""


class CalculationError(BuildCostError):
    """Raised by a calculation step; carries a machine-readable code."""

    code: ErrorCode = ErrorCode.INVALID_INPUT


class InvalidInputError(CalculationError):
    """Raised when request values violate their constraints."""

    code = ErrorCode.INVALID_INPUT


class InvalidBuildingTypeError(CalculationError):
    """Raised for an unknown building type or category selector."""

    code = ErrorCode.INVALID_BUILDING_TYPE


class InsufficientBuildingSizeError(CalculationError):
    """Raised when the allocated rooms need more area than the building has."""

    code = ErrorCode.INSUFFICIENT_BUILDING_SIZE

    def __init__(self, message: str, deficit: float = 0.0) -> None:
        super().__init__(message)
        self.deficit = deficit


class MissingCostTableEntryError(CalculationError):
    """Raised when the cost tables lack a key the calculation needs."""

    code = ErrorCode.MISSING_COST_TABLE_ENTRY


ERRORS_BY_CODE: dict[ErrorCode, type[CalculationError]] = {
    ErrorCode.INVALID_INPUT: InvalidInputError,
    ErrorCode.INVALID_BUILDING_TYPE: InvalidBuildingTypeError,
    ErrorCode.INSUFFICIENT_BUILDING_SIZE: InsufficientBuildingSizeError,
    ErrorCode.MISSING_COST_TABLE_ENTRY: MissingCostTableEntryError,
}


class TableLoadError(BuildCostError):
    """Raised when a cost tables document cannot be read or parsed."""


class TableValidationError(BuildCostError):
    """Raised when a cost tables document fails validation on save."""
