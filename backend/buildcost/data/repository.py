"""Cost table providers.

A provider hands the engine a complete, validated ``CostTables`` snapshot
and accepts edited snapshots back. ``StaticTableProvider`` keeps tables in
memory; ``JsonTableProvider`` persists them as a JSON document.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from buildcost.data.quality import check_tables
from buildcost.exceptions import TableLoadError, TableValidationError
from buildcost.models.tables import CostTables

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def validate_tables(data: CostTables | dict[str, Any]) -> CostTables:
    """Validate a raw tables document.

    Raises:
        TableValidationError: If the document is not a valid CostTables.
    """
    if isinstance(data, CostTables):
        return data
    try:
        return CostTables.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid cost tables: {exc.error_count()} problem(s)\n{exc}"
        raise TableValidationError(msg) from exc


class TableProvider(ABC):
    """Source of cost table snapshots."""

    @abstractmethod
    def fetch_tables(self) -> CostTables:
        """Return the current table snapshot."""

    @abstractmethod
    def save_tables(self, tables: CostTables | dict[str, Any]) -> CostTables:
        """Validate and store a new snapshot, returning the stored tables."""

    @staticmethod
    def _log_quality(tables: CostTables) -> None:
        for warning in check_tables(tables):
            logger.warning("Cost table check: %s", warning)


class StaticTableProvider(TableProvider):
    """In-memory provider, seeded with a fixed snapshot."""

    def __init__(self, tables: CostTables) -> None:
        self._tables = tables

    def fetch_tables(self) -> CostTables:
        return self._tables

    def save_tables(self, tables: CostTables | dict[str, Any]) -> CostTables:
        validated = validate_tables(tables)
        self._log_quality(validated)
        self._tables = validated
        return validated


class JsonTableProvider(TableProvider):
    """Stores cost tables as a JSON document on disk.

    If the file does not exist yet it is created from ``default`` on the
    first fetch.
    """

    def __init__(self, path: Path, default: CostTables | None = None) -> None:
        self._path = path
        self._default = default

    @property
    def path(self) -> Path:
        return self._path

    def fetch_tables(self) -> CostTables:
        if not self._path.exists():
            if self._default is None:
                msg = f"Cost tables file not found: {self._path}"
                raise TableLoadError(msg)
            logger.info("Seeding cost tables file %s", self._path)
            return self.save_tables(self._default)

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Could not read cost tables from {self._path}: {exc}"
            raise TableLoadError(msg) from exc

        try:
            tables = CostTables.model_validate_json(raw)
        except ValidationError as exc:
            msg = f"Malformed cost tables in {self._path}: {exc.error_count()} problem(s)"
            raise TableLoadError(msg) from exc

        logger.info("Loaded cost tables version %s from %s", tables.version, self._path)
        self._log_quality(tables)
        return tables

    def save_tables(self, tables: CostTables | dict[str, Any]) -> CostTables:
        validated = validate_tables(tables)
        self._log_quality(validated)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(validated.model_dump_json(indent=2), encoding="utf-8")
        tmp_path.replace(self._path)
        logger.info("Saved cost tables version %s to %s", validated.version, self._path)
        return validated
