"""Workspace: the current table and the original it was loaded as.

Wrangling operations replace the current table with a new value; the
original stays untouched so it can be restored at any time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from datasight.analysis import (
    ColumnStats,
    ColumnTypeMap,
    CorrelationResult,
    DatasetProfile,
    calculate_column_stats,
    calculate_correlation,
    detect_column_types,
    profile_table,
)
from datasight.core.config import Settings, get_settings
from datasight.core.logging import get_logger, log_context
from datasight.core.models.base import FileInfo, Result
from datasight.table import Table

logger = get_logger(__name__)

type Operation = Callable[..., Result[Table]]


class Workspace:
    """Holds the table being analyzed and its restore point."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.file_info: FileInfo | None = None
        self._original: Table | None = None
        self._current: Table | None = None

    @property
    def original(self) -> Table:
        if self._original is None:
            raise RuntimeError("No table loaded")
        return self._original

    @property
    def current(self) -> Table:
        if self._current is None:
            raise RuntimeError("No table loaded")
        return self._current

    @property
    def is_loaded(self) -> bool:
        return self._current is not None

    @property
    def is_modified(self) -> bool:
        return self._current is not self._original

    def load(self, table: Table, file_info: FileInfo | None = None) -> None:
        """Replace everything with a freshly loaded table."""
        self.file_info = file_info
        self._original = table
        self._current = table
        logger.info(
            "workspace_loaded",
            file=file_info.name if file_info else None,
            rows=table.row_count,
            columns=len(table.columns),
        )

    def apply(self, operation: Operation, *args: Any, **kwargs: Any) -> Result[Table]:
        """Run a wrangling operation on the current table.

        The current table is replaced only when the operation succeeds.
        """
        name = getattr(operation, "__name__", str(operation))
        with log_context(file=self.file_info.name if self.file_info else None, operation=name):
            result = operation(self.current, *args, **kwargs)
            if result.success and result.value is not None:
                logger.info(
                    "wrangle_applied",
                    rows_before=self.current.row_count,
                    rows_after=result.value.row_count,
                )
                self._current = result.value
            else:
                logger.warning("wrangle_failed", error=result.error)
        return result

    def reset(self) -> Table:
        """Restore the table as originally loaded."""
        self._current = self.original
        logger.info("workspace_reset", rows=self.original.row_count)
        return self._current

    def clear(self) -> None:
        self.file_info = None
        self._original = None
        self._current = None

    # Derived views of the current table

    def column_types(self) -> ColumnTypeMap:
        return detect_column_types(self.current, self.settings.type_detection_threshold)

    def stats(self, column: str) -> ColumnStats:
        return calculate_column_stats(self.current, column, self.settings.outlier_iqr_multiplier)

    def correlation(self, column1: str, column2: str) -> CorrelationResult:
        return calculate_correlation(self.current, column1, column2)

    def profile(self) -> DatasetProfile:
        return profile_table(
            self.current,
            threshold=self.settings.type_detection_threshold,
            histogram_buckets=self.settings.profile_histogram_buckets,
            top_k=self.settings.profile_top_k_values,
            sample_size=self.settings.profile_sample_values,
            iqr_multiplier=self.settings.outlier_iqr_multiplier,
        )
