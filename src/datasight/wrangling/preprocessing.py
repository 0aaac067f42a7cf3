"""Whole-table preprocessing."""

import math

from datasight.core.logging import get_logger
from datasight.core.models.base import Result
from datasight.table import Table, is_missing, to_number

logger = get_logger(__name__)

DEFAULT_ZSCORE_THRESHOLD = 3.0


def drop_incomplete_rows(table: Table) -> Result[Table]:
    """Drop every row that has at least one missing cell."""
    kept = [
        row for row in table.rows if not any(is_missing(row.get(column)) for column in table.columns)
    ]
    logger.debug("incomplete_rows_dropped", removed=table.row_count - len(kept))
    return Result.ok(table.with_rows(kept))


def remove_outliers(table: Table, threshold: float = DEFAULT_ZSCORE_THRESHOLD) -> Result[Table]:
    """Drop rows with a z-score above ``threshold`` in any fully numeric column.

    Columns are processed one after another, each on the rows left by the
    previous one. The sample standard deviation (n - 1) is used; columns
    with fewer than two rows or zero spread are skipped.
    """
    if threshold <= 0:
        return Result.fail(f"Outlier threshold must be positive, got {threshold}")
    if table.is_empty:
        return Result.ok(table)

    columns = [
        column
        for column in table.columns
        if all(to_number(value) is not None for value in table.column_values(column))
    ]

    rows = list(table.rows)
    for column in columns:
        if len(rows) < 2:
            break
        numbers = [to_number(row.get(column)) for row in rows]
        mean = sum(numbers) / len(numbers)
        stddev = math.sqrt(sum((number - mean) ** 2 for number in numbers) / (len(numbers) - 1))
        if stddev == 0:
            continue
        rows = [
            row
            for row, number in zip(rows, numbers, strict=True)
            if abs((number - mean) / stddev) <= threshold
        ]

    logger.debug(
        "outliers_removed",
        columns=columns,
        threshold=threshold,
        removed=table.row_count - len(rows),
    )
    return Result.ok(table.with_rows(rows))
