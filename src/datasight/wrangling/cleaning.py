"""Column cleaning operations.

Each operation targets one column and returns a new table.
"""

import math

from datasight.core.logging import get_logger
from datasight.core.models.base import Result
from datasight.table import Table, is_missing, to_number

logger = get_logger(__name__)


def remove_nulls(table: Table, column: str) -> Result[Table]:
    """Drop rows whose cell in ``column`` is missing."""
    if not table.has_column(column):
        return Result.fail(f"Unknown column: {column}")

    kept = [row for row in table.rows if not is_missing(row.get(column))]
    logger.debug("nulls_removed", column=column, removed=table.row_count - len(kept))
    return Result.ok(table.with_rows(kept))


def remove_duplicates(table: Table, column: str) -> Result[Table]:
    """Keep only the first row for each distinct value of ``column``."""
    if not table.has_column(column):
        return Result.fail(f"Unknown column: {column}")

    seen: set[object] = set()
    kept = []
    for row in table.rows:
        value = row.get(column)
        key = (type(value).__name__, value)
        if key in seen:
            continue
        seen.add(key)
        kept.append(row)

    logger.debug("duplicates_removed", column=column, removed=table.row_count - len(kept))
    return Result.ok(table.with_rows(kept))


def standardize(table: Table, column: str) -> Result[Table]:
    """Replace ``column`` with z-scores using the population standard deviation.

    Cells that are not numeric become None.
    """
    if not table.has_column(column):
        return Result.fail(f"Unknown column: {column}")

    numbers = [to_number(value) for value in table.column_values(column)]
    valid = [number for number in numbers if number is not None]
    if not valid:
        return Result.fail(f"Column '{column}' has no numeric values")

    mean = sum(valid) / len(valid)
    stddev = math.sqrt(sum((number - mean) ** 2 for number in valid) / len(valid))
    if stddev == 0:
        return Result.fail(f"Column '{column}' has zero variance and cannot be standardized")

    scores = [None if number is None else (number - mean) / stddev for number in numbers]
    return Result.ok(table.with_column(column, scores))


def bin_column(table: Table, column: str, bins: int) -> Result[Table]:
    """Add ``{column}_binned`` holding equal-width bin indexes.

    Bin ``i`` covers ``[min + i*width, min + (i+1)*width)``; the maximum falls
    into the last bin. A constant column maps entirely to bin 0.
    """
    if not table.has_column(column):
        return Result.fail(f"Unknown column: {column}")
    if bins < 1:
        return Result.fail(f"Invalid number of bins: {bins}")

    numbers = [to_number(value) for value in table.column_values(column)]
    valid = [number for number in numbers if number is not None]
    if not valid:
        return Result.fail(f"Column '{column}' has no numeric values")

    minimum, maximum = min(valid), max(valid)
    width = (maximum - minimum) / bins

    def bin_index(number: float | None) -> int | None:
        if number is None:
            return None
        if width == 0:
            return 0
        return min(int(math.floor((number - minimum) / width)), bins - 1)

    return Result.ok(table.with_column(f"{column}_binned", [bin_index(n) for n in numbers]))
