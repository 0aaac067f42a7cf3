"""Row filtering."""

from datasight.core.logging import get_logger
from datasight.core.models.base import Result
from datasight.table import CellValue, Table, to_number

logger = get_logger(__name__)


def _matches(cell: CellValue, needle: str, needle_number: float | None) -> bool:
    if isinstance(cell, int | float) and not isinstance(cell, bool):
        return needle_number is not None and float(cell) == needle_number
    text = "" if cell is None else str(cell)
    return needle.lower() in text.lower()


def filter_rows(table: Table, column: str, value: str) -> Result[Table]:
    """Keep the rows whose cell in ``column`` matches ``value``.

    Numeric cells match when they equal the filter value parsed as a number.
    All other cells match when they contain the filter value, ignoring case.

    Args:
        table: Table to filter
        column: Column to test
        value: Filter value as typed by the user

    Returns:
        Result containing the filtered table
    """
    if not table.has_column(column):
        return Result.fail(f"Unknown column: {column}")
    if value == "":
        return Result.fail("Filter value must not be empty")

    needle_number = to_number(value)
    kept = [row for row in table.rows if _matches(row.get(column), value, needle_number)]

    logger.debug("rows_filtered", column=column, rows_before=table.row_count, rows_after=len(kept))
    return Result.ok(table.with_rows(kept))
