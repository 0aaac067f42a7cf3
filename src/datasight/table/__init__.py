"""Table model and cell coercion."""

from datasight.table.cells import (
    CellValue,
    count_dates,
    is_boolean_token,
    is_missing,
    numeric_values,
    parse_date,
    to_number,
)
from datasight.table.models import Row, Table

__all__ = [
    "CellValue",
    "Row",
    "Table",
    "count_dates",
    "is_boolean_token",
    "is_missing",
    "numeric_values",
    "parse_date",
    "to_number",
]
