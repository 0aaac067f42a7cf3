"""Column type detection by parse-success rate.

For each column the non-empty values are tested as numbers, boolean tokens
and dates. The first type (in that priority order) whose match count reaches
the threshold share of non-empty values wins; otherwise the column is a
string column. Columns without any non-empty value are unknown.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from datasight.core.models.base import ColumnType
from datasight.table import Table, count_dates, is_boolean_token, is_missing, to_number

TYPE_THRESHOLD = 0.9

type ColumnTypeMap = dict[str, ColumnType]


def detect_column_type(values: Sequence[Any], threshold: float = TYPE_THRESHOLD) -> ColumnType:
    """Infer the semantic type of a single column's values.

    Args:
        values: Raw cell values of the column
        threshold: Share of non-empty values that must match a type

    Returns:
        The detected ColumnType
    """
    present = [value for value in values if not is_missing(value)]
    if not present:
        return ColumnType.UNKNOWN

    required = len(present) * threshold

    numeric_count = sum(1 for value in present if to_number(value) is not None)
    if numeric_count >= required:
        return ColumnType.NUMERIC

    boolean_count = sum(1 for value in present if is_boolean_token(value))
    if boolean_count >= required:
        return ColumnType.BOOLEAN

    if count_dates(present) >= required:
        return ColumnType.DATE

    return ColumnType.STRING


def detect_column_types(table: Table, threshold: float = TYPE_THRESHOLD) -> ColumnTypeMap:
    """Infer the semantic type of every column in a table.

    Args:
        table: Table to analyze
        threshold: Share of non-empty values that must match a type

    Returns:
        Mapping of column name to ColumnType, in column order
    """
    return {
        column: detect_column_type(table.column_values(column), threshold)
        for column in table.columns
    }


def numeric_columns(type_map: Mapping[str, ColumnType]) -> list[str]:
    """Names of the numeric columns, in column order."""
    return [column for column, column_type in type_map.items() if column_type is ColumnType.NUMERIC]
