"""Column type detection."""

from datasight.analysis.typing.detector import (
    TYPE_THRESHOLD,
    ColumnTypeMap,
    detect_column_type,
    detect_column_types,
    numeric_columns,
)

__all__ = [
    "TYPE_THRESHOLD",
    "ColumnTypeMap",
    "detect_column_type",
    "detect_column_types",
    "numeric_columns",
]
