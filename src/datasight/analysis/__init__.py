"""Tabular statistics engine.

Pure functions over an in-memory Table:

- typing: column type detection
- statistics: descriptive statistics of numeric columns
- correlation: Pearson, Spearman and Kendall coefficients
- profiling: per-column profiles built on the above
"""

from datasight.analysis.correlation import (
    CorrelationMatrix,
    CorrelationResult,
    calculate_correlation,
    correlation_matrix,
)
from datasight.analysis.profiling import ColumnProfile, DatasetProfile, profile_table
from datasight.analysis.statistics import (
    ColumnStats,
    TableStats,
    calculate_all_column_stats,
    calculate_column_stats,
)
from datasight.analysis.typing import ColumnTypeMap, detect_column_types, numeric_columns

__all__ = [
    "detect_column_types",
    "numeric_columns",
    "calculate_column_stats",
    "calculate_all_column_stats",
    "calculate_correlation",
    "correlation_matrix",
    "profile_table",
    "ColumnTypeMap",
    "ColumnStats",
    "TableStats",
    "CorrelationResult",
    "CorrelationMatrix",
    "ColumnProfile",
    "DatasetProfile",
]
