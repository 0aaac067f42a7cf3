"""Descriptive statistics module.

Computes per-column statistics on numeric columns:
- Valid/invalid counts
- Mean, median, mode, min, max
- Population variance and standard deviation
- Skewness and excess kurtosis
- Index quartiles, IQR and IQR outlier count
"""

from datasight.analysis.statistics.calculator import (
    OUTLIER_IQR_MULTIPLIER,
    calculate_all_column_stats,
    calculate_column_stats,
    calculate_stats_for_values,
)
from datasight.analysis.statistics.models import ColumnStats, TableStats

__all__ = [
    # Main entry points
    "calculate_column_stats",
    "calculate_all_column_stats",
    "calculate_stats_for_values",
    "OUTLIER_IQR_MULTIPLIER",
    # Pydantic Models
    "ColumnStats",
    "TableStats",
]
