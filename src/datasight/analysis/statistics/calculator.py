"""Descriptive statistics for numeric columns.

Median and quartiles are read at fixed indices of the sorted values
(n // 2, n // 4, 3n // 4). Even-length medians are not averaged and quartiles
are not interpolated.
"""

import math
from collections import Counter
from collections.abc import Mapping, Sequence

import numpy as np
from scipy import stats

from datasight.analysis.statistics.models import ColumnStats, TableStats
from datasight.analysis.typing import detect_column_types, numeric_columns
from datasight.core.models.base import ColumnType
from datasight.table import Table, numeric_values

OUTLIER_IQR_MULTIPLIER = 1.5


def _finite(value: float) -> float | None:
    value = float(value)
    return value if math.isfinite(value) else None


def _mode(sorted_values: Sequence[float]) -> float | list[float]:
    counts = Counter(sorted_values)
    top = max(counts.values())
    tied = [value for value, count in counts.items() if count == top]
    return tied[0] if len(tied) == 1 else tied


def calculate_stats_for_values(
    column_name: str,
    values: Sequence[object],
    iqr_multiplier: float = OUTLIER_IQR_MULTIPLIER,
) -> ColumnStats:
    """Compute descriptive statistics over raw cell values.

    Args:
        column_name: Name recorded on the result
        values: Raw cell values; those that do not coerce to finite numbers
            are counted as invalid and excluded
        iqr_multiplier: Multiplier for the IQR outlier fences

    Returns:
        ColumnStats (all statistics None when there are no valid values)
    """
    valid = numeric_values(values)
    valid_count = len(valid)
    invalid_count = len(values) - valid_count

    if valid_count == 0:
        return ColumnStats(
            column_name=column_name,
            valid_count=valid_count,
            invalid_count=invalid_count,
        )

    ordered = sorted(valid)
    n = len(ordered)
    array = np.asarray(ordered, dtype=float)
    minimum, maximum = ordered[0], ordered[-1]

    if minimum == maximum:
        # Constant column: avoid rounding noise from the mean
        mean = minimum
        variance = 0.0
    else:
        mean = float(np.mean(array))
        variance = float(np.mean((array - mean) ** 2))
    stddev = math.sqrt(variance)

    skewness: float | None = None
    kurtosis: float | None = None
    if stddev > 0:
        # Biased estimators equal the mean of the standardized moments.
        # Shifting by the minimum keeps large, tightly clustered values from
        # cancelling out (scipy returns nan for those).
        with np.errstate(over="ignore", invalid="ignore"):
            shifted = array - minimum
            skewness = _finite(stats.skew(shifted, bias=True))
            kurtosis = _finite(stats.kurtosis(shifted, fisher=True, bias=True))

    q1 = ordered[n // 4]
    q3 = ordered[(3 * n) // 4]
    iqr = q3 - q1
    lower_fence = q1 - iqr_multiplier * iqr
    upper_fence = q3 + iqr_multiplier * iqr
    outlier_count = int(np.count_nonzero((array < lower_fence) | (array > upper_fence)))

    return ColumnStats(
        column_name=column_name,
        valid_count=valid_count,
        invalid_count=invalid_count,
        mean=_finite(mean),
        median=ordered[n // 2],
        mode=_mode(ordered),
        min=minimum,
        max=maximum,
        stddev=_finite(stddev),
        variance=_finite(variance),
        skewness=skewness,
        kurtosis=kurtosis,
        q1=q1,
        q3=q3,
        iqr=iqr,
        outlier_count=outlier_count,
        lower_fence=_finite(lower_fence),
        upper_fence=_finite(upper_fence),
    )


def calculate_column_stats(
    table: Table,
    column: str,
    iqr_multiplier: float = OUTLIER_IQR_MULTIPLIER,
) -> ColumnStats:
    """Compute descriptive statistics for one column of a table.

    The column is assumed numeric; non-numeric cells are counted as invalid.
    A column that does not exist has only invalid (empty) cells.

    Args:
        table: Table to analyze
        column: Column name
        iqr_multiplier: Multiplier for the IQR outlier fences

    Returns:
        ColumnStats for the column
    """
    return calculate_stats_for_values(column, table.column_values(column), iqr_multiplier)


def calculate_all_column_stats(
    table: Table,
    type_map: Mapping[str, ColumnType] | None = None,
    iqr_multiplier: float = OUTLIER_IQR_MULTIPLIER,
) -> TableStats:
    """Compute statistics for every numeric column of a table.

    Args:
        table: Table to analyze
        type_map: Column types; detected when not given
        iqr_multiplier: Multiplier for the IQR outlier fences

    Returns:
        TableStats keyed by column name
    """
    if type_map is None:
        type_map = detect_column_types(table)

    return TableStats(
        row_count=table.row_count,
        columns={
            column: calculate_column_stats(table, column, iqr_multiplier)
            for column in numeric_columns(type_map)
        },
    )
