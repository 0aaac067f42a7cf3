"""Column profiling.

Builds the per-column views shown next to the raw data: uniqueness and
missing-value rates, distinct samples, top values for string columns, and
descriptive statistics plus a histogram for numeric columns.
"""

import math
from collections import Counter
from collections.abc import Mapping
from typing import Any

import numpy as np

from datasight.analysis.profiling.models import (
    ColumnProfile,
    DatasetProfile,
    HistogramBucket,
    ValueCount,
)
from datasight.analysis.statistics import OUTLIER_IQR_MULTIPLIER, calculate_stats_for_values
from datasight.analysis.typing import TYPE_THRESHOLD, detect_column_types
from datasight.core.logging import get_logger
from datasight.core.models.base import ColumnType
from datasight.table import Table, is_missing, numeric_values

logger = get_logger(__name__)

DEFAULT_HISTOGRAM_BUCKETS = 20
DEFAULT_TOP_K = 5
DEFAULT_SAMPLE_SIZE = 5


def _distinct_key(value: Any) -> Any:
    # Keep 1, 1.0, True and "1" apart
    if is_missing(value):
        return None
    return (type(value).__name__, value)


def _percentage(count: int, total: int) -> float:
    return (count / total) * 100 if total else 0.0


def build_histogram(values: list[float], buckets: int) -> list[HistogramBucket]:
    """Equal-width histogram over numeric values.

    Empty when the value range itself overflows a float.
    """
    if not values or buckets < 1:
        return []
    if not math.isfinite(max(values) - min(values)):
        return []
    counts, edges = np.histogram(np.asarray(values, dtype=float), bins=buckets)
    return [
        HistogramBucket(
            bucket_min=float(edges[i]),
            bucket_max=float(edges[i + 1]),
            count=int(count),
        )
        for i, count in enumerate(counts)
    ]


def top_values(values: list[Any], k: int) -> list[ValueCount]:
    """Most frequent non-missing values with their share of all values."""
    total = len(values)
    counts = Counter(value for value in values if not is_missing(value))
    return [
        ValueCount(value=value, count=count, percentage=_percentage(count, total))
        for value, count in counts.most_common(k)
    ]


def profile_column(
    table: Table,
    column: str,
    column_type: ColumnType,
    histogram_buckets: int = DEFAULT_HISTOGRAM_BUCKETS,
    top_k: int = DEFAULT_TOP_K,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    iqr_multiplier: float = OUTLIER_IQR_MULTIPLIER,
) -> ColumnProfile:
    """Profile a single column.

    Args:
        table: Table containing the column
        column: Column name
        column_type: Detected type of the column
        histogram_buckets: Number of histogram buckets for numeric columns
        top_k: Number of top values for string columns
        sample_size: Number of distinct sample values
        iqr_multiplier: Multiplier for the IQR outlier fences

    Returns:
        ColumnProfile
    """
    values = table.column_values(column)
    total = len(values)

    distinct: dict[Any, Any] = {}
    for value in values:
        distinct.setdefault(_distinct_key(value), value)
    missing_count = sum(1 for value in values if is_missing(value))

    profile = ColumnProfile(
        column_name=column,
        column_type=column_type,
        total_count=total,
        unique_count=len(distinct),
        unique_percentage=_percentage(len(distinct), total),
        missing_count=missing_count,
        missing_percentage=_percentage(missing_count, total),
        sample_values=list(distinct.values())[:sample_size],
    )

    if column_type is ColumnType.NUMERIC:
        profile.stats = calculate_stats_for_values(column, values, iqr_multiplier)
        profile.histogram = build_histogram(numeric_values(values), histogram_buckets)
    elif column_type is ColumnType.STRING:
        profile.top_values = top_values(values, top_k)

    return profile


def profile_table(
    table: Table,
    column_types: Mapping[str, ColumnType] | None = None,
    threshold: float = TYPE_THRESHOLD,
    histogram_buckets: int = DEFAULT_HISTOGRAM_BUCKETS,
    top_k: int = DEFAULT_TOP_K,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    iqr_multiplier: float = OUTLIER_IQR_MULTIPLIER,
) -> DatasetProfile:
    """Profile every column of a table.

    Args:
        table: Table to profile
        column_types: Precomputed column types; detected when not given
        threshold: Type detection threshold
        histogram_buckets: Number of histogram buckets for numeric columns
        top_k: Number of top values for string columns
        sample_size: Number of distinct sample values
        iqr_multiplier: Multiplier for the IQR outlier fences

    Returns:
        DatasetProfile
    """
    types = dict(column_types) if column_types is not None else detect_column_types(table, threshold)

    columns = {
        column: profile_column(
            table,
            column,
            types.get(column, ColumnType.UNKNOWN),
            histogram_buckets=histogram_buckets,
            top_k=top_k,
            sample_size=sample_size,
            iqr_multiplier=iqr_multiplier,
        )
        for column in table.columns
    }

    logger.debug(
        "table_profiled",
        rows=table.row_count,
        columns=len(table.columns),
        numeric_columns=sum(1 for t in types.values() if t is ColumnType.NUMERIC),
    )

    return DatasetProfile(
        row_count=table.row_count,
        column_count=len(table.columns),
        column_types={column: types.get(column, ColumnType.UNKNOWN) for column in table.columns},
        columns=columns,
    )
