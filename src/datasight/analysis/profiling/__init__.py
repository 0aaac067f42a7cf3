"""Column and dataset profiling."""

from datasight.analysis.profiling.models import (
    ColumnProfile,
    DatasetProfile,
    HistogramBucket,
    ValueCount,
)
from datasight.analysis.profiling.profiler import (
    build_histogram,
    profile_column,
    profile_table,
    top_values,
)

__all__ = [
    "profile_table",
    "profile_column",
    "build_histogram",
    "top_values",
    "ColumnProfile",
    "DatasetProfile",
    "HistogramBucket",
    "ValueCount",
]
