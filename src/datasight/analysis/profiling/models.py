"""Column and dataset profile models.

- ColumnProfile: counts, samples and type-specific details of a column
- HistogramBucket: Histogram bin
- ValueCount: Frequency count for top values
- DatasetProfile: Profiles of all columns plus table shape
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from datasight.analysis.statistics.models import ColumnStats
from datasight.core.models.base import ColumnType


class HistogramBucket(BaseModel):
    """A histogram bucket."""

    bucket_min: float
    bucket_max: float
    count: int


class ValueCount(BaseModel):
    """A value with its count."""

    value: Any
    count: int
    percentage: float


class ColumnProfile(BaseModel):
    """Profile of a single column."""

    column_name: str
    column_type: ColumnType

    total_count: int
    unique_count: int
    unique_percentage: float
    missing_count: int
    missing_percentage: float
    sample_values: list[Any] = Field(default_factory=list)

    # String columns
    top_values: list[ValueCount] = Field(default_factory=list)

    # Numeric columns
    stats: ColumnStats | None = None
    histogram: list[HistogramBucket] = Field(default_factory=list)

    @property
    def most_common(self) -> Any:
        return self.top_values[0].value if self.top_values else None


class DatasetProfile(BaseModel):
    """Profile of a whole table."""

    row_count: int
    column_count: int
    column_types: dict[str, ColumnType]
    columns: dict[str, ColumnProfile] = Field(default_factory=dict)

    @property
    def total_missing(self) -> int:
        return sum(profile.missing_count for profile in self.columns.values())

    @property
    def total_outliers(self) -> int:
        return sum(
            profile.stats.outlier_count or 0
            for profile in self.columns.values()
            if profile.stats is not None
        )
