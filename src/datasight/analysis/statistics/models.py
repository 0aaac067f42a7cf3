"""Descriptive statistics models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ColumnStats(BaseModel):
    """Descriptive statistics for a numeric column.

    Every statistic is None when the column has no valid numeric value.
    Skewness and kurtosis are also None for zero-variance columns.
    """

    column_name: str
    valid_count: int = 0
    invalid_count: int = 0  # Includes empty cells

    mean: float | None = None
    median: float | None = None
    mode: float | list[float] | None = None  # List when several values tie
    min: float | None = None
    max: float | None = None
    stddev: float | None = None  # Population
    variance: float | None = None  # Population
    skewness: float | None = None
    kurtosis: float | None = None  # Excess kurtosis

    q1: float | None = None
    q3: float | None = None
    iqr: float | None = None
    outlier_count: int | None = None
    lower_fence: float | None = None
    upper_fence: float | None = None

    @property
    def total_count(self) -> int:
        return self.valid_count + self.invalid_count

    @property
    def has_data(self) -> bool:
        return self.valid_count > 0


class TableStats(BaseModel):
    """Statistics for every numeric column of a table."""

    row_count: int
    columns: dict[str, ColumnStats] = Field(default_factory=dict)
