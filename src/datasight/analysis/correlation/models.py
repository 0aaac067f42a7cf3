"""Correlation models."""

from __future__ import annotations

from pydantic import BaseModel

from datasight.core.models.base import CorrelationMethod


class CorrelationResult(BaseModel):
    """Correlation coefficients for a pair of numeric columns.

    A coefficient is None when the columns have no usable overlap or the
    coefficient is undefined (zero variance, a single value).
    """

    column1: str
    column2: str
    sample_size: int = 0
    pearson: float | None = None
    spearman: float | None = None
    kendall: float | None = None

    def coefficient(self, method: CorrelationMethod) -> float | None:
        return getattr(self, method.value)

    @property
    def strength(self) -> str | None:
        """Qualitative strength from the absolute Pearson coefficient."""
        if self.pearson is None:
            return None
        r = abs(self.pearson)
        if r >= 0.9:
            return "very_strong"
        elif r >= 0.7:
            return "strong"
        elif r >= 0.5:
            return "moderate"
        elif r >= 0.3:
            return "weak"
        return "very_weak"


class CorrelationMatrix(BaseModel):
    """Square matrix of one coefficient over a set of numeric columns."""

    method: CorrelationMethod
    columns: list[str]
    values: list[list[float | None]]

    def get(self, column1: str, column2: str) -> float | None:
        return self.values[self.columns.index(column1)][self.columns.index(column2)]
