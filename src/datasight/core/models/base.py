"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
domain module (table, analysis, wrangling, llm).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value

    def map(self, fn: Callable[[T], Any]) -> Result[Any]:
        """Transform the value if successful."""
        if self.success and self.value is not None:
            return Result.ok(fn(self.value), self.warnings)
        return self


# === Enums ===


class ColumnType(str, Enum):
    """Semantic type inferred for a column."""

    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    DATE = "date"
    STRING = "string"
    UNKNOWN = "unknown"  # No non-empty values at all


class CorrelationMethod(str, Enum):
    """Correlation coefficient."""

    PEARSON = "pearson"
    SPEARMAN = "spearman"
    KENDALL = "kendall"


# === Identifiers ===


class FileInfo(BaseModel):
    """Metadata about the file a table was loaded from."""

    name: str
    type: str  # 'csv', 'tsv', 'xlsx', ...
    size: int  # bytes

    def __str__(self) -> str:
        return f"{self.name} ({self.type}, {self.size} bytes)"
