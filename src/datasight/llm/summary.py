"""Table summaries sent to the LLM in place of raw rows."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from datasight.analysis.typing import detect_column_types
from datasight.core.config import get_settings
from datasight.core.models.base import ColumnType
from datasight.llm.config import LLMPrivacy
from datasight.llm.privacy import DataSampler
from datasight.table import Table, numeric_values


class ColumnSummary(BaseModel):
    """Compact description of one column."""

    type: ColumnType
    unique_values: int
    sample_values: list[Any] = Field(default_factory=list)
    min: float | None = None
    max: float | None = None
    mean: float | None = None


class TableSummary(BaseModel):
    """Compact description of a table for prompts."""

    total_rows: int
    processed_rows: int
    columns: dict[str, ColumnSummary] = Field(default_factory=dict)

    @property
    def truncated(self) -> bool:
        return self.processed_rows < self.total_rows

    def to_prompt_json(self, max_chars: int | None = None) -> str:
        """JSON for prompt inclusion, dropping sample values if too long."""
        text = self.model_dump_json(indent=2)
        if max_chars is not None and len(text) > max_chars:
            slim = self.model_copy(
                update={
                    "columns": {
                        name: column.model_copy(update={"sample_values": []})
                        for name, column in self.columns.items()
                    }
                }
            )
            text = slim.model_dump_json(indent=2)
        return text


def summarize_table(
    table: Table,
    max_rows: int | None = None,
    privacy: LLMPrivacy | None = None,
) -> TableSummary:
    """Summarize a table for an LLM prompt.

    Only the first ``max_rows`` rows are considered.

    Args:
        table: Table to summarize
        max_rows: Row cap applied before summarizing; defaults to the
            ``llm_max_rows`` setting
        privacy: Sampling and redaction settings

    Returns:
        TableSummary
    """
    sampler = DataSampler(privacy or LLMPrivacy())
    if max_rows is None:
        max_rows = get_settings().llm_max_rows
    processed = table.head(max_rows)
    types = detect_column_types(processed)

    columns: dict[str, ColumnSummary] = {}
    for column in processed.columns:
        values = processed.column_values(column)
        summary = ColumnSummary(
            type=types[column],
            unique_values=len({(type(v).__name__, v) for v in values}),
            sample_values=sampler.sample_values(column, values),
        )
        if types[column] is ColumnType.NUMERIC and not sampler.is_sensitive(column):
            numbers = numeric_values(values)
            if numbers:
                summary.min = min(numbers)
                summary.max = max(numbers)
                summary.mean = sum(numbers) / len(numbers)
        columns[column] = summary

    return TableSummary(
        total_rows=table.row_count,
        processed_rows=processed.row_count,
        columns=columns,
    )
