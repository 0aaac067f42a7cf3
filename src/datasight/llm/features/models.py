"""Insight payload models.

The LLM answers in camelCase JSON; fields are exposed in snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class KeyMetric(BaseModel):
    """A headline metric named by the model."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    value: str
    description: str = ""


class DataInsights(BaseModel):
    """Structured insights about a table."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    executive_summary: str
    key_metrics: dict[str, KeyMetric] = Field(default_factory=dict)
    main_insights: list[str] = Field(default_factory=list)
    action_items: list[str] = Field(default_factory=list)
    limitations: list[str] = Field(default_factory=list)
    model: str | None = None
    cached: bool = False
