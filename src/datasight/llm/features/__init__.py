"""LLM-powered features."""

from datasight.llm.features._base import LLMFeature
from datasight.llm.features.insights import InsightsFeature, strip_code_fences
from datasight.llm.features.models import DataInsights, KeyMetric

__all__ = [
    "LLMFeature",
    "InsightsFeature",
    "DataInsights",
    "KeyMetric",
    "strip_code_fences",
]
