"""Data privacy and sampling for LLM analysis.

1. Limits sample values to configured maximum
2. Redacts sensitive columns based on pattern matching
"""

import re
from collections.abc import Sequence
from typing import Any

from datasight.llm.config import LLMPrivacy
from datasight.table import is_missing

REDACTED = "<REDACTED>"


class DataSampler:
    """Sample column values for LLM prompts with privacy controls."""

    def __init__(self, config: LLMPrivacy):
        self.config = config
        self._patterns = [re.compile(p, re.IGNORECASE) for p in config.sensitive_patterns]

    def sample_values(self, column_name: str, values: Sequence[Any]) -> list[Any]:
        """First distinct non-missing values of a column, or redaction markers.

        Args:
            column_name: Column the values belong to
            values: Raw cell values

        Returns:
            Up to ``max_sample_values`` samples
        """
        if self.is_sensitive(column_name):
            return [REDACTED] * min(3, self.config.max_sample_values)

        samples: list[Any] = []
        seen: set[tuple[str, Any]] = set()
        for value in values:
            if is_missing(value):
                continue
            key = (type(value).__name__, value)
            if key in seen:
                continue
            seen.add(key)
            samples.append(value)
            if len(samples) >= self.config.max_sample_values:
                break
        return samples

    def is_sensitive(self, column_name: str) -> bool:
        """Check if column name matches a sensitive pattern."""
        return any(pattern.match(column_name) for pattern in self._patterns)
