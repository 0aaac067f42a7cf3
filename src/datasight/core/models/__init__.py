"""Core models: ONLY truly shared base types.

Domain models live in their respective packages:
- analysis/statistics/models.py  → Descriptive statistics models
- analysis/correlation/models.py → Correlation models
- analysis/profiling/models.py   → Column and dataset profiles
- llm/features/models.py         → Insight payloads

Import domain models directly from their packages:
    from datasight.analysis.statistics.models import ColumnStats
    from datasight.analysis.correlation.models import CorrelationResult
"""

from datasight.core.models.base import (
    ColumnType,
    CorrelationMethod,
    FileInfo,
    Result,
)

__all__ = [
    "Result",
    "ColumnType",
    "CorrelationMethod",
    "FileInfo",
]
