"""Correlation analysis between numeric columns.

- Pearson product-moment correlation
- Spearman rank correlation (first-index ranks)
- Kendall's tau
- Correlation matrix over the numeric columns of a table
"""

from datasight.analysis.correlation.algorithms import (
    first_index_ranks,
    kendall,
    pearson,
    spearman,
)
from datasight.analysis.correlation.calculator import calculate_correlation, correlation_matrix
from datasight.analysis.correlation.models import CorrelationMatrix, CorrelationResult

__all__ = [
    "calculate_correlation",
    "correlation_matrix",
    "pearson",
    "spearman",
    "kendall",
    "first_index_ranks",
    "CorrelationResult",
    "CorrelationMatrix",
]
