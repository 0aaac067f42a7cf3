"""Correlation between numeric columns of a table.

Each column is filtered to its finite numeric values independently, so the
two sequences are only paired when they come out the same length. Rows with
a gap in one column are not dropped from the other; mismatched lengths give
an all-None result instead.
"""

from collections.abc import Sequence

from datasight.analysis.correlation.algorithms import kendall, pearson, spearman
from datasight.analysis.correlation.models import CorrelationMatrix, CorrelationResult
from datasight.analysis.typing import detect_column_types, numeric_columns
from datasight.core.logging import get_logger
from datasight.core.models.base import CorrelationMethod
from datasight.table import Table, numeric_values

logger = get_logger(__name__)

_ALGORITHMS = {
    CorrelationMethod.PEARSON: pearson,
    CorrelationMethod.SPEARMAN: spearman,
    CorrelationMethod.KENDALL: kendall,
}


def _paired_values(table: Table, column1: str, column2: str) -> tuple[list[float], list[float]] | None:
    values1 = numeric_values(table.column_values(column1))
    values2 = numeric_values(table.column_values(column2))
    if len(values1) != len(values2) or not values1:
        return None
    return values1, values2


def calculate_correlation(table: Table, column1: str, column2: str) -> CorrelationResult:
    """Compute Pearson, Spearman and Kendall coefficients for two columns.

    Args:
        table: Table to analyze
        column1: First column name
        column2: Second column name

    Returns:
        CorrelationResult; coefficients are None when unavailable
    """
    paired = _paired_values(table, column1, column2)
    if paired is None:
        logger.debug(
            "correlation_unavailable",
            column1=column1,
            column2=column2,
            reason="no_matching_numeric_values",
        )
        return CorrelationResult(column1=column1, column2=column2)

    x, y = paired
    return CorrelationResult(
        column1=column1,
        column2=column2,
        sample_size=len(x),
        pearson=pearson(x, y),
        spearman=spearman(x, y),
        kendall=kendall(x, y),
    )


def correlation_matrix(
    table: Table,
    columns: Sequence[str] | None = None,
    method: CorrelationMethod = CorrelationMethod.PEARSON,
) -> CorrelationMatrix:
    """Compute one coefficient for every pair of columns.

    Args:
        table: Table to analyze
        columns: Columns to include; the numeric columns when not given
        method: Coefficient to compute

    Returns:
        Symmetric CorrelationMatrix
    """
    if columns is None:
        columns = numeric_columns(detect_column_types(table))
    columns = list(columns)
    algorithm = _ALGORITHMS[method]

    size = len(columns)
    values: list[list[float | None]] = [[None] * size for _ in range(size)]
    for i in range(size):
        for j in range(i, size):
            paired = _paired_values(table, columns[i], columns[j])
            coefficient = algorithm(*paired) if paired is not None else None
            values[i][j] = coefficient
            values[j][i] = coefficient

    return CorrelationMatrix(method=method, columns=columns, values=values)
