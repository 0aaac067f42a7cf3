"""Calculated columns from arithmetic formulas.

Formulas are evaluated by pandas over the table's columns, e.g.
``Quantity * Price`` or ```Unit Price` * 1.2`` for names that are not
Python identifiers. Numeric columns are coerced to floats first so that
numbers stored as text take part in arithmetic.
"""

import math

import pandas as pd

from datasight.analysis.typing import detect_column_types
from datasight.core.logging import get_logger
from datasight.core.models.base import ColumnType, Result
from datasight.table import Table, to_number

logger = get_logger(__name__)


def _evaluation_frame(table: Table) -> pd.DataFrame:
    frame = table.to_frame()
    for column, column_type in detect_column_types(table).items():
        if column_type is ColumnType.NUMERIC:
            frame[column] = pd.Series(
                [to_number(value) for value in table.column_values(column)],
                dtype="float64",
            )
    return frame


def add_calculated_column(table: Table, name: str, formula: str) -> Result[Table]:
    """Add (or replace) a column computed from ``formula``.

    Args:
        table: Source table
        name: Name of the new column
        formula: Arithmetic expression over column names

    Returns:
        Result containing the table with the new column; fails when the
        formula is invalid or does not produce numbers
    """
    name = name.strip()
    formula = formula.strip()
    if not name or not formula:
        return Result.fail("Please provide both a column name and a formula")
    if table.is_empty:
        return Result.fail("Cannot add a calculated column to an empty table")

    try:
        evaluated = _evaluation_frame(table).eval(formula, engine="python")
    except Exception as e:
        return Result.fail(f"Invalid formula '{formula}': {e}")

    if isinstance(evaluated, pd.Series):
        if pd.api.types.is_bool_dtype(evaluated) or not pd.api.types.is_numeric_dtype(evaluated):
            return Result.fail("Formula must return a numeric result")
        results = evaluated.tolist()
    elif pd.api.types.is_number(evaluated) and not pd.api.types.is_bool(evaluated):
        results = [evaluated] * table.row_count
    else:
        return Result.fail("Formula must return a numeric result")

    values = [
        float(value) if value is not None and math.isfinite(value) else None for value in results
    ]

    logger.debug("calculated_column_added", column=name, formula=formula)
    return Result.ok(table.with_column(name, values))
