"""Cell value coercion.

Every statistic goes through these functions so that the rules for what
counts as a number, a boolean, a date or a missing value live in one place.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import datetime
from typing import Any

import pandas as pd

type CellValue = str | int | float | bool | None

BOOLEAN_TOKENS = frozenset({"true", "false", "0", "1"})


def is_missing(value: Any) -> bool:
    """True for None, the empty string and float NaN."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return math.isnan(value)
    return False


def to_number(value: Any) -> float | None:
    """Coerce a cell to a finite float.

    Strings are trimmed before parsing. Booleans, non-numeric strings and
    non-finite values (nan, inf, ints too large for a float) yield None.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError, OverflowError):
        # OverflowError: ints beyond float range
        return None
    return number if math.isfinite(number) else None


def is_boolean_token(value: Any) -> bool:
    """True for Python booleans and the literal tokens true/false/0/1."""
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value in BOOLEAN_TOKENS


def parse_date(value: Any) -> datetime | None:
    """Permissively parse a cell as a date, returning None on failure.

    Parsed strings come back timezone-aware in UTC; naive strings are taken
    as UTC. datetime cells pass through unchanged.
    """
    if is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    parsed = pd.to_datetime(str(value), errors="coerce", format="mixed", utc=True)
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime()


def count_dates(values: Iterable[Any]) -> int:
    """Count values that parse as dates.

    Vectorized equivalent of summing parse_date over the values.
    """
    candidates = [
        value
        for value in values
        if not is_missing(value) and not isinstance(value, bool)
    ]
    if not candidates:
        return 0
    as_text = pd.Series([str(value) for value in candidates], dtype=object)
    # utc=True: mixed offsets would otherwise raise despite errors="coerce"
    parsed = pd.to_datetime(as_text, errors="coerce", format="mixed", utc=True)
    return int(parsed.notna().sum())


def numeric_values(values: Iterable[Any]) -> list[float]:
    """Keep the values that coerce to finite numbers, in order."""
    numbers = []
    for value in values:
        number = to_number(value)
        if number is not None:
            numbers.append(number)
    return numbers
