"""In-memory table model.

A Table is an immutable snapshot: every transformation builds a new Table
and leaves the original untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import numpy as np
import pandas as pd

from datasight.table.cells import CellValue

type Row = Mapping[str, CellValue]


def _freeze_row(row: Mapping[str, Any], columns: tuple[str, ...]) -> Row:
    return MappingProxyType({column: row.get(column) for column in columns})


@dataclass(frozen=True)
class Table:
    """Ordered rows sharing one set of column names."""

    columns: tuple[str, ...] = ()
    rows: tuple[Row, ...] = field(default=(), repr=False)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Iterable[str] | None = None,
    ) -> Table:
        """Build a table from row mappings.

        Column order is taken from ``columns`` when given, otherwise from the
        order in which keys are first seen. Rows missing a column get None.
        """
        records = list(records)
        if columns is None:
            seen: dict[str, None] = {}
            for record in records:
                for key in record:
                    seen.setdefault(key, None)
            column_names = tuple(seen)
        else:
            column_names = tuple(columns)
        return cls(
            columns=column_names,
            rows=tuple(_freeze_row(record, column_names) for record in records),
        )

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> Table:
        """Build a table from a DataFrame, mapping NaN/NaT to None."""
        cleaned = frame.astype(object).where(pd.notna(frame), None)
        columns = [str(column) for column in cleaned.columns]
        cleaned.columns = columns
        records = [
            {key: _to_python(value) for key, value in record.items()}
            for record in cleaned.to_dict(orient="records")
        ]
        return cls.from_records(records, columns=columns)

    def to_frame(self) -> pd.DataFrame:
        """Convert to a pandas DataFrame (object columns, values as stored)."""
        return pd.DataFrame([dict(row) for row in self.rows], columns=list(self.columns))

    def to_records(self) -> list[dict[str, CellValue]]:
        """Plain, mutable copies of the rows."""
        return [dict(row) for row in self.rows]

    def column_values(self, column: str) -> list[CellValue]:
        """All values of a column in row order (None for unknown columns)."""
        return [row.get(column) for row in self.rows]

    def with_rows(self, rows: Iterable[Mapping[str, Any]]) -> Table:
        """New table with the same columns and the given rows."""
        return Table(
            columns=self.columns,
            rows=tuple(_freeze_row(row, self.columns) for row in rows),
        )

    def with_column(self, column: str, values: Iterable[CellValue]) -> Table:
        """New table with ``column`` added (or replaced) from ``values``."""
        columns = self.columns if column in self.columns else (*self.columns, column)
        rows = []
        for row, value in zip(self.rows, values, strict=True):
            updated = dict(row)
            updated[column] = value
            rows.append(_freeze_row(updated, columns))
        return Table(columns=columns, rows=tuple(rows))

    def head(self, n: int = 5) -> Table:
        return Table(columns=self.columns, rows=self.rows[:n])

    def has_column(self, column: str) -> bool:
        return column in self.columns

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)


def _to_python(value: Any) -> CellValue:
    """Unwrap numpy scalars so cells hold plain Python values."""
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    return value
