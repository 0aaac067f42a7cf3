"""Tests for column type detection."""

import pytest

from datasight.analysis.typing import (
    detect_column_type,
    detect_column_types,
    numeric_columns,
)
from datasight.core.models.base import ColumnType
from datasight.table import Table


class TestDetectColumnType:
    def test_numeric_strings(self):
        assert detect_column_type(["1", "2", "3.5"]) == ColumnType.NUMERIC

    def test_mostly_text_is_string(self):
        assert detect_column_type(["1", "2", "abc", "def", "ghi"]) == ColumnType.STRING

    def test_whitespace_padded_numbers(self):
        assert detect_column_type([" 42 ", "\t7", "3 "]) == ColumnType.NUMERIC

    def test_native_numbers(self):
        assert detect_column_type([1, 2.5, 3]) == ColumnType.NUMERIC

    def test_boolean_tokens(self):
        assert detect_column_type(["true", "false", "true", "0"]) == ColumnType.BOOLEAN
        assert detect_column_type([True, False, True]) == ColumnType.BOOLEAN

    def test_numeric_beats_boolean(self):
        # 0/1 parse as both; numeric has priority
        assert detect_column_type(["0", "1", "1", "0"]) == ColumnType.NUMERIC

    def test_dates(self):
        values = ["2024-01-15", "2024-02-20", "2024-03-25", "2024-04-30"]
        assert detect_column_type(values) == ColumnType.DATE

    def test_dates_with_mixed_offsets(self):
        values = ["2024-01-01T00:00:00+05:00", "2024-01-02", "2024-01-03T00:00:00Z"]
        assert detect_column_type(values) == ColumnType.DATE

    def test_all_empty_is_unknown(self):
        assert detect_column_type(["", None, ""]) == ColumnType.UNKNOWN
        assert detect_column_type([]) == ColumnType.UNKNOWN

    def test_empty_cells_do_not_count(self):
        assert detect_column_type(["1", "", None, "2"]) == ColumnType.NUMERIC

    def test_threshold_is_inclusive(self):
        values = [str(i) for i in range(9)] + ["abc"]
        assert detect_column_type(values) == ColumnType.NUMERIC

    def test_below_threshold_is_string(self):
        values = [str(i) for i in range(8)] + ["abc", "def"]
        assert detect_column_type(values) == ColumnType.STRING

    def test_custom_threshold(self):
        values = [str(i) for i in range(8)] + ["abc", "def"]
        assert detect_column_type(values, threshold=0.8) == ColumnType.NUMERIC


class TestDetectColumnTypes:
    def test_mixed_table(self, sales_table):
        types = detect_column_types(sales_table)

        assert types == {
            "region": ColumnType.STRING,
            "price": ColumnType.NUMERIC,
            "quantity": ColumnType.NUMERIC,
            "active": ColumnType.BOOLEAN,
            "date": ColumnType.DATE,
        }

    def test_preserves_column_order(self, sales_table):
        assert list(detect_column_types(sales_table)) == list(sales_table.columns)

    def test_empty_table(self):
        assert detect_column_types(Table()) == {}

    def test_columns_without_rows_are_unknown(self):
        table = Table(columns=("a", "b"))
        assert detect_column_types(table) == {"a": ColumnType.UNKNOWN, "b": ColumnType.UNKNOWN}

    @pytest.mark.parametrize("threshold", [0.5, 0.9, 1.0])
    def test_deterministic(self, sales_table, threshold):
        assert detect_column_types(sales_table, threshold) == detect_column_types(
            sales_table, threshold
        )


def test_numeric_columns(sales_table):
    assert numeric_columns(detect_column_types(sales_table)) == ["price", "quantity"]
