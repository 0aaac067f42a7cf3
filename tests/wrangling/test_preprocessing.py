"""Tests for whole-table preprocessing."""

from datasight.table import Table
from datasight.wrangling import drop_incomplete_rows, remove_outliers


def test_drop_incomplete_rows(numbers_table):
    result = drop_incomplete_rows(numbers_table)

    assert result.success
    assert result.value.column_values("id") == [1, 2, 4, 5]


def test_drop_incomplete_rows_empty_strings():
    table = Table.from_records([{"a": "x", "b": ""}, {"a": "y", "b": "z"}])
    assert drop_incomplete_rows(table).value.column_values("a") == ["y"]


class TestRemoveOutliers:
    def _table(self):
        # 20 values near 10 and one far away
        values = [10.0 + (i % 5) * 0.1 for i in range(20)] + [1000.0]
        return Table.from_records([{"v": v, "label": f"r{i}"} for i, v in enumerate(values)])

    def test_drops_extreme_row(self):
        result = remove_outliers(self._table())

        assert result.success
        assert result.value.row_count == 20
        assert 1000.0 not in result.value.column_values("v")

    def test_higher_threshold_keeps_row(self):
        assert remove_outliers(self._table(), threshold=10).value.row_count == 21

    def test_partially_numeric_columns_are_skipped(self):
        values = [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 500]
        table = Table.from_records([{"v": v} for v in values] + [{"v": "n/a"}])
        assert remove_outliers(table).value.row_count == 12

    def test_constant_column(self):
        table = Table.from_records([{"v": 2}, {"v": 2}, {"v": 2}])
        assert remove_outliers(table).value.row_count == 3

    def test_threshold_must_be_positive(self):
        assert not remove_outliers(self._table(), threshold=0).success

    def test_empty_table(self):
        result = remove_outliers(Table(columns=("v",)))

        assert result.success
        assert result.value.is_empty
