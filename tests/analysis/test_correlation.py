"""Tests for correlation coefficients."""

import math

import pytest

from datasight.analysis.correlation import (
    calculate_correlation,
    correlation_matrix,
    first_index_ranks,
    kendall,
    pearson,
    spearman,
)
from datasight.core.models.base import CorrelationMethod
from datasight.table import Table


class TestAlgorithms:
    def test_first_index_ranks_do_not_average_ties(self):
        assert first_index_ranks([30, 10, 20, 20]) == [4.0, 1.0, 2.0, 2.0]

    def test_spearman_uses_first_index_ranks(self):
        # Ranks [1, 2, 2, 4] vs [1, 2, 3, 4]
        assert spearman([1, 2, 2, 3], [1, 2, 3, 4]) == pytest.approx(4.5 / math.sqrt(23.75))

    def test_kendall_ties_count_for_neither(self):
        # Five concordant pairs, one tied pair, denominator 6
        assert kendall([1, 2, 2, 3], [1, 2, 3, 4]) == pytest.approx(5 / 6)

    def test_pearson_constant_is_none(self):
        assert pearson([1, 1, 1], [1, 2, 3]) is None
        assert pearson([1, 2, 3], [4, 4, 4]) is None

    def test_single_pair(self):
        assert pearson([1], [2]) is None
        assert spearman([1], [2]) is None
        assert kendall([1], [2]) is None

    def test_mismatched_or_empty(self):
        assert pearson([], []) is None
        assert pearson([1, 2], [1, 2, 3]) is None
        assert kendall([1, 2], [1]) is None

    def test_kendall_all_ties_is_zero(self):
        assert kendall([1, 1, 1], [1, 2, 3]) == 0.0


class TestCalculateCorrelation:
    def test_perfect_positive(self):
        table = Table.from_records([{"x": 1, "y": 2}, {"x": 2, "y": 4}, {"x": 3, "y": 6}])
        result = calculate_correlation(table, "x", "y")

        assert result.sample_size == 3
        assert result.pearson == pytest.approx(1.0)
        assert result.spearman == pytest.approx(1.0)
        assert result.kendall == pytest.approx(1.0)
        assert result.strength == "very_strong"

    def test_perfect_negative(self):
        table = Table.from_records([{"x": 1, "y": 2}, {"x": 2, "y": 1}, {"x": 3, "y": 0}])
        result = calculate_correlation(table, "x", "y")

        assert result.pearson == pytest.approx(-1.0)
        assert result.spearman == pytest.approx(-1.0)
        assert result.kendall == pytest.approx(-1.0)

    def test_self_correlation(self, numbers_table):
        result = calculate_correlation(numbers_table, "score", "score")

        assert result.pearson == pytest.approx(1.0)
        assert result.spearman == pytest.approx(1.0)
        assert result.kendall == pytest.approx(1.0)

    def test_numeric_strings(self, sales_table):
        result = calculate_correlation(sales_table, "price", "quantity")
        assert result.pearson == pytest.approx(1.0)

    def test_length_mismatch_gives_all_none(self, numbers_table):
        result = calculate_correlation(numbers_table, "score", "bonus")

        assert result.sample_size == 0
        assert result.pearson is None
        assert result.spearman is None
        assert result.kendall is None
        assert result.strength is None

    def test_non_numeric_column(self, sales_table):
        result = calculate_correlation(sales_table, "price", "region")
        assert result.pearson is None

    def test_missing_column(self, sales_table):
        result = calculate_correlation(sales_table, "price", "nope")
        assert result.kendall is None

    def test_symmetric(self, numbers_table):
        forward = calculate_correlation(numbers_table, "id", "score")
        backward = calculate_correlation(numbers_table, "score", "id")

        assert forward.pearson == pytest.approx(backward.pearson)
        assert forward.spearman == pytest.approx(backward.spearman)
        assert forward.kendall == pytest.approx(backward.kendall)

    def test_bounded(self, numbers_table):
        result = calculate_correlation(numbers_table, "id", "score")
        for method in CorrelationMethod:
            assert -1.0 <= result.coefficient(method) <= 1.0


class TestCorrelationMatrix:
    def test_numeric_columns_by_default(self, sales_table):
        matrix = correlation_matrix(sales_table)

        assert matrix.method == CorrelationMethod.PEARSON
        assert matrix.columns == ["price", "quantity"]
        assert matrix.get("price", "price") == pytest.approx(1.0)
        assert matrix.get("price", "quantity") == pytest.approx(1.0)

    def test_symmetric_with_gaps(self, numbers_table):
        matrix = correlation_matrix(
            numbers_table, columns=["id", "score", "bonus"], method=CorrelationMethod.KENDALL
        )

        assert matrix.get("id", "score") == matrix.get("score", "id")
        assert matrix.get("score", "bonus") is None
        assert matrix.get("bonus", "bonus") == pytest.approx(1.0)

    def test_empty(self):
        matrix = correlation_matrix(Table())

        assert matrix.columns == []
        assert matrix.values == []
