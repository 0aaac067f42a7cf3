"""Tests for the workspace holding the current and original table."""

import pytest

from datasight.core.config import Settings
from datasight.core.models.base import ColumnType, FileInfo
from datasight.workspace import Workspace
from datasight.wrangling import bin_column, remove_nulls, standardize


@pytest.fixture
def workspace(numbers_table):
    ws = Workspace(Settings())
    ws.load(numbers_table, FileInfo(name="numbers.csv", type="csv", size=42))
    return ws


def test_nothing_loaded():
    ws = Workspace(Settings())

    assert not ws.is_loaded
    with pytest.raises(RuntimeError):
        _ = ws.current


def test_load(workspace, numbers_table):
    assert workspace.is_loaded
    assert not workspace.is_modified
    assert workspace.current is numbers_table
    assert workspace.file_info.name == "numbers.csv"


def test_apply_success_replaces_current(workspace, numbers_table):
    result = workspace.apply(remove_nulls, "bonus")

    assert result.success
    assert workspace.current.row_count == 4
    assert workspace.original is numbers_table
    assert workspace.is_modified


def test_apply_failure_keeps_current(workspace):
    before = workspace.current
    result = workspace.apply(standardize, "nope")

    assert not result.success
    assert workspace.current is before


def test_operations_chain(workspace):
    workspace.apply(remove_nulls, "bonus")
    workspace.apply(bin_column, "score", bins=2)

    assert workspace.current.columns[-1] == "score_binned"
    assert workspace.current.row_count == 4


def test_reset(workspace, numbers_table):
    workspace.apply(remove_nulls, "bonus")

    assert workspace.reset() is numbers_table
    assert not workspace.is_modified


def test_clear(workspace):
    workspace.clear()

    assert not workspace.is_loaded
    assert workspace.file_info is None


def test_analysis_uses_current(workspace):
    assert workspace.column_types()["score"] == ColumnType.NUMERIC
    assert workspace.stats("bonus").valid_count == 4
    assert workspace.correlation("score", "bonus").pearson is None

    workspace.apply(remove_nulls, "bonus")

    assert workspace.correlation("score", "bonus").pearson is not None
    assert workspace.profile().row_count == 4


def test_settings_threshold(numbers_table):
    ws = Workspace(Settings(type_detection_threshold=1.0))
    ws.load(numbers_table.with_column("mixed", ["1", "2", "3", "4", "x"]))

    assert ws.column_types()["mixed"] == ColumnType.STRING
