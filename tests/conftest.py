"""Shared pytest fixtures for all tests."""

import pytest

from datasight.core.config import get_settings
from datasight.core.logging import configure_logging
from datasight.table import Table


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; drop them around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Logging binds the current stderr; rebind it to this test's stream."""
    configure_logging(log_level="WARNING", show_timestamps=False)
    yield


@pytest.fixture
def sales_table() -> Table:
    """Small mixed-type table as it would come out of a CSV."""
    return Table.from_records(
        [
            {"region": "North", "price": "10", "quantity": "1", "active": "true", "date": "2024-01-15"},
            {"region": "South", "price": "20", "quantity": "2", "active": "false", "date": "2024-02-20"},
            {"region": "North", "price": "30", "quantity": "3", "active": "true", "date": "2024-03-25"},
            {"region": "East", "price": "40", "quantity": "4", "active": "true", "date": "2024-04-30"},
            {"region": "West", "price": "50", "quantity": "5", "active": "false", "date": "2024-05-10"},
        ]
    )


@pytest.fixture
def numbers_table() -> Table:
    """Numeric table with one outlier and one gap."""
    return Table.from_records(
        [
            {"id": 1, "score": 10.0, "bonus": 1.0},
            {"id": 2, "score": 12.0, "bonus": 2.0},
            {"id": 3, "score": 11.0, "bonus": None},
            {"id": 4, "score": 13.0, "bonus": 4.0},
            {"id": 5, "score": 100.0, "bonus": 5.0},
        ]
    )


@pytest.fixture
def sales_csv(tmp_path):
    """Create a simple CSV with mixed types."""
    csv_content = """region,price,quantity,active,date
North,10,1,true,2024-01-15
South,20,2,false,2024-02-20
North,30,3,true,2024-03-25
East,40,4,true,2024-04-30
West,50,,false,2024-05-10
"""
    csv_file = tmp_path / "sales.csv"
    csv_file.write_text(csv_content)
    return csv_file
