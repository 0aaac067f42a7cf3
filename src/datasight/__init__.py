"""datasight - a tabular statistics engine for CSV and Excel files.

Example:
    from datasight import Workspace, load_table

    workspace = Workspace()
    workspace.load(load_table("sales.csv").unwrap())
    workspace.column_types()
    workspace.stats("revenue")
    workspace.correlation("price", "quantity")
"""

__version__ = "0.1.0"

from datasight.core.models.base import ColumnType, Result
from datasight.sources import load_table
from datasight.table import Table
from datasight.workspace import Workspace

__all__ = [
    "ColumnType",
    "Result",
    "Table",
    "Workspace",
    "load_table",
    "__version__",
]
