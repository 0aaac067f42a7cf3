"""Reading and writing tabular files."""

from datasight.sources.export import EXPORT_FORMATS, export_table
from datasight.sources.loader import file_info, load_table

__all__ = ["EXPORT_FORMATS", "export_table", "file_info", "load_table"]
