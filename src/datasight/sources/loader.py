"""Load local CSV and Excel files into a Table.

Delimited text is read VARCHAR-first: every cell stays a string and empty
cells stay empty strings, so type detection sees the raw values. Excel
cells keep the types stored in the workbook.
"""

from pathlib import Path

import pandas as pd

from datasight.core.logging import get_logger
from datasight.core.models.base import FileInfo, Result
from datasight.table import Table

logger = get_logger(__name__)

DELIMITED_SUFFIXES = {".csv": ",", ".tsv": "\t", ".txt": None}
EXCEL_SUFFIXES = {".xlsx"}  # openpyxl reads only the OOXML formats


def file_info(path: Path) -> FileInfo:
    """Describe a file by name, suffix and size."""
    return FileInfo(
        name=path.name,
        type=path.suffix.lstrip(".").lower() or "unknown",
        size=path.stat().st_size,
    )


def _read_delimited(path: Path, separator: str | None) -> pd.DataFrame:
    return pd.read_csv(
        path,
        sep=separator,
        dtype=str,
        keep_default_na=False,
        engine="python" if separator is None else "c",
    )


def _read_excel(path: Path, sheet_name: str | int) -> pd.DataFrame:
    return pd.read_excel(path, sheet_name=sheet_name)


def load_table(path: Path | str, sheet_name: str | int = 0) -> Result[Table]:
    """Read a CSV/TSV/TXT or Excel file.

    Args:
        path: File to read
        sheet_name: Worksheet for Excel files (name or index)

    Returns:
        Result containing the Table
    """
    path = Path(path)
    if not path.exists():
        return Result.fail(f"File not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix in DELIMITED_SUFFIXES:
            frame = _read_delimited(path, DELIMITED_SUFFIXES[suffix])
        elif suffix in EXCEL_SUFFIXES:
            frame = _read_excel(path, sheet_name)
        else:
            return Result.fail(
                f"Unsupported file type: {suffix or '(none)'}. "
                f"Supported: {', '.join([*DELIMITED_SUFFIXES, *sorted(EXCEL_SUFFIXES)])}"
            )
    except pd.errors.EmptyDataError:
        return Result.fail(f"File is empty: {path.name}")
    except Exception as e:
        return Result.fail(f"Failed to read {path.name}: {e}")

    table = Table.from_frame(frame)
    logger.info("table_loaded", file=path.name, rows=table.row_count, columns=len(table.columns))
    return Result.ok(table)
