"""Write a Table to CSV, JSON or Excel."""

from pathlib import Path

from datasight.core.logging import get_logger
from datasight.core.models.base import Result
from datasight.table import Table

logger = get_logger(__name__)

EXPORT_FORMATS = {".csv": "csv", ".json": "json", ".xlsx": "xlsx"}


def export_table(table: Table, path: Path | str, fmt: str | None = None) -> Result[Path]:
    """Export a table.

    Args:
        table: Table to write
        path: Destination file
        fmt: 'csv', 'json' or 'xlsx'; inferred from the suffix when None

    Returns:
        Result containing the written path
    """
    path = Path(path)
    fmt = fmt or EXPORT_FORMATS.get(path.suffix.lower())
    if fmt not in EXPORT_FORMATS.values():
        return Result.fail(
            f"Unsupported export format for {path.name}. Use one of: {', '.join(EXPORT_FORMATS)}"
        )

    frame = table.to_frame()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if fmt == "csv":
            frame.to_csv(path, index=False)
        elif fmt == "json":
            frame.to_json(path, orient="records", indent=2)
        else:
            frame.to_excel(path, index=False, sheet_name="Data")
    except Exception as e:
        return Result.fail(f"Failed to export {path.name}: {e}")

    logger.info("table_exported", file=str(path), format=fmt, rows=table.row_count)
    return Result.ok(path)
