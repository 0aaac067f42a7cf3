"""Shared CLI utilities and constants."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console

from datasight.core.config import get_settings
from datasight.core.logging import configure_logging
from datasight.sources import load_table
from datasight.table import Table

# Load .env file from current directory (for API keys, etc.)
load_dotenv()

# Shared console instance
console = Console()

NOT_AVAILABLE = "N/A"

# Common type aliases for typer options
FileArg = Annotated[
    Path,
    typer.Argument(
        help="CSV, TSV, TXT or Excel file to analyze",
        exists=True,
        dir_okay=False,
        file_okay=True,
        resolve_path=True,
    ),
]

SheetOption = Annotated[
    str | None,
    typer.Option(
        "--sheet",
        help="Worksheet name for Excel files (default: first sheet)",
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=settings.log_level (WARNING by default), 1=INFO, 2+=DEBUG
    """
    settings = get_settings()
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level

    log_format = settings.log_format
    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )


def load_or_exit(path: Path, sheet: str | None = None) -> Table:
    """Load a table or print the error and exit with status 1."""
    result = load_table(path, sheet_name=sheet if sheet is not None else 0)
    if not result.success or result.value is None:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)
    return result.value


def format_value(value: Any, precision: int = 4) -> str:
    """Render a statistic for display; None becomes N/A."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return f"{value:.{precision}f}"
    if isinstance(value, list):
        return ", ".join(format_value(v, precision) for v in value)
    return str(value)
