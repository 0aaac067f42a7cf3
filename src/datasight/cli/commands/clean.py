"""Clean command - apply a cleaning operation and write the result."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from datasight.cli.common import (
    FileArg,
    SheetOption,
    VerboseOption,
    console,
    load_or_exit,
    setup_logging,
)
from datasight.sources import export_table, file_info
from datasight.workspace import Workspace
from datasight.wrangling import CLEANING_OPERATIONS


def clean(
    path: FileArg,
    operation: Annotated[
        str,
        typer.Option(
            "--operation",
            "-p",
            help=f"One of: {', '.join(CLEANING_OPERATIONS)}",
        ),
    ],
    column: Annotated[
        str,
        typer.Option(
            "--column",
            "-c",
            help="Column to clean",
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Where to write the cleaned table (.csv, .json or .xlsx)",
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    bins: Annotated[
        int,
        typer.Option(
            "--bins",
            "-b",
            min=1,
            help="Number of bins for the binning operation",
        ),
    ] = 5,
    sheet: SheetOption = None,
    verbose: VerboseOption = 0,
) -> None:
    """Clean one column and write the resulting table.

    Examples:

        datasight clean sales.csv -p remove_nulls -c region -o clean.csv

        datasight clean sales.csv -p binning -c price --bins 4 -o binned.xlsx
    """
    setup_logging(verbosity=verbose)

    if operation not in CLEANING_OPERATIONS:
        console.print(
            f"[red]Unknown operation: {operation}. "
            f"Supported: {', '.join(CLEANING_OPERATIONS)}[/red]"
        )
        raise typer.Exit(1)

    workspace = Workspace()
    workspace.load(load_or_exit(path, sheet), file_info(path))
    rows_before = workspace.current.row_count

    kwargs = {"bins": bins} if operation == "binning" else {}
    result = workspace.apply(CLEANING_OPERATIONS[operation], column, **kwargs)
    if not result.success:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)

    written = export_table(workspace.current, output)
    if not written.success:
        console.print(f"[red]{written.error}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]{operation}[/green] on [cyan]{column}[/cyan]: "
        f"{rows_before} -> {workspace.current.row_count} rows, written to {written.value}"
    )
