"""Analysis commands - types, statistics, correlation and profiles."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.table import Table as RichTable

from datasight.analysis import (
    ColumnStats,
    calculate_all_column_stats,
    calculate_column_stats,
    calculate_correlation,
    correlation_matrix,
    detect_column_types,
    profile_table,
)
from datasight.cli.common import (
    FileArg,
    JsonFlag,
    SheetOption,
    VerboseOption,
    console,
    format_value,
    load_or_exit,
    setup_logging,
)
from datasight.core.config import get_settings
from datasight.core.models.base import CorrelationMethod

STAT_FIELDS = [
    "valid_count",
    "invalid_count",
    "mean",
    "median",
    "mode",
    "min",
    "max",
    "stddev",
    "variance",
    "skewness",
    "kurtosis",
    "q1",
    "q3",
    "iqr",
    "outlier_count",
]


def types(
    path: FileArg,
    sheet: SheetOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Detect the type of every column.

    Examples:

        datasight types sales.csv

        datasight types report.xlsx --sheet Q3 --json
    """
    setup_logging(verbosity=verbose)
    settings = get_settings()
    table = load_or_exit(path, sheet)
    type_map = detect_column_types(table, settings.type_detection_threshold)

    if json_output:
        console.print_json(json.dumps({name: t.value for name, t in type_map.items()}))
        return

    rich_table = RichTable(title=f"Column types ({table.row_count} rows)")
    rich_table.add_column("Column", style="cyan")
    rich_table.add_column("Type", style="green")
    for name, column_type in type_map.items():
        rich_table.add_row(name, column_type.value)
    console.print(rich_table)


def stats(
    path: FileArg,
    column: Annotated[
        str | None,
        typer.Option(
            "--column",
            "-c",
            help="Column to describe (default: every numeric column)",
        ),
    ] = None,
    sheet: SheetOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Show descriptive statistics of numeric columns.

    Examples:

        datasight stats sales.csv

        datasight stats sales.csv --column revenue
    """
    setup_logging(verbosity=verbose)
    settings = get_settings()
    table = load_or_exit(path, sheet)

    if column is not None:
        if not table.has_column(column):
            console.print(f"[red]Column not found: {column}[/red]")
            raise typer.Exit(1)
        columns = {column: calculate_column_stats(table, column, settings.outlier_iqr_multiplier)}
    else:
        columns = calculate_all_column_stats(
            table,
            detect_column_types(table, settings.type_detection_threshold),
            iqr_multiplier=settings.outlier_iqr_multiplier,
        ).columns

    if json_output:
        console.print_json(
            json.dumps({name: s.model_dump(mode="json") for name, s in columns.items()})
        )
        return

    if not columns:
        console.print("[yellow]No numeric columns found[/yellow]")
        return

    console.print(_stats_table(columns))


def _stats_table(columns: dict[str, ColumnStats]) -> RichTable:
    rich_table = RichTable(title="Descriptive statistics")
    rich_table.add_column("Statistic", style="cyan")
    for name in columns:
        rich_table.add_column(name, justify="right")
    for field in STAT_FIELDS:
        rich_table.add_row(
            field, *(format_value(getattr(s, field)) for s in columns.values())
        )
    return rich_table


def correlate(
    path: FileArg,
    column1: Annotated[
        str | None,
        typer.Argument(help="First column (omit both for a matrix of numeric columns)"),
    ] = None,
    column2: Annotated[
        str | None,
        typer.Argument(help="Second column"),
    ] = None,
    method: Annotated[
        CorrelationMethod,
        typer.Option(
            "--method",
            "-m",
            help="Coefficient for the matrix view",
        ),
    ] = CorrelationMethod.PEARSON,
    sheet: SheetOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Correlate two columns, or every pair of numeric columns.

    Examples:

        datasight correlate sales.csv price quantity

        datasight correlate sales.csv --method spearman
    """
    setup_logging(verbosity=verbose)
    table = load_or_exit(path, sheet)

    if (column1 is None) != (column2 is None):
        console.print("[red]Give two columns, or none for the matrix view[/red]")
        raise typer.Exit(1)

    if column1 is not None and column2 is not None:
        result = calculate_correlation(table, column1, column2)
        if json_output:
            console.print_json(result.model_dump_json())
            return
        rich_table = RichTable(title=f"{column1} vs {column2} (n={result.sample_size})")
        rich_table.add_column("Coefficient", style="cyan")
        rich_table.add_column("Value", justify="right")
        for m in CorrelationMethod:
            rich_table.add_row(m.value, format_value(result.coefficient(m)))
        rich_table.add_row("strength", format_value(result.strength))
        console.print(rich_table)
        return

    matrix = correlation_matrix(table, method=method)
    if json_output:
        console.print_json(matrix.model_dump_json())
        return
    if not matrix.columns:
        console.print("[yellow]No numeric columns found[/yellow]")
        return

    rich_table = RichTable(title=f"{method.value.capitalize()} correlation")
    rich_table.add_column("", style="cyan")
    for name in matrix.columns:
        rich_table.add_column(name, justify="right")
    for name, row in zip(matrix.columns, matrix.values, strict=True):
        rich_table.add_row(name, *(format_value(v, precision=3) for v in row))
    console.print(rich_table)


def profile(
    path: FileArg,
    sheet: SheetOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Profile every column: type, completeness, distinct values and ranges.

    Examples:

        datasight profile sales.csv
    """
    setup_logging(verbosity=verbose)
    settings = get_settings()
    table = load_or_exit(path, sheet)
    dataset = profile_table(
        table,
        threshold=settings.type_detection_threshold,
        histogram_buckets=settings.profile_histogram_buckets,
        top_k=settings.profile_top_k_values,
        sample_size=settings.profile_sample_values,
        iqr_multiplier=settings.outlier_iqr_multiplier,
    )

    if json_output:
        console.print_json(dataset.model_dump_json())
        return

    console.print(
        f"[bold]{dataset.row_count} rows, {dataset.column_count} columns[/bold]  "
        f"missing cells: {dataset.total_missing}  outliers: {dataset.total_outliers}"
    )
    rich_table = RichTable()
    rich_table.add_column("Column", style="cyan")
    rich_table.add_column("Type", style="green")
    rich_table.add_column("Missing", justify="right")
    rich_table.add_column("Unique", justify="right")
    rich_table.add_column("Mean / most common", justify="right")
    rich_table.add_column("Range")
    for name, column in dataset.columns.items():
        if column.stats is not None:
            summary = format_value(column.stats.mean)
            value_range = f"{format_value(column.stats.min)} .. {format_value(column.stats.max)}"
        else:
            summary = format_value(column.most_common)
            value_range = ""
        rich_table.add_row(
            name,
            column.column_type.value,
            f"{column.missing_count} ({column.missing_percentage:.1f}%)",
            str(column.unique_count),
            summary,
            value_range,
        )
    console.print(rich_table)
