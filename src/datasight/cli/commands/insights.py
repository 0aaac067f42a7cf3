"""Insights command - LLM analysis of a table summary."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.panel import Panel
from rich.table import Table as RichTable

from datasight.cli.common import (
    FileArg,
    JsonFlag,
    SheetOption,
    VerboseOption,
    console,
    load_or_exit,
    setup_logging,
)
from datasight.llm import DataInsights, LLMService, load_llm_config


def insights(
    path: FileArg,
    question: Annotated[
        str | None,
        typer.Option(
            "--question",
            "-q",
            help="Ask a specific question instead of a general analysis",
        ),
    ] = None,
    sheet: SheetOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Ask the LLM for insights about a file.

    Only a summary of the table is sent: column types, distinct counts,
    a few sample values and numeric ranges.

    Examples:

        datasight insights sales.csv

        datasight insights sales.csv -q "Which product sells best?"
    """
    setup_logging(verbosity=verbose)
    table = load_or_exit(path, sheet)

    try:
        service = LLMService(load_llm_config())
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    if question:
        result = asyncio.run(service.answer_question(table, question))
    else:
        result = asyncio.run(service.generate_insights(table))

    if not result.success or result.value is None:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print_json(result.value.model_dump_json(by_alias=True))
    else:
        _print_insights(result.value)


def _print_insights(data: DataInsights) -> None:
    console.print(Panel(data.executive_summary, title="Summary"))

    if data.key_metrics:
        metrics = RichTable(title="Key metrics")
        metrics.add_column("Metric", style="cyan")
        metrics.add_column("Value", justify="right")
        metrics.add_column("Description")
        for name, metric in data.key_metrics.items():
            metrics.add_row(name, metric.value, metric.description)
        console.print(metrics)

    for title, items in (
        ("Insights", data.main_insights),
        ("Recommendations", data.action_items),
        ("Limitations", data.limitations),
    ):
        if items:
            console.print(f"\n[bold]{title}[/bold]")
            for item in items:
                console.print(f"  - {item}")

    if data.cached:
        console.print("\n[dim]Served from cache[/dim]")
