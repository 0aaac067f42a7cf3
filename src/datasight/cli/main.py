"""Main CLI application entry point."""

from __future__ import annotations

import typer

from datasight.cli.commands import analyze, clean, insights

app = typer.Typer(
    name="datasight",
    help="datasight - type detection, statistics and insights for CSV and Excel files.",
    no_args_is_help=True,
)

# Register commands
app.command()(analyze.types)
app.command()(analyze.stats)
app.command()(analyze.correlate)
app.command()(analyze.profile)
app.command()(clean.clean)
app.command()(insights.insights)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
