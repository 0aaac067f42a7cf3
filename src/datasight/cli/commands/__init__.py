"""CLI command implementations."""

from datasight.cli.commands import analyze, clean, insights

__all__ = ["analyze", "clean", "insights"]
