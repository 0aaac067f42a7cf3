"""CLI for datasight.

Provides commands for inspecting, cleaning and summarizing tabular files.

Usage:
    datasight types data.csv
    datasight stats data.csv --column revenue
    datasight correlate data.xlsx price quantity
    datasight insights data.csv --question "Which region grows fastest?"

Environment:
    Loads .env file from current directory if present.
    Set ANTHROPIC_API_KEY for the insights command.
"""

from datasight.cli.main import app, main

__all__ = ["app", "main"]
