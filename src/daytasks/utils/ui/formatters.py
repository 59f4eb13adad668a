"""Output formatters for different formats."""

import json
from datetime import date, datetime
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()

STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
}

DATE_STYLES = {
    "long": "%B {day}, %Y",  # October 18, 2026
    "medium": "%b {day}, %Y",  # Oct 18, 2026
    "short": "%m/%d/%y",  # 10/18/26
    "iso": "%Y-%m-%d",
}


def format_long_date(value: date | datetime, style: str = "long") -> str:
    """Format a date for the task screen header.

    Unknown styles fall back to ``long``.
    """
    pattern = DATE_STYLES.get(style, DATE_STYLES["long"])
    # %d pads with zero; the long and medium styles show the bare day.
    return value.strftime(pattern.replace("{day}", str(value.day)))


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, dict):
        format_single_item(data)
        return

    if isinstance(data, list) and isinstance(data[0], dict):
        table = Table(show_header=True, header_style="bold cyan")
        columns = list(data[0].keys())
        for column in columns:
            table.add_column(column.replace("_", " ").title())
        for item in data:
            table.add_row(*[_cell(item.get(column)) for column in columns])
        console.print(table)
        return

    console.print(data)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(formatted_key, _cell(value))

    console.print(table)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if isinstance(value, dict):
        return ", ".join(f"{k}={_cell(v)}" for k, v in value.items())
    if value is None:
        return "-"
    return str(value)


def format_pretty(data: Any) -> None:
    """Format data in pretty format."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list) and isinstance(data[0], dict):
        if "label" in data[0] and "date" in data[0]:
            format_days_pretty(data)
        else:
            format_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_days_pretty(days: list[dict]) -> None:
    """Format the resolved week, highlighting today."""
    for day in days:
        marker = "▶" if day.get("today") else " "
        line = f"{marker} [cyan]{day['index']}[/cyan] {day['label']}  {day['date']}"
        if day.get("today"):
            line = f"[bold]{line}[/bold]"
        console.print(line)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
