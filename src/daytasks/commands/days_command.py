"""Command 'days' of daytasks"""

from datetime import datetime

import typer

from daytasks.services.config_service import get_config_service
from daytasks.services.day_filter import DAY_LABELS, day_index_of, resolve_day
from daytasks.utils.clock import SystemClock
from daytasks.utils.ui.formatters import format_long_date, format_output

from .decorators import command_wrapper


def week_rows(now: datetime, date_style: str = "long") -> list[dict]:
    """One row per day index with the date it resolves to at *now*."""
    today_index = day_index_of(now)
    return [
        {
            "index": index,
            "label": label,
            "date": format_long_date(resolve_day(index, now), date_style),
            "today": index == today_index,
        }
        for index, label in enumerate(DAY_LABELS)
    ]


@command_wrapper
def days(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (default: output.format)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """Show the date each day of the week currently resolves to."""
    config = get_config_service().config
    if json_opt:
        output = "json"
    output = output or config.output.format

    date_style = config.ui.date_format
    if output == "json":
        date_style = "iso"

    format_output(week_rows(SystemClock().now(), date_style), output)
