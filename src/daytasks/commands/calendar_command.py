"""Calendar integration commands."""

import typer

from daytasks.adapters.ics import IcsCalendarBackend
from daytasks.repositories import CalendarError
from daytasks.services.calendar_service import ACCESS_QUESTION, get_calendar_service
from daytasks.services.config_service import get_config_service
from daytasks.utils.exit_codes import ERROR_PERMISSION_DENIED
from daytasks.utils.typer_helpers import SuggestingGroup
from daytasks.utils.ui.console import get_console
from daytasks.utils.ui.formatters import format_info, format_success, format_warning

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Calendar integration commands")
console = get_console()


@app.command("add-event")
@command_wrapper
async def add_event(
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Grant calendar access without asking"
    ),
) -> None:
    """Add a one-hour event starting now to the default calendar."""
    service = get_calendar_service()

    granted = await service.request_access(
        lambda: yes or typer.confirm(ACCESS_QUESTION, default=False)
    )
    if not granted:
        raise AppError(
            "Calendar access denied, no event created", ERROR_PERMISSION_DENIED
        )

    event = await service.add_event()
    if event is None:
        format_info("No event was created, details are in the log")
        return

    format_success(f"Event '{event.title}' saved to {event.calendar}")


@app.command("status")
@command_wrapper
def calendar_status() -> None:
    """Show calendar access and the default calendar."""
    config_service = get_config_service()
    granted = config_service.config.calendar.access_granted

    if granted is None:
        console.print("[yellow]○ Access not requested yet[/yellow]")
    elif granted:
        console.print("[green]● Access granted[/green]")
    else:
        console.print("[red]● Access denied[/red]")
        console.print("  Run: [bold]daytasks calendar reset-access[/bold]")

    path = config_service.calendar_path
    console.print(f"  Calendar: {path}")
    try:
        events = IcsCalendarBackend(path).list_events()
    except CalendarError as e:
        raise AppError(str(e)) from e
    console.print(f"  Events: {len(events)}")


@app.command("reset-access")
@command_wrapper
def reset_access() -> None:
    """Forget the access decision so the next event asks again."""
    config_service = get_config_service()
    if config_service.config.calendar.access_granted is None:
        format_warning("Calendar access has not been requested yet")
        return

    config_service.set("calendar.access_granted", None)
    format_success("Calendar access will be requested again")
