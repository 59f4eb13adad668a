"""Main entry point for DayTasks."""

import typer

from daytasks.commands import (
    calendar_command,
    config_command,
    days_command,
    ui_command,
    version_command,
)
from daytasks.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="daytasks",
    cls=SuggestingGroup,
    help="A single-screen task list organised by day of the week",
    no_args_is_help=True,
)

# Sub-command groups
app.add_typer(calendar_command.app, name="calendar", help="Calendar integration")
app.add_typer(config_command.app, name="config", help="Configuration management")

# Top-level commands
app.command("ui")(ui_command.ui)
app.command("days")(days_command.days)
app.command("version")(version_command.version)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
