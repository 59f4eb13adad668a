"""Configuration management commands."""

import typer
from pydantic import ValidationError

from daytasks.services.config_service import get_config_service
from daytasks.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from daytasks.utils.typer_helpers import SuggestingGroup
from daytasks.utils.ui.console import get_console
from daytasks.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


@app.command("view")
@command_wrapper
def view_config(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (default: output.format)"
    ),
) -> None:
    """View current configuration."""
    config = get_config_service().config
    format_output(config.model_dump(), output or config.output.format)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., calendar.event_title)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not set", ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., ui.default_day_index)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        stored = get_config_service().set_from_string(key, value)
    except KeyError as e:
        raise AppError(f"Unknown configuration key '{key}'", ERROR_NOT_FOUND) from e
    except ValidationError as e:
        message = e.errors()[0].get("msg", str(e))
        raise AppError(f"Invalid value for '{key}': {message}", ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{stored}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_info("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(f"Unknown configuration key '{key}'", ERROR_NOT_FOUND) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
