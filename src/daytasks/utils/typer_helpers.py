"""Typer command group that proposes close matches for mistyped commands."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from daytasks.utils.exit_codes import ERROR_GENERAL
from daytasks.utils.ui.console import get_console

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


class SuggestingGroup(TyperGroup):
    """Typer group answering an unknown command with its closest matches."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            suggestions = self._suggestions(args[0]) if args else []
            if not suggestions:
                raise
            self._print_suggestions(ctx.info_name, args[0], suggestions)
            raise typer.Exit(ERROR_GENERAL) from e

    def _suggestions(self, attempted: str) -> list[str]:
        return get_close_matches(
            attempted, list(self.commands), n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF
        )

    @staticmethod
    def _print_suggestions(group: str, attempted: str, suggestions: list[str]) -> None:
        console = get_console()
        console.print(f'[red]Error:[/red] unknown command "{attempted}" for "{group}"')
        console.print()
        if len(suggestions) == 1:
            console.print("[yellow]Did you mean this?[/yellow]")
        else:
            console.print("[yellow]Did you mean one of these?[/yellow]")
        for suggestion in suggestions:
            console.print(f"        {suggestion}")
