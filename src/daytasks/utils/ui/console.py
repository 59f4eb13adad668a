"""Shared rich console."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Console used by every command, one per highlight setting."""
    return Console(highlight=highlight)
