"""Command 'version' of daytasks"""

from daytasks import __version__
from daytasks.utils.ui.console import get_console

console = get_console(highlight=False)


def version() -> None:
    """Show version information"""
    console.print(__version__)
