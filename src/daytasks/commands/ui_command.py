"""Command 'ui' of daytasks"""

from .decorators import command_wrapper


@command_wrapper
def ui() -> None:
    """Open the task list screen."""
    # Lazy import to keep Textual out of plain CLI commands
    from daytasks.ui.task_list_app import TaskListApp

    TaskListApp().run()
