"""DayTasks - a single-screen weekday task list."""

__version__ = "0.1.0"
