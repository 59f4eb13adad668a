"""Repository interfaces for DayTasks.

This package contains abstract base classes (ABCs) that define the contracts
for task storage and calendar access. These are the "Ports" in the Hexagonal
Architecture.

Implementations (Adapters) are in:
- daytasks.adapters.memory (in-process task list)
- daytasks.adapters.ics (iCalendar file)
"""

from .repository import CalendarBackend, CalendarError, TaskRepository

__all__ = [
    "TaskRepository",
    "CalendarBackend",
    "CalendarError",
]
