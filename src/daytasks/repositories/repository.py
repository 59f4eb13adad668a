"""Repository abstraction layer for DayTasks.

This module defines the abstract base classes (interfaces) for storage and
calendar backends, following the hexagonal architecture (Ports & Adapters)
pattern. Business logic in ``daytasks.services`` only talks to these
interfaces; concrete adapters live in ``daytasks.adapters``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from daytasks.models import CalendarEvent, Task


class TaskRepository(ABC):
    """Abstract base class for task persistence operations.

    Implementations must keep tasks in insertion order.
    """

    @abstractmethod
    def list_all(self) -> list[Task]:
        """List all tasks in insertion order.

        Returns:
            A new list; mutating it does not affect the repository
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def add(self, task: Task) -> Task:
        """Append a task.

        Args:
            task: Fully built Task object

        Returns:
            The stored Task
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    def delete(self, task_id: str) -> bool:
        """Delete the first task with the given ID.

        Args:
            task_id: Unique identifier for the task

        Returns:
            True if a task was removed, False if no task had that ID
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    def count(self) -> int:
        """Number of stored tasks."""
        raise NotImplementedError(
            "TaskRepository.count() must be implemented by adapter"
        )


class CalendarBackend(ABC):
    """Abstract base class for calendars events can be written to."""

    @abstractmethod
    def default_calendar(self) -> str:
        """Name of the calendar new events go to."""
        raise NotImplementedError(
            "CalendarBackend.default_calendar() must be implemented by adapter"
        )

    @abstractmethod
    def save(self, event: CalendarEvent) -> None:
        """Persist a single event.

        Raises:
            CalendarError: If the event could not be written
        """
        raise NotImplementedError(
            "CalendarBackend.save() must be implemented by adapter"
        )


class CalendarError(Exception):
    """Raised by calendar backends when an event cannot be saved."""
