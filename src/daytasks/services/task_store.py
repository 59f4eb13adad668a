"""Task store - business rules for the task list.

The store sits between the task screen and the task repository. It owns the
collection of tasks for the lifetime of its owner and never raises for bad
input: empty names and unknown IDs are silently ignored.
"""

from __future__ import annotations

from daytasks.adapters.memory import InMemoryTaskRepository
from daytasks.models import Task
from daytasks.repositories import TaskRepository
from daytasks.services.day_filter import filter_tasks_for_day, resolve_day
from daytasks.utils.clock import Clock, SystemClock
from daytasks.utils.logger import get_logger


class TaskStore:
    """Ordered, in-memory collection of tasks.

    This service encapsulates the add/delete/filter rules and reads the
    current moment from an injected clock.
    """

    def __init__(
        self,
        repository: TaskRepository | None = None,
        clock: Clock | None = None,
    ):
        """Initialize the task store.

        Args:
            repository: TaskRepository implementation, in-memory by default
            clock: Source of "now", the system clock by default
        """
        self.repository = repository or InMemoryTaskRepository()
        self.clock = clock or SystemClock()

    def __len__(self) -> int:
        return self.repository.count()

    def add_task(self, name: str, selected_day_index: int) -> Task | None:
        """Create a task due on the selected day.

        Args:
            name: Task text, used as-is (not trimmed)
            selected_day_index: Day index, 0 = Sunday ... 6 = Saturday

        Returns:
            The created Task, or None when *name* is empty
        """
        if not name:
            return None

        due_date = resolve_day(selected_day_index, self.clock.now())
        task = self.repository.add(Task(name=name, due_date=due_date))
        get_logger("task_store").debug(
            "task added id=%s day=%s due=%s",
            task.id,
            selected_day_index,
            task.due_date.isoformat(),
        )
        return task

    def delete_task(self, task_id: str) -> None:
        """Delete a task. Unknown IDs are ignored."""
        if self.repository.delete(task_id):
            get_logger("task_store").debug("task deleted id=%s", task_id)

    def list_tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        return self.repository.list_all()

    def filtered_tasks(self, day_index: int) -> list[Task]:
        """Tasks due on the day *day_index* currently resolves to."""
        return filter_tasks_for_day(
            self.repository.list_all(), day_index, self.clock.now()
        )
