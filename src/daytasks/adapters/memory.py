"""In-memory task repository.

Tasks live only for the lifetime of the process.
"""

from __future__ import annotations

from daytasks.models import Task
from daytasks.repositories import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """Ordered list of tasks held in memory."""

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def delete(self, task_id: str) -> bool:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                return True
        return False

    def count(self) -> int:
        return len(self._tasks)
