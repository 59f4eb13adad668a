"""Unit tests for TaskStore.

Covers the add/delete/list/filter rules:
- Empty names are ignored, whitespace is kept as typed
- IDs are unique, order is insertion order
- Deleting keeps the order of the remaining tasks; unknown IDs are no-ops
- Due dates follow the selected day and the injected clock
"""

from __future__ import annotations

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from daytasks.adapters.memory import InMemoryTaskRepository
from daytasks.models import Task
from daytasks.services.day_filter import day_index_of
from daytasks.services.task_store import TaskStore
from daytasks.utils.clock import FixedClock, SystemClock


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def store(clock):
    return TaskStore(clock=clock)


def _names(tasks: list[Task]) -> list[str]:
    return [t.name for t in tasks]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    """Tests for default collaborators."""

    def test_defaults(self):
        store = TaskStore()
        assert isinstance(store.repository, InMemoryTaskRepository)
        assert isinstance(store.clock, SystemClock)
        assert len(store) == 0

    def test_separate_stores_do_not_share_tasks(self, clock):
        first = TaskStore(clock=clock)
        second = TaskStore(clock=clock)
        first.add_task("only here", 0)
        assert second.list_tasks() == []


# ---------------------------------------------------------------------------
# add_task
# ---------------------------------------------------------------------------


class TestAddTask:
    """Tests for add_task."""

    def test_buy_milk_on_tuesday(self, store):
        task = store.add_task("Buy milk", 2)

        tasks = store.list_tasks()
        assert tasks == [task]
        assert task.name == "Buy milk"
        assert task.completed is False
        assert task.due_date == datetime(2026, 10, 20)
        assert day_index_of(task.due_date) == 2

    def test_empty_name_is_ignored(self, store):
        store.add_task("existing", 0)

        assert store.add_task("", 0) is None
        assert _names(store.list_tasks()) == ["existing"]

    @pytest.mark.parametrize("name", [" ", "  padded  ", "\t"])
    def test_whitespace_is_not_trimmed(self, store, name):
        task = store.add_task(name, 1)
        assert task is not None
        assert task.name == name

    def test_appends_in_insertion_order(self, store):
        for name in ["a", "b", "c"]:
            store.add_task(name, 4)
        assert _names(store.list_tasks()) == ["a", "b", "c"]

    def test_ids_are_unique(self, store):
        tasks = [store.add_task(f"task {i}", i % 7) for i in range(50)]
        assert len({t.id for t in tasks}) == 50

    def test_today_due_date_is_now(self, store, clock):
        task = store.add_task("now", day_index_of(clock.now()))
        assert task.due_date == clock.now()

    def test_bad_index_falls_back_to_now(self, store, clock):
        task = store.add_task("fallback", 11)
        assert task.due_date == clock.now()

    def test_due_date_follows_clock(self, clock):
        store = TaskStore(clock=clock)
        clock.advance(timedelta(days=1))  # Thursday
        task = store.add_task("thu", 4)
        assert task.due_date == clock.now()

    def test_uses_repository(self, clock):
        repo = MagicMock()
        repo.add.side_effect = lambda task: task
        store = TaskStore(repository=repo, clock=clock)

        task = store.add_task("x", 0)

        repo.add.assert_called_once_with(task)


# ---------------------------------------------------------------------------
# delete_task
# ---------------------------------------------------------------------------


class TestDeleteTask:
    """Tests for delete_task."""

    def test_delete_first_of_two(self, store):
        a = store.add_task("A", 0)
        store.add_task("B", 0)

        store.delete_task(a.id)

        assert _names(store.list_tasks()) == ["B"]

    @pytest.mark.parametrize("position", [0, 2, 4])
    def test_preserves_order_of_remaining(self, store, position):
        tasks = [store.add_task(name, 1) for name in "vwxyz"]
        expected = [t for i, t in enumerate(tasks) if i != position]

        store.delete_task(tasks[position].id)

        assert store.list_tasks() == expected

    def test_unknown_id_is_noop_twice(self, store):
        store.add_task("keep", 0)
        before = store.list_tasks()

        assert store.delete_task("missing") is None
        assert store.delete_task("missing") is None

        assert store.list_tasks() == before

    def test_delete_on_empty_store(self, store):
        store.delete_task("anything")
        assert len(store) == 0


# ---------------------------------------------------------------------------
# list_tasks / filtered_tasks
# ---------------------------------------------------------------------------


class TestListing:
    """Tests for list_tasks and filtered_tasks."""

    def test_list_is_a_snapshot(self, store):
        store.add_task("a", 0)
        snapshot = store.list_tasks()
        snapshot.clear()
        assert len(store.list_tasks()) == 1

    def test_filtered_tasks_today_and_tomorrow(self, store, clock):
        today = day_index_of(clock.now())
        store.add_task("X", today)

        assert _names(store.filtered_tasks(today)) == ["X"]
        assert store.filtered_tasks((today + 1) % 7) == []

    def test_filtered_tasks_for_every_day(self, store):
        for index in range(7):
            store.add_task(f"day {index}", index)

        for index in range(7):
            assert _names(store.filtered_tasks(index)) == [f"day {index}"]

    def test_filtered_on_empty_store(self, store):
        assert store.filtered_tasks(0) == []

    def test_filter_uses_current_time(self):
        clock = FixedClock(datetime(2026, 10, 14, 9))
        store = TaskStore(clock=clock)
        store.add_task("wed", 3)

        # A week later Wednesday resolves to another date
        clock.advance(timedelta(days=7))

        assert store.filtered_tasks(3) == []
