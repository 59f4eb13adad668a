"""Service layer: task store, day filter, calendar and configuration."""

from .calendar_service import CalendarService
from .config_service import ConfigService, get_config_service
from .day_filter import (
    DAY_LABELS,
    day_index_of,
    filter_tasks_for_day,
    is_same_day,
    resolve_day,
)
from .task_store import TaskStore

__all__ = [
    "TaskStore",
    "CalendarService",
    "ConfigService",
    "get_config_service",
    "DAY_LABELS",
    "day_index_of",
    "filter_tasks_for_day",
    "is_same_day",
    "resolve_day",
]
