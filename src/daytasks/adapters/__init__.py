"""Adapters implementing the repository interfaces."""

from .ics import IcsCalendarBackend
from .memory import InMemoryTaskRepository

__all__ = ["InMemoryTaskRepository", "IcsCalendarBackend"]
