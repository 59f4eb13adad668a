"""DayTasks domain models.

This package contains Pydantic models that represent the core domain entities
of the application. These models are used throughout the application for data
validation, serialization, and type safety.
"""

from .config_models import AppConfig, CalendarConfig, OutputConfig, UIConfig
from .core import CalendarEvent, Task

__all__ = [
    # Task models
    "Task",
    # Calendar models
    "CalendarEvent",
    # Config models
    "AppConfig",
    "UIConfig",
    "CalendarConfig",
    "OutputConfig",
]
