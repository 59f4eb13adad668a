"""Configuration models for DayTasks.

The whole configuration is a single JSON document validated by
:class:`AppConfig`. Every section has sensible defaults so an empty file
(or no file at all) yields a working setup.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class UIConfig(BaseModel):
    """Task screen configuration."""

    default_day_index: int = Field(default=0, description="Initially selected day")
    start_on_today: bool = Field(default=False)
    date_format: str = Field(default="long")  # long, medium, short, iso

    @field_validator("default_day_index")
    @classmethod
    def validate_day_index(cls, v: int) -> int:
        """Day indexes address Sun..Sat."""
        if not 0 <= v <= 6:
            raise ValueError("default_day_index must be between 0 and 6")
        return v


class CalendarConfig(BaseModel):
    """Calendar integration configuration."""

    path: str | None = Field(
        default=None, description="iCalendar file used as the default calendar"
    )
    event_title: str = Field(default="My Event")
    event_duration_minutes: int = Field(default=60)
    access_granted: bool | None = Field(
        default=None, description="Recorded answer to the access prompt"
    )

    @field_validator("event_duration_minutes")
    @classmethod
    def validate_duration(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("event_duration_minutes must be positive")
        return v


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")  # pretty, json, yaml, table


class AppConfig(BaseModel):
    """Main application configuration."""

    ui: UIConfig = Field(default_factory=UIConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
