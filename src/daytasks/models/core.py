"""Task and calendar data models."""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _new_id() -> str:
    return str(uuid4())


class Task(BaseModel):
    """Task model representing a single to-do item.

    Attributes:
        id: Unique identifier generated at creation
        name: Display text as typed by the user (never empty)
        completed: Completion flag, False at creation
        due_date: Concrete calendar date the task is due on
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str = Field(..., min_length=1)
    completed: bool = False
    due_date: datetime


class CalendarEvent(BaseModel):
    """A single event written to a calendar.

    Attributes:
        uid: Unique identifier of the event
        title: Event summary
        start: Start timestamp
        end: End timestamp
        calendar: Name or location of the calendar holding the event
        created: When the event was built, written as DTSTAMP
    """

    uid: str = Field(default_factory=_new_id)
    title: str
    start: datetime
    end: datetime
    calendar: str
    created: datetime = Field(default_factory=lambda: datetime.now(UTC))
