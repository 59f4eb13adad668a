"""Time sources.

Everything that needs "now" takes a clock instead of calling
``datetime.now()`` directly, so tests can pin the moment.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current moment."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock. Naive local time unless a timezone is given."""

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Clock frozen at a given moment."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward (or backward) and return the new moment."""
        self.moment = self.moment + delta
        return self.moment
