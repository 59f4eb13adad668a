"""Calendar service - one-shot event creation.

The calendar is a side channel: nothing here reads or changes tasks, and no
outcome is ever reported back to the caller as an error. Access is asked for
once and the answer is remembered in the configuration.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from datetime import timedelta

from daytasks.adapters.ics import IcsCalendarBackend
from daytasks.models import CalendarEvent
from daytasks.repositories import CalendarBackend, CalendarError
from daytasks.services.config_service import ConfigService, get_config_service
from daytasks.utils.clock import Clock, SystemClock
from daytasks.utils.logger import get_logger

ACCESS_QUESTION = "Allow DayTasks to add events to your calendar?"

AccessPrompt = Callable[[], bool | Awaitable[bool]]


class CalendarService:
    """Creates events in the default calendar of a backend."""

    def __init__(
        self,
        backend: CalendarBackend,
        config_service: ConfigService,
        clock: Clock | None = None,
    ):
        self.backend = backend
        self.config_service = config_service
        self.clock = clock or SystemClock()
        self._pending: set[asyncio.Task] = set()

    @property
    def access_granted(self) -> bool | None:
        """Recorded access decision, None while the user has not been asked."""
        return self.config_service.config.calendar.access_granted

    async def request_access(self, prompt: AccessPrompt) -> bool:
        """Ask for calendar access unless a decision is already recorded.

        Args:
            prompt: Sync or async callable returning True to allow access

        Returns:
            Whether access is granted
        """
        logger = get_logger("calendar")
        decision = self.access_granted

        if decision is None:
            try:
                answer = prompt()
                if inspect.isawaitable(answer):
                    answer = await answer
            except Exception as e:
                logger.warning("Calendar access denied: %s", str(e) or type(e).__name__)
                return False

            decision = bool(answer)
            try:
                self.config_service.set("calendar.access_granted", decision)
            except RuntimeError as e:
                logger.warning("Could not record calendar access decision: %s", e)

        if decision:
            logger.info("Calendar access granted")
        else:
            logger.info("Calendar access denied: not allowed by user")
        return decision

    def build_event(self) -> CalendarEvent:
        """Event starting now in the backend's default calendar."""
        settings = self.config_service.config.calendar
        start = self.clock.now()
        return CalendarEvent(
            title=settings.event_title,
            start=start,
            end=start + timedelta(minutes=settings.event_duration_minutes),
            calendar=self.backend.default_calendar(),
            created=start,
        )

    async def add_event(self) -> CalendarEvent | None:
        """Save a new event; failures are logged, never raised.

        Returns:
            The saved event, or None if nothing was saved
        """
        logger = get_logger("calendar")
        if not self.access_granted:
            logger.error("Error saving event to calendar: access not granted")
            return None

        try:
            event = self.build_event()
            await asyncio.to_thread(self.backend.save, event)
        except CalendarError as e:
            logger.error("Error saving event to calendar: %s", e)
            return None
        except Exception as e:
            logger.exception("Error saving event to calendar: %s", e)
            return None

        logger.info(
            "Event saved to calendar uid=%s calendar=%s", event.uid, event.calendar
        )
        return event

    def add_event_in_background(self) -> asyncio.Task:
        """Schedule :meth:`add_event` on the running loop and return at once."""
        task = asyncio.get_running_loop().create_task(self.add_event())
        self._pending.add(task)
        task.add_done_callback(self._on_event_done)
        return task

    def _on_event_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        logger = get_logger("calendar")
        if task.cancelled():
            logger.warning("Calendar event creation cancelled")


def get_calendar_service(clock: Clock | None = None) -> CalendarService:
    """Calendar service writing to the configured iCalendar file."""
    config_service = get_config_service()
    return CalendarService(
        IcsCalendarBackend(config_service.calendar_path), config_service, clock
    )
