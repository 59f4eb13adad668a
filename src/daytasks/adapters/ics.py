"""iCalendar file used as the default calendar.

Events are appended as ``VEVENT`` blocks to a single ``.ics`` file that any
calendar application can import or subscribe to.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from daytasks import __version__
from daytasks.models import CalendarEvent
from daytasks.repositories import CalendarBackend, CalendarError

CRLF = "\r\n"
PRODID = f"-//DayTasks//daytasks {__version__}//EN"
CALENDAR_END = "END:VCALENDAR"
MAX_LINE_OCTETS = 75


def escape_text(value: str) -> str:
    """Escape a TEXT value (RFC 5545, 3.3.11)."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def format_timestamp(value: datetime) -> str:
    """Format a DATE-TIME value.

    Aware values are converted to UTC; naive values are written as floating
    local time.
    """
    if value.tzinfo is not None:
        return value.astimezone(UTC).strftime("%Y%m%dT%H%M%SZ")
    return value.strftime("%Y%m%dT%H%M%S")


def fold_line(line: str, limit: int = MAX_LINE_OCTETS) -> list[str]:
    """Split a content line into physical lines of at most *limit* octets.

    Continuation lines start with a single space (RFC 5545, 3.1). Multi-byte
    characters are never split.
    """
    folded: list[str] = []
    current, size = "", 0
    for char in line:
        width = len(char.encode("utf-8"))
        if size + width > limit:
            folded.append(current)
            current, size = " ", 1
        current += char
        size += width
    folded.append(current)
    return folded


def unfold_lines(text: str) -> list[str]:
    """Join folded continuation lines back into logical content lines."""
    lines: list[str] = []
    for line in text.splitlines():
        if line[:1] in (" ", "\t") and lines:
            lines[-1] += line[1:]
        elif line:
            lines.append(line)
    return lines


def render_event(event: CalendarEvent, stamp: datetime | None = None) -> list[str]:
    """Render one event as folded iCalendar content lines.

    ``DTSTAMP`` is the event's creation time unless *stamp* is given; it is
    always written in UTC.
    """
    stamp = (stamp or event.created).astimezone(UTC)
    lines = [
        "BEGIN:VEVENT",
        f"UID:{event.uid}",
        f"DTSTAMP:{format_timestamp(stamp)}",
        f"DTSTART:{format_timestamp(event.start)}",
        f"DTEND:{format_timestamp(event.end)}",
        f"SUMMARY:{escape_text(event.title)}",
        "END:VEVENT",
    ]
    return [physical for line in lines for physical in fold_line(line)]


class IcsCalendarBackend(CalendarBackend):
    """Calendar backend writing to a local iCalendar file."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def default_calendar(self) -> str:
        return str(self.path)

    def save(self, event: CalendarEvent) -> None:
        lines = self._read_lines()
        lines[-1:-1] = render_event(event)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                f.write(CRLF.join(lines) + CRLF)
        except OSError as e:
            raise CalendarError(f"Could not write {self.path}: {e}") from e

    def _read_text(self) -> str:
        try:
            with open(self.path, encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CalendarError(f"Could not read {self.path}: {e}") from e

    def _read_lines(self) -> list[str]:
        """Existing physical lines, or an empty calendar."""
        if not self.path.exists():
            return [
                "BEGIN:VCALENDAR",
                "VERSION:2.0",
                f"PRODID:{PRODID}",
                CALENDAR_END,
            ]

        lines = [line for line in self._read_text().splitlines() if line]
        if not lines or lines[-1] != CALENDAR_END:
            raise CalendarError(f"{self.path} is not an iCalendar file")
        return lines

    def list_events(self) -> list[dict[str, str]]:
        """Parse back the events stored in the file.

        Raises:
            CalendarError: If the file cannot be read
        """
        if not self.path.exists():
            return []

        events: list[dict[str, str]] = []
        current: dict[str, str] | None = None
        for line in unfold_lines(self._read_text()):
            if line == "BEGIN:VEVENT":
                current = {}
            elif line == "END:VEVENT" and current is not None:
                events.append(current)
                current = None
            elif current is not None and ":" in line:
                key, value = line.split(":", 1)
                current[key] = value
        return events
