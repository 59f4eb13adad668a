"""Tests for the iCalendar file backend."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from daytasks.adapters.ics import (
    IcsCalendarBackend,
    escape_text,
    fold_line,
    format_timestamp,
    render_event,
    unfold_lines,
)
from daytasks.models import CalendarEvent
from daytasks.repositories import CalendarError


def _event(title: str = "My Event") -> CalendarEvent:
    start = datetime(2026, 10, 14, 15, 30)
    return CalendarEvent(
        title=title, start=start, end=start + timedelta(hours=1), calendar="test"
    )


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


class TestFormatting:
    """Tests for TEXT escaping and DATE-TIME values."""

    def test_escape_text(self):
        assert escape_text("a,b;c\\d\ne") == "a\\,b\\;c\\\\d\\ne"

    def test_plain_text_unchanged(self):
        assert escape_text("My Event") == "My Event"

    def test_naive_timestamp_is_floating(self):
        assert format_timestamp(datetime(2026, 10, 14, 15, 30)) == "20261014T153000"

    def test_aware_timestamp_is_utc(self):
        value = datetime(2026, 10, 14, 17, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "20261014T153000Z"

    def test_render_event(self):
        event = _event("Lunch, with Sam")
        lines = render_event(event, stamp=datetime(2026, 10, 14, tzinfo=UTC))

        assert lines[0] == "BEGIN:VEVENT"
        assert lines[-1] == "END:VEVENT"
        assert f"UID:{event.uid}" in lines
        assert "DTSTAMP:20261014T000000Z" in lines
        assert "DTSTART:20261014T153000" in lines
        assert "DTEND:20261014T163000" in lines
        assert "SUMMARY:Lunch\\, with Sam" in lines

    def test_dtstamp_defaults_to_event_creation(self):
        created = datetime(2026, 10, 14, 17, 30, tzinfo=timezone(timedelta(hours=2)))
        event = _event().model_copy(update={"created": created})
        assert "DTSTAMP:20261014T153000Z" in render_event(event)


# ---------------------------------------------------------------------------
# Line folding
# ---------------------------------------------------------------------------


class TestFolding:
    """Tests for 75-octet content lines."""

    def test_short_line_is_untouched(self):
        assert fold_line("SUMMARY:My Event") == ["SUMMARY:My Event"]

    def test_long_line_is_folded(self):
        line = "SUMMARY:" + "x" * 200
        folded = fold_line(line)

        assert all(len(part.encode("utf-8")) <= 75 for part in folded)
        assert all(part.startswith(" ") for part in folded[1:])
        assert unfold_lines("\r\n".join(folded)) == [line]

    def test_multibyte_characters_are_not_split(self):
        line = "SUMMARY:" + "\u00e9" * 100
        folded = fold_line(line)

        assert all(len(part.encode("utf-8")) <= 75 for part in folded)
        assert "".join(part.lstrip(" ") for part in folded) == line


# ---------------------------------------------------------------------------
# IcsCalendarBackend
# ---------------------------------------------------------------------------


class TestIcsCalendarBackend:
    """Tests for appending events to the file."""

    def test_default_calendar_is_the_path(self, tmp_path):
        backend = IcsCalendarBackend(tmp_path / "cal.ics")
        assert backend.default_calendar() == str(tmp_path / "cal.ics")

    def test_save_creates_calendar(self, tmp_path):
        path = tmp_path / "nested" / "cal.ics"
        backend = IcsCalendarBackend(path)

        backend.save(_event())

        content = path.read_bytes().decode("utf-8")
        assert content.startswith("BEGIN:VCALENDAR\r\nVERSION:2.0\r\nPRODID:")
        assert content.endswith("END:VCALENDAR\r\n")
        assert "\nSUMMARY:My Event\r\n" in content

    def test_second_event_is_appended(self, tmp_path):
        backend = IcsCalendarBackend(tmp_path / "cal.ics")
        first, second = _event("first"), _event("second")

        backend.save(first)
        backend.save(second)

        events = backend.list_events()
        assert [e["SUMMARY"] for e in events] == ["first", "second"]
        assert [e["UID"] for e in events] == [first.uid, second.uid]
        assert (tmp_path / "cal.ics").read_text().count("BEGIN:VCALENDAR") == 1

    def test_list_events_without_file(self, tmp_path):
        assert IcsCalendarBackend(tmp_path / "missing.ics").list_events() == []

    def test_foreign_file_is_rejected(self, tmp_path):
        path = tmp_path / "notes.ics"
        path.write_text("just some notes\n", encoding="utf-8")

        with pytest.raises(CalendarError, match="not an iCalendar file"):
            IcsCalendarBackend(path).save(_event())

        assert path.read_text(encoding="utf-8") == "just some notes\n"

    def test_unwritable_location_raises_calendar_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(CalendarError, match="Could not write"):
            IcsCalendarBackend(blocker / "cal.ics").save(_event())

    def test_long_title_round_trips_folded(self, tmp_path):
        path = tmp_path / "cal.ics"
        backend = IcsCalendarBackend(path)
        title = "Quarterly planning " * 10

        backend.save(_event(title))

        physical = path.read_bytes().split(b"\r\n")
        assert all(len(line) <= 75 for line in physical)
        assert backend.list_events()[0]["SUMMARY"] == escape_text(title)

    def test_undecodable_file_raises_calendar_error(self, tmp_path):
        path = tmp_path / "cal.ics"
        original = b"BEGIN:VCALENDAR\r\nSUMMARY:\xff\xfe\r\nEND:VCALENDAR\r\n"
        path.write_bytes(original)
        backend = IcsCalendarBackend(path)

        with pytest.raises(CalendarError, match="Could not read"):
            backend.save(_event())
        with pytest.raises(CalendarError, match="Could not read"):
            backend.list_events()

        assert path.read_bytes() == original
