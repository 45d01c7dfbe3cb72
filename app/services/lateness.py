"""Decides whether an absence request was filed too close to its meeting."""

from datetime import datetime, timedelta

from app.errors import ParseFailure

LATE_REQUEST_WINDOW = timedelta(hours=24)

DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y")
TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M:%S %p")


def now_local():
    """Current local time, wrapped so tests can patch it."""
    return datetime.now()


def _parse(value, formats):
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def meeting_start(date_str, time_str):
    """Combine a meeting's date and start time into one naive local datetime."""
    if not isinstance(date_str, str) or not isinstance(time_str, str):
        raise ParseFailure("Meeting date or start time missing")

    day = _parse(date_str.strip(), DATE_FORMATS)
    clock = _parse(time_str.strip(), TIME_FORMATS)
    if day is None or clock is None:
        raise ParseFailure(
            f"Cannot parse meeting start from date={date_str!r} time={time_str!r}"
        )
    return datetime.combine(day.date(), clock.time())


def is_request_late(date_str, time_str, now):
    # A meeting exactly 24 hours away counts as late; so does one in the past.
    return meeting_start(date_str, time_str) - now <= LATE_REQUEST_WINDOW
