"""UTC datetime utilities."""

from datetime import date, datetime, time, timedelta, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def start_of_next_day(day: date) -> datetime:
    """First UTC instant after `day` — exclusive upper bound for an inclusive date range."""
    return start_of_day(day + timedelta(days=1))
