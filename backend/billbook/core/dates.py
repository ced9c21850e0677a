from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple

RECENT_WINDOW_DAYS = 30

# Millisecond precision, matching what clients send and display
DAY_START = time(0, 0, 0, 0, tzinfo=timezone.utc)
DAY_END = time(23, 59, 59, 999000, tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, DAY_START)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, DAY_END)


def day_bounds(
    start: Optional[date], end: Optional[date]
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """Expand calendar dates into inclusive full-day UTC timestamp bounds."""
    return (
        start_of_day(start) if start else None,
        end_of_day(end) if end else None,
    )


def recent_cutoff(now: Optional[datetime] = None, days: int = RECENT_WINDOW_DAYS) -> datetime:
    return (now or utcnow()) - timedelta(days=days)


def recent_days(now: Optional[datetime] = None, days: int = RECENT_WINDOW_DAYS) -> Tuple[date, date]:
    """Calendar dates covering the last ``days`` days up to and including today."""
    now = now or utcnow()
    return (now - timedelta(days=days)).date(), now.date()
