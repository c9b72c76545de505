"""Date utility functions for togglipy."""
from datetime import datetime, date, timedelta
from typing import Dict, Iterable, List, NamedTuple, Optional
import calendar

DAY_NAMES = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']

NAMED_RANGES = ['current-week', 'last-week', 'current-month', 'last-month']


class DateRange(NamedTuple):
    """Inclusive range of calendar dates."""
    start: date
    end: date


def extract_date(iso_datetime: str) -> date:
    """Extract the local calendar date from an ISO 8601 datetime string.

    Args:
        iso_datetime: ISO datetime string (e.g. "2026-01-12T09:00:00Z")

    Returns:
        Date portion of the timestamp in local time. Naive timestamps are
        taken as local time already.
    """
    dt = datetime.fromisoformat(iso_datetime.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.date()
    return dt.astimezone().date()


def get_dates_in_range(start: date, end: date) -> List[date]:
    """Get every date from start to end, inclusive.

    Args:
        start: First date
        end: Last date

    Returns:
        Ascending list of dates, empty if end is before start
    """
    days = (end - start).days
    return [start + timedelta(days=i) for i in range(days + 1)]


def get_day_name(dt: date) -> str:
    """Get the English weekday name of a date (e.g. "Monday")."""
    return DAY_NAMES[dt.weekday()]


def get_day_names(dates: Iterable[date]) -> Dict[date, str]:
    """Map each date to its weekday name."""
    return {d: get_day_name(d) for d in dates}


def get_week_range(target_date: date, week_start: int = 0) -> DateRange:
    """Get the start and end dates of the week containing the target date.

    Args:
        target_date: Date within the week
        week_start: Day of week to start on (0=Monday, 6=Sunday)

    Returns:
        DateRange of (start_date, end_date)
    """
    wd = (target_date.weekday() - week_start) % 7
    start = target_date - timedelta(days=wd)
    end = start + timedelta(days=6)
    return DateRange(start, end)


def get_month_range(target_date: date) -> DateRange:
    """Get the start and end dates of the month containing the target date.

    Args:
        target_date: Date within the month

    Returns:
        DateRange of (start_date, end_date)
    """
    start = target_date.replace(day=1)
    last_day = calendar.monthrange(target_date.year, target_date.month)[1]
    end = target_date.replace(day=last_day)
    return DateRange(start, end)


def get_current_calendar_week(today: Optional[date] = None) -> DateRange:
    """Monday to Sunday of the week containing today."""
    return get_week_range(today or date.today())


def get_last_calendar_week(today: Optional[date] = None) -> DateRange:
    """Monday to Sunday of the week before the current one."""
    today = today or date.today()
    return get_week_range(today - timedelta(days=7))


def get_current_month(today: Optional[date] = None) -> DateRange:
    return get_month_range(today or date.today())


def get_last_month(today: Optional[date] = None) -> DateRange:
    today = today or date.today()
    return get_month_range(today.replace(day=1) - timedelta(days=1))


def get_named_range(name: str, today: Optional[date] = None) -> DateRange:
    """Resolve a named range to its dates.

    Args:
        name: One of current-week, last-week, current-month, last-month
        today: Reference date (defaults to today)

    Returns:
        DateRange for the named period

    Raises:
        ValueError: If the name is unknown
    """
    resolvers = {
        'current-week': get_current_calendar_week,
        'last-week': get_last_calendar_week,
        'current-month': get_current_month,
        'last-month': get_last_month,
    }
    if name not in resolvers:
        raise ValueError(f"Unknown date range '{name}', expected one of: {', '.join(NAMED_RANGES)}")
    return resolvers[name](today)


def to_swiss_format(dt: date) -> str:
    """Format a date as DD.MM.YYYY."""
    return dt.strftime("%d.%m.%Y")


def day_str(dt: date) -> str:
    """Format a date as a string with day of week.

    Args:
        dt: Date to format

    Returns:
        Formatted date string
    """
    return f"({['Mo','Tue','Wed','Thu','Fri','Sat','Sun'][dt.weekday()]}){dt}"
