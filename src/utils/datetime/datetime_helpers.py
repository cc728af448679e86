"""
DateTime Helper Utilities

Centralized datetime manipulation functions.

The canonical timestamp is UTC ISO-8601 with millisecond precision and a
trailing ``Z`` (``2026-10-26T09:30:00.000Z``), the form Motion returns and
accepts for ``dueDate``.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Any, Union

from dateutil import parser as date_parser


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_timestamp(dt: datetime) -> str:
    """
    Format ``dt`` as the canonical timestamp.

    Naive datetimes are taken to be UTC.

    Raises:
        ValueError: the UTC equivalent falls outside the supported years
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        dt = dt.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"Invalid date: {dt.isoformat()} is out of range in UTC") from e
    return dt.replace(tzinfo=None).isoformat(timespec='milliseconds') + 'Z'


def to_date_string(value: Union[date, datetime]) -> str:
    """Format as ``YYYY-MM-DD``. Aware datetimes are converted to UTC first."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime('%Y-%m-%d')


def parse_date(value: Any) -> datetime:
    """
    Parse a date or date-time value.

    Accepts ``datetime``/``date`` objects and anything ``dateutil`` can read
    ("2026-10-30", "2026-10-30T14:00:00-07:00", "Oct 30 2026").

    Raises:
        ValueError: the value is not a recognizable calendar date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return date_parser.parse(str(value).strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date: {value!r}") from e


def days_from(start: Union[date, datetime], days: int) -> Union[date, datetime]:
    """Shift ``start`` by whole calendar days."""
    return start + timedelta(days=days)
