"""
Date/Time Utilities

Canonical timestamp formatting and lenient date parsing for task fields.
"""

from .datetime_helpers import (
    utc_now,
    to_timestamp,
    to_date_string,
    parse_date,
    days_from,
)

__all__ = [
    "utc_now",
    "to_timestamp",
    "to_date_string",
    "parse_date",
    "days_from",
]
