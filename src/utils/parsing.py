"""
Parsing Utilities - Lenient coercion of form values.

Form submissions arrive as loosely typed JSON: numbers may be strings,
strings may carry trailing units. These helpers coerce them the same way
on both sides of the proxy.
"""
import re
from typing import Any, Dict, Optional

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of ``value``.

    Mirrors browser ``parseInt(value, 10)``: "45" -> 45, " 90 min" -> 90,
    45.7 -> 45, "abc" -> None. Booleans and None are not numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float('inf'), float('-inf')):
            return None
        return int(value)

    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def is_blank(value: Any) -> bool:
    """True for the values a form treats as 'not filled in': None and ''."""
    return value is None or value == ''


def prune_blank(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of ``fields`` without top-level entries that are '' or None."""
    return {key: value for key, value in fields.items() if not is_blank(value)}
