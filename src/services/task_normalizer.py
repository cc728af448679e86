"""
Task Normalizer

Turns a loosely structured task draft, as submitted by a form, into the
payload Motion's ``POST /tasks`` expects.

Rules, applied in order:
    1. ``priority`` defaults to MEDIUM.
    2. ``dueDate`` is parsed and re-emitted as a canonical timestamp, or
       defaulted to seven days after the request.
    3. ``autoScheduled`` is rebuilt from scratch: start today, the requested
       deadline type (or SOFT), and the work-hours schedule.
    4. ``duration`` keeps the NONE/REMINDER sentinels, otherwise becomes a
       positive integer of minutes, defaulting to 30.
    5. The flat ``deadlineType`` is dropped.
    6. Top-level fields that are empty strings or null are dropped.

No field is validated beyond that: anything Motion rejects is reported by
Motion.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from src.utils.datetime import days_from, parse_date, to_date_string, to_timestamp, utc_now
from src.utils.parsing import is_blank, parse_int, prune_blank

DEFAULT_PRIORITY = "MEDIUM"
DEFAULT_DEADLINE_TYPE = "SOFT"
DEFAULT_SCHEDULE = "Work Hours"
DEFAULT_DURATION_MINUTES = 30
DEFAULT_DUE_IN_DAYS = 7

# Motion's "no duration" and "reminder only" values.
DURATION_SENTINELS = frozenset({"NONE", "REMINDER"})


def normalize_task(draft: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build the Motion task payload from ``draft``.

    Args:
        draft: Field mapping from the client; not modified
        now: Request time (aware UTC); defaults to the current time

    Returns:
        New mapping ready to send to Motion

    Raises:
        ValueError: ``dueDate`` is present but not a recognizable date
    """
    now = now or utc_now()
    task = dict(draft)

    task["priority"] = draft.get("priority") or DEFAULT_PRIORITY
    task["dueDate"] = normalize_due_date(draft.get("dueDate"), now)
    task["autoScheduled"] = build_auto_scheduled(_requested_deadline_type(draft), now)
    task["duration"] = normalize_duration(draft.get("duration"))

    task.pop("deadlineType", None)

    return prune_blank(task)


def normalize_due_date(value: Any, now: datetime) -> str:
    """Canonical due date timestamp; seven days after ``now`` when blank."""
    if is_blank(value) or (isinstance(value, str) and not value.strip()):
        return to_timestamp(days_from(now, DEFAULT_DUE_IN_DAYS))
    return to_timestamp(parse_date(value))


def _requested_deadline_type(draft: Dict[str, Any]) -> Any:
    """Flat deadlineType, else the one the client nested under autoScheduled."""
    if draft.get("deadlineType"):
        return draft["deadlineType"]
    nested = draft.get("autoScheduled")
    if isinstance(nested, dict):
        return nested.get("deadlineType")
    return None


def build_auto_scheduled(deadline_type: Any, now: datetime) -> Dict[str, Any]:
    """Auto-scheduling block, rebuilt on the server. Only the deadline type comes from the client."""
    return {
        "startDate": to_date_string(now),
        "deadlineType": deadline_type or DEFAULT_DEADLINE_TYPE,
        "schedule": DEFAULT_SCHEDULE,
    }


def normalize_duration(value: Any) -> Any:
    """Keep sentinels, coerce numbers, default everything else to 30 minutes."""
    if isinstance(value, str) and value in DURATION_SENTINELS:
        return value
    minutes = parse_int(value)
    if minutes is None or minutes <= 0:
        return DEFAULT_DURATION_MINUTES
    return minutes
