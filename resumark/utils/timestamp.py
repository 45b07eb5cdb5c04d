"""Timestamp and date formatting utilities."""

from datetime import date, datetime, timezone
from typing import Optional, Union


def now() -> str:
    """Compact local timestamp for directory names (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """
    Current UTC time as an ISO 8601 string with millisecond precision.

    Examples:
        now_exact()
        # "2025-11-13T18:45:40.572Z"
    """
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_date(value: Union[date, datetime, str, None]) -> Optional[str]:
    """
    Normalize a date-like value to an ISO calendar date ("YYYY-MM-DD").

    Resume records come from different providers: some hand over datetime objects,
    others ISO strings with or without a time component.

    Args:
        value: date, datetime, ISO string, or None

    Returns:
        "YYYY-MM-DD" string, None for None, or the original string if it cannot be parsed

    Examples:
        format_date(datetime(2022, 1, 1, 9, 30))
        # "2022-01-01"

        format_date("2021-12-31T00:00:00.000Z")
        # "2021-12-31"
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date().isoformat()

    if isinstance(value, date):
        return value.isoformat()

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except (ValueError, AttributeError):
        # Return original if parsing fails
        return value
