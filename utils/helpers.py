"""Helper utility functions for coercing form and query input."""

import re
from datetime import datetime, timezone
from typing import Optional
from utils.exceptions import InvalidDateError

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_DATE_ONLY = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DISPLAY_DATE = re.compile(
    r"^(?:(?:%s)\s+)?(%s)\s+(\d{1,2})\s+(\d{4})$" % ("|".join(DAY_NAMES), "|".join(MONTH_NAMES))
)


def parse_int(value: Optional[str]) -> Optional[int]:
    """Read the leading integer of a string, like "45min" -> 45.

    Returns None when the value has no leading digits or does not fit in a
    signed 64-bit BSON integer.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    number = int(match.group(1))
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_date(value: str) -> datetime:
    """Parse a client-supplied date into an aware UTC datetime.

    Accepts YYYY-MM-DD, ISO-8601 datetimes and the display format
    ("Sun Jan 15 2023"). Naive values are taken as UTC.
    """
    text = str(value).strip()

    match = _DATE_ONLY.match(text)
    if match:
        try:
            return datetime(*(int(part) for part in match.groups()), tzinfo=timezone.utc)
        except ValueError:
            raise InvalidDateError(value)

    match = _DISPLAY_DATE.match(text)
    if match:
        month, day, year = match.groups()
        try:
            return datetime(int(year), MONTH_NAMES.index(month) + 1, int(day), tzinfo=timezone.utc)
        except ValueError:
            raise InvalidDateError(value)

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise InvalidDateError(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_date_string(value: datetime) -> str:
    """Render a datetime as 'Mon Jan 01 2024' in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return "%s %s %02d %04d" % (
        DAY_NAMES[value.weekday()],
        MONTH_NAMES[value.month - 1],
        value.day,
        value.year,
    )
