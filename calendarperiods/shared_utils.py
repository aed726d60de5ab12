"""
Shared Utility Functions
------------------------

Input checks and date coercion used across the period and humanize modules.

Functions:
  - ensure_date: Validate a date argument (None -> today)
  - ensure_int: Validate an integer argument (bool rejected)
  - parse_date: Parse an ISO 8601 date string via dateutil
  - coerce_date: Accept date, datetime or ISO string
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

try:
    from dateutil import parser as dateutil_parser
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

logger = logging.getLogger(__name__)


def ensure_date(value: Optional[date], *, name: str = "date") -> date:
    """
    Validate a date argument.

    None becomes today; datetimes are reduced to their calendar date.

    Raises:
        TypeError: if value is neither None nor a date
    """
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(f"{name} must be a datetime.date, got {type(value).__name__}")
    return value


def ensure_int(value, *, name: str) -> int:
    """Validate an integer argument. bool is not accepted as an integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def parse_date(text: str) -> date:
    """
    Parse an ISO 8601 date string.

    Examples:
        >>> parse_date("1977-10-18")
        datetime.date(1977, 10, 18)

        >>> parse_date("2024-03-14T09:30:00")
        datetime.date(2024, 3, 14)
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text).__name__}")
    try:
        parsed = dateutil_parser.isoparse(text.strip())
    except ValueError as e:
        raise ValueError(f"Could not parse date from {text!r}: {e}") from e
    logger.debug(f"Parsed {text!r} as {parsed.date().isoformat()}")
    return parsed.date()


def coerce_date(value: Union[date, datetime, str, None]) -> date:
    """Accept a date, a datetime or an ISO string (None -> today)."""
    if isinstance(value, str):
        return parse_date(value)
    return ensure_date(value)


__all__ = [
    "ensure_date",
    "ensure_int",
    "parse_date",
    "coerce_date",
]
