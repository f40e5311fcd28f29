"""Date parsing utilities for job postings."""

import logging
import re
from datetime import date, datetime
from typing import Optional, Union

import dateutil.parser

from job_planner.exceptions import DateParseError

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]

# Full calendar date at the start of an ISO 8601 value (extended or basic form)
_ISO_FULL_DATE = re.compile(r"^\d{4}-?\d{2}-?\d{2}(?:$|[T\s])")

# Two defaults differing in year, month and day: a component the text does
# not supply comes out different in the two parses.
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_posted_date(date_string: Optional[str]) -> Optional[date]:
    """
    Parse a job posting timestamp to a calendar date.

    Handles:
    - ISO 8601 timestamps (e.g., "2024-01-15T10:30:00Z")
    - Plain dates (e.g., "2024-01-15")
    - Human-readable dates (e.g., "January 15, 2024")

    Partial dates missing the year, month or day ("March", "18") are
    rejected rather than completed from the current date.

    The time of day is discarded without timezone conversion, so the date
    is the one written in the posting.

    Args:
        date_string: Date string from a catalog record

    Returns:
        Parsed date, or None if parsing fails
    """
    if not date_string or not isinstance(date_string, str):
        return None

    value = date_string.strip()
    if _ISO_FULL_DATE.match(value):
        try:
            return dateutil.parser.isoparse(value).date()
        except (ValueError, OverflowError):
            pass

    try:
        first, second = (
            dateutil.parser.parse(value, default=default).date() for default in _FILL_DEFAULTS
        )
    except (ValueError, OverflowError, TypeError) as e:
        logger.debug(f"Failed to parse date '{date_string}': {str(e)}")
        return None

    # Partial dates ("March", "18") would otherwise be completed from the defaults
    if first != second:
        logger.debug(f"Incomplete date '{date_string}': year, month and day are required")
        return None
    return first


def coerce_date(value: DateLike) -> date:
    """
    Convert a filter bound to a calendar date.

    Args:
        value: A date, a datetime, or a date string

    Returns:
        The calendar date

    Raises:
        DateParseError: If the value is a string that cannot be parsed, or
            is not a date at all
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = parse_posted_date(value)
        if parsed is None:
            raise DateParseError(f"Cannot parse date bound: {value!r}")
        return parsed
    raise DateParseError(f"Unsupported date bound type: {type(value).__name__}")
