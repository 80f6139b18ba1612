"""Date and time helpers for feed values, filters and log metadata."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone

from exposures.common.errors import FilterInputError

FEED_DATE_RE = re.compile(r"\d+/\d+/\d\d+")
FILTER_DATE_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")
KITCHEN_TIME_RE = re.compile(r"^\d{1,2}:\d{2}(am|pm)$", re.IGNORECASE)


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")


def parse_feed_date(value: str) -> date | None:
    """Parse a feed date such as ``01/09/2021`` or ``1/9/2021``.

    Only the text before the first space is considered, so composite values
    like ``01/09/2021 - Wednesday`` parse to their date prefix.
    """

    prefix = value.split(" ")[0].strip()
    if not FEED_DATE_RE.search(prefix):
        return None
    try:
        return datetime.strptime(prefix, "%d/%m/%Y").date()
    except ValueError:
        return None


def parse_filter_date(value: str) -> date:
    if FILTER_DATE_RE.match(value):
        try:
            return datetime.strptime(value, "%d/%m/%Y").date()
        except ValueError:
            pass
    raise FilterInputError(f"date format is strictly DD/MM/YYYY: could not parse '{value}'")


def is_kitchen_time(value: str) -> bool:
    return bool(KITCHEN_TIME_RE.match(value))


def parse_kitchen_time(value: str) -> time | None:
    if not is_kitchen_time(value):
        return None
    try:
        return datetime.strptime(value.upper(), "%I:%M%p").time()
    except ValueError:
        return None


def format_kitchen_time(value: time) -> str:
    hour = value.hour % 12 or 12
    suffix = "PM" if value.hour >= 12 else "AM"
    return f"{hour}:{value.minute:02d}{suffix}"


def format_day_month_year(value: date) -> str:
    return f"{value.day}-{value.month}-{value.year}"
