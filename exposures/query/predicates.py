"""Field predicates for the query engine."""

from __future__ import annotations

import re
from datetime import date, time
from typing import Callable, Dict

from exposures.common.models import FieldKind
from exposures.common.time_utils import format_day_month_year, format_kitchen_time

NIL = "nil"


def _regex_search(pattern: str, text: str) -> bool:
    try:
        return re.search(pattern, text) is not None
    except re.error:
        # Filter values are free text first; an invalid pattern is only a regex miss.
        return False


def check(a: str, b: str) -> bool:
    """Case-insensitive match of filter value ``a`` against record value ``b``.

    Succeeds when ``a`` is ``nil`` and ``b`` is empty, when ``a`` is a substring
    of ``b``, or when ``a`` used as a regular expression is found in ``b``.
    """

    needle = a.lower()
    haystack = b.lower()
    if needle == NIL and haystack == "":
        return True
    if needle in haystack:
        return True
    return _regex_search(needle, haystack)


def check_not(a: str, b: str) -> bool:
    return not check(a, b)


def _check_text(wanted: object, actual: object) -> bool:
    return check(str(wanted), str(actual))


def _check_date(wanted: object, actual: object) -> bool:
    if not isinstance(wanted, date):
        return False
    actual_str = format_day_month_year(actual) if isinstance(actual, date) else ""
    return check(format_day_month_year(wanted), actual_str)


def _check_time(wanted: object, actual: object) -> bool:
    actual_str = format_kitchen_time(actual) if isinstance(actual, time) else ""
    return check(str(wanted), actual_str)


def _check_numeric(wanted: object, actual: object) -> bool:
    return wanted == actual


PREDICATES: Dict[FieldKind, Callable[[object, object], bool]] = {
    FieldKind.TEXT: _check_text,
    FieldKind.ENUMERATED: _check_text,
    FieldKind.DATE: _check_date,
    FieldKind.TIME: _check_time,
    FieldKind.NUMERIC: _check_numeric,
}


def check_field(kind: FieldKind, wanted: object, actual: object) -> bool:
    return PREDICATES[kind](wanted, actual)
