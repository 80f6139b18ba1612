"""Serialise query results as raw feed lines or a headed CSV."""

from __future__ import annotations

import csv
from typing import Iterable, Sequence, TextIO, TypeVar

from exposures.common.models import Record
from exposures.common.time_utils import format_day_month_year, format_kitchen_time

T = TypeVar("T")

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

RESULT_HEADERS = [
    "Status",
    "Location",
    "Street",
    "Suburb",
    "State",
    "Date/Time",
    "Contact",
]


def _feed_date(record: Record) -> str:
    if record.date is None:
        return ""
    return f"{record.date.day:02d}/{record.date.month}/{record.date.year} - {WEEKDAYS[record.date.weekday()]}"


def format_raw_line(record: Record) -> str:
    values = [
        record.status,
        record.exposure_location,
        record.street,
        record.suburb,
        record.state,
        _feed_date(record),
        format_kitchen_time(record.arrival_time),
        format_kitchen_time(record.departure_time),
        record.contact,
    ]
    return ",".join(f'"{value}"' for value in values)


def _serialize_row(record: Record) -> list[str]:
    day = format_day_month_year(record.date) if record.date is not None else ""
    window = f"{format_kitchen_time(record.arrival_time)} - {format_kitchen_time(record.departure_time)}"
    return [
        record.status,
        record.exposure_location,
        record.street,
        record.suburb,
        record.state,
        f"{day} {window}".strip(),
        record.contact,
    ]


def limit_results(items: Sequence[T], limit: int) -> list[T]:
    if limit <= 0:
        return list(items)
    return list(items[:limit])


def write_results_csv(stream: TextIO, records: Iterable[Record]) -> int:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(RESULT_HEADERS)
    written = 0
    for record in records:
        writer.writerow(_serialize_row(record))
        written += 1
    return written


def summary_line(shown: int, total: int) -> str:
    if shown >= total:
        return f"total items found: {total}"
    return f"displaying {shown} of {total} total items found"
