"""Data models shared by the classifier, query engine and exporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Iterator

from exposures.common.constants import CONTACTS, STATES, STATUSES, SUBURB_LITERALS
from exposures.common.time_utils import format_day_month_year, format_kitchen_time


class FieldKind(Enum):
    TEXT = "text"
    ENUMERATED = "enumerated"
    DATE = "date"
    TIME = "time"
    NUMERIC = "numeric"


# Filterable record fields, in the order they are evaluated.
FIELD_KINDS: dict[str, FieldKind] = {
    "status": FieldKind.ENUMERATED,
    "exposure_location": FieldKind.TEXT,
    "street": FieldKind.TEXT,
    "suburb": FieldKind.TEXT,
    "state": FieldKind.ENUMERATED,
    "date": FieldKind.DATE,
    "arrival_time": FieldKind.TIME,
    "departure_time": FieldKind.TIME,
    "contact": FieldKind.ENUMERATED,
    "field_count": FieldKind.NUMERIC,
}


@dataclass(frozen=True)
class Vocabulary:
    """Closed token sets recognised by the classifier."""

    statuses: tuple[str, ...] = STATUSES
    contacts: tuple[str, ...] = CONTACTS
    states: tuple[str, ...] = STATES
    suburb_literals: tuple[str, ...] = SUBURB_LITERALS


@dataclass(frozen=True)
class Record:
    """One classified feed line.

    Enumerated fields hold either a recognised token or ``""``. The arrival and
    departure times default to midnight and are only ever set together.
    """

    status: str = ""
    exposure_location: str = ""
    street: str = ""
    suburb: str = ""
    state: str = ""
    date: date | None = None
    arrival_time: time = time()
    departure_time: time = time()
    contact: str = ""
    field_count: int = 0

    @property
    def is_retained(self) -> bool:
        return bool(self.suburb)

    def render(self) -> str:
        """Free-text form searched by positive and negative queries."""

        parts = [
            self.status,
            self.exposure_location,
            self.street,
            self.suburb,
            self.state,
            format_day_month_year(self.date) if self.date is not None else "",
            format_kitchen_time(self.arrival_time),
            format_kitchen_time(self.departure_time),
            self.contact,
        ]
        return " ".join(parts)


@dataclass(frozen=True)
class Filter:
    """Record-shaped query template.

    ``""`` and ``None`` mean the field is unset and imposes no constraint.
    Time fields are matched as text against the Kitchen rendering (``2:15PM``).
    """

    status: str = ""
    exposure_location: str = ""
    street: str = ""
    suburb: str = ""
    state: str = ""
    date: date | None = None
    arrival_time: str = ""
    departure_time: str = ""
    contact: str = ""
    field_count: int | None = None
    positive: tuple[str, ...] = field(default_factory=tuple)
    negative: tuple[str, ...] = field(default_factory=tuple)

    def set_fields(self) -> Iterator[tuple[str, object]]:
        for name in FIELD_KINDS:
            value = getattr(self, name)
            if value is None or value == "":
                continue
            yield name, value

    def is_empty(self) -> bool:
        if self.positive or self.negative:
            return False
        return next(self.set_fields(), None) is None
