"""Filter classified records against a query template."""

from __future__ import annotations

from typing import Callable, Iterable, List

from exposures.common.models import FIELD_KINDS, Filter, Record
from exposures.pipeline.export import format_raw_line
from exposures.query.predicates import check, check_field, check_not


def evaluation_trace(record: Record, query: Filter) -> List[bool]:
    """Return one boolean per constraint the filter actually sets.

    Unset fields are skipped entirely, so they never affect the outcome.
    """

    trace: List[bool] = []
    for name, wanted in query.set_fields():
        trace.append(check_field(FIELD_KINDS[name], wanted, getattr(record, name)))

    if query.positive or query.negative:
        rendered = record.render()
        for q in query.positive:
            trace.append(check(q, rendered))
        for q in query.negative:
            trace.append(check_not(q, rendered))
    return trace


def evaluate(record: Record, query: Filter) -> bool:
    return all(evaluation_trace(record, query))


def apply_filter(records: Iterable[Record], query: Filter) -> List[Record]:
    return [record for record in records if evaluate(record, query)]


class QueryEngine:
    """Holds the retained records and the result of the last applied filter.

    Applying a filter equal to the previous one is a no-op: the filtered
    collection is left as is and nothing is emitted.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: List[Record] = []
        self._filtered: List[Record] = []
        self._last_filter: Filter | None = None
        self.load(records)

    def load(self, records: Iterable[Record]) -> None:
        self._records = [record for record in records if record.is_retained]
        self._filtered = list(self._records)
        self._last_filter = None

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    @property
    def filtered(self) -> tuple[Record, ...]:
        return tuple(self._filtered)

    @property
    def last_filter(self) -> Filter | None:
        return self._last_filter

    def apply(self, query: Filter, *, sink: Callable[[str], None] | None = None) -> tuple[Record, ...]:
        """Rebuild the filtered collection for ``query``.

        With a ``sink``, matches are serialised with :func:`format_raw_line` and
        handed over one by one instead of being collected.
        """

        if query == self._last_filter:
            return self.filtered

        self._last_filter = query
        self._filtered = []
        for record in self._records:
            if not evaluate(record, query):
                continue
            if sink is None:
                self._filtered.append(record)
            else:
                sink(format_raw_line(record))
        return self.filtered
