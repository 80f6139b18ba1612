"""Classify raw feed lines into records."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from exposures.classify.rules import DEFAULT_RULES, TIME_PAIR, ClassifierRule, TokenWindow
from exposures.classify.tokens import split_tokens, trim_quotes
from exposures.common.constants import MIN_FIELDS
from exposures.common.models import Record


def _claim_fields(tokens: list[str], rules: Sequence[ClassifierRule]) -> dict[str, object]:
    values: dict[str, object] = {}
    claimed: set[str] = set()
    index = 0
    while index < len(tokens):
        width = 1
        value = trim_quotes(tokens[index])
        if value:
            window = TokenWindow(tokens=tokens, index=index, value=value)
            for rule in rules:
                if rule.locks and rule.target in claimed:
                    continue
                hit = rule.matcher(window)
                if hit is None:
                    continue
                values[rule.target] = hit
                if rule.locks:
                    claimed.add(rule.target)
                width = rule.width
                break
        index += width
    return values


def classify(
    line: str,
    *,
    rules: Sequence[ClassifierRule] | None = None,
    min_fields: int = MIN_FIELDS,
    today: date | None = None,
) -> Record:
    """Turn one raw feed line into a :class:`Record`.

    Lines with fewer than ``min_fields`` tokens yield an empty record, which
    callers discard. Dates fall back to ``today`` when no date token is found.
    """

    tokens = split_tokens(line)
    if len(tokens) < min_fields:
        return Record(field_count=len(tokens))

    values = _claim_fields(tokens, rules if rules is not None else DEFAULT_RULES)
    record_date = values.get("date") or today or date.today()

    extra = {}
    if TIME_PAIR in values:
        arrival, departure = values[TIME_PAIR]
        extra = {"arrival_time": arrival, "departure_time": departure}

    return Record(
        status=values.get("status", ""),
        exposure_location=values.get("exposure_location", ""),
        street=values.get("street", ""),
        suburb=values.get("suburb", ""),
        state=values.get("state", ""),
        date=record_date,
        contact=values.get("contact", ""),
        field_count=len(tokens),
        **extra,
    )


def classify_payload(
    text: str,
    *,
    rules: Sequence[ClassifierRule] | None = None,
    min_fields: int = MIN_FIELDS,
    today: date | None = None,
) -> list[Record]:
    """Classify every line of a payload, keeping only records with a suburb."""

    records: list[Record] = []
    for line in text.split("\n"):
        record = classify(line, rules=rules, min_fields=min_fields, today=today)
        if record.is_retained:
            records.append(record)
    return records
