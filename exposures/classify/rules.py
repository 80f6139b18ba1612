"""Ordered content-shape rules used to classify feed tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List

from exposures.classify.tokens import trim_quotes
from exposures.common.models import Vocabulary
from exposures.common.time_utils import parse_feed_date, parse_kitchen_time

SUBURB_RE = re.compile(r"^[A-Z][a-z]+$")
LOCATION_RE = re.compile(r"^[A-Z0-9].*[a-z]")
STREET_RE = re.compile(r"^([0-9/-]+ [A-Z][a-z].*|[A-Z][a-z].*)$")

TIME_PAIR = "time_pair"


@dataclass(frozen=True)
class TokenWindow:
    """A token plus read access to its raw neighbour on the right."""

    tokens: List[str]
    index: int
    value: str

    def follower(self) -> str | None:
        nxt = self.index + 1
        if nxt >= len(self.tokens):
            return None
        return trim_quotes(self.tokens[nxt])


@dataclass(frozen=True)
class ClassifierRule:
    """One classification rule.

    ``matcher`` returns the value to store in ``target`` or ``None`` for a miss.
    A locking rule only fires while its target is unclaimed; a non-locking rule
    overwrites earlier hits. ``width`` is the number of raw tokens consumed on a
    hit.
    """

    name: str
    target: str
    matcher: Callable[[TokenWindow], object | None]
    locks: bool = True
    width: int = 1


def _match_date(window: TokenWindow):
    return parse_feed_date(window.value)


def _match_exact(vocabulary: tuple[str, ...]) -> Callable[[TokenWindow], str | None]:
    allowed = frozenset(vocabulary)

    def _matcher(window: TokenWindow) -> str | None:
        if window.value in allowed:
            return window.value
        return None

    return _matcher


def _match_suburb(literals: tuple[str, ...]) -> Callable[[TokenWindow], str | None]:
    allowed = frozenset(literals)

    def _matcher(window: TokenWindow) -> str | None:
        if SUBURB_RE.match(window.value) or window.value in allowed:
            return window.value
        return None

    return _matcher


def _match_time_pair(window: TokenWindow):
    arrival = parse_kitchen_time(window.value)
    if arrival is None:
        return None
    follower = window.follower()
    if follower is None:
        return None
    departure = parse_kitchen_time(follower)
    if departure is None:
        return None
    return arrival, departure


def _match_pattern(pattern: re.Pattern) -> Callable[[TokenWindow], str | None]:
    def _matcher(window: TokenWindow) -> str | None:
        if pattern.match(window.value):
            return window.value
        return None

    return _matcher


def build_rules(vocabulary: Vocabulary | None = None) -> List[ClassifierRule]:
    """Compile the ordered rule cascade for a vocabulary.

    Order matters: the location rule is broader than the street rule, so a
    street-shaped token only lands in ``street`` once a location is claimed.
    """

    vocab = vocabulary or Vocabulary()
    return [
        ClassifierRule("date", "date", _match_date, locks=False),
        ClassifierRule("status", "status", _match_exact(vocab.statuses)),
        ClassifierRule("contact", "contact", _match_exact(vocab.contacts)),
        ClassifierRule("state", "state", _match_exact(vocab.states)),
        ClassifierRule("suburb", "suburb", _match_suburb(vocab.suburb_literals)),
        ClassifierRule("time_pair", TIME_PAIR, _match_time_pair, locks=False, width=2),
        ClassifierRule("location", "exposure_location", _match_pattern(LOCATION_RE)),
        ClassifierRule("street", "street", _match_pattern(STREET_RE)),
    ]


DEFAULT_RULES = build_rules()
