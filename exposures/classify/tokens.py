"""Token helpers for the comma separated exposure feed.

The feed is not compliant CSV: quoted values may contain commas, but lines are
split on every raw comma before quotes are considered. A quoted value holding a
comma is therefore never reassembled.
"""

from __future__ import annotations

from exposures.common.constants import MIN_FIELDS

_GARBAGE_CHARS = "\r!"


def split_tokens(line: str) -> list[str]:
    return line.rstrip("\r").split(",")


def trim_quotes(token: str) -> str:
    """Return the text between the first pair of double quotes.

    ``"Holt"`` becomes ``Holt``, ``"Shop 5`` becomes ``Shop 5`` and a closing
    fragment such as `` Benjamin Way"`` becomes an empty string. Tokens without
    quotes are returned unchanged.
    """

    if '"' in token:
        return token.split('"')[1].strip(" ")
    return token


def clean_payload(text: str, *, min_fields: int = MIN_FIELDS) -> str:
    """Drop short lines and strip stray characters from the ends of the rest.

    Only lines with at least ``min_fields`` raw tokens survive. Commas are left
    in place since leading and trailing empty fields still count as tokens. If
    nothing survives the payload is returned untouched.
    """

    cleaned: list[str] = []
    for line in text.split("\n"):
        if len(line.split(",")) >= min_fields:
            cleaned.append(line.strip(_GARBAGE_CHARS))

    if not cleaned:
        return text
    return "".join(f"{line}\n" for line in cleaned)
