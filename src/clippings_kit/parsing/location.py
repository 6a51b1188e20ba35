# src/clippings_kit/parsing/location.py

import re

from clippings_kit.errors import MalformedInputError
from clippings_kit.models import Location, LocationKind

from .primitives import tag

# Single source for both the keyword alternation and the kind it maps to.
KEYWORDS: dict[str, LocationKind] = {
    "at location": LocationKind.LOCATION,
    "on page": LocationKind.PAGE,
}

_KEYWORD = re.compile(
    "|".join(re.escape(keyword) for keyword in KEYWORDS),
    re.IGNORECASE | re.ASCII,
)
_NUMBER = re.compile(r"[0-9]+")


def _parse_number(text: str, pos: int) -> tuple[int, int]:
    match = _NUMBER.match(text, pos)
    if match is None:
        raise MalformedInputError("expected number", text, pos)
    return int(match.group()), match.end()


def parse_location(text: str, pos: int) -> tuple[Location, int]:
    """Parse ``at location 12-14`` / ``on page 7`` style addressing.

    The keyword is case-insensitive. A trailing ``-N`` sets ``to``; a ``-``
    without digits after it is left unconsumed.
    """
    match = _KEYWORD.match(text, pos)
    if match is None:
        raise MalformedInputError(
            "expected 'at location' or 'on page'", text, pos
        )
    kind = KEYWORDS[match.group().lower()]

    _, pos = tag(" ")(text, match.end())
    start, pos = _parse_number(text, pos)

    end = None
    if text.startswith("-", pos) and _NUMBER.match(text, pos + 1):
        end, pos = _parse_number(text, pos + 1)

    return Location(kind=kind, from_=start, to=end), pos
