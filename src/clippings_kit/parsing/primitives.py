# src/clippings_kit/parsing/primitives.py

"""Low-level parsers shared by the record grammars.

Every parser takes ``(text, pos)`` and returns ``(value, new_pos)``.
Positions are indices into a ``str``, so they always sit on code point
boundaries. Failure raises MalformedInputError, or IncompleteInputError
when a scan runs off the end of the input.
"""

import re
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from clippings_kit.errors import (
    ClippingsParseError,
    IncompleteInputError,
    MalformedInputError,
)

T = TypeVar("T")

Parser = Callable[[str, int], tuple[T, int]]

CLIPPING_END = "=========="

_LINE = re.compile(r"[^\r\n]*")
_NEWLINE = re.compile(r"\r?\n")
_NEWLINES = re.compile(r"(?:\r?\n)+")
_SPACES = re.compile(r"[ \t]+")


def tag(literal: str) -> Parser[str]:
    """Match ``literal`` exactly."""

    def parser(text: str, pos: int) -> tuple[str, int]:
        if text.startswith(literal, pos):
            return literal, pos + len(literal)
        raise MalformedInputError(f"expected {literal!r}", text, pos)

    return parser


def parse_spaces(text: str, pos: int) -> tuple[str, int]:
    match = _SPACES.match(text, pos)
    if match is None:
        raise MalformedInputError("expected whitespace", text, pos)
    return match.group(), match.end()


def parse_newline(text: str, pos: int) -> tuple[None, int]:
    """Match a single ``\\r\\n`` or ``\\n``."""
    match = _NEWLINE.match(text, pos)
    if match is None:
        raise MalformedInputError("expected newline", text, pos)
    return None, match.end()


def _line_end(text: str, pos: int) -> int:
    # always matches, possibly empty
    return _LINE.match(text, pos).end()  # type: ignore[union-attr]


def parse_until_newline(text: str, pos: int) -> tuple[str, int]:
    """Rest of the line, followed by exactly one newline."""
    end = _line_end(text, pos)
    _, after = parse_newline(text, end)
    return text[pos:end], after


def parse_until_multi_newline(text: str, pos: int) -> tuple[str, int]:
    """Rest of the line, followed by one or more newlines."""
    end = _line_end(text, pos)
    match = _NEWLINES.match(text, end)
    if match is None:
        raise MalformedInputError("expected newline", text, end)
    return text[pos:end], match.end()


def parse_clipping_end(text: str, pos: int) -> tuple[None, int]:
    """Record closer: newline, ten ``=``, newline."""
    _, pos = parse_newline(text, pos)
    _, pos = tag(CLIPPING_END)(text, pos)
    return parse_newline(text, pos)


def parse_until(
    terminator: Parser[Any], candidates: re.Pattern[str] | None = None
) -> Parser[str]:
    """Scan forward until ``terminator`` matches.

    Returns the text before the match and the position after the
    terminator. Raises IncompleteInputError if the input runs out first.

    ``candidates`` matches wherever the terminator could start. When given,
    only those positions are tried instead of every position.
    """

    def positions(text: str, pos: int) -> Iterator[int]:
        if candidates is None:
            return iter(range(pos, len(text)))
        return (match.start() for match in candidates.finditer(text, pos))

    def parser(text: str, pos: int) -> tuple[str, int]:
        for i in positions(text, pos):
            try:
                _, end = terminator(text, i)
            except ClippingsParseError:
                continue
            return text[pos:i], end

        raise IncompleteInputError("input ended before terminator", text, pos)

    return parser


# the closer always starts with a newline
parse_body = parse_until(parse_clipping_end, candidates=_NEWLINE)
