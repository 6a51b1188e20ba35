# src/clippings_kit/errors.py

"""Parse failures.

Two kinds only:
- IncompleteInputError: a terminator scan ran out of input. Ambiguous
  between "more input needed" and "malformed".
- MalformedInputError: a literal, newline, keyword or number did not match
  where it was required.

Both carry the code-point offset of the failure. The top-level parser fills
in line/column and the partial document built before the failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DEFAULT_SNIPPET_LENGTH

if TYPE_CHECKING:
    from .models import ClippingsDocument


class ClippingsParseError(Exception):
    def __init__(self, expected: str, text: str, offset: int) -> None:
        self.expected = expected
        self.offset = offset
        self._text = text
        self._snippet_length = DEFAULT_SNIPPET_LENGTH
        self.line: int | None = None
        self.column: int | None = None
        self.partial: ClippingsDocument | None = None
        super().__init__(expected)

    def locate(self, text: str, snippet_length: int) -> None:
        """Fill line/column for ``offset`` within ``text``."""
        self.line = text.count("\n", 0, self.offset) + 1
        self.column = self.offset - (text.rfind("\n", 0, self.offset) + 1) + 1
        self._text = text
        self._snippet_length = snippet_length

    @property
    def remaining(self) -> str:
        """Input quoted at the failure offset."""
        return self._text[self.offset : self.offset + self._snippet_length]

    def __str__(self) -> str:
        where = f"offset {self.offset}"
        if self.line is not None:
            where = f"line {self.line}, column {self.column} ({where})"
        return f"{self.expected} at {where}: {self.remaining!r}"


class IncompleteInputError(ClippingsParseError):
    pass


class MalformedInputError(ClippingsParseError):
    pass
