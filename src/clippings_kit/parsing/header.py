# src/clippings_kit/parsing/header.py

from clippings_kit.models import Book

from .primitives import parse_until_multi_newline


def split_header(line: str) -> Book:
    """Split ``Title (Author)`` on the last ``" ("``.

    Parenthesised asides earlier in the title stay in the title. The final
    character after the split (normally ``)``) is dropped from the author.
    A title that really ends in ``(Something)`` reads as author Something.
    """
    title, sep, author = line.rpartition(" (")
    if not sep:
        return Book(title=line)
    return Book(title=title, author=author[:-1])


def parse_header(text: str, pos: int) -> tuple[Book, int]:
    """First record line plus the newlines after it."""
    line, pos = parse_until_multi_newline(text, pos)
    return split_header(line), pos
