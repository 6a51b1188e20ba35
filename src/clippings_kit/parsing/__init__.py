# src/clippings_kit/parsing/__init__.py

"""Clippings grammar and parser.

Example:
    >>> from clippings_kit.parsing import parse
    >>>
    >>> document = parse(text)
    >>> for group in document.to_list():
    ...     print(group.book.title, len(group.clippings))
"""

from .clippings_parser import ClippingsParser, parse
from .header import parse_header, split_header
from .location import parse_location
from .primitives import parse_until
from .records import parse_clipping

__all__ = [
    # Entry points
    "parse",
    "ClippingsParser",
    # Grammar
    "parse_clipping",
    "parse_header",
    "split_header",
    "parse_location",
    "parse_until",
]
