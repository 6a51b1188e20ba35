# src/clippings_kit/models.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class LocationKind(str, Enum):
    """How a clipping is addressed inside its book."""

    PAGE = "Page"
    LOCATION = "Location"


@dataclass(frozen=True)
class Book:
    """Source book of a clipping.

    Two records with identical title/author strings are the same book.
    """

    title: str
    author: str | None = None


@dataclass(frozen=True)
class Location:
    """Page or reading position, optionally a range.

    ``to`` is None when the source named a single point, never ``from_``.
    """

    kind: LocationKind
    from_: int
    to: int | None = None


@dataclass(frozen=True)
class ClippingHighlight:
    location: Location
    text: str


@dataclass(frozen=True)
class ClippingNote:
    location: Location
    text: str


@dataclass(frozen=True)
class ClippingBookmark:
    location: Location


@dataclass(frozen=True)
class ClippingArticleClip:
    location: Location
    text: str


ClippingContent = Union[
    ClippingHighlight, ClippingNote, ClippingBookmark, ClippingArticleClip
]


@dataclass(frozen=True)
class Clipping:
    """One parsed record. Only lives until it is folded into a document."""

    book: Book
    content: ClippingContent


@dataclass(frozen=True)
class BookClippings:
    book: Book
    clippings: list[ClippingContent]


ClippingsList = list[BookClippings]


@dataclass
class ClippingsDocument:
    """Clippings grouped by book.

    Books keep the order in which they were first seen, entries keep the
    order in which they were parsed.
    """

    entries: dict[Book, list[ClippingContent]] = field(default_factory=dict)

    def add(self, clipping: Clipping) -> None:
        items = self.entries.get(clipping.book)
        if items is None:
            self.entries[clipping.book] = [clipping.content]
        else:
            items.append(clipping.content)

    def to_list(self) -> ClippingsList:
        return [
            BookClippings(book=book, clippings=list(clippings))
            for book, clippings in self.entries.items()
        ]

    def __len__(self) -> int:
        return len(self.entries)


def _sort_key(item: BookClippings) -> tuple[bool, str, str]:
    # books without an author come first
    author = item.book.author
    return (author is not None, author or "", item.book.title)


def sort_clippings_list(clippings: ClippingsList) -> None:
    """Sort groups in place by (author, title)."""
    clippings.sort(key=_sort_key)
