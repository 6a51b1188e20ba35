# src/clippings_kit/parsing/records.py

"""Record grammars.

A record is::

    <title> (<author>)
    - Your Highlight at location 12-14 | Added on ...

    <body>
    ==========

The four kinds differ only in the leading tag and in whether a body
follows the metadata line. Bookmarks have no body.
"""

import logging

from clippings_kit.errors import MalformedInputError
from clippings_kit.models import (
    Clipping,
    ClippingArticleClip,
    ClippingBookmark,
    ClippingContent,
    ClippingHighlight,
    ClippingNote,
    Location,
)

from .header import parse_header
from .location import parse_location
from .primitives import (
    parse_body,
    parse_spaces,
    parse_until_multi_newline,
    parse_until_newline,
    tag,
)

logger = logging.getLogger(__name__)

HIGHLIGHT_TAG = "- Your Highlight "
NOTE_TAG = "- Your Note "
BOOKMARK_TAG = "- Your Bookmark "
ARTICLE_CLIP_TAG = "- Clip This Article "


def _parse_metadata(text: str, pos: int, leading: str) -> tuple[Location, int]:
    # tag, location, then at least one space before the discarded timestamp
    _, pos = tag(leading)(text, pos)
    location, pos = parse_location(text, pos)
    _, pos = parse_spaces(text, pos)
    return location, pos


def parse_clipping_highlight(text: str, pos: int) -> tuple[ClippingHighlight, int]:
    location, pos = _parse_metadata(text, pos, HIGHLIGHT_TAG)
    _, pos = parse_until_multi_newline(text, pos)
    body, pos = parse_body(text, pos)
    return ClippingHighlight(location=location, text=body), pos


def parse_clipping_note(text: str, pos: int) -> tuple[ClippingNote, int]:
    location, pos = _parse_metadata(text, pos, NOTE_TAG)
    _, pos = parse_until_multi_newline(text, pos)
    body, pos = parse_body(text, pos)
    return ClippingNote(location=location, text=body), pos


def parse_clipping_bookmark(text: str, pos: int) -> tuple[ClippingBookmark, int]:
    location, pos = _parse_metadata(text, pos, BOOKMARK_TAG)
    _, pos = parse_until_newline(text, pos)
    # normally just the blank line before the closer
    _, pos = parse_body(text, pos)
    return ClippingBookmark(location=location), pos


def parse_clipping_article_clip(
    text: str, pos: int
) -> tuple[ClippingArticleClip, int]:
    location, pos = _parse_metadata(text, pos, ARTICLE_CLIP_TAG)
    _, pos = parse_until_multi_newline(text, pos)
    body, pos = parse_body(text, pos)
    return ClippingArticleClip(location=location, text=body), pos


CONTENT_PARSERS = (
    parse_clipping_highlight,
    parse_clipping_note,
    parse_clipping_bookmark,
    parse_clipping_article_clip,
)


def parse_content(text: str, pos: int) -> tuple[ClippingContent, int]:
    """Try each record kind in order; first match wins.

    If an alternative got past its tag before failing, that failure is
    reported since it points at the real problem. Incomplete input is never
    retried against the other kinds.
    """
    furthest: MalformedInputError | None = None
    for parser in CONTENT_PARSERS:
        try:
            return parser(text, pos)
        except MalformedInputError as e:
            if furthest is None or e.offset > furthest.offset:
                furthest = e

    if furthest is not None and furthest.offset > pos:
        raise furthest
    raise MalformedInputError(
        "expected highlight, note, bookmark or article clip", text, pos
    )


def parse_clipping(text: str, pos: int) -> tuple[Clipping, int]:
    """Parse one whole record starting at ``pos``."""
    book, pos = parse_header(text, pos)
    content, pos = parse_content(text, pos)
    logger.debug(
        "Parsed %s for %r (%s)", type(content).__name__, book.title, book.author
    )
    return Clipping(book=book, content=content), pos
