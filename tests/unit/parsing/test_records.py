import pytest
from samples import (
    FLOW_TEXT,
    PAGE_HIGHLIGHT,
    SINGLE_ARTICLE_CLIP,
    SINGLE_BOOKMARK,
    SINGLE_HIGHLIGHT,
    SINGLE_HIGHLIGHT_UNIX,
    SINGLE_NOTE,
)

from clippings_kit.errors import IncompleteInputError, MalformedInputError
from clippings_kit.models import (
    Book,
    ClippingArticleClip,
    ClippingBookmark,
    ClippingHighlight,
    ClippingNote,
    Location,
    LocationKind,
)
from clippings_kit.parsing.records import parse_clipping

FLOW = Book(title="Flow", author="Mihaly Csikszentmihalyi")


class TestParseClipping:
    def test_parse_single_clipping(self) -> None:
        clipping, pos = parse_clipping(SINGLE_HIGHLIGHT, 0)

        assert pos == len(SINGLE_HIGHLIGHT)
        assert clipping.book == FLOW
        assert clipping.content == ClippingHighlight(
            location=Location(kind=LocationKind.LOCATION, from_=1213, to=1214),
            text=FLOW_TEXT,
        )

    def test_parse_single_clipping_unix(self) -> None:
        """Unix newlines, with a stray CRLF before the closer."""
        clipping, pos = parse_clipping(SINGLE_HIGHLIGHT_UNIX, 0)

        assert pos == len(SINGLE_HIGHLIGHT_UNIX)
        assert clipping.content == ClippingHighlight(
            location=Location(kind=LocationKind.LOCATION, from_=1213, to=1214),
            text=FLOW_TEXT,
        )

    def test_parse_single_note(self) -> None:
        clipping, _ = parse_clipping(SINGLE_NOTE, 0)

        assert clipping.book == FLOW
        assert clipping.content == ClippingNote(
            location=Location(kind=LocationKind.LOCATION, from_=1213, to=None),
            text="Yada yada ya.",
        )

    def test_parse_single_bookmark(self) -> None:
        clipping, pos = parse_clipping(SINGLE_BOOKMARK, 0)

        assert pos == len(SINGLE_BOOKMARK)
        assert clipping.book == Book(
            title="Sapiens: A Brief History of Humankind",
            author="Harari, Yuval Noah",
        )
        assert clipping.content == ClippingBookmark(
            location=Location(kind=LocationKind.LOCATION, from_=3883, to=None)
        )
        assert not hasattr(clipping.content, "text")

    def test_parse_single_article_clip(self) -> None:
        clipping, _ = parse_clipping(SINGLE_ARTICLE_CLIP, 0)

        assert clipping.book == Book(title="crofflr 2015-08-07", author="crofflr.com")
        assert clipping.content == ClippingArticleClip(
            location=Location(kind=LocationKind.LOCATION, from_=228, to=None),
            text="Yada yada ya",
        )

    def test_page_addressed_multiline_highlight(self) -> None:
        clipping, _ = parse_clipping(PAGE_HIGHLIGHT, 0)

        assert clipping.content == ClippingHighlight(
            location=Location(kind=LocationKind.PAGE, from_=42, to=None),
            text=(
                "’Nothing in life is as important as you think it is.’\n"
                "Second line of the same highlight."
            ),
        )

    def test_starts_at_given_position(self) -> None:
        text = SINGLE_NOTE + SINGLE_BOOKMARK

        clipping, pos = parse_clipping(text, len(SINGLE_NOTE))

        assert isinstance(clipping.content, ClippingBookmark)
        assert pos == len(text)


class TestParseClippingErrors:
    def test_unknown_record_kind(self) -> None:
        text = SINGLE_NOTE.replace("- Your Note", "- Your Quote")

        with pytest.raises(MalformedInputError, match="expected highlight") as exc_info:
            parse_clipping(text, 0)

        assert exc_info.value.offset == len("Flow (Mihaly Csikszentmihalyi)\r\n")

    def test_unknown_location_keyword_reports_location_error(self) -> None:
        """Once a tag matched, its own failure is reported."""
        text = SINGLE_NOTE.replace("at location", "at position")

        with pytest.raises(MalformedInputError, match="'at location' or 'on page'"):
            parse_clipping(text, 0)

    def test_missing_space_after_location(self) -> None:
        text = SINGLE_NOTE.replace("1213 | Added", "1213| Added")

        with pytest.raises(MalformedInputError, match="expected whitespace"):
            parse_clipping(text, 0)

    def test_unclosed_body_is_incomplete(self) -> None:
        text = SINGLE_NOTE[: -len("==========\r\n")]

        with pytest.raises(IncompleteInputError):
            parse_clipping(text, 0)
