import pytest
from samples import (
    BOOK_1_HIGHLIGHT_1,
    BOOK_1_HIGHLIGHT_2,
    BOOK_2_HIGHLIGHT_1,
    SINGLE_ARTICLE_CLIP,
    SINGLE_BOOKMARK,
    SINGLE_NOTE,
)


@pytest.fixture
def mixed_export() -> str:
    """Three books: two article clips, a bookmark and a note."""
    return "".join(
        [SINGLE_ARTICLE_CLIP, SINGLE_ARTICLE_CLIP, SINGLE_BOOKMARK, SINGLE_NOTE]
    )


@pytest.fixture
def two_book_export() -> str:
    """Book 1 entries interleaved with a Book 2 entry."""
    return "".join([BOOK_1_HIGHLIGHT_1, BOOK_2_HIGHLIGHT_1, BOOK_1_HIGHLIGHT_2])
