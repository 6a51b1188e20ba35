from pathlib import Path

import pytest
from samples import (
    BOOK_1_HIGHLIGHT_1,
    PAGE_HIGHLIGHT,
    SINGLE_ARTICLE_CLIP,
    SINGLE_BOOKMARK,
    SINGLE_HIGHLIGHT,
    SINGLE_NOTE,
)


@pytest.fixture
def clippings_file(tmp_path: Path) -> Path:
    """A realistic export: BOM, both newline styles, all record kinds."""
    path = tmp_path / "My Clippings.txt"
    text = "\ufeff" + "".join(
        [
            SINGLE_HIGHLIGHT,
            SINGLE_ARTICLE_CLIP,
            PAGE_HIGHLIGHT,
            SINGLE_BOOKMARK,
            SINGLE_NOTE,
            BOOK_1_HIGHLIGHT_1,
        ]
    )
    path.write_bytes(text.encode("utf-8"))
    return path


@pytest.fixture
def broken_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.txt"
    text = SINGLE_NOTE + "Flow\r\n- Your Quote at location 1\r\n"
    path.write_bytes(text.encode("utf-8"))
    return path
