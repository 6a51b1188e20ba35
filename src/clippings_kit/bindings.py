# src/clippings_kit/bindings.py

"""String-in, string-out entry points for embedding hosts.

Both return the JSON wire format from ``serialization``. Parse failures
propagate as ClippingsParseError.
"""

from .parsing import parse
from .serialization import dump_document


def parse_clippings(text: str) -> str:
    """Parse and serialize, books in first-seen order."""
    return dump_document(parse(text))


def parse_clippings_sorted(text: str) -> str:
    """Parse and serialize, books sorted by (author, title)."""
    return dump_document(parse(text), sort=True)
