# Bindings
from .bindings import parse_clippings, parse_clippings_sorted

# Config
from .config import ParserConfig

# Errors
from .errors import ClippingsParseError, IncompleteInputError, MalformedInputError

# Models
from .models import (
    Book,
    BookClippings,
    Clipping,
    ClippingArticleClip,
    ClippingBookmark,
    ClippingContent,
    ClippingHighlight,
    ClippingNote,
    ClippingsDocument,
    ClippingsList,
    Location,
    LocationKind,
    sort_clippings_list,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsing
from .parsing import ClippingsParser, parse

# Serialization
from .serialization import dump_document, dump_groups, load_groups

__all__ = [
    # Models
    "Book",
    "BookClippings",
    "Clipping",
    "ClippingArticleClip",
    "ClippingBookmark",
    "ClippingContent",
    "ClippingHighlight",
    "ClippingNote",
    "ClippingsDocument",
    "ClippingsList",
    "Location",
    "LocationKind",
    "sort_clippings_list",
    # Parsing
    "ClippingsParser",
    "parse",
    # Errors
    "ClippingsParseError",
    "IncompleteInputError",
    "MalformedInputError",
    # Config
    "ParserConfig",
    # Serialization
    "dump_document",
    "dump_groups",
    "load_groups",
    # Bindings
    "parse_clippings",
    "parse_clippings_sorted",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
]
