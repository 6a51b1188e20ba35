# src/clippings_kit/parsing/clippings_parser.py

import logging
import re
from time import monotonic

from clippings_kit.config import ParserConfig
from clippings_kit.errors import ClippingsParseError
from clippings_kit.models import ClippingsDocument
from clippings_kit.observability import names
from clippings_kit.observability.base import MetricsHook, NoOpMetricsHook

from .records import parse_clipping

logger = logging.getLogger(__name__)

BOM = "\ufeff"

_TRAILING_WHITESPACE = re.compile(r"[ \t\r\n]*\Z")


class ClippingsParser:
    """Parser for e-reader clippings exports.

    - Pure: same text in, same document (or same error) out
    - One record at a time, folded into a ClippingsDocument
    - Stops at the first bad record; the error carries what was parsed
      before it as ``partial``
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> ClippingsDocument:
        start = monotonic()
        if self.config.strip_bom and text.startswith(BOM):
            text = text[len(BOM) :]

        document = ClippingsDocument()
        records = 0
        pos = 0

        try:
            while not _TRAILING_WHITESPACE.match(text, pos):
                clipping, pos = parse_clipping(text, pos)
                document.add(clipping)
                records += 1
        except ClippingsParseError as e:
            e.locate(text, self.config.snippet_length)
            e.partial = document
            self.metrics_hook.increment(
                names.PARSE_ERRORS_TOTAL, labels={"kind": type(e).__name__}
            )
            logger.error(
                "Clippings parse failed after %d records: %s", records, e
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_RECORDS_TOTAL, records)
        self.metrics_hook.record_gauge(names.PARSE_BOOKS, len(document))

        logger.info(
            "Parsed %d clippings from %d books in %.0fms",
            records,
            len(document),
            elapsed_ms,
        )
        return document


def parse(
    text: str,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ClippingsDocument:
    """Parse a whole clippings export.

    Args:
        text: Full contents of the export, already decoded.
        config: Optional parser configuration.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Clippings grouped by book. Empty for blank input.

    Raises:
        MalformedInputError: A record did not match any record kind.
        IncompleteInputError: A record body was never closed.

    Example:
        >>> document = parse(open("My Clippings.txt", encoding="utf-8").read())
        >>> groups = document.to_list()
    """
    return ClippingsParser(config, metrics_hook).parse(text)
