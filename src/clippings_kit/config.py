# src/clippings_kit/config.py

from dataclasses import dataclass

DEFAULT_SNIPPET_LENGTH = 40


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the clippings parser.

    Immutable. Explicit. No magic defaults from environment.
    """

    strip_bom: bool = True  # Kindle exports usually start with U+FEFF
    # characters of input quoted in parse errors
    snippet_length: int = DEFAULT_SNIPPET_LENGTH

    def __post_init__(self) -> None:
        if self.snippet_length <= 0:
            raise ValueError("snippet_length must be > 0")
