"""Base class for segmentation engines."""

from abc import ABC, abstractmethod

from ..models import Token

# Undecodable bytes survive a str round trip as lone surrogates
ENCODING_ERRORS = "surrogateescape"


def encode_text(text: str | bytes) -> bytes:
    if isinstance(text, bytes):
        return text
    return text.encode("utf-8", ENCODING_ERRORS)


def decode_span(data: bytes, start: int, end: int) -> str:
    return data[start:end].decode("utf-8", ENCODING_ERRORS)


class SegmentationEngine(ABC):
    """Base class for segmentation engines.

    Engines work on UTF-8 bytes and report ``[start, end)`` byte spans that
    cover the input contiguously, with no empty span.
    """

    name = "base"

    @abstractmethod
    def segment_spans(self, data: bytes) -> list[tuple[int, int]]:
        """Segment UTF-8 bytes into token spans.

        Args:
            data: UTF-8 encoded input text

        Returns:
            List of (start, end) byte offsets
        """
        pass

    def segment_with_indices(self, text: str | bytes) -> list[tuple[str, int, int]]:
        """Segment text and return tokens with their byte offsets.

        Args:
            text: Input text to segment

        Returns:
            List of (token_text, start_index, end_index) tuples
        """
        data = encode_text(text)
        return [
            (decode_span(data, start, end), start, end)
            for start, end in self.segment_spans(data)
        ]

    def segment_tokens(self, text: str | bytes) -> list[Token]:
        return [Token(*item) for item in self.segment_with_indices(text)]

    def segment(self, text: str | bytes) -> list[str]:
        """Segment text into a list of token strings."""
        return [token for token, _, _ in self.segment_with_indices(text)]
