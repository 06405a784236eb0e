"""Data models for segmentation results."""

from dataclasses import dataclass


@dataclass
class Token:
    """A token and its byte span in the UTF-8 encoded source text."""

    text: str
    start: int
    end: int

    @property
    def byte_length(self) -> int:
        return self.end - self.start


@dataclass
class DocumentMetadata:
    """Where a segmented line came from."""

    source_id: str
    line_number: int


@dataclass
class SegmentationResult:
    """Result of segmenting one line of input."""

    tokens: list[Token]
    metadata: DocumentMetadata

    @property
    def token_texts(self) -> list[str]:
        return [token.text for token in self.tokens]
