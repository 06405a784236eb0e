"""Segmentation engines."""

from typing import Optional

from ..dictionary import Dictionary
from .base import SegmentationEngine
from .newmm_engine import NewmmSegmenter
from .tcc_engine import TccSegmenter

ENGINES = ("newmm", "tcc")


def create_engine(
    name: str, dictionary: Optional[Dictionary] = None, max_tokens: Optional[int] = None
) -> SegmentationEngine:
    """Build a segmentation engine by name.

    Args:
        name: One of ``ENGINES``
        dictionary: Required for the newmm engine
        max_tokens: Token cap for the newmm engine

    Returns:
        Segmentation engine instance

    Raises:
        ValueError: If the engine is unknown or a dictionary is missing
    """
    if name == "newmm":
        if dictionary is None:
            raise ValueError("The newmm engine requires a dictionary")
        return NewmmSegmenter(dictionary, max_tokens=max_tokens)
    if name == "tcc":
        return TccSegmenter()
    raise ValueError(
        f"Unsupported engine '{name}'. Choose one of: {', '.join(ENGINES)}"
    )


__all__ = [
    "ENGINES",
    "SegmentationEngine",
    "NewmmSegmenter",
    "TccSegmenter",
    "create_engine",
]
