"""Cluster-only segmentation engine."""

from ..tcc import tcc_positions
from .base import SegmentationEngine


class TccSegmenter(SegmentationEngine):
    """Segmentation engine emitting one token per Thai Character Cluster.

    Needs no dictionary; useful as a baseline and for checking where the
    newmm engine is allowed to cut unknown words.
    """

    name = "tcc"

    def segment_spans(self, data: bytes) -> list[tuple[int, int]]:
        spans = []
        start = 0
        for end in tcc_positions(data):
            spans.append((start, end))
            start = end
        return spans
