"""Dictionary-based maximal matching engine (newmm)."""

import bisect
import logging
from typing import Optional

from ..codepoint import (
    NUMBER_SEPARATORS,
    decode_codepoint,
    is_ascii_digit,
    is_ascii_letter,
    is_non_thai,
    is_space,
    is_thai,
)
from ..dictionary import Dictionary
from ..tcc import tcc_positions
from .base import SegmentationEngine

logger = logging.getLogger(__name__)


class NewmmSegmenter(SegmentationEngine):
    """Longest dictionary match, constrained by Thai Character Clusters.

    At each position the longest dictionary word wins, unless it would be
    followed by a Thai character that starts no dictionary word. In that
    case the shorter matches are tried, longest first, and the first one
    followed by a dictionary word is taken instead. Text without a
    dictionary match is consumed as a run of non-Thai characters of one
    class, or up to the next cluster boundary.
    """

    name = "newmm"

    def __init__(self, dictionary: Dictionary, max_tokens: Optional[int] = None):
        """Initialize newmm segmenter.

        Args:
            dictionary: Dictionary handle; its trie is borrowed read-only
            max_tokens: Raise RuntimeError once a text yields more tokens
                than this (None = unlimited)
        """
        self.dictionary = dictionary
        self.max_tokens = max_tokens

    def segment_spans(self, data: bytes) -> list[tuple[int, int]]:
        """Segment UTF-8 bytes into token spans.

        Args:
            data: UTF-8 encoded input text

        Returns:
            List of (start, end) byte offsets covering ``data``

        Raises:
            ValueError: If the dictionary has been released
            RuntimeError: If the text produces more than ``max_tokens`` tokens
        """
        trie = self.dictionary.trie
        text_len = len(data)
        if not text_len:
            return []

        boundaries = tcc_positions(data)
        spans = []
        pos = 0

        while pos < text_len:
            end = self._dictionary_match(trie, data, pos)
            if end is None:
                codepoint, length = decode_codepoint(data, pos)
                if is_non_thai(codepoint):
                    end = self._non_thai_run(data, pos, codepoint, length)
                else:
                    end = self._next_boundary(boundaries, pos, text_len)

            spans.append((pos, end))
            if self.max_tokens is not None and len(spans) > self.max_tokens:
                raise RuntimeError(
                    f"Text produced more than {self.max_tokens} tokens "
                    f"(stopped at byte {end} of {text_len})"
                )
            pos = end

        logger.debug("Segmented %d bytes into %d tokens", text_len, len(spans))
        return spans

    def _dictionary_match(self, trie, data: bytes, pos: int) -> Optional[int]:
        """Pick the dictionary word starting at ``pos``.

        Returns:
            End offset of the chosen word, or None if no word starts here
        """
        lengths = trie.matching_prefixes(data, pos)
        if not lengths:
            return None

        best_end = pos + lengths[-1]
        if best_end >= len(data) or trie.has_match(data, best_end):
            return best_end

        codepoint, _ = decode_codepoint(data, best_end)
        if not is_thai(codepoint):
            return best_end

        # The longest word strands an unknown Thai character; prefer the
        # longest shorter word that is followed by another dictionary word.
        for length in reversed(lengths[:-1]):
            end = pos + length
            if trie.has_match(data, end):
                return end
        return best_end

    @staticmethod
    def _next_boundary(boundaries: list[int], pos: int, text_len: int) -> int:
        """First cluster boundary strictly after ``pos`` (end of text if none)."""
        i = bisect.bisect_right(boundaries, pos)
        if i < len(boundaries):
            return boundaries[i]
        return text_len

    @staticmethod
    def _non_thai_run(data: bytes, pos: int, codepoint: int, length: int) -> int:
        """End offset of the run of same-class characters starting at ``pos``.

        Letters group with letters, spaces/tabs with spaces/tabs, and digits
        with digits plus ``.``/``,`` when a digit follows the separator.
        Anything else is a single-codepoint token.
        """
        if is_ascii_letter(codepoint):
            same_class = is_ascii_letter
        elif is_space(codepoint):
            same_class = is_space
        elif is_ascii_digit(codepoint):
            same_class = is_ascii_digit
        else:
            return pos + length

        end = pos + length
        text_len = len(data)
        while end < text_len:
            next_cp, next_len = decode_codepoint(data, end)
            if same_class(next_cp):
                end += next_len
                continue
            if (
                same_class is is_ascii_digit
                and next_cp in NUMBER_SEPARATORS
                and end + next_len < text_len
                and is_ascii_digit(data[end + next_len])
            ):
                end += next_len
                continue
            break
        return end
