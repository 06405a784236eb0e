"""Prefix tree over codepoint sequences for dictionary lookup."""

import logging
from pathlib import Path
from typing import Iterable

from .codepoint import decode_codepoint

logger = logging.getLogger(__name__)

# Characters trimmed from both ends of a dictionary entry
ENTRY_STRIP = " \t\r\n"


class TrieNode:
    """A single node: codepoint -> child, plus an end-of-word marker."""

    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        self.children: dict[int, TrieNode] = {}
        self.is_end = False


class Trie:
    """Dictionary trie keyed by Unicode codepoints.

    Built once per dictionary and treated as read-only while segmenting.
    """

    def __init__(self, words: Iterable[str | bytes] = ()) -> None:
        self._root = TrieNode()
        self._word_count = 0
        for word in words:
            self.insert(word)

    @property
    def word_count(self) -> int:
        """Number of distinct words stored."""
        return self._word_count

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, (str, bytes)):
            return False
        data = _entry_bytes(word)
        if not data:
            return False
        node = self._walk(data)
        return node is not None and node.is_end

    def insert(self, word: str | bytes) -> bool:
        """Add a word, trimming surrounding whitespace.

        Args:
            word: Dictionary entry (str or UTF-8 bytes)

        Returns:
            True if the word was new, False if it was empty or already present
        """
        data = _entry_bytes(word)
        if not data:
            return False

        node = self._root
        pos = 0
        while pos < len(data):
            codepoint, length = decode_codepoint(data, pos)
            child = node.children.get(codepoint)
            if child is None:
                child = node.children[codepoint] = TrieNode()
            node = child
            pos += length

        if node.is_end:
            return False
        node.is_end = True
        self._word_count += 1
        return True

    def load(self, source: str | Path) -> int:
        """Insert every line of a newline-delimited word file.

        Lines may end in LF or CRLF. Empty lines are skipped; a line holding
        only spaces or tabs is counted but inserts nothing. The file is read
        as raw bytes so that malformed UTF-8 never aborts a load.

        Args:
            source: Path to the word list

        Returns:
            Number of non-empty lines read

        Raises:
            OSError: If the file cannot be opened or read
        """
        count = 0
        with open(source, "rb") as f:
            for line in f:
                line = line.rstrip(b"\r\n")
                if not line:
                    continue
                self.insert(line)
                count += 1
        logger.debug("Read %d entries from %s (%d distinct words)", count, source, self._word_count)
        return count

    def matching_prefixes(self, data: bytes, pos: int = 0) -> list[int]:
        """Find every dictionary word that is a prefix of ``data[pos:]``.

        The walk follows a single path and stops at the first codepoint
        without a matching child.

        Args:
            data: UTF-8 encoded text
            pos: Byte offset to start matching at

        Returns:
            Byte lengths of the matching words, shortest first
        """
        lengths = []
        node = self._root
        offset = pos
        end = len(data)
        while offset < end:
            codepoint, length = decode_codepoint(data, offset)
            node = node.children.get(codepoint)
            if node is None:
                break
            offset += length
            if node.is_end:
                lengths.append(offset - pos)
        return lengths

    def has_match(self, data: bytes, pos: int = 0) -> bool:
        """True if at least one dictionary word is a prefix of ``data[pos:]``."""
        node = self._root
        offset = pos
        end = len(data)
        while offset < end:
            codepoint, length = decode_codepoint(data, offset)
            node = node.children.get(codepoint)
            if node is None:
                return False
            if node.is_end:
                return True
            offset += length
        return False

    def _walk(self, data: bytes) -> TrieNode | None:
        node = self._root
        pos = 0
        while pos < len(data):
            codepoint, length = decode_codepoint(data, pos)
            node = node.children.get(codepoint)
            if node is None:
                return None
            pos += length
        return node


def _entry_bytes(word: str | bytes) -> bytes:
    if isinstance(word, bytes):
        return word.strip(ENTRY_STRIP.encode("ascii"))
    return word.strip(ENTRY_STRIP).encode("utf-8", "surrogateescape")
