"""Dictionary handles: an owned trie plus where its words came from."""

import logging
from pathlib import Path
from typing import Optional

from .trie import Trie

logger = logging.getLogger(__name__)

# Used when no word list is given or the given one cannot be read
DEFAULT_WORDS = (
    "ไป", "มา", "ใน", "ที่", "และ", "หรือ", "คือ", "เป็น", "มี", "ได้",
    "จะ", "ไม่", "ของ", "กับ", "ก็", "ให้", "ถ้า", "แล้ว", "เมื่อ", "ซึ่ง",
    "นี้", "นั้น", "อยู่", "เพื่อ", "การ", "ความ", "จาก", "โดย", "อย่าง", "ถึง",
    "ว่า", "เอง", "ทุก", "แต่", "ตาม", "นัก", "ยัง", "ผล", "ผู้", "คน",
    "วัน", "ปี", "เดือน", "ครั้ง", "ตัว", "สิ่ง", "งาน", "ข้อ", "รับ",
)

PACKAGED_WORDS = Path(__file__).parent / "data" / "thai_words.txt"


def default_dictionary_path() -> Optional[Path]:
    """Return the packaged word list, or None to use ``DEFAULT_WORDS``."""
    if PACKAGED_WORDS.exists():
        return PACKAGED_WORDS
    return None


class Dictionary:
    """Handle that exclusively owns a dictionary trie.

    Segmenters borrow the trie and never modify it. Call ``close`` (or use
    the handle as a context manager) to release it.
    """

    def __init__(self, trie: Trie, source: Optional[Path] = None):
        """Initialize dictionary handle.

        Args:
            trie: Populated trie, owned by this handle from now on
            source: Word list the trie was loaded from (None for built-in words)
        """
        self._trie: Optional[Trie] = trie
        self.source = source

    @property
    def trie(self) -> Trie:
        if self._trie is None:
            raise ValueError("Dictionary has been released")
        return self._trie

    @property
    def closed(self) -> bool:
        return self._trie is None

    @property
    def is_default(self) -> bool:
        """True if the handle holds the built-in word list."""
        return self.source is None

    @property
    def word_count(self) -> int:
        return self.trie.word_count

    def add(self, word: str) -> bool:
        """Insert a word. Must not run concurrently with segmentation."""
        return self.trie.insert(word)

    def close(self) -> None:
        """Release the trie. Safe to call more than once."""
        self._trie = None

    def __enter__(self) -> "Dictionary":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return self.word_count

    def __repr__(self) -> str:
        if self.closed:
            return "Dictionary(closed)"
        origin = str(self.source) if self.source else "built-in"
        return f"Dictionary({origin}, {self.word_count} words)"


def load_dictionary(
    source: Optional[str | Path] = None, *, fallback: bool = True
) -> Dictionary:
    """Build a dictionary from a word list or the built-in default words.

    Args:
        source: Path to a newline-delimited UTF-8 word list. None selects
            the built-in ``DEFAULT_WORDS``.
        fallback: Use the built-in words if ``source`` cannot be read

    Returns:
        Dictionary handle owning a new trie

    Raises:
        OSError: If ``source`` cannot be read and ``fallback`` is False
    """
    if source is None:
        return Dictionary(Trie(DEFAULT_WORDS))

    trie = Trie()
    try:
        trie.load(source)
    except OSError as e:
        if not fallback:
            raise
        logger.warning(
            "Could not read dictionary %s (%s); using built-in word list", source, e
        )
        return Dictionary(Trie(DEFAULT_WORDS))

    logger.debug("Loaded %d words from %s", trie.word_count, source)
    return Dictionary(trie, Path(source))
