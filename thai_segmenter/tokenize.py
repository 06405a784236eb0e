"""Word tokenization entry points."""

import logging
import os
import threading
from pathlib import Path
from typing import Optional

from .dictionary import Dictionary, default_dictionary_path, load_dictionary
from .engines import ENGINES, NewmmSegmenter, create_engine
from .utils import drop_whitespace

logger = logging.getLogger(__name__)

# One cached handle, keyed by the resolved source path
_cache_lock = threading.Lock()
_cached_key: Optional[str] = None
_cached_dictionary: Optional[Dictionary] = None


def segment(
    text: Optional[str],
    dictionary: Optional[Dictionary | str | Path] = None,
    keep_whitespace: bool = True,
) -> list[str]:
    """Segment Thai text with the newmm algorithm.

    Args:
        text: Input text. None or "" yields an empty list.
        dictionary: A loaded ``Dictionary`` (borrowed), or a word-list path
            / None to load one for this call only
        keep_whitespace: Keep whitespace-only tokens in the output

    Returns:
        List of tokens

    Examples:
        >>> segment("ฉันไปโรงเรียน", load_dictionary("words.txt"))
        ['ฉัน', 'ไป', 'โรงเรียน']
    """
    if not text:
        return []

    if isinstance(dictionary, Dictionary):
        tokens = NewmmSegmenter(dictionary).segment(text)
    else:
        with load_dictionary(dictionary) as loaded:
            tokens = NewmmSegmenter(loaded).segment(text)

    if not keep_whitespace:
        tokens = drop_whitespace(tokens)
    return tokens


def get_dictionary(source: Optional[str | Path] = None) -> Dictionary:
    """Return the cached dictionary for ``source``, loading it if needed.

    Only one dictionary is cached. Asking for a different source replaces
    it; the replaced handle is not closed and stays usable by its holders.

    Args:
        source: Word-list path; None selects the packaged word list (or the
            built-in words if it is missing)

    Returns:
        Shared, read-only dictionary handle
    """
    global _cached_key, _cached_dictionary

    if source is None:
        source = default_dictionary_path()
    key = os.path.abspath(source) if source is not None else None

    with _cache_lock:
        if _cached_dictionary is not None and _cached_key == key and not _cached_dictionary.closed:
            return _cached_dictionary
        _cached_dictionary = load_dictionary(source)
        _cached_key = key
        logger.debug("Cached %r", _cached_dictionary)
        return _cached_dictionary


def clear_dictionary_cache() -> None:
    """Release the cached dictionary."""
    global _cached_key, _cached_dictionary

    with _cache_lock:
        if _cached_dictionary is not None:
            _cached_dictionary.close()
        _cached_dictionary = None
        _cached_key = None


def word_tokenize(
    text: str,
    engine: str = "newmm",
    custom_dict: Optional[str | Path] = None,
    keep_whitespace: bool = True,
) -> list[str]:
    """Segment Thai text into words.

    Args:
        text: Input text to tokenize
        engine: Tokenization engine, "newmm" (default) or "tcc"
        custom_dict: Path to a word list (one word per line). If None, the
            default dictionary is used.
        keep_whitespace: Keep whitespace-only tokens in the output

    Returns:
        List of tokens

    Raises:
        ValueError: If an unsupported engine is specified
        TypeError: If text is not a string
        FileNotFoundError: If custom_dict does not exist

    Examples:
        >>> word_tokenize("hello world")
        ['hello', ' ', 'world']
    """
    if engine not in ENGINES:
        raise ValueError(
            f"Unsupported engine '{engine}'. Choose one of: {', '.join(ENGINES)}"
        )

    if not isinstance(text, str):
        raise TypeError(f"text must be a string, got {type(text)}")

    if not text:
        return []

    if custom_dict is not None and not os.path.exists(custom_dict):
        raise FileNotFoundError(f"Dictionary file not found: {custom_dict}")

    dictionary = get_dictionary(custom_dict) if engine == "newmm" else None
    tokens = create_engine(engine, dictionary).segment(text)

    if not keep_whitespace:
        tokens = drop_whitespace(tokens)
    return tokens
