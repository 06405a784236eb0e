"""Thai Character Cluster (TCC) boundaries.

A TCC is the smallest run of Thai text a tokenizer may not split, following
the rules of Theeramunkong et al. (2000): a consonant with its attached
vowels and marks, or a leading vowel together with the consonant it
precedes. This module only finds cluster edges; word boundaries come from
the dictionary.
"""

from .codepoint import decode_codepoint

# Half-open codepoint ranges
LEADING_VOWELS = ((0x0E40, 0x0E45),)  # เ แ โ ใ ไ
CONSONANTS = ((0x0E01, 0x0E2F),)  # ก .. ฮ
FOLLOW_VOWELS = ((0x0E30, 0x0E34),)  # ะ ั า ำ
ABOVE_VOWELS = ((0x0E34, 0x0E38),)  # ิ ี ึ ื
BELOW_VOWELS = ((0x0E38, 0x0E3A),)  # ุ ู
TONE_MARKS = ((0x0E48, 0x0E4C),)  # ่ ้ ๊ ๋
SIGNS = ((0x0E4C, 0x0E4F),)  # ์ ํ ๎

# Marks that may trail a leading-vowel cluster
LEAD_CLUSTER_MARKS = TONE_MARKS + SIGNS + ABOVE_VOWELS + BELOW_VOWELS
# Marks that may trail a consonant cluster
CONSONANT_CLUSTER_MARKS = LEAD_CLUSTER_MARKS + FOLLOW_VOWELS


def in_ranges(codepoint: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(start <= codepoint < end for start, end in ranges)


def is_leading_vowel(codepoint: int) -> bool:
    return in_ranges(codepoint, LEADING_VOWELS)


def is_consonant(codepoint: int) -> bool:
    return in_ranges(codepoint, CONSONANTS)


def _take(data: bytes, pos: int, ranges) -> int:
    """Byte length of the codepoint at ``pos`` if it falls in ``ranges``, else 0."""
    if pos >= len(data):
        return 0
    codepoint, length = decode_codepoint(data, pos)
    return length if in_ranges(codepoint, ranges) else 0


def _take_marks(data: bytes, pos: int, ranges) -> int:
    start = pos
    while True:
        length = _take(data, pos, ranges)
        if not length:
            return pos - start
        pos += length


def cluster_length(data: bytes, pos: int = 0) -> int:
    """Return the byte length of the cluster starting at ``pos``.

    Args:
        data: UTF-8 encoded text
        pos: Byte offset of the cluster start

    Returns:
        Length in bytes (at least one codepoint)
    """
    codepoint, length = decode_codepoint(data, pos)
    end = pos + length

    if is_leading_vowel(codepoint):
        consonant = _take(data, end, CONSONANTS)
        if not consonant:
            # A leading vowel without its consonant stands alone
            return length
        end += consonant
        end += _take(data, end, CONSONANTS)
        end += _take_marks(data, end, LEAD_CLUSTER_MARKS)
        return end - pos

    if is_consonant(codepoint):
        end += _take(data, end, CONSONANTS)
        end += _take_marks(data, end, CONSONANT_CLUSTER_MARKS)
        return end - pos

    return length


def tcc_positions(text: str | bytes) -> list[int]:
    """Compute the end offset of every cluster in ``text``.

    Args:
        text: Input text; str is encoded to UTF-8

    Returns:
        Ascending byte offsets, the last one equal to the byte length
    """
    data = _as_bytes(text)
    positions = []
    pos = 0
    while pos < len(data):
        pos += cluster_length(data, pos)
        positions.append(pos)
    return positions


def segment_clusters(text: str) -> list[str]:
    """Split ``text`` into its Thai Character Clusters."""
    data = _as_bytes(text)
    clusters = []
    start = 0
    for end in tcc_positions(data):
        clusters.append(data[start:end].decode("utf-8", "surrogateescape"))
        start = end
    return clusters


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, bytes):
        return text
    return text.encode("utf-8", "surrogateescape")
