"""UTF-8 codepoint decoding and character classes."""

# Thai Unicode block
THAI_START = 0x0E00
THAI_END = 0x0E7F

SPACE_CHARS = {ord(" "), ord("\t")}
NUMBER_SEPARATORS = {ord("."), ord(",")}


def char_length(lead: int) -> int:
    """Return the UTF-8 sequence length announced by a leading byte.

    Malformed leading bytes (stray continuation bytes, 0xF8 and above)
    count as a single byte.
    """
    if lead & 0x80 == 0:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 1


def decode_codepoint(data: bytes, pos: int = 0) -> tuple[int, int]:
    """Decode the UTF-8 sequence starting at ``pos``.

    Decoding never fails. A truncated sequence, or one whose continuation
    bytes are not of the form ``10xxxxxx``, degrades to the raw leading
    byte with a length of 1.

    Args:
        data: UTF-8 encoded bytes
        pos: Byte offset of the leading byte

    Returns:
        Tuple of (codepoint, byte_length)
    """
    lead = data[pos]
    length = char_length(lead)
    if length == 1:
        return lead, 1
    if pos + length > len(data):
        return lead, 1

    codepoint = lead & (0x7F >> length)
    for byte in data[pos + 1 : pos + length]:
        if byte & 0xC0 != 0x80:
            return lead, 1
        codepoint = (codepoint << 6) | (byte & 0x3F)
    return codepoint, length


def is_thai(codepoint: int) -> bool:
    return THAI_START <= codepoint <= THAI_END


def is_non_thai(codepoint: int) -> bool:
    """ASCII letters, digits, whitespace and anything outside the Thai block."""
    return not is_thai(codepoint)


def is_ascii_letter(codepoint: int) -> bool:
    return ord("a") <= codepoint <= ord("z") or ord("A") <= codepoint <= ord("Z")


def is_ascii_digit(codepoint: int) -> bool:
    return ord("0") <= codepoint <= ord("9")


def is_space(codepoint: int) -> bool:
    return codepoint in SPACE_CHARS
