"""Token and text helpers."""

import re

# Control characters that break CSV/Excel (tab, newline, carriage return kept)
ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def is_whitespace_token(token: str) -> bool:
    return not token.strip()


def drop_whitespace(tokens: list[str]) -> list[str]:
    """Remove tokens that consist only of whitespace."""
    return [token for token in tokens if not is_whitespace_token(token)]


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub("", text)
