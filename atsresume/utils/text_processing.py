"""
Text processing utilities shared by the intake and scoring contexts.
"""

import re
from typing import List

# Lines in uploaded documents may end with \n or \r\n
LINE_BREAK = re.compile(r"\r?\n")
NON_LETTERS = re.compile(r"[^a-z\s]")
ALL_CAPS_LINE = re.compile(r"^[A-Z\s]+$")
BULLET_GLYPHS = ("•", "-", "*", "◦")
BULLET_PREFIX = re.compile(r"^[•\-*◦]\s*")


def split_resume_lines(text: str) -> List[str]:
    """
    Split raw document text into trimmed, non-empty lines.

    Args:
        text: Raw text as recovered from a document

    Returns:
        Ordered list of lines with surrounding whitespace removed

    Example:
        >>> split_resume_lines("Jane Doe\\r\\n\\n  jane@example.com  ")
        ['Jane Doe', 'jane@example.com']
    """
    return [line.strip() for line in LINE_BREAK.split(text) if line.strip()]


def letters_only(line: str) -> str:
    """
    Lowercase a line and drop everything except letters and whitespace.

    Example:
        >>> letters_only("WORK EXPERIENCE:")
        'work experience'
    """
    return NON_LETTERS.sub("", line.lower()).strip()


def is_all_caps(line: str) -> bool:
    """True for lines made only of capital letters and whitespace."""
    return bool(ALL_CAPS_LINE.match(line))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet glyph and the whitespace after it."""
    return BULLET_PREFIX.sub("", line).strip()


def count_words(text: str) -> int:
    """Number of whitespace-separated words in text (0 for blank text)."""
    return len(text.split())


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
