"""ANSI-aware text measurement and padding utilities.

Column alignment uses display width, so escape sequences count as zero
columns and East Asian wide characters as two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    """Return ``text`` with ANSI escape sequences removed."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks and control characters consume no columns, and East Asian
    wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) == "Cc":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies when printed."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def pad_ansi(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces to ``width`` display columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + " " * missing
