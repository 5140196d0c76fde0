"""
ANSI colour escape handling.

Only SGR colour sequences (``ESC [ params m``) are recognised. Cursor
movement and other escapes are left untouched and count towards length.
"""

from __future__ import annotations

import re

ANSI_COLOR_RE = re.compile(r"\x1b\[\d*(?:;\d+)*m")

RESET = "\x1b[0m"


def remove_ansi_color(text: str) -> str:
    """Strip every ANSI colour escape sequence from text."""
    return ANSI_COLOR_RE.sub("", text)


def visible_length(text: str | None, ansi: bool = False) -> int:
    """
    Length of text as it appears on screen.

    Args:
        text: Cell content; None counts as empty
        ansi: Ignore colour escape sequences when measuring

    Returns:
        Number of visible characters
    """
    if text is None:
        return 0
    if ansi:
        return len(remove_ansi_color(text))
    return len(text)


def pad_ansi_cell(text: str | None, width: int) -> tuple[str, int]:
    """
    Pad a coloured cell to its column width.

    A reset sequence is appended after the content so trailing padding is
    never coloured. String formatting cannot do the padding here because it
    counts the escape bytes.

    Args:
        text: Cell content; None counts as empty
        width: Column width in visible characters

    Returns:
        Tuple of (padded copy of the cell, raw padding before clamping)
    """
    content = text or ""
    pad = width - visible_length(content, ansi=True)
    return content + RESET + " " * max(pad, 0), pad
