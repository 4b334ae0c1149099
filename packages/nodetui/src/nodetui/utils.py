"""
Text measurement used for shrink-to-content sizing.

Key functions:
- visible_width: cell width of a single line, ignoring ANSI codes
- content_size: (width, height) of a multi-line block
"""

from __future__ import annotations

import re

from wcwidth import wcwidth


# ANSI escape sequence patterns
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[a-zA-Z]")
OSC_ESCAPE = re.compile(r"\x1b\][^\x07\x1b]*[\x07\x1b\\]")


def _strip_ansi(text: str) -> str:
    text = ANSI_ESCAPE.sub("", text)
    return OSC_ESCAPE.sub("", text)


def visible_width(text: str) -> int:
    """
    Calculate the visible width of text, ignoring ANSI codes.

    Wide characters count for two cells, combining and control
    characters for none.

    Example:
        >>> visible_width("\x1b[31mHello\x1b[0m")
        5
    """
    clean = _strip_ansi(text)
    return sum(max(0, wcwidth(c)) for c in clean)


def content_size(content: str) -> tuple[int, int]:
    """
    Measure a block of text.

    Args:
        content: Text possibly spanning several lines

    Returns:
        Tuple of (widest line width, number of lines); (0, 0) for empty text
    """
    if not content:
        return 0, 0
    lines = content.split("\n")
    return max(visible_width(line) for line in lines), len(lines)
