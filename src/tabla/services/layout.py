"""
Text layout for table cells.

Cell content is word-wrapped greedily to a fixed width. Words that could
never fit on a line of that width are hyphenated. Every line produced is
padded with trailing spaces to exactly the requested width.
"""

from __future__ import annotations

from collections import deque
from typing import List, Tuple

HYPHEN = "-"


def hyphenate(word: str, width: int) -> List[str]:
    """
    Break ``word`` into pieces that each fit within ``width`` characters.

    Pieces hold at most ``width - 1`` code points and every piece except the
    last ends with a hyphen. At width 1 there is no room for a hyphen, so the
    word is split into single code points.
    """
    if width <= 0:
        raise ValueError(f"Cannot hyphenate to width {width}")
    if width == 1:
        return list(word)

    step = width - 1
    chunks = [word[start : start + step] for start in range(0, len(word), step)]
    return [chunk + HYPHEN for chunk in chunks[:-1]] + chunks[-1:]


def _finish_line(width: int, line: str) -> str:
    text = line.ljust(width)
    if len(text) != width:
        raise ValueError(f"Length of line {text!r} must be {width} (is {len(text)})")
    return text


def wrap_text(width: int, text: str) -> Tuple[str, ...]:
    """
    Wrap ``text`` into lines of exactly ``width`` characters.

    Args:
        width: Target line width; must be non-negative.
        text: Raw cell content. Runs of whitespace separate words.

    Returns:
        The wrapped lines. Width 0 yields a single empty line and empty text
        yields a single blank line.
    """
    if width < 0:
        raise ValueError(f"Width must be non-negative (got {width})")
    if width == 0:
        return ("",)

    words = deque(text.split() or [""])
    lines: List[str] = []
    buffer = ""

    while words:
        word = words.popleft()
        remaining = width - len(buffer)

        if len(word) > remaining:
            if len(word) > width:
                # Pieces go back to the front so word order is preserved.
                words.extendleft(reversed(hyphenate(word, width)))
                continue

            lines.append(_finish_line(width, buffer))
            buffer = ""
            words.appendleft(word)
            continue

        buffer += word
        if len(word) < remaining:
            buffer += " "

    if buffer:
        lines.append(_finish_line(width, buffer))

    return tuple(lines)
