"""Text block utilities - sizing, padding and splicing lists of lines.

A block is a ``list[str]``, one string per line. Widths are character
counts, not display widths.
"""

from __future__ import annotations

import logging

BLANK = ' '

logger = logging.getLogger(__name__)


def blank_block(height: int, width: int) -> list[str]:
    """A block of ``height`` lines, each ``width`` blanks."""
    return [BLANK * width for _ in range(height)]


def pad_to_width(s: str, width: int, char: str = BLANK) -> str:
    """Pad string with char to reach at least width characters."""
    if len(s) >= width:
        return s
    return s + char * (width - len(s))


def fit_block(lines: list[str], height: int, width: int) -> list[str]:
    """
    Force a block to exactly ``height`` lines of exactly ``width`` characters.

    Short lines and missing lines are filled with blanks. Anything beyond
    the extent is clipped so the surrounding grid stays rectangular.
    """
    clipped = len(lines) > height or any(len(line) > width for line in lines)
    if clipped:
        logger.debug("Clipping %dx%d output to %dx%d", len(lines),
                     max((len(line) for line in lines), default=0), height, width)

    fitted = [pad_to_width(line[:width], width) for line in lines[:height]]
    fitted.extend(blank_block(height - len(fitted), width))
    return fitted


def place_block(
    lines: list[str],
    width: int,
    top: int = 0,
    bottom: int = 0,
    left: int = 0,
    right: int = 0,
) -> list[str]:
    """Surround a block of lines ``width`` wide with blank margins."""
    full_width = left + width + right
    return (
        blank_block(top, full_width)
        + [BLANK * left + line + BLANK * right for line in lines]
        + blank_block(bottom, full_width)
    )


def stack_vertical(blocks: list[list[str]]) -> list[str]:
    """Concatenate blocks top to bottom."""
    result: list[str] = []
    for block in blocks:
        result.extend(block)
    return result


def join_horizontal(blocks: list[list[str]], height: int) -> list[str]:
    """Concatenate blocks of ``height`` lines left to right, line by line."""
    return [''.join(block[row] for block in blocks) for row in range(height)]


def to_text(lines: list[str]) -> str:
    """Join a block into a printable string."""
    return '\n'.join(lines)
