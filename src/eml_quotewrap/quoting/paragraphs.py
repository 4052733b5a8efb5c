"""
Paragraph detection inside a block.

A line starts a new paragraph when the line before it ends with a period
and it is itself indented, by a tab or by at least ``min_indent`` spaces.
No other document structure is recognized.
"""

from typing import List, Optional, Sequence

from ..config import settings


def starts_paragraph(previous: str, line: str, min_indent: int) -> bool:
    """Return True if line opens a new paragraph after previous."""
    if not previous.endswith("."):
        return False
    if line.startswith("\t"):
        return True
    return len(line) - len(line.lstrip(" ")) >= min_indent


def break_block_into_paragraphs(
    block: Sequence[str], min_indent: Optional[int] = None
) -> List[List[str]]:
    """
    Break a block's message lines into paragraphs.

    Args:
        block: Message lines of one block
        min_indent: Leading spaces that mark an indented line
            (defaults to settings.paragraph_indent_min_spaces)

    Returns:
        Non-empty paragraphs partitioning the lines, in order
    """
    if min_indent is None:
        min_indent = settings.paragraph_indent_min_spaces
    # An indented line needs at least one leading space
    min_indent = max(min_indent, 1)

    paragraphs: List[List[str]] = []
    current: List[str] = []

    for line in block:
        if current and starts_paragraph(current[-1], line, min_indent):
            paragraphs.append(current)
            current = []
        current.append(line)

    if current:
        paragraphs.append(current)

    return paragraphs
