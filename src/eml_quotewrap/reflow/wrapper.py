"""
Word wrapping of a single paragraph.

Wraps with textwrap.TextWrapper. The leading whitespace of the paragraph's
first line is kept as the indentation of every output line; for quoted text
that is the space separating the quote prefix from the words. A first-line
indent added by an earlier pass is taken off again first, so wrapping
already wrapped text is a fixed point.
"""

import textwrap
from typing import List, Optional, Sequence

from ..models.format_options import FormatOptions


def paragraph_indent(first_line: str, tabstop: int = 8) -> str:
    """Leading whitespace of a line with tabs expanded."""
    stripped = first_line.lstrip(" \t")
    return first_line[: len(first_line) - len(stripped)].expandtabs(tabstop)


def carried_indent(first_line: str, options: FormatOptions) -> str:
    """
    Indentation carried from a paragraph's first line to all its lines.

    Trailing first_indent spaces are dropped when present; they are the ones
    a previous wrap with the same options put there.
    """
    indent = paragraph_indent(first_line, options.tabstop)
    added = " " * options.first_indent
    if added and indent.endswith(added):
        return indent[: len(indent) - len(added)]
    return indent


def wrap_paragraph(
    lines: Sequence[str], width: int, options: Optional[FormatOptions] = None
) -> List[str]:
    """
    Reflow one paragraph to lines of at most ``width`` columns.

    Runs of whitespace between words collapse to one space. A word wider
    than the available space overflows unless options.break_long_words is set.

    Args:
        lines: Lines of the paragraph
        width: Target width, clamped to at least 1
        options: Wrap configuration (defaults to FormatOptions())

    Returns:
        Wrapped lines without terminators; at least one line
    """
    options = options or FormatOptions()
    if not lines:
        return [""]

    indent = carried_indent(lines[0], options)
    words = " ".join(lines).expandtabs(options.tabstop).split()
    if not words:
        return [indent]

    wrapper = textwrap.TextWrapper(
        width=max(width, 1),
        initial_indent=indent + " " * options.first_indent,
        subsequent_indent=indent + " " * options.body_indent,
        fix_sentence_endings=options.extra_space,
        break_long_words=options.break_long_words,
        break_on_hyphens=options.hyphenate,
        tabsize=options.tabstop,
    )
    return wrapper.wrap(" ".join(words)) or [indent]
