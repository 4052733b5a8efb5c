"""
Quote prefix parsing.

Splits a line into the quote prefix (tabs, spaces and recognized quote
characters at the start of the line) and its message content, and counts
how many quote generations a prefix represents.

Quote characters are matched by set membership, so characters that carry a
meaning in regular expressions ("]", "^", "\\", "-") are safe to use.
"""

from typing import Iterable, Union

from ..models.block import ParsedLine

PREFIX_WHITESPACE = frozenset(" \t")

QuoteChars = Union[str, Iterable[str]]


def quote_char_set(quotechars: QuoteChars) -> frozenset:
    """Build the membership set for a quote character string."""
    return frozenset(quotechars or "")


def parse_quotification(line: str, quotechars: QuoteChars) -> ParsedLine:
    """
    Split a line into its quote prefix and message.

    The prefix is the longest leading run of tabs, spaces and quote
    characters, minus its trailing tabs/spaces; those move to the front of
    the message, so "> text" gives (">", " text"). An empty message becomes
    a single space.

    Args:
        line: One line of text without line terminator
        quotechars: Characters recognized as quote marks

    Returns:
        ParsedLine(prefix, message); prefix + message == line unless the
        line had no content after its prefix

    Raises:
        TypeError: If line is not a string
    """
    if not isinstance(line, str):
        raise TypeError(f"line must be a string, got {type(line).__name__}")

    allowed = quote_char_set(quotechars) | PREFIX_WHITESPACE

    run_end = 0
    while run_end < len(line) and line[run_end] in allowed:
        run_end += 1

    # Hand trailing whitespace of the run back to the message
    prefix_end = run_end
    while prefix_end > 0 and line[prefix_end - 1] in PREFIX_WHITESPACE:
        prefix_end -= 1

    prefix = line[:prefix_end]
    message = line[prefix_end:] or " "
    return ParsedLine(prefix, message)


def quote_generation(prefix: str, quotechars: QuoteChars) -> int:
    """
    Count quote characters in a prefix.

    Tabs and spaces never count; order and duplicates in quotechars are
    irrelevant.

    Args:
        prefix: Quote prefix (usually from parse_quotification)
        quotechars: Characters recognized as quote marks

    Returns:
        Quote generation (0 = unquoted)
    """
    marks = quote_char_set(quotechars) - PREFIX_WHITESPACE
    return sum(1 for char in prefix if char in marks)


def is_blank_message(message: str) -> bool:
    """True if a message part carries no visible content."""
    return not message.strip()
