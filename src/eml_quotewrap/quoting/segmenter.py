"""
Block segmentation of quoted text.

Groups lines into maximal runs of equal quote generation. Every line whose
message is blank becomes a block of its own so vertical whitespace survives
reflow and never merges with its neighbours.
"""

from typing import List, Optional, Sequence

import structlog

from ..models.block import Block
from .quote_parser import (
    QuoteChars,
    is_blank_message,
    parse_quotification,
    quote_char_set,
    quote_generation,
)

logger = structlog.get_logger(__name__)


def break_text_into_blocks(text: Sequence[str], quotechars: QuoteChars) -> List[Block]:
    """
    Break text into blocks of same-generation quoted material.

    A new block starts at a blank line or at a change of quote generation.
    The block keeps the quote prefix of its first line; prefixes of later
    lines of the same generation are not reconciled with it.

    Args:
        text: Lines of the message body (not modified)
        quotechars: Characters recognized as quote marks

    Returns:
        Blocks in input order; their message lines, concatenated, are the
        parsed messages of all input lines
    """
    marks = quote_char_set(quotechars)
    blocks: List[Block] = []

    quotification = ""
    current_message: List[str] = []
    # None forces the next line to open a block whatever its generation
    current_generation: Optional[int] = None

    def flush() -> None:
        if current_message:
            blocks.append(Block(quotification=quotification, message=tuple(current_message)))
            current_message.clear()

    for line in text:
        prefix, message = parse_quotification(line, marks)
        generation = quote_generation(prefix, marks)
        blank = is_blank_message(message)

        if blank or generation != current_generation:
            flush()
            quotification = prefix
            current_generation = generation

        current_message.append(message)

        if blank:
            flush()
            current_generation = None

    flush()

    logger.debug("blocks_segmented", lines=len(text), blocks=len(blocks))
    return blocks
