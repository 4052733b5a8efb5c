"""
Block reflow.

Each block is wrapped to the configured column count minus the width of its
quote prefix, paragraph by paragraph, and the prefix is stamped back onto
every produced line.
"""

from typing import List, Optional, Sequence

import structlog

from ..models.block import Block
from ..models.format_options import FormatOptions
from ..quoting.paragraphs import break_block_into_paragraphs
from .wrapper import wrap_paragraph

logger = structlog.get_logger(__name__)

# Emitted for a block with no visible content
BLANK_LINE = " "


def block_width(columns: int, quotification: str) -> int:
    """
    Width available to a block's message text.

    Clamps to 1 when the prefix is as wide as the page; the wrapped lines
    then overflow instead of failing.
    """
    width = columns - len(quotification)
    return width if width > 0 else 1


def reflow_block(
    block: Block,
    columns: int,
    options: Optional[FormatOptions] = None,
    min_indent: Optional[int] = None,
) -> List[str]:
    """
    Reflow one block and re-apply its quote prefix.

    Args:
        block: Segmented block
        columns: Total line width including the prefix
        options: Wrap configuration
        min_indent: Paragraph indentation threshold (see break_block_into_paragraphs)

    Returns:
        Output lines, each starting with block.quotification
    """
    options = options or FormatOptions()
    width = block_width(columns, block.quotification)

    if block.is_blank:
        wrapped = [BLANK_LINE]
    else:
        wrapped = []
        for paragraph in break_block_into_paragraphs(block.message, min_indent):
            wrapped.extend(wrap_paragraph(paragraph, width, options))

    return [(block.quotification + line).rstrip("\r\n") for line in wrapped]


def reflow_blocks(
    blocks: Sequence[Block],
    columns: int,
    options: Optional[FormatOptions] = None,
    min_indent: Optional[int] = None,
) -> List[str]:
    """
    Reflow blocks and concatenate their output in block order.

    Args:
        blocks: Blocks from break_text_into_blocks
        columns: Total line width including quote prefixes
        options: Wrap configuration
        min_indent: Paragraph indentation threshold

    Returns:
        The new text as a list of lines
    """
    if columns <= 0:
        raise ValueError(f"columns must be positive, got {columns}")

    lines: List[str] = []
    for block in blocks:
        lines.extend(reflow_block(block, columns, options, min_indent))

    logger.debug("blocks_reflowed", blocks=len(blocks), lines=len(lines), columns=columns)
    return lines
