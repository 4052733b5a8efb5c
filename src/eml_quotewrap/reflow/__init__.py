# Reflow: paragraph wrapping and per-block prefix re-application

from .wrapper import carried_indent, paragraph_indent, wrap_paragraph
from .reflower import BLANK_LINE, block_width, reflow_block, reflow_blocks

__all__ = [
    "carried_indent",
    "paragraph_indent",
    "wrap_paragraph",
    "BLANK_LINE",
    "block_width",
    "reflow_block",
    "reflow_blocks",
]
