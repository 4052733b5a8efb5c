# Quote structure detection: prefix parsing, block segmentation, paragraphs

from .quote_parser import (
    is_blank_message,
    parse_quotification,
    quote_char_set,
    quote_generation,
)
from .segmenter import break_text_into_blocks
from .paragraphs import break_block_into_paragraphs, starts_paragraph

__all__ = [
    "parse_quotification",
    "quote_generation",
    "quote_char_set",
    "is_blank_message",
    "break_text_into_blocks",
    "break_block_into_paragraphs",
    "starts_paragraph",
]
