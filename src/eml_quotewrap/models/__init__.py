# Data models for the quote reflow pipeline

from .block import Block, ParsedLine
from .format_options import FormatOptions

__all__ = [
    "Block",
    "ParsedLine",
    "FormatOptions",
]
