"""
Value objects produced while segmenting quoted message text.

A ParsedLine is one input line split into its quote prefix and content.
A Block is a run of lines sharing one quote generation, stamped on output
with the prefix of its first line.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Tuple


class ParsedLine(NamedTuple):
    """
    One physical line split at the end of its quote prefix.

    Attributes:
        prefix: Leading quote characters (tabs/spaces allowed between them),
            without trailing whitespace
        message: Remainder of the line, starting with any whitespace that
            followed the prefix; a single space when the line has no content
    """

    prefix: str
    message: str


@dataclass(frozen=True)
class Block:
    """
    A maximal run of same-generation lines.

    Message lines are held in a tuple so a flushed block never shares
    storage with the block still being assembled or with the caller's text.

    Attributes:
        quotification: Quote prefix re-applied to every output line
        message: Message parts of the lines, in input order
    """

    quotification: str
    message: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Freeze message lines and validate their types."""
        if not isinstance(self.quotification, str):
            raise TypeError("quotification must be a string")
        lines = tuple(self.message)
        if not all(isinstance(line, str) for line in lines):
            raise TypeError("message lines must be strings")
        object.__setattr__(self, "message", lines)

    @property
    def is_blank(self) -> bool:
        """True when every message line is whitespace only."""
        return not "".join(self.message).strip()
