"""
Quoted message document.

QuoteWrapDocument holds a message body with its reflow configuration and
offers the two whole-body operations:

- quotify(): prepend the output quote character to every line
- format(): reflow every block of same-generation quoted material to the
  configured column count, keeping each block's quote prefix

Construction reports bad arguments by producing no object (create() returns
None). Operations and mutators report failures by returning a descriptive
message and leave the document unchanged; they return None on success.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import structlog
from pydantic import ValidationError

from .config import settings
from .models.format_options import FormatOptions
from .quoting.quote_parser import quote_generation
from .quoting.segmenter import break_text_into_blocks
from .reflow.reflower import reflow_blocks

logger = structlog.get_logger(__name__)

MULTI_GENERATION_ERROR = "Quotification character is a multiple-generation quote character!"


def _is_line_sequence(value: Any) -> bool:
    """True for a list or tuple of strings."""
    return isinstance(value, (list, tuple)) and all(isinstance(line, str) for line in value)


def _is_columns(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_multi_generation(output_quotechar: str, input_quotechars: str) -> bool:
    return quote_generation(output_quotechar, input_quotechars) > 1


class QuoteWrapDocument:
    """
    A message body plus the settings used to quote and reflow it.

    Not safe for concurrent mutation; give each thread its own document or
    serialize access externally.
    """

    def __init__(
        self,
        text: Optional[Sequence[str]] = None,
        columns: Optional[int] = None,
        output_quotechar: Optional[str] = None,
        input_quotechars: Optional[str] = None,
        format_params: Optional[Mapping] = None,
    ):
        """
        Initialize a document.

        Args:
            text: Lines of the body, without line terminators
            columns: Width the body is reflowed to
            output_quotechar: Mark prepended to each line by quotify()
            input_quotechars: Characters recognized as quote marks
            format_params: Word-wrap options (see FormatOptions)

        Raises:
            TypeError: If an argument has the wrong shape
            ValueError: If columns is not positive, or output_quotechar is
                itself a multiple-generation quote
        """
        if text is not None and not _is_line_sequence(text):
            raise TypeError("text must be a list or tuple of strings")
        if columns is not None:
            if not isinstance(columns, int) or isinstance(columns, bool):
                raise TypeError("columns must be an integer")
            if columns <= 0:
                raise ValueError("columns must be positive")
        if output_quotechar is not None and not isinstance(output_quotechar, str):
            raise TypeError("output_quotechar must be a string")
        if input_quotechars is not None and not isinstance(input_quotechars, str):
            raise TypeError("input_quotechars must be a string")
        if format_params is not None and not isinstance(format_params, Mapping):
            raise TypeError("format_params must be a mapping")

        if (
            output_quotechar is not None
            and input_quotechars is not None
            and _is_multi_generation(output_quotechar, input_quotechars)
        ):
            raise ValueError(MULTI_GENERATION_ERROR)

        self._text: Optional[List[str]] = list(text) if text is not None else None
        self._columns = columns
        self._output_quotechar = output_quotechar
        self._input_quotechars = input_quotechars
        self._format_params: Optional[Dict[str, Any]] = (
            dict(format_params) if format_params is not None else None
        )

    @classmethod
    def create(cls, *args, **kwargs) -> Optional["QuoteWrapDocument"]:
        """Construct a document, or return None if the arguments are invalid."""
        try:
            return cls(*args, **kwargs)
        except (TypeError, ValueError) as e:
            logger.warning("document_rejected", error=str(e))
            return None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def text(self) -> Optional[List[str]]:
        return list(self._text) if self._text is not None else None

    @property
    def columns(self) -> Optional[int]:
        return self._columns

    @property
    def output_quotechar(self) -> Optional[str]:
        return self._output_quotechar

    @property
    def input_quotechars(self) -> Optional[str]:
        return self._input_quotechars

    @property
    def format_params(self) -> Optional[Dict[str, Any]]:
        return dict(self._format_params) if self._format_params is not None else None

    def set_text(self, text: Sequence[str]) -> Optional[str]:
        """Replace the body. Returns an error message on failure."""
        if not _is_line_sequence(text):
            return self._fail("set_text", "Supplied text is not a list of lines!")
        self._text = list(text)
        return None

    def set_columns(self, columns: int) -> Optional[str]:
        """Set the reflow width. Returns an error message on failure."""
        if not _is_columns(columns):
            return self._fail("set_columns", "Number of columns is invalid!")
        self._columns = columns
        return None

    def set_input_quotechars(self, input_quotechars: str) -> Optional[str]:
        """Set the recognized quote characters. Returns an error message on failure."""
        if not isinstance(input_quotechars, str):
            return self._fail("set_input_quotechars", "Input quote characters are invalid!")
        self._input_quotechars = input_quotechars
        return None

    def set_output_quotechar(self, output_quotechar: str) -> Optional[str]:
        """
        Set the quote mark used by quotify().

        Rejected when the mark already reads as more than one quote
        generation under the current input quote characters.
        """
        if not isinstance(output_quotechar, str):
            return self._fail("set_output_quotechar", "Quotification character is invalid!")
        if self._input_quotechars is not None and _is_multi_generation(
            output_quotechar, self._input_quotechars
        ):
            return self._fail("set_output_quotechar", MULTI_GENERATION_ERROR)
        self._output_quotechar = output_quotechar
        return None

    def set_format_params(self, format_params: Mapping) -> Optional[str]:
        """Set word-wrap options. Returns an error message on failure."""
        if not isinstance(format_params, Mapping):
            return self._fail("set_format_params", "Supplied format_params is not a mapping!")
        self._format_params = dict(format_params)
        return None

    def append(self, lines: Union[str, Iterable[str]]) -> Optional[str]:
        """
        Append a line, or a sequence of lines, to the body.

        Multi-line strings are split on line breaks. Returns an error message
        on failure.
        """
        if isinstance(lines, str):
            new_lines = lines.splitlines() or [""]
        elif _is_line_sequence(lines):
            new_lines = list(lines)
        else:
            return self._fail("append", "Appended text is not a line or list of lines!")
        self._text = (self._text or []) + new_lines
        return None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def quotify(self) -> Optional[str]:
        """
        Quote every line with the output quote character.

        The output quote character is also added to the input quote
        characters so a later format() treats the new marks as quoting.
        Returns an error message on failure.
        """
        text = self._text
        input_quotechars = self._input_quotechars
        output_quotechar = self._output_quotechar

        if not _is_line_sequence(text):
            return self._fail("quotify", "Supplied text is not valid!")
        if not isinstance(input_quotechars, str):
            return self._fail("quotify", "Supplied input_quotechars is not valid!")
        if not isinstance(output_quotechar, str):
            return self._fail("quotify", "Supplied output_quotechar is not valid!")

        self._text = [output_quotechar + line for line in text]
        self._input_quotechars = input_quotechars + output_quotechar

        logger.debug("text_quotified", lines=len(text), quotechar=output_quotechar)
        return None

    def format(self) -> Optional[str]:
        """
        Reflow the body to the configured width.

        Lines are grouped into blocks of same-generation quoted material,
        each block is split into paragraphs and wrapped to the column count
        minus its quote prefix, and the prefix is re-applied to every line.
        Returns an error message on failure.
        """
        text = self._text
        input_quotechars = self._input_quotechars
        columns = self._columns
        format_params = self._format_params

        if not _is_line_sequence(text):
            return self._fail("format", "Supplied text is invalid!")
        if not isinstance(input_quotechars, str):
            return self._fail("format", "Supplied input_quotechars is invalid!")
        if not _is_columns(columns):
            return self._fail("format", "Supplied columns is invalid!")
        if not isinstance(format_params, Mapping):
            return self._fail("format", "Supplied format_params is invalid!")

        try:
            options = FormatOptions.from_params(
                format_params, default_first_indent=settings.default_first_indent
            )
        except ValidationError as e:
            logger.warning("format_params_invalid", errors=e.errors())
            return self._fail("format", "Supplied format_params is invalid!")

        blocks = break_text_into_blocks(text, input_quotechars)
        new_text = reflow_blocks(blocks, columns, options)

        logger.debug(
            "format_completed",
            lines_in=len(text),
            lines_out=len(new_text),
            blocks=len(blocks),
            columns=columns,
        )
        self._text = new_text
        return None

    def _fail(self, operation: str, message: str) -> str:
        logger.warning("operation_failed", operation=operation, error=message)
        return message

    def __repr__(self) -> str:
        lines = len(self._text) if self._text is not None else None
        return (
            f"QuoteWrapDocument(lines={lines}, columns={self._columns!r}, "
            f"output_quotechar={self._output_quotechar!r}, "
            f"input_quotechars={self._input_quotechars!r})"
        )


def create(
    text: Optional[Sequence[str]] = None,
    columns: Optional[int] = None,
    output_quotechar: Optional[str] = None,
    input_quotechars: Optional[str] = None,
    format_params: Optional[Mapping] = None,
) -> Optional[QuoteWrapDocument]:
    """
    Create a document, or return None if any argument is invalid.

    Args:
        text: Lines of the body
        columns: Width the body is reflowed to
        output_quotechar: Mark prepended to each line by quotify()
        input_quotechars: Characters recognized as quote marks
        format_params: Word-wrap options

    Returns:
        QuoteWrapDocument, or None
    """
    return QuoteWrapDocument.create(
        text, columns, output_quotechar, input_quotechars, format_params
    )


def reflow_text(
    text: str,
    columns: Optional[int] = None,
    output_quotechar: Optional[str] = None,
    input_quotechars: Optional[str] = None,
    format_params: Optional[Mapping] = None,
    quote: bool = False,
) -> str:
    """
    Reflow a message body given as one string.

    Unset values come from settings. With quote=True the body is quotified
    before it is formatted, as when preparing a reply.

    Args:
        text: Message body
        columns: Reflow width
        output_quotechar: Quote mark for quote=True
        input_quotechars: Characters recognized as quote marks
        format_params: Word-wrap options
        quote: Quotify before formatting

    Returns:
        Reflowed body, lines joined with newlines

    Raises:
        ValueError: If the configuration is invalid
    """
    document = create(
        text.splitlines(),
        settings.default_columns if columns is None else columns,
        settings.default_output_quotechar if output_quotechar is None else output_quotechar,
        settings.default_input_quotechars if input_quotechars is None else input_quotechars,
        {} if format_params is None else format_params,
    )
    if document is None:
        raise ValueError("Invalid reflow configuration")

    if quote:
        error = document.quotify()
        if error:
            raise ValueError(error)

    error = document.format()
    if error:
        raise ValueError(error)

    return "\n".join(document.text)
