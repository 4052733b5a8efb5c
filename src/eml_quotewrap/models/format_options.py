"""
Formatting knobs handed to the word-wrap step.

Callers supply a plain mapping; it is validated into FormatOptions each time
a document is formatted. Text::Format-style camelCase keys are accepted as
aliases so option maps written for that tool keep working.
"""

from typing import Any, List, Mapping

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger(__name__)


class FormatOptions(BaseModel):
    """Validated word-wrap configuration for one format() run."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    first_indent: int = Field(
        0, ge=0, alias="firstIndent", description="Extra spaces before a paragraph's first line"
    )
    body_indent: int = Field(
        0, ge=0, alias="bodyIndent", description="Extra spaces before a paragraph's other lines"
    )
    tabstop: int = Field(8, ge=1, description="Tab expansion width")
    extra_space: bool = Field(
        False, alias="extraSpace", description="Two spaces after sentence-ending punctuation"
    )
    hyphenate: bool = Field(True, description="Allow breaks after hyphens in compound words")
    break_long_words: bool = Field(
        False,
        alias="breakLongWords",
        description="Split tokens wider than the line instead of letting them overflow",
    )

    @classmethod
    def unsupported_keys(cls, params: Mapping[str, Any]) -> List[str]:
        """Keys of params that match neither a field name nor its alias."""
        known = set(cls.model_fields)
        known.update(f.alias for f in cls.model_fields.values() if f.alias)
        known.add("columns")
        return sorted(str(key) for key in params if key not in known)

    @classmethod
    def from_params(cls, params: Mapping[str, Any], default_first_indent: int = 0) -> "FormatOptions":
        """
        Build options from a caller-supplied mapping without mutating it.

        Args:
            params: Option mapping (snake_case or camelCase keys)
            default_first_indent: First-line indent used when the mapping sets none

        Returns:
            Validated FormatOptions

        Raises:
            pydantic.ValidationError: On out-of-range or mistyped values
        """
        ignored = cls.unsupported_keys(params)
        if ignored:
            logger.warning("format_params_ignored", keys=ignored)

        values = dict(params)
        values.pop("columns", None)
        if "first_indent" not in values and "firstIndent" not in values:
            values["first_indent"] = default_first_indent
        return cls.model_validate(values)
