"""
Unit tests for block segmentation (segmenter.py).

Tests cover:
- Generation changes open new blocks
- Blank lines become singleton blocks
- First-line quote prefix is kept for the whole block
- Message concatenation preserves order and count
- Blocks do not alias the input
"""

import pytest

from eml_quotewrap.models.block import Block
from eml_quotewrap.quoting.quote_parser import (
    is_blank_message,
    parse_quotification,
    quote_generation,
)
from eml_quotewrap.quoting.segmenter import break_text_into_blocks
from tests.fixtures.messages import SAMPLE_MESSAGES


class TestBreakTextIntoBlocks:
    """Tests for break_text_into_blocks() function."""

    @pytest.mark.unit
    def test_generation_change_splits_blocks(self):
        """Test quoted and unquoted lines land in separate blocks."""
        blocks = break_text_into_blocks(["> World", "Hello"], "<>:")

        assert blocks == [
            Block(quotification=">", message=(" World",)),
            Block(quotification="", message=("Hello",)),
        ]
        assert quote_generation(blocks[0].quotification, "<>:") == 1
        assert quote_generation(blocks[1].quotification, "<>:") == 0

    @pytest.mark.unit
    def test_leading_blank_line(self):
        """Test a leading empty line is its own block."""
        blocks = break_text_into_blocks(["", "Hi"], "")

        assert blocks == [
            Block(quotification="", message=(" ",)),
            Block(quotification="", message=("Hi",)),
        ]

    @pytest.mark.unit
    def test_same_generation_lines_merge(self):
        """Test consecutive same-generation lines share one block."""
        blocks = break_text_into_blocks(["> one", "> two", "> three"], ">")

        assert len(blocks) == 1
        assert blocks[0].message == (" one", " two", " three")

    @pytest.mark.unit
    def test_blank_line_separates_same_generation(self):
        """Test a blank line splits a run even without a generation change."""
        blocks = break_text_into_blocks(["one", "", "two"], ">")

        assert [b.message for b in blocks] == [("one",), (" ",), ("two",)]

    @pytest.mark.unit
    def test_quoted_blank_line_is_singleton(self):
        """Test a bare quote mark line is a blank singleton block."""
        blocks = break_text_into_blocks(["> a", ">", "> b"], ">")

        assert blocks == [
            Block(quotification=">", message=(" a",)),
            Block(quotification=">", message=(" ",)),
            Block(quotification=">", message=(" b",)),
        ]

    @pytest.mark.unit
    def test_consecutive_blank_lines(self):
        """Test every blank line gets its own block."""
        blocks = break_text_into_blocks(["", "", ""], ">")

        assert len(blocks) == 3
        assert all(b.message == (" ",) for b in blocks)

    @pytest.mark.unit
    def test_blank_line_then_generation_change(self):
        """Test the line after a blank starts fresh with its own prefix."""
        blocks = break_text_into_blocks(["> a", ">", ">> b", ">> c"], ">")

        assert blocks[-1] == Block(quotification=">>", message=(" b", " c"))

    @pytest.mark.unit
    def test_quoted_leading_blank_keeps_prefix(self):
        """Test a block after a leading blank line keeps its quote prefix."""
        blocks = break_text_into_blocks([">", "> text"], ">")

        assert blocks[1] == Block(quotification=">", message=(" text",))

    @pytest.mark.unit
    def test_first_line_prefix_wins(self):
        """Test later same-generation prefixes are not reconciled."""
        blocks = break_text_into_blocks(["> a", " > b", ">c"], ">")

        assert len(blocks) == 1
        assert blocks[0].quotification == ">"
        assert blocks[0].message == (" a", " b", "c")

    @pytest.mark.unit
    def test_empty_text(self):
        """Test empty input gives no blocks."""
        assert break_text_into_blocks([], ">") == []

    @pytest.mark.unit
    def test_input_not_modified(self, nested_reply):
        """Test the caller's line list is untouched."""
        original = list(nested_reply)
        break_text_into_blocks(nested_reply, "<>:")
        assert nested_reply == original

    @pytest.mark.unit
    def test_blocks_are_independent_values(self):
        """Test flushed blocks hold immutable message tuples."""
        blocks = break_text_into_blocks(["a", "b", "", "c"], ">")

        assert all(isinstance(b.message, tuple) for b in blocks)
        assert blocks[0].message == ("a", "b")

    @pytest.mark.unit
    def test_nested_reply_structure(self, nested_reply):
        """Test segmentation of a realistic nested reply."""
        blocks = break_text_into_blocks(nested_reply, "<>:")

        assert [b.quotification for b in blocks] == ["", ">", ">>", ">", ">", "", ""]
        assert blocks[2].message == (
            " Could you confirm the invoice was sent to the billing",
            " address we agreed on last week?",
        )

    @pytest.mark.unit
    @pytest.mark.parametrize("name", sorted(SAMPLE_MESSAGES))
    def test_segmentation_properties(self, name):
        """Test segmentation invariants on every sample message."""
        text = SAMPLE_MESSAGES[name]
        blocks = break_text_into_blocks(text, "<>:")

        # Concatenated messages equal the parsed messages of the input
        messages = [line for block in blocks for line in block.message]
        assert messages == [parse_quotification(line, "<>:").message for line in text]

        for block in blocks:
            # Blank lines are singletons
            if any(is_blank_message(m) for m in block.message):
                assert len(block.message) == 1

        # Lines of one block share one generation
        position = 0
        for block in blocks:
            generations = {
                quote_generation(parse_quotification(line, "<>:").prefix, "<>:")
                for line in text[position : position + len(block.message)]
            }
            assert len(generations) == 1
            position += len(block.message)
