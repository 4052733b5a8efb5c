"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Mock settings/configuration
- Sample message bodies
- Ready-made documents
"""

import pytest

from eml_quotewrap.config import Settings
from eml_quotewrap.document import QuoteWrapDocument
from tests.fixtures.messages import SAMPLE_MESSAGES


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create settings for testing with the shipped defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        default_columns=72,
        default_output_quotechar=">",
        default_input_quotechars="<>:",
        log_level="INFO",
        log_json=False,  # Easier to read in tests
    )


@pytest.fixture
def nested_reply() -> list:
    """
    Get a reply with first- and second-generation quotes and blank lines.

    Returns:
        List of lines
    """
    return list(SAMPLE_MESSAGES["nested_reply"])


@pytest.fixture
def long_quoted() -> list:
    """
    Get a single over-long quoted line.

    Returns:
        List of lines
    """
    return list(SAMPLE_MESSAGES["long_quoted"])


@pytest.fixture
def document(nested_reply) -> QuoteWrapDocument:
    """
    Create a fully configured document over the nested reply sample.

    Returns:
        QuoteWrapDocument ready for quotify() and format()
    """
    return QuoteWrapDocument(
        text=nested_reply,
        columns=40,
        output_quotechar=">",
        input_quotechars="<>:",
        format_params={},
    )


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
