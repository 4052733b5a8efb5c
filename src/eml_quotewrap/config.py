"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Quote reflow configuration from environment variables.

    All settings can be overridden via environment variables prefixed with
    QUOTEWRAP_ (e.g. QUOTEWRAP_DEFAULT_COLUMNS=64).
    """

    # Reflow defaults
    default_columns: int = 72
    default_output_quotechar: str = ">"
    default_input_quotechars: str = "<>:"
    default_first_indent: int = 0

    # Paragraph detection: a line indented by this many spaces (or a tab)
    # after a line ending with a period opens a new paragraph
    paragraph_indent_min_spaces: int = 2

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_prefix": "QUOTEWRAP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
