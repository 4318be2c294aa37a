"""
Quill: fluent text building for Python

Accumulate text fragments and transform them with chainable operations:
line joins, case conversion, substring extraction, conditional mutation
and per-character mapping.

Quick Start:
    >>> from quill import make
    >>> make("Hel").append("lo!").to_string()
    'Hello!'

    >>> make("class").space().append(make("user profile").pascal_case()).append(":")
    Text('class UserProfile:')

    >>> make("{{hello world}}").inside("{", "}").to_string()
    'hello world'

Configuration:
    >>> from quill import TextConfig, text_config_context
    >>> with text_config_context(TextConfig(newline="\\r\\n")):
    ...     make("a").append_line("b").to_string()
    'a\\r\\nb'

Installation:
    pip install quill              # Zero runtime dependencies
"""

from quill.builder import Input, Text, TextBuilder, make
from quill.cases import (
    camel_case,
    is_uuid,
    kebab_case,
    lower_first,
    pascal_case,
    snake_case,
    split_words,
    trim_lines,
    upper_first,
    words,
)
from quill.config import (
    TextConfig,
    get_text_config,
    reset_text_config,
    set_text_config,
    text_config_context,
)
from quill.errors import InvalidInputError, QuillError
from quill.extract import (
    after,
    after_last,
    before,
    before_last,
    between,
    finish,
    inside,
    start,
)

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 (grouped by category)
    # Builder
    "Input",
    "Text",
    "TextBuilder",
    "make",
    # Extractors
    "after",
    "after_last",
    "before",
    "before_last",
    "between",
    "finish",
    "inside",
    "start",
    # Formatters
    "camel_case",
    "is_uuid",
    "kebab_case",
    "lower_first",
    "pascal_case",
    "snake_case",
    "split_words",
    "trim_lines",
    "upper_first",
    "words",
    # Configuration
    "TextConfig",
    "get_text_config",
    "reset_text_config",
    "set_text_config",
    "text_config_context",
    # Errors
    "InvalidInputError",
    "QuillError",
    "__version__",
]
