"""Whole-string formatters for Quill.

Provides word splitting, case conversion, first-letter casing, block
dedenting and UUID validation. All functions are pure and work on plain
strings; :class:`quill.Text` wraps them as fluent methods.

Example:
    >>> from quill.cases import kebab_case, words
    >>> kebab_case("HelloWorld")
    'hello-world'
    >>> words("hello world")
    ['hello', 'world']
"""

from __future__ import annotations

import re
import textwrap
from collections.abc import Callable

from quill.config import get_text_config

# Maximal runs of characters that are neither whitespace nor punctuation.
# Underscore is a word character for ``\w``, so it is excluded explicitly.
WORD_PATTERN = re.compile(r"[^\W_]+")

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def words(text: str, pattern: str | re.Pattern[str] | None = None) -> list[str]:
    """Split text into words.

    Args:
        text: Text to split
        pattern: Regex matching one word. Defaults to the configured
            ``word_pattern``, then to :data:`WORD_PATTERN`.

    Returns:
        Words in order of appearance

    Examples:
        >>> words("hello world")
        ['hello', 'world']
        >>> words("hello & world", r"[^, ]+")
        ['hello', '&', 'world']
    """
    if pattern is None:
        pattern = get_text_config().word_pattern or WORD_PATTERN
    # Whole matches, even when the pattern has groups
    return [match.group() for match in re.finditer(pattern, text)]


def _is_boundary(chunk: str, i: int, split_digits: bool) -> bool:
    prev, cur = chunk[i - 1], chunk[i]
    if split_digits and prev.isdigit() != cur.isdigit():
        return True
    if not cur.isupper():
        return False
    if not prev.isupper():
        return True
    # End of an acronym: "HTTPServer" splits before the "S"
    return i + 1 < len(chunk) and chunk[i + 1].islower()


def split_words(text: str, split_digits: bool | None = None) -> list[str]:
    """Split text into lowercase word tokens for case conversion.

    Separators are whitespace, punctuation, hyphens and underscores. Inside
    a run of word characters, a new token starts at every lower-to-upper
    transition and at the last capital of an acronym followed by lowercase
    letters. With ``split_digits``, letter/digit transitions split too.

    Args:
        text: Text to tokenize
        split_digits: Override ``TextConfig.split_digits``

    Returns:
        Lowercased tokens

    Examples:
        >>> split_words("   Hello, World!   ")
        ['hello', 'world']
        >>> split_words("parseHTTPResponse")
        ['parse', 'http', 'response']
    """
    if split_digits is None:
        split_digits = get_text_config().split_digits

    tokens: list[str] = []
    for chunk in WORD_PATTERN.findall(text):
        begin = 0
        for i in range(1, len(chunk)):
            if _is_boundary(chunk, i, split_digits):
                tokens.append(chunk[begin:i].lower())
                begin = i
        tokens.append(chunk[begin:].lower())
    return tokens


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:]


def _settle(text: str, render: Callable[[list[str]], str]) -> str:
    """Run the tokenize/render pipeline until its output stops changing.

    Re-tokenizing a rendered string can only merge tokens (for instance
    ``["a", "b"]`` renders as ``"AB"``, which reads back as one acronym),
    so the loop ends after at most one pass per token.
    """
    split_digits = get_text_config().split_digits
    tokens = split_words(text, split_digits)
    result = render(tokens)
    for _ in range(len(tokens)):
        again = render(split_words(result, split_digits))
        if again == result:
            break
        result = again
    return result


def kebab_case(text: str) -> str:
    """Convert text to kebab-case."""
    return _settle(text, "-".join)


def snake_case(text: str) -> str:
    """Convert text to snake_case."""
    return _settle(text, "_".join)


def camel_case(text: str) -> str:
    """Convert text to camelCase.

    Examples:
        >>> camel_case("Hello, World!")
        'helloWorld'
    """
    return _settle(
        text, lambda tokens: "".join(tokens[:1] + [_capitalize(t) for t in tokens[1:]])
    )


def pascal_case(text: str) -> str:
    """Convert text to PascalCase.

    Examples:
        >>> pascal_case("hello_world")
        'HelloWorld'
    """
    return _settle(text, lambda tokens: "".join(_capitalize(t) for t in tokens))


def upper_first(text: str) -> str:
    """Uppercase the character at index 0 only."""
    return text[:1].upper() + text[1:]


def lower_first(text: str) -> str:
    """Lowercase the character at index 0 only."""
    return text[:1].lower() + text[1:]


def trim_lines(text: str, newline: str | None = None) -> str:
    """Dedent an indented block and drop its surrounding blank lines.

    Useful for triple-quoted literals indented along with the code:

        >>> trim_lines('''
        ...     Hello
        ...       from
        ...     a block
        ... ''')
        'Hello\\n  from\\na block'

    Args:
        text: Block to dedent
        newline: Separator for the output lines (default: configured newline)

    Returns:
        Dedented block without leading or trailing blank lines
    """
    if newline is None:
        newline = get_text_config().newline

    # Only "\n" (or "\r\n") ends a line; other separators stay in the content
    lines = textwrap.dedent(text.replace("\r\n", "\n")).split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return newline.join(lines)


def is_uuid(text: str) -> bool:
    """Check whether text is a UUID in its 8-4-4-4-12 hex form.

    Any version and variant nibble is accepted, in either case.
    """
    return UUID_PATTERN.fullmatch(text) is not None


__all__ = [
    "UUID_PATTERN",
    "WORD_PATTERN",
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
]
