"""Substring extraction for Quill.

Pure ``str -> str`` functions backing the extractor methods of
:class:`quill.Text`. None of them raise when a delimiter is missing: the
input comes back unchanged (or trimmed on the side that was found).

Example:
    >>> from quill.extract import between, start
    >>> between("hello", "h", "o")
    'ell'
    >>> start("//hello", "/")
    '/hello'
"""

from __future__ import annotations

import re

from quill.utils.logger import get_logger

logger = get_logger(__name__)


def before(text: str, search: str) -> str:
    """Return everything before the first occurrence of ``search``."""
    index = text.find(search) if search else -1
    if index == -1:
        logger.debug("before(): %r not found, keeping text", search)
        return text
    return text[:index]


def before_last(text: str, search: str) -> str:
    """Return everything before the last occurrence of ``search``."""
    index = text.rfind(search) if search else -1
    if index == -1:
        logger.debug("before_last(): %r not found, keeping text", search)
        return text
    return text[:index]


def after(text: str, search: str) -> str:
    """Return everything after the first occurrence of ``search``."""
    index = text.find(search) if search else -1
    if index == -1:
        logger.debug("after(): %r not found, keeping text", search)
        return text
    return text[index + len(search) :]


def after_last(text: str, search: str) -> str:
    """Return everything after the last occurrence of ``search``."""
    index = text.rfind(search) if search else -1
    if index == -1:
        logger.debug("after_last(): %r not found, keeping text", search)
        return text
    return text[index + len(search) :]


def _slice_from(text: str, begin: int, end: str) -> str:
    """Cut ``text`` from ``begin`` up to the first ``end`` found after it."""
    stop = text.find(end, begin) if end else -1
    if stop == -1:
        logger.debug("end delimiter %r not found, keeping the tail", end)
        return text[begin:]
    return text[begin:stop]


def between(text: str, start: str, end: str) -> str:
    """Return the content between ``start`` and the next ``end``.

    Measured from the first occurrence of ``start``. When ``end`` cannot be
    found after it, everything after ``start`` is returned; when ``start``
    is missing, everything before the first ``end`` is returned.

    Args:
        text: Text to search
        start: Opening delimiter
        end: Closing delimiter

    Returns:
        The extracted content, or ``text`` if neither delimiter is present

    Examples:
        >>> between("aabbcc", "a", "c")
        'abbc'
        >>> between("hello", "h", "p")
        'ello'
        >>> between("hello", "p", "e")
        'h'
    """
    index = text.find(start) if start else -1
    if index == -1:
        return before(text, end)
    return _slice_from(text, index + len(start), end)


def inside(text: str, start: str, end: str) -> str:
    """Return the content of the innermost ``start``/``end`` pair.

    Measured from the last occurrence of ``start`` to the first ``end``
    that follows it. Missing delimiters fall back the same way as
    :func:`between`.

    Examples:
        >>> inside("aabbcc", "a", "c")
        'bb'
        >>> inside("{{hello world}}", "{", "}")
        'hello world'
    """
    index = text.rfind(start) if start else -1
    if index == -1:
        return before(text, end)
    return _slice_from(text, index + len(start), end)


def finish(text: str, value: str) -> str:
    """Append ``value`` unless the text already ends with it."""
    if not value or text.endswith(value):
        return text
    return text + value


def start(text: str, value: str) -> str:
    """Begin the text with a single ``value``.

    A leading run of repeated ``value`` copies collapses to one, so applying
    this twice is the same as applying it once.

    Examples:
        >>> start("hello/", "/")
        '/hello/'
        >>> start("///hello", "/")
        '/hello'
    """
    if not value:
        return text
    return value + re.sub(f"^(?:{re.escape(value)})+", "", text)


__all__ = [
    "after",
    "after_last",
    "before",
    "before_last",
    "between",
    "finish",
    "inside",
    "start",
]
