"""Fluent text builder.

Accumulates string fragments in a list and joins them on demand: O(n)
total for appends vs O(n²) for repeated string concatenation.

Mutators (append, prepend, lines, conditionals) work on the fragment list
directly. Extractors and formatters materialize the fragments, transform
the resulting string, and replace the fragments with that single result.
Every fluent method returns the builder itself for chaining.

Example:
    >>> from quill import make
    >>> make("Hel").append("lo!").to_string()
    'Hello!'
    >>> str(make("Hello World").kebab_case())
    'hello-world'

Thread Safety:
    A builder has no internal locking. Share an instance across threads
    only behind your own lock.

"""

from __future__ import annotations

import re
from collections.abc import Callable

from quill import cases, extract
from quill.config import get_text_config
from quill.errors import InvalidInputError


def _coerce(value: object, position: int | None = None) -> str:
    """Convert an accepted input into a fragment."""
    if isinstance(value, str):
        return value
    if isinstance(value, Text):
        return value.to_string()
    # bool is an int subclass but not a number here
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidInputError(value, position)


def _fragmentify(inputs: tuple[object, ...]) -> list[str]:
    return [_coerce(value, position) for position, value in enumerate(inputs)]


class Text:
    """Builds a string, fluently.

    Usage:
            >>> text = Text("Hello")
            >>> text.space().append("World").append_line("Bye")
            Text('Hello World\\nBye')
            >>> text.snake_case().to_string()
            'hello_world_bye'

    """

    __slots__ = ("_fragments",)

    def __init__(self, *inputs: Input) -> None:
        """Create a builder from zero or more inputs.

        Numbers are stringified with ``str()``, so ``1.0`` becomes ``"1.0"``
        and ``float("nan")`` becomes ``"nan"``.

        Raises:
            InvalidInputError: If an input is not str, int, float or Text
        """
        self._fragments: list[str] = _fragmentify(inputs)

    @classmethod
    def make(cls, *inputs: Input) -> Text:
        """Create a new builder from zero or more inputs."""
        return cls(*inputs)

    @property
    def fragments(self) -> tuple[str, ...]:
        """Fragments in concatenation order."""
        return tuple(self._fragments)

    def copy(self) -> Text:
        """Return an independent builder with the same fragments."""
        clone = type(self)()
        clone._fragments = list(self._fragments)
        return clone

    def _replace(self, value: str) -> Text:
        self._fragments = [value]
        return self

    # =========================================================================
    # Mutators
    # =========================================================================

    def append(self, *inputs: Input) -> Text:
        """Append the given inputs after the existing fragments.

        Returns:
            self for method chaining
        """
        self._fragments.extend(_fragmentify(inputs))
        return self

    def concat(self, *inputs: Input) -> Text:
        """Alias of append(), mirroring ``String.concat``."""
        return self.append(*inputs)

    def prepend(self, *inputs: Input) -> Text:
        """Insert the given inputs before the existing fragments.

        The inputs keep their relative order: ``prepend("a", "b")`` on
        ``"c"`` gives ``"abc"``.
        """
        self._fragments[:0] = _fragmentify(inputs)
        return self

    def _splice_line(self, line: str, *, front: bool) -> Text:
        # No separator against empty content
        if not self:
            return self._replace(line)
        newline = get_text_config().newline
        if front:
            self._fragments[:0] = [line, newline]
        else:
            self._fragments.extend((newline, line))
        return self

    def append_line(self, *inputs: Input) -> Text:
        """Append the inputs as one new line.

        A newline separates the line from existing content; nothing is
        added in front of it when the builder is empty.
        """
        return self._splice_line("".join(_fragmentify(inputs)), front=False)

    def prepend_line(self, *inputs: Input) -> Text:
        """Prepend the inputs as one new line."""
        return self._splice_line("".join(_fragmentify(inputs)), front=True)

    def append_lines(self, *lines: Input) -> Text:
        """Append each input as its own line."""
        newline = get_text_config().newline
        return self._splice_line(newline.join(_fragmentify(lines)), front=False)

    def prepend_lines(self, *lines: Input) -> Text:
        """Prepend each input as its own line.

        Examples:
            >>> make("Line 3").prepend_lines("Line 1", "Line 2").to_string()
            'Line 1\\nLine 2\\nLine 3'
            >>> make().prepend_lines("Line 1").to_string()
            'Line 1'
        """
        newline = get_text_config().newline
        return self._splice_line(newline.join(_fragmentify(lines)), front=True)

    def space(self, count: int = 1) -> Text:
        """Append ``count`` spaces (at least one)."""
        self._fragments.append(" " * max(count, 1))
        return self

    def nl(self) -> Text:
        """Append a newline."""
        self._fragments.append(get_text_config().newline)
        return self

    def times(self, value: Input, count: int) -> Text:
        """Append ``value`` ``count`` times."""
        fragment = _coerce(value)
        self._fragments.extend(fragment for _ in range(count))
        return self

    def append_if(self, condition: bool, *inputs: Input) -> Text:
        """append() only when ``condition`` is true."""
        return self.append(*inputs) if condition else self

    def prepend_if(self, condition: bool, *inputs: Input) -> Text:
        """prepend() only when ``condition`` is true."""
        return self.prepend(*inputs) if condition else self

    def line_if(self, condition: bool, *inputs: Input) -> Text:
        """append_line() only when ``condition`` is true."""
        return self.append_line(*inputs) if condition else self

    def when(self, condition: bool, callback: Callable[[Text], object]) -> Text:
        """Call ``callback(self)`` only when ``condition`` is true."""
        if condition:
            callback(self)
        return self

    def tap(self, callback: Callable[[Text], object]) -> Text:
        """Call ``callback(self)`` for its side effects."""
        callback(self)
        return self

    def clear(self) -> Text:
        """Drop every fragment."""
        self._fragments.clear()
        return self

    def _chars(self) -> list[Text]:
        return [type(self)(char) for char in self.to_string()]

    def each(self, callback: CharCallback) -> Text:
        """Call ``callback(char, index, chars)`` for every character.

        The builder's content is left untouched whatever the callback
        returns.
        """
        chars = self._chars()
        for index, char in enumerate(chars):
            callback(char, index, chars)
        return self

    def map(self, callback: CharCallback) -> Text:
        """Replace every character with the result of ``callback``.

        ``chars`` is built once before iterating, so the callback can look at
        neighbouring characters of the original text.

        Examples:
            >>> make("Hello").map(
            ...     lambda char, i, chars: char.upper().append_if(i < len(chars) - 1, " ")
            ... ).to_string()
            'H E L L O'

        Raises:
            InvalidInputError: If a callback result is not a valid input
        """
        chars = self._chars()
        results = [
            _coerce(callback(char, index, chars), index) for index, char in enumerate(chars)
        ]
        return self._replace("".join(results))

    # =========================================================================
    # Extractors
    # =========================================================================

    def before(self, search: str) -> Text:
        """Keep the content before the first ``search``."""
        return self._replace(extract.before(self.to_string(), search))

    def before_last(self, search: str) -> Text:
        """Keep the content before the last ``search``."""
        return self._replace(extract.before_last(self.to_string(), search))

    def after(self, search: str) -> Text:
        """Keep the content after the first ``search``."""
        return self._replace(extract.after(self.to_string(), search))

    def after_last(self, search: str) -> Text:
        """Keep the content after the last ``search``."""
        return self._replace(extract.after_last(self.to_string(), search))

    def between(self, start: str, end: str) -> Text:
        """Keep the content between the first ``start`` and the next ``end``."""
        return self._replace(extract.between(self.to_string(), start, end))

    def inside(self, start: str, end: str) -> Text:
        """Keep the content of the innermost ``start``/``end`` pair."""
        return self._replace(extract.inside(self.to_string(), start, end))

    def finish(self, value: str) -> Text:
        """End the content with ``value`` exactly once."""
        return self._replace(extract.finish(self.to_string(), value))

    def start(self, value: str) -> Text:
        """Begin the content with ``value`` exactly once."""
        return self._replace(extract.start(self.to_string(), value))

    # =========================================================================
    # Formatters
    # =========================================================================

    def is_uuid(self) -> Text:
        """Replace the content with ``"true"`` or ``"false"``."""
        return self._replace("true" if cases.is_uuid(self.to_string()) else "false")

    def words(self, pattern: str | re.Pattern[str] | None = None) -> list[str]:
        """Split the content into words. The builder is not modified."""
        return cases.words(self.to_string(), pattern)

    def upper_first(self) -> Text:
        return self._replace(cases.upper_first(self.to_string()))

    def lower_first(self) -> Text:
        return self._replace(cases.lower_first(self.to_string()))

    def kebab_case(self) -> Text:
        return self._replace(cases.kebab_case(self.to_string()))

    def camel_case(self) -> Text:
        return self._replace(cases.camel_case(self.to_string()))

    def snake_case(self) -> Text:
        return self._replace(cases.snake_case(self.to_string()))

    def pascal_case(self) -> Text:
        return self._replace(cases.pascal_case(self.to_string()))

    def trim_lines(self, template: str | None = None) -> Text:
        """Dedent a block and append it, or dedent the content itself.

        Args:
            template: Indented block to append (None = dedent the content
                already in the builder)
        """
        if template is None:
            return self._replace(cases.trim_lines(self.to_string()))
        self._fragments.append(cases.trim_lines(template))
        return self

    # =========================================================================
    # String passthroughs
    # =========================================================================

    def upper(self) -> Text:
        return self._replace(self.to_string().upper())

    def lower(self) -> Text:
        return self._replace(self.to_string().lower())

    def trim(self) -> Text:
        return self._replace(self.to_string().strip())

    def trim_left(self) -> Text:
        return self._replace(self.to_string().lstrip())

    def trim_right(self) -> Text:
        return self._replace(self.to_string().rstrip())

    def repeat(self, count: int) -> Text:
        """Replace the content with ``count`` copies of itself."""
        return self._replace(self.to_string() * count)

    def char_at(self, index: int) -> Text:
        """Keep only the character at ``index`` (empty when out of range)."""
        text = self.to_string()
        return self._replace(text[index] if 0 <= index < len(text) else "")

    def replace(
        self,
        pattern: str | re.Pattern[str],
        replacement: str | Callable[[re.Match[str]], str],
    ) -> Text:
        """Replace matches of ``pattern``.

        A plain string pattern replaces its first occurrence only; a compiled
        regex replaces every match. ``replacement`` may be a function of the
        match in both cases.

        Examples:
            >>> make("Hello").replace("l", "w").to_string()
            'Hewlo'
            >>> make("Hello").replace(re.compile("l"), "w").to_string()
            'Hewwo'
        """
        text = self.to_string()
        if isinstance(pattern, re.Pattern):
            return self._replace(pattern.sub(replacement, text))
        if callable(replacement):
            return self._replace(re.sub(re.escape(pattern), replacement, text, count=1))
        return self._replace(text.replace(pattern, replacement, 1))

    def replace_all(self, search: str, replacement: str) -> Text:
        """Replace every occurrence of the plain string ``search``."""
        return self._replace(self.to_string().replace(search, replacement))

    def slice(self, start: int, end: int | None = None) -> Text:
        """Keep ``content[start:end]``; negative indices count from the end."""
        return self._replace(self.to_string()[start:end])

    def substring(self, start: int, end: int | None = None) -> Text:
        """Keep the content between two indices.

        Indices are clamped to the content and swapped when ``start`` is
        greater than ``end``.
        """
        text = self.to_string()
        size = len(text)
        start = min(max(start, 0), size)
        end = size if end is None else min(max(end, 0), size)
        if start > end:
            start, end = end, start
        return self._replace(text[start:end])

    def pad_start(self, length: int, fill: str = " ") -> Text:
        """Left-pad to ``length`` characters, repeating ``fill`` as needed."""
        text = self.to_string()
        missing = length - len(text)
        if missing <= 0 or not fill:
            return self
        return self._replace((fill * missing)[:missing] + text)

    def pad_end(self, length: int, fill: str = " ") -> Text:
        """Right-pad to ``length`` characters, repeating ``fill`` as needed."""
        text = self.to_string()
        missing = length - len(text)
        if missing <= 0 or not fill:
            return self
        return self._replace(text + (fill * missing)[:missing])

    # =========================================================================
    # Serialization
    # =========================================================================

    def join(self, separator: str = "") -> str:
        """Return the fragments joined by ``separator``."""
        return separator.join(self._fragments)

    def to_string(self) -> str:
        """Return the materialized text."""
        return "".join(self._fragments)

    @property
    def length(self) -> int:
        """Number of characters in the materialized text."""
        return len(self.to_string())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Text({self.to_string()!r})"

    def __len__(self) -> int:
        return self.length

    def __bool__(self) -> bool:
        return any(self._fragments)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Text):
            return self.to_string() == other.to_string()
        if isinstance(other, str):
            return self.to_string() == other
        return NotImplemented

    def __add__(self, other: Input) -> Text:
        return self.copy().append(other)

    def __radd__(self, other: Input) -> Text:
        return self.copy().prepend(other)


TextBuilder = Text

Input = str | int | float | Text

# Receives a one-character builder, its index, and every character of the
# materialized text as one-character builders.
CharCallback = Callable[[Text, int, list[Text]], object]


def make(*inputs: Input) -> Text:
    """Create a new builder from zero or more inputs.

    Example:
        >>> make("Line ", 1).append_line(make("Line ", 2)).to_string()
        'Line 1\\nLine 2'
    """
    return Text(*inputs)


__all__ = [
    "CharCallback",
    "Input",
    "Text",
    "TextBuilder",
    "make",
]
