"""Tests for formatters: words, case conversion, dedenting, UUIDs."""

import re

import pytest

from quill import TextConfig, make, text_config_context
from quill.cases import split_words, trim_lines, words

CASE_INPUTS = [
    "Hello World",
    "Hello, World!",
    "   Hello, World!   ",
    "hello_world",
    "HelloWorld",
    "hello-world",
]


class TestWords:
    """words() splitting."""

    def test_default(self) -> None:
        assert make("hello world").words() == ["hello", "world"]

    def test_punctuation_dropped(self) -> None:
        assert words("hello & world, again_and-again") == ["hello", "world", "again", "and", "again"]

    def test_custom_pattern(self) -> None:
        assert make("hello & world").words(r"[^, ]+") == ["hello", "&", "world"]

    def test_compiled_pattern(self) -> None:
        assert words("a1b22c", re.compile(r"\d+")) == ["1", "22"]

    def test_grouped_pattern_returns_whole_matches(self) -> None:
        assert make("ab-cd").words(r"(a)b|cd") == ["ab", "cd"]

    def test_grouped_configured_pattern(self) -> None:
        with text_config_context(TextConfig(word_pattern=r"(\w)\w*")):
            assert words("foo bar") == ["foo", "bar"]

    def test_configured_pattern(self) -> None:
        with text_config_context(TextConfig(word_pattern=r"\S+")):
            assert words("a-b c") == ["a-b", "c"]

    def test_builder_unchanged(self) -> None:
        text = make("hello world")
        text.words()
        assert text.to_string() == "hello world"


class TestSplitWords:
    """Tokenizer shared by the case converters."""

    def test_camel_boundaries(self) -> None:
        assert split_words("helloWorld") == ["hello", "world"]

    def test_acronyms(self) -> None:
        assert split_words("parseHTTPResponse") == ["parse", "http", "response"]
        assert split_words("HTML") == ["html"]

    def test_digits_kept_by_default(self) -> None:
        assert split_words("version2Beta") == ["version2", "beta"]

    def test_split_digits(self) -> None:
        assert split_words("version2Beta", split_digits=True) == ["version", "2", "beta"]

    def test_split_digits_from_config(self) -> None:
        with text_config_context(TextConfig(split_digits=True)):
            assert split_words("abc123") == ["abc", "123"]

    def test_empty(self) -> None:
        assert split_words("  -_!  ") == []


class TestCaseConversion:
    """kebab, camel, snake and pascal conversions."""

    @pytest.mark.parametrize("source", CASE_INPUTS)
    def test_kebab(self, source: str) -> None:
        assert make(source).kebab_case().to_string() == "hello-world"

    @pytest.mark.parametrize("source", CASE_INPUTS)
    def test_camel(self, source: str) -> None:
        assert make(source).camel_case().to_string() == "helloWorld"

    @pytest.mark.parametrize("source", CASE_INPUTS)
    def test_snake(self, source: str) -> None:
        assert make(source).snake_case().to_string() == "hello_world"

    @pytest.mark.parametrize("source", CASE_INPUTS)
    def test_pascal(self, source: str) -> None:
        assert make(source).pascal_case().to_string() == "HelloWorld"

    def test_acronym_conversion(self) -> None:
        assert make("XMLHttpRequest").snake_case().to_string() == "xml_http_request"

    def test_single_letter_words_settle(self) -> None:
        once = make("a b").pascal_case().to_string()
        assert once == "Ab"
        assert make(once).pascal_case().to_string() == once

    def test_empty(self) -> None:
        assert make("").camel_case().to_string() == ""
        assert make("!!").kebab_case().to_string() == ""


class TestFirstCharacter:
    """upper_first and lower_first."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [("hello", "Hello"), ("Hello", "Hello"), (" hello", " hello"), ("", "")],
    )
    def test_upper_first(self, source: str, expected: str) -> None:
        assert make(source).upper_first().to_string() == expected

    @pytest.mark.parametrize(
        ("source", "expected"),
        [("hello", "hello"), ("Hello", "hello"), (" hello", " hello"), ("HELLO", "hELLO")],
    )
    def test_lower_first(self, source: str, expected: str) -> None:
        assert make(source).lower_first().to_string() == expected


class TestTrimLines:
    """Dedenting indented blocks."""

    def test_template_block(self) -> None:
        block = """
					Hello
					from
					template
					literals
				"""
        assert make().trim_lines(block).to_string() == "Hello\nfrom\ntemplate\nliterals"

    def test_keeps_relative_indent(self) -> None:
        block = """
            def f():
                return 1
        """
        assert trim_lines(block) == "def f():\n    return 1"

    def test_appends_after_content(self) -> None:
        text = make("x = (").nl().trim_lines("\n    1,\n    2,\n").nl().append(")")
        assert text.to_string() == "x = (\n1,\n2,\n)"

    def test_dedents_own_content(self) -> None:
        assert make("\n  a\n    b\n\n").trim_lines().to_string() == "a\n  b"

    def test_inner_blank_lines_kept(self) -> None:
        assert trim_lines("  a\n\n  b") == "a\n\nb"

    def test_only_newline_splits_lines(self) -> None:
        assert make().trim_lines("\n  a\x0cb\n").to_string() == "a\x0cb"
        assert trim_lines("  a b\x85c\n  d") == "a b\x85c\nd"

    def test_crlf_input(self) -> None:
        assert trim_lines("\r\n  a\r\n    b\r\n") == "a\n  b"


class TestIsUuid:
    """UUID validation yields 'true'/'false' text."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("hello", "false"),
            ("52dc5778-1288-400d-b400-821b7beabd92", "true"),  # v4
            ("0630c1d6-8fab-11ea-bc55-0242ac130003", "true"),  # v1
            ("52DC5778-1288-400D-B400-821B7BEABD92", "true"),
            ("52dc5778-1288-400d-b400-821b7beabd9", "false"),
            ("52dc5778-1288-400d-b400-821b7beabd92x", "false"),
            ("52dc57781288400db400821b7beabd92", "false"),
            ("", "false"),
        ],
    )
    def test_is_uuid(self, source: str, expected: str) -> None:
        assert make(source).is_uuid().to_string() == expected
