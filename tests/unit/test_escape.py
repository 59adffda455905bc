#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Markdown and markup escaping utilities."""

import pytest

from xeditor_md.utils.escape import (
    escape_inline_code,
    escape_markdown,
    escape_markup,
    escape_markup_attribute,
    longest_backtick_run,
)
from xeditor_md.utils.security import sanitize_language_identifier


@pytest.mark.unit
class TestEscapeMarkdown:
    """Test backslash escaping of Markdown-special characters."""

    def test_plain_text_unchanged(self):
        assert escape_markdown("Hello world") == "Hello world"

    def test_empty_string(self):
        assert escape_markdown("") == ""

    def test_emphasis_markers(self):
        assert escape_markdown("a*b_c") == "a\\*b\\_c"

    def test_every_special_character(self):
        result = escape_markdown("1. Item (x) [y] {z} #tag +1 -2 !`")
        assert result == "1\\. Item \\(x\\) \\[y\\] \\{z\\} \\#tag \\+1 \\-2 \\!\\`"

    def test_backslash_escaped_once(self):
        assert escape_markdown("back\\slash") == "back\\\\slash"

    def test_characters_outside_the_set_are_untouched(self):
        assert escape_markdown("a < b > c | d ~ e") == "a < b > c | d ~ e"


@pytest.mark.unit
class TestEscapeMarkup:
    """Test HTML escaping for text and attributes."""

    def test_escape_markup(self):
        assert escape_markup("<b> & </b>") == "&lt;b&gt; &amp; &lt;/b&gt;"

    def test_escape_markup_leaves_quotes(self):
        assert escape_markup('say "hi"') == 'say "hi"'

    def test_escape_markup_attribute_escapes_quotes(self):
        assert escape_markup_attribute('a "b" & c') == "a &quot;b&quot; &amp; c"

    def test_empty_values(self):
        assert escape_markup("") == ""
        assert escape_markup_attribute("") == ""


@pytest.mark.unit
class TestInlineCodeDelimiters:
    """Test backtick delimiter selection for inline code."""

    def test_longest_backtick_run(self):
        assert longest_backtick_run("no ticks") == 0
        assert longest_backtick_run("a ` b `` c") == 2

    def test_plain_code_uses_single_backtick(self):
        assert escape_inline_code("x = 1") == ("x = 1", "`")

    def test_code_with_backtick_uses_longer_delimiter(self):
        assert escape_inline_code("a ` b") == ("a ` b", "``")

    def test_code_starting_with_backtick_is_padded(self):
        assert escape_inline_code("`tick") == (" `tick ", "``")


@pytest.mark.unit
class TestSanitizeLanguageIdentifier:
    """Test code fence language validation."""

    @pytest.mark.parametrize("language", ["python", "c++", "c#", "objective-c", "shell.session"])
    def test_valid_identifiers(self, language):
        assert sanitize_language_identifier(language) == language

    def test_surrounding_whitespace_stripped(self):
        assert sanitize_language_identifier("  js ") == "js"

    def test_none_and_empty(self):
        assert sanitize_language_identifier(None) == ""
        assert sanitize_language_identifier("") == ""

    def test_newline_injection_rejected(self):
        assert sanitize_language_identifier("python\n```\nmalicious") == ""

    def test_too_long_rejected(self, caplog):
        with caplog.at_level("WARNING"):
            assert sanitize_language_identifier("x" * 51) == ""
        assert "maximum length" in caplog.text
