"""Tests for text cleaning."""

from __future__ import annotations

import pytest

from json2sections.cleaning import (
    clean_text,
    collapse_whitespace,
    normalize_punctuation,
    strip_noise_quotes,
    unescape,
)

CORPUS = [
    "",
    "plain text",
    'He said \\"hi\\" twice',
    '\\\\"double escaped\\\\"',
    'a "b" "c d" "Market Leader"',
    '"""',
    '" "',
    "key :value ,next",
    "1,000 users,and more",
    "line one\\nline two\\n\\n\\n\\nline three",
    "tabs\tand\r\nwindows\rbreaks",
    '"nested "quotes" here"',
    'label:"value" and:[list]',
    "   padded   ",
]


class TestCleanText:
    """Tests for clean_text."""

    def test_empty_string(self) -> None:
        """Empty input stays empty."""
        assert clean_text("") == ""

    def test_unescapes_quotes_and_drops_noise(self) -> None:
        """Escaped quotes around a short lowercase word are removed."""
        assert clean_text('He said \\"hi\\"') == "He said hi"

    def test_keeps_title_case_quotes(self) -> None:
        """Quoted titles keep their quotation marks."""
        assert clean_text('"Market Leader"') == '"Market Leader"'

    def test_drops_short_lowercase_quotes(self) -> None:
        """A short quoted word loses its quotation marks."""
        assert clean_text('"yes"') == "yes"

    @pytest.mark.parametrize(
        "text",
        ['"ends with period."', '"42 posts"', '"ratio: high"', '"it\'s fine"'],
    )
    def test_keeps_meaningful_quotes(self, text: str) -> None:
        """Sentences, numbers, labels and apostrophes keep their quotes."""
        assert clean_text(text) == text

    def test_collapses_whitespace(self) -> None:
        """Runs of spaces and tabs become one space."""
        assert clean_text("a   b\t c") == "a b c"

    def test_literal_newline_escapes(self) -> None:
        """Backslash-n sequences become real line breaks."""
        assert clean_text("first\\nsecond") == "first\nsecond"

    def test_preserves_single_line_breaks_by_default(self) -> None:
        """Single newlines survive when preserve_line_breaks is on."""
        assert clean_text("line one\nline two") == "line one\nline two"

    def test_folds_single_line_breaks_when_disabled(self) -> None:
        """Single newlines become spaces when preserve_line_breaks is off."""
        assert clean_text("line one\nline two", preserve_line_breaks=False) == "line one line two"

    @pytest.mark.parametrize("preserve", [True, False])
    def test_paragraph_breaks_collapse_to_two(self, preserve: bool) -> None:
        """Long newline runs collapse to a single paragraph break."""
        result = clean_text("para one\n\n\n\npara two", preserve_line_breaks=preserve)
        assert result == "para one\n\npara two"

    @pytest.mark.parametrize("text", CORPUS)
    @pytest.mark.parametrize("preserve", [True, False])
    def test_idempotent(self, text: str, preserve: bool) -> None:
        """Cleaning already-clean text changes nothing."""
        once = clean_text(text, preserve_line_breaks=preserve)
        assert clean_text(once, preserve_line_breaks=preserve) == once


class TestCleaningHelpers:
    """Tests for the individual cleaning steps."""

    def test_unescape(self) -> None:
        """Known escapes are replaced; carriage returns are dropped."""
        assert unescape('\\"a\\" \\/ \\t\\r') == '"a" / \t'

    def test_collapse_whitespace_trims_around_newlines(self) -> None:
        """Spaces hugging a newline are removed."""
        assert collapse_whitespace("a  \n  b") == "a\nb"

    def test_strip_noise_quotes(self) -> None:
        """Only unintentional quotes are stripped."""
        assert strip_noise_quotes('say "ok" to "Big Plans"') == 'say ok to "Big Plans"'

    def test_normalize_punctuation_spacing(self) -> None:
        """Space before comma/colon goes; space after comma is added."""
        assert normalize_punctuation("a ,b") == "a, b"
        assert normalize_punctuation("label :[1]") == "label: [1]"

    def test_normalize_punctuation_leaves_thousands(self) -> None:
        """Digit groups are not split."""
        assert normalize_punctuation("1,000") == "1,000"
