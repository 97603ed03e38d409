"""
Tests for Content Normalization
===============================
RTF stripping, whitespace normalization and the malformed-input fallback.
"""

import pytest

from wordlens.engine.core import is_rtf, normalize_content, normalize_whitespace, strip_rtf
from wordlens.engine.errors import NormalizationError
from wordlens.engine.matching import count_keywords


class TestRtfStripping:
    """Tests for RTF control-word removal."""

    def test_minimal_document(self):
        assert normalize_content("{\\rtf1\\ansi Hello\\par World}") == "Hello\nWorld"

    def test_font_and_color_tables_removed(self):
        raw = (
            r"{\rtf1\ansi\ansicpg1252\deff0"
            r"{\fonttbl{\f0\fswiss Helvetica;}{\f1 Times;}}"
            r"{\colortbl;\red255\green0\blue0;}"
            r"\f0\fs24 Hello\par World}"
        )
        assert normalize_content(raw) == "Hello\nWorld"

    def test_ignorable_destinations_removed(self):
        raw = r"{\rtf1{\*\generator Riched20 10.0;}\viewkind4 Body text}"
        assert normalize_content(raw) == "Body text"

    def test_page_headers_and_footers_removed(self):
        raw = (
            r"{\rtf1{\headerl Left head}{\headerr Right head}{\footerf First foot}"
            r"{\header Plain head}{\footer Plain foot}Body text}"
        )
        assert normalize_content(raw) == "Body text"

    def test_formatting_inside_word_keeps_word_whole(self):
        """The space ending a control word is not document text."""
        raw = r"{\rtf1\ansi Res\i pect\i0  matters}"
        normalized = normalize_content(raw)

        assert normalized == "Respect matters"
        assert count_keywords(normalized, ["respect"]) == {"respect": 1}

    def test_formatting_delimiter_space_consumed(self):
        assert normalize_content(r"{\rtf1 Bo\b ld\b0  text}") == "Bold text"
        assert normalize_content(r"{\rtf1 Big\fs32  word}") == "Big word"

    def test_tab_becomes_tab_character(self):
        assert normalize_content(r"{\rtf1 Name\tab Value}") == "Name\tValue"

    def test_glyph_controls(self):
        assert normalize_content(r"{\rtf1 \bullet Item}") == "\u2022 Item"
        assert normalize_content(r"{\rtf1 A\emdash B}") == "A\u2014B"
        assert normalize_content(r"{\rtf1 \ldblquote Hi\rdblquote  there}") == "\u201cHi\u201d there"

    def test_character_formatting_removed(self):
        raw = r"{\rtf1\pard\qc\b Bold\b0  and \i italic\i0  text\par}"
        assert normalize_content(raw) == "Bold and italic text"

    def test_escapes_decoded(self):
        assert normalize_content(r"{\rtf1 caf\u233?}") == "caf\u00e9"
        assert normalize_content(r"{\rtf1 caf\'e9}") == "caf\u00e9"

    def test_escaped_literals_survive(self):
        assert normalize_content(r"{\rtf1 a \{b\} c\\d}") == "a {b} c\\d"

    def test_paragraph_breaks_collapse(self):
        raw = r"{\rtf1 One\par\par\par\par Two}"
        assert normalize_content(raw) == "One\n\nTwo"

    def test_unbalanced_groups_raise(self):
        with pytest.raises(NormalizationError):
            strip_rtf(r"{\rtf1 Hello")

    def test_malformed_falls_back_to_raw(self):
        raw = r"{\rtf1 Hello {\b World"
        assert normalize_content(raw) == raw

    def test_is_rtf(self):
        assert is_rtf("  {\\rtf1 x}")
        assert not is_rtf("plain {text}")
        assert not is_rtf("")


class TestWhitespace:
    """Tests for whitespace normalization of plain text."""

    def test_plain_text_only_whitespace_normalized(self):
        raw = "Hello   world  \r\n\r\n\r\n\r\nNext line\t "
        assert normalize_content(raw) == "Hello world\n\nNext line"

    def test_backslashes_in_plain_text_kept(self):
        assert normalize_content("Path C:\\Users\\bob\\par") == "Path C:\\Users\\bob\\par"

    def test_idempotent_on_plain_text(self):
        samples = [
            "  Indented\n\n\n\nparagraphs   here \r\nand\tthere  ",
            "single line",
            "\n\n",
            "tabs\t\tinside\tlines",
        ]
        for text in samples:
            once = normalize_content(text)
            assert normalize_content(once) == once
            assert normalize_whitespace(once) == once

    def test_inner_tabs_kept(self):
        assert normalize_whitespace("a\tb") == "a\tb"

    def test_empty(self):
        assert normalize_content("") == ""
