"""Tests for cell text wrapping and hyphenation."""

from __future__ import annotations

import pytest

from tabla.services.layout import hyphenate, wrap_text

SAMPLE_TEXTS = [
    "",
    "a",
    "A 9v battery.",
    "A bottle of isopropyl alcohol.",
    "af6b0d4f-383a-4d3a-807f-8cf53b64dfa8",
    "supercalifragilisticexpialidocious and more words",
    "tabs\tand\nnewlines   and  spaces",
    "日本語のテキストを折り返す",
    "naïve café résumé",
    "emoji 🙂🙃 sequences 👩‍👩‍👧",
    "x" * 100,
]


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
@pytest.mark.parametrize("width", range(0, 13))
def test_every_line_has_exact_width(text, width):
    lines = wrap_text(width, text)

    assert lines
    assert all(len(line) == width for line in lines)


def test_zero_width_yields_single_empty_line():
    assert wrap_text(0, "anything at all") == ("",)


def test_empty_text_yields_single_blank_line():
    assert wrap_text(4, "") == ("    ",)


def test_words_are_packed_greedily():
    assert wrap_text(10, "A 9v battery.") == ("A 9v      ", "battery.  ")


def test_word_filling_line_exactly_gets_no_trailing_space():
    assert wrap_text(5, "abcde fg") == ("abcde", "fg   ")


def test_whitespace_runs_collapse():
    assert wrap_text(12, "  one \t two\n\nthree ") == ("one two     ", "three       ")


def test_long_words_are_hyphenated_in_order():
    assert wrap_text(4, "abcdefg hi") == ("abc-", "def-", "g hi")


def test_hyphenation_splits_on_code_points():
    assert wrap_text(3, "日本語テキスト") == ("日本-", "語テ-", "キス-", "ト  ")


def test_width_one_splits_without_hyphens():
    assert wrap_text(1, "ab c") == ("a", "b", "c")


def test_wrapping_preserves_content():
    text = "The quick brown fox jumps over the lazy dog"
    lines = wrap_text(9, text)

    assert " ".join(" ".join(line.split()) for line in lines) == text


class TestHyphenate:
    def test_chunks_reserve_room_for_hyphen(self):
        assert hyphenate("abcdefgh", 4) == ["abc-", "def-", "gh"]

    def test_last_chunk_may_fill_width_minus_one(self):
        assert hyphenate("abcdef", 4) == ["abc-", "def"]

    def test_width_one(self):
        assert hyphenate("abc", 1) == ["a", "b", "c"]

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            hyphenate("abc", 0)


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        wrap_text(-1, "text")
