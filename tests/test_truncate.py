"""Tests for collext.truncate."""

from collext.truncate import ELLIPSIS, SPLIT_CHARS, split_words, truncate

SENTENCE = "прошло немного времени, прежде чем тесты стали полезными"


def test_truncate_keeps_short_text() -> None:
    assert truncate("very short line", 20) == "very short line"


def test_truncate_cuts_long_text() -> None:
    assert truncate("123456789", 5) == "12345…"


def test_truncate_skips_cut_when_tail_too_short() -> None:
    assert truncate("123456789", 8) == "123456789"


def test_truncate_boundary_is_limit_plus_ellipsis() -> None:
    assert truncate("1234567890", 8) == "12345678…"


def test_truncate_missing_value_gives_empty_string() -> None:
    assert truncate(None, 30) == ""


def test_truncate_converts_non_strings() -> None:
    assert truncate(0, 30) == "0"
    assert truncate(1234567, 3) == "123…"


def test_truncate_empty_string() -> None:
    assert truncate("", 0) == ""


# ── by_word ─────────────────────────────────────────────────────────


def test_truncate_by_word_cyrillic() -> None:
    assert truncate(SENTENCE, 20, by_word=True) == "прошло немного…"
    assert truncate(SENTENCE, 25, by_word=True) == "прошло немного времени,…"


def test_truncate_by_word_short_text_unchanged() -> None:
    assert truncate("two words", 20, by_word=True) == "two words"


def test_truncate_by_word_never_splits_words() -> None:
    text = "alpha beta gamma delta epsilon"
    for limit in range(0, len(text)):
        result = truncate(text, limit, by_word=True)
        if result == text:
            continue
        kept = result[: -len(ELLIPSIS)]
        assert text.startswith(kept)
        assert kept == "" or text[len(kept)] == " "
        assert len(result) <= limit + len(ELLIPSIS)


def test_truncate_by_word_first_word_too_long() -> None:
    assert truncate("supercalifragilistic word", 5, by_word=True) == "…"


def test_truncate_by_word_splits_on_unicode_spaces() -> None:
    text = "one\u3000two\u00a0three\tfour"
    assert truncate(text, 8, by_word=True) == "one\u3000two…"


# ── split_words ─────────────────────────────────────────────────────


def test_split_words_keeps_leading_separator() -> None:
    assert split_words("a b\nc") == ["a", " b", "\nc"]


def test_split_chars_cover_no_break_space() -> None:
    assert "\u00a0" in SPLIT_CHARS
    assert "\ufeff" in SPLIT_CHARS
