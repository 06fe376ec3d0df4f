"""Normalization must agree with the backend scorer token for token."""
import pytest

from read_practice.alignment.normalizer import first_token, normalize_words


def test_lowercases_and_strips_punctuation():
    assert normalize_words("Hello, World! It's fine.") == ["hello", "world", "its", "fine"]


def test_collapses_whitespace_runs_and_drops_empty_tokens():
    assert normalize_words("  the \t cat\n\nsat  ") == ["the", "cat", "sat"]


def test_punctuation_only_words_vanish():
    assert normalize_words("-- ... !!") == []


@pytest.mark.parametrize("value", [None, 42, ["the", "cat"], b"the cat"])
def test_non_string_input_yields_nothing(value):
    assert normalize_words(value) == []


@pytest.mark.parametrize(
    "text",
    ["Don't STOP—believing!", "Ça va? Très bien.", "snake_case and  TABS\t", "", "  "],
)
def test_tokens_are_lowercase_nonempty_and_punctuation_free(text):
    for token in normalize_words(text):
        assert token
        assert token == token.lower()
        assert all(ch.isalnum() or ch == "_" for ch in token)


def test_first_token_of_passage_unit():
    assert first_token('"Run,"') == "run"
    assert first_token("—") == ""
