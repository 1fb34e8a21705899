"""
Unit tests for the case transforms.
"""

from casecraft.transforms.case import (
    alternating_case,
    capitalize_words,
    inverse_case,
    lowercase,
    smart_title_case,
    true_sentence_case,
    uppercase,
)
from tests.fixtures import get_text_batch


class TestSimpleCase:
    """Tests for lowercase and uppercase."""

    def test_lowercase(self):
        """Test lowercasing mixed text."""
        assert lowercase("Hello WORLD 123") == "hello world 123"

    def test_uppercase(self):
        """Test uppercasing mixed text."""
        assert uppercase("Hello world 123") == "HELLO WORLD 123"

    def test_non_latin(self):
        """Test that case mapping covers non-ASCII letters."""
        assert uppercase("straße") == "STRASSE"
        assert lowercase("ÉCOLE") == "école"


class TestCapitalizeWords:
    """Tests for the capitalized / title / sentence case transform."""

    def test_basic(self):
        """Test that each word gets an initial capital."""
        assert capitalize_words("hello world") == "Hello World"

    def test_rest_of_word_lowercased(self):
        """Test that the remaining letters are lowered."""
        assert capitalize_words("hELLO wORLD") == "Hello World"

    def test_whitespace_preserved(self):
        """Test that spacing and line breaks survive."""
        assert capitalize_words("one  two\nthree") == "One  Two\nThree"

    def test_apostrophe_does_not_split(self):
        """Test that contractions are a single word."""
        assert capitalize_words("don't stop") == "Don't Stop"

    def test_empty(self):
        """Test empty input."""
        assert capitalize_words("") == ""


class TestSmartTitleCase:
    """Tests for title case that keeps short words lowercase."""

    def test_small_words_stay_lower(self):
        """Test that articles and prepositions are not capitalized."""
        assert smart_title_case("the lord of the rings") == "The Lord of the Rings"

    def test_first_word_always_capitalized(self):
        """Test that a leading small word is capitalized."""
        assert smart_title_case("a tale OF two cities") == "A Tale of Two Cities"


class TestTrueSentenceCase:
    """Tests for sentence-start capitalization."""

    def test_sentences(self):
        """Test capitalization after each terminator."""
        text = "hELLO world. how ARE you? fine"
        assert true_sentence_case(text) == "Hello world. How are you? Fine"

    def test_newline_starts_sentence(self):
        """Test that a new line starts a new sentence."""
        assert true_sentence_case("first line\nsecond line") == "First line\nSecond line"

    def test_leading_punctuation(self):
        """Test that the first letter is capitalized even after symbols."""
        assert true_sentence_case("...wait") == "...Wait"


class TestAlternatingCase:
    """Tests for alternating case."""

    def test_alternates_by_position(self):
        """Test even positions lower and odd positions upper."""
        assert alternating_case("hello") == "hElLo"

    def test_spaces_count_as_positions(self):
        """Test that every character advances the position."""
        assert alternating_case("a b") == "a b"
        assert alternating_case("ab cd") == "aB Cd"


class TestInverseCase:
    """Tests for swapping case."""

    def test_swaps(self):
        """Test that upper and lower case are exchanged."""
        assert inverse_case("Hello World") == "hELLO wORLD"

    def test_uncased_characters_unchanged(self):
        """Test digits and punctuation pass through."""
        assert inverse_case("123 !?") == "123 !?"

    def test_involution_on_ascii(self):
        """Test that inverting twice restores ASCII text."""
        text = "The Quick Brown FOX"
        assert inverse_case(inverse_case(text)) == text


class TestCaseProperties:
    """Properties that hold for any input."""

    def test_uppercase_idempotent(self):
        """Test that uppercasing twice changes nothing more."""
        for text in get_text_batch():
            assert uppercase(uppercase(text)) == uppercase(text)

    def test_capitalize_keeps_whitespace(self):
        """Test that word capitalization never moves whitespace."""
        for text in get_text_batch():
            assert capitalize_words(text).split() == [w[:1].upper() + w[1:].lower() for w in text.split()]
