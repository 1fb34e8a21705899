"""
Unit tests for text statistics.
"""

import pytest

from casecraft.analysis import TextStats, analyze_text, reading_time


class TestReadingTime:
    """Tests for the reading time estimate."""

    @pytest.mark.parametrize("words, minutes", [
        (0, 1),
        (199, 1),
        (200, 1),
        (400, 2),
        (599, 2),
        (1000, 5),
    ])
    def test_reading_time(self, words, minutes):
        """Test whole minutes at 200 words per minute, minimum one."""
        assert reading_time(words) == minutes


class TestAnalyzeText:
    """Tests for analyze_text."""

    def test_basic_counts(self):
        """Test the counts for a two-sentence line."""
        stats = analyze_text("Hello world. How are you?")
        assert stats.word_count == 5
        assert stats.char_count == 25
        assert stats.chars_without_spaces == 21
        assert stats.line_count == 1
        assert stats.paragraph_count == 1
        assert stats.sentence_count == 2
        assert stats.unique_words == 5
        assert stats.average_word_length == pytest.approx(4.2)
        assert stats.reading_time_minutes == 1
        assert stats.content_type == "Short Text"

    def test_empty(self):
        """Test that empty text gives zero counts."""
        stats = analyze_text("")
        assert stats.word_count == 0
        assert stats.char_count == 0
        assert stats.line_count == 0
        assert stats.paragraph_count == 0
        assert stats.sentence_count == 0
        assert stats.unique_words == 0
        assert stats.average_word_length == 0.0
        assert stats.reading_time_minutes == 1

    def test_unique_words_ignore_case(self):
        """Test that words differing only in case count once."""
        assert analyze_text("The the THE").unique_words == 1

    def test_lines_and_paragraphs(self):
        """Test line and blank-line-separated paragraph counts."""
        stats = analyze_text("a\n\nb\n\n\n\nc")
        assert stats.line_count == 7
        assert stats.paragraph_count == 3

    def test_blank_runs_are_not_paragraphs(self):
        """Test that extra blank lines and whitespace-only blocks add no paragraphs."""
        assert analyze_text("a\n\n\n\n\n\nb").paragraph_count == 2
        assert analyze_text("\n\n  \n\n").paragraph_count == 0
        assert analyze_text("one\n\n").paragraph_count == 1

    def test_mixed_line_breaks(self):
        """Test that every line break style ends a line."""
        assert analyze_text("a\nb\r\nc\rd").line_count == 4

    def test_characters_are_graphemes(self):
        """Test that a joined emoji counts as one character."""
        family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
        assert analyze_text(family).char_count == 1

    def test_every_terminator_counts(self):
        """Test that each terminator is counted, including ellipses."""
        assert analyze_text("Wait... what?!").sentence_count == 5

    def test_content_type(self, contacts_text):
        """Test that the content heuristics are included."""
        assert analyze_text(contacts_text).content_type == "Email/Contact"

    def test_long_reading_time(self):
        """Test reading time for a long text."""
        stats = analyze_text("word " * 450)
        assert stats.word_count == 450
        assert stats.reading_time_minutes == 2
        assert stats.content_type == "Long Document"


class TestTextStats:
    """Tests for the statistics record."""

    def test_rows(self):
        """Test the display rows."""
        rows = dict(analyze_text("Hello world. How are you?").as_rows())
        assert rows["Basic Statistics"] == "5 words, 25 characters"
        assert rows["Sentences"] == "2 sentences"
        assert rows["Average Word Length"] == "4.2 letters"
        assert rows["Reading Time"] == "~1 minute"
        assert rows["Content Type"] == "Short Text"
        assert len(rows) == 8

    def test_plural_minutes(self):
        """Test the plural reading time label."""
        rows = dict(analyze_text("word " * 400).as_rows())
        assert rows["Reading Time"] == "~2 minutes"

    def test_to_dict(self):
        """Test conversion to a plain dict."""
        data = analyze_text("one two").to_dict()
        assert data["word_count"] == 2
        assert set(data) == {f.name for f in TextStats.__dataclass_fields__.values()}
