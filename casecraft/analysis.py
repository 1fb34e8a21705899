"""
Text statistics and content-type detection.
"""

import re
from dataclasses import dataclass, asdict

from .transforms.encoding import detect_content_type
from .transforms.text_utils import graphemes, split_lines

WORDS_PER_MINUTE = 200

_SENTENCE_SEPARATOR = re.compile(r"[.!?]")


@dataclass
class TextStats:
    """Summary statistics for a piece of text."""
    word_count: int
    char_count: int
    chars_without_spaces: int
    line_count: int
    paragraph_count: int
    sentence_count: int
    unique_words: int
    average_word_length: float
    reading_time_minutes: int
    content_type: str

    def as_rows(self) -> list[tuple[str, str]]:
        """Return (title, value) pairs ready for display."""
        minutes = self.reading_time_minutes
        return [
            ("Basic Statistics", f"{self.word_count} words, {self.char_count} characters"),
            ("Characters (no spaces)", f"{self.chars_without_spaces} characters"),
            ("Lines & Paragraphs", f"{self.line_count} lines, {self.paragraph_count} paragraphs"),
            ("Sentences", f"{self.sentence_count} sentences"),
            ("Unique Words", f"{self.unique_words} unique words"),
            ("Average Word Length", f"{self.average_word_length:.1f} letters"),
            ("Reading Time", f"~{minutes} minute{'' if minutes == 1 else 's'}"),
            ("Content Type", self.content_type),
        ]

    def to_dict(self) -> dict:
        return asdict(self)


def reading_time(word_count: int) -> int:
    """Minutes to read at 200 words per minute, never less than one."""
    return max(1, word_count // WORDS_PER_MINUTE)


def analyze_text(text: str) -> TextStats:
    """
    Compute word, character, line and sentence statistics for text.

    Characters are counted as user-perceived characters. Sentences are
    counted by their terminators. Paragraphs are the non-blank blocks
    between "\n\n" separators, so runs of blank lines add nothing.
    Empty text yields zero counts with a one-minute reading time.
    """
    words = text.split()
    word_count = len(words)
    chars_without_spaces = len(graphemes(text.replace(" ", "")))

    return TextStats(
        word_count=word_count,
        char_count=len(graphemes(text)),
        chars_without_spaces=chars_without_spaces,
        line_count=len(split_lines(text)),
        paragraph_count=len([p for p in text.split("\n\n") if p.strip()]),
        sentence_count=len(_SENTENCE_SEPARATOR.findall(text)),
        unique_words=len({w.lower() for w in words}),
        average_word_length=chars_without_spaces / word_count if word_count else 0.0,
        reading_time_minutes=reading_time(word_count),
        content_type=detect_content_type(text),
    )
