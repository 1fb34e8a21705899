"""
Cleanup & analysis transforms.

Line-oriented operations split on any line break and join with "\\n".
Empty input has no lines and produces empty output.
"""

import re
import unicodedata

from .text_utils import graphemes, join_lines, split_lines

# Applied in order; bold must go before italic so "**" is not read as two "*"
FORMATTING_PATTERNS = (
    re.compile(r"\*\*(.*?)\*\*"),
    re.compile(r"\*(.*?)\*"),
    re.compile(r"_(.*?)_"),
    re.compile(r"~~(.*?)~~"),
)

ADJACENT_DUPLICATE = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)
ADJACENT_SAMPLE_LIMIT = 6

_WHITESPACE_RUN = re.compile(r"\s+")
_NEWLINE_RUN = re.compile(r"\n+")
_NON_ALPHANUMERIC = re.compile(r"[^\w]+|_+")


def remove_duplicate_lines(text: str) -> str:
    """Drop repeated lines, keeping the first occurrence of each in order."""
    seen = set()
    out = []
    for line in split_lines(text):
        if line not in seen:
            seen.add(line)
            out.append(line)
    return join_lines(out)


def find_duplicate_words(text: str) -> str:
    """
    Report words that occur more than once.

    Counting is case-sensitive over whitespace-delimited words. Each
    duplicate is reported as "word: N times", in order of first appearance.
    """
    counts = {}
    for word in text.split():
        counts[word] = counts.get(word, 0) + 1
    return "\n".join(f"{word}: {n} times" for word, n in counts.items() if n > 1)


def find_adjacent_duplicates(text: str) -> str:
    """Summarize immediately repeated words such as "the the"."""
    words = [m.group(1) for m in ADJACENT_DUPLICATE.finditer(text)]
    if not words:
        return "No adjacent duplicate words found"
    return "Adjacent duplicates: " + ", ".join(words[:ADJACENT_SAMPLE_LIMIT])


def remove_formatting(text: str) -> str:
    """Strip **bold**, *italic*, _underscore_ and ~~strike~~ delimiters."""
    for pattern in FORMATTING_PATTERNS:
        text = pattern.sub(r"\1", text)
    return text


def remove_letters(text: str) -> str:
    return "".join(ch for ch in graphemes(text) if not ch[:1].isalpha())


def plain_text(text: str) -> str:
    return " ".join(text.split())


def compress_text(text: str) -> str:
    """Collapse whitespace runs to one space, newline runs to one newline, trim."""
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _NEWLINE_RUN.sub("\n", text)
    return text.strip()


def remove_extra_spaces(text: str) -> str:
    return compress_text(text)


def remove_spaces(text: str) -> str:
    return text.replace(" ", "")


def remove_line_breaks(text: str) -> str:
    return text.replace("\n", " ")


def remove_underscores(text: str) -> str:
    return text.replace("_", "")


def remove_non_alphanumeric(text: str) -> str:
    """Keep letters and digits; every run of anything else becomes one space."""
    return " ".join(part for part in _NON_ALPHANUMERIC.split(text) if part)


def add_line_numbers(text: str) -> str:
    return join_lines(f"{n}. {line}" for n, line in enumerate(split_lines(text), start=1))


def sort_lines(text: str) -> str:
    """Sort lines by code point, independent of locale."""
    return join_lines(sorted(split_lines(text)))


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", stripped)


def remove_formatting_ascii(text: str) -> str:
    """Strip diacritics, then drop everything outside ASCII."""
    return "".join(ch for ch in strip_diacritics(text) if ch.isascii())
