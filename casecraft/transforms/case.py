"""
Case & formatting transforms.
"""

import re

from .text_utils import graphemes

_WORD = re.compile(r"\S+")

SMALL_WORDS = frozenset({
    "a", "an", "the", "and", "but", "or", "for", "nor", "on", "at",
    "to", "from", "by", "in", "of", "with", "as",
})
SENTENCE_END = ".!?\n"


def lowercase(text: str) -> str:
    return text.lower()


def uppercase(text: str) -> str:
    return text.upper()


def _capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def capitalize_words(text: str) -> str:
    """
    Uppercase the first character of every whitespace-delimited word and
    lowercase the rest. Whitespace between words is preserved.

    Unlike str.title(), apostrophes and digits do not start a new word:
    "don't" becomes "Don't", not "Don'T".
    """
    return _WORD.sub(lambda m: _capitalize_word(m.group(0)), text)


def smart_title_case(text: str) -> str:
    """Capitalize each word except short function words after the first."""
    index = 0

    def repl(match):
        nonlocal index
        word = match.group(0)
        first = index == 0
        index += 1
        if not first and word.lower() in SMALL_WORDS:
            return word.lower()
        return _capitalize_word(word)

    return _WORD.sub(repl, text)


def true_sentence_case(text: str) -> str:
    """Lowercase everything, then capitalize the first letter of each sentence."""
    out = []
    capitalize_next = True
    for ch in graphemes(text):
        if ch[:1].isalpha():
            out.append(ch.upper() if capitalize_next else ch.lower())
            capitalize_next = False
        else:
            out.append(ch)
            if ch in SENTENCE_END or ch == "\r\n":
                capitalize_next = True
    return "".join(out)


def alternating_case(text: str) -> str:
    """Even positions lowercase, odd positions uppercase, counting every character."""
    return "".join(
        ch.upper() if i % 2 else ch.lower()
        for i, ch in enumerate(graphemes(text))
    )


def inverse_case(text: str) -> str:
    """Swap the case of every character; uncased characters are unchanged."""
    return "".join(
        ch.lower() if ch == ch.upper() else ch.upper()
        for ch in graphemes(text)
    )
