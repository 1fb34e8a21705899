"""
Encoding & technical transforms.
"""

import base64
import binascii
import re

from .text_utils import graphemes, join_lines, split_lines

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
DATE_PATTERN = re.compile(r"\d{1,2}/\d{1,2}/\d{4}")
PHONE_PATTERN = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")

SHORT_TEXT_LIMIT = 50
LONG_TEXT_LIMIT = 500

VOWELS = frozenset("aeiouAEIOU")

NATO_ALPHABET = {
    "a": "Alpha", "b": "Bravo", "c": "Charlie", "d": "Delta", "e": "Echo",
    "f": "Foxtrot", "g": "Golf", "h": "Hotel", "i": "India", "j": "Juliet",
    "k": "Kilo", "l": "Lima", "m": "Mike", "n": "November", "o": "Oscar",
    "p": "Papa", "q": "Quebec", "r": "Romeo", "s": "Sierra", "t": "Tango",
    "u": "Uniform", "v": "Victor", "w": "Whiskey", "x": "X-ray", "y": "Yankee",
    "z": "Zulu",
}

APA_BULLET = "• "

_TOKEN = re.compile(r"\S+")


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> str:
    """Decode standard Base64 to UTF-8 text; invalid input is returned as-is."""
    try:
        raw = base64.b64decode(text, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError):
        return text


def extract_emails(text: str) -> str:
    return "\n".join(EMAIL_PATTERN.findall(text))


def _split_trailing_punctuation(word: str) -> tuple[str, str]:
    """Split a token into its core and the non-letter characters at its end."""
    end = len(word)
    while end > 0 and not word[end - 1].isalpha():
        end -= 1
    return word[:end], word[end:]


def _pig_latin_word(word: str) -> str:
    core, punct = _split_trailing_punctuation(word)
    if not core:
        return word
    if core[0] in VOWELS:
        return core + "ay" + punct
    for i, ch in enumerate(core):
        if ch in VOWELS:
            return core[i:] + core[:i] + "ay" + punct
    return core + "ay" + punct


def pig_latin(text: str) -> str:
    """
    Translate each word to Pig Latin, moving the whole leading consonant
    cluster: "string" -> "ingstray", "apple" -> "appleay".

    Trailing punctuation stays at the end of the word, tokens without
    letters are left alone and the whitespace between words is preserved.
    """
    return _TOKEN.sub(lambda m: _pig_latin_word(m.group(0)), text)


def _pig_latin_simple_word(word: str) -> str:
    first = word[0]
    if not first.isalpha():
        return word
    if first in VOWELS:
        return word + "ay"
    return word[1:] + first + "ay"


def pig_latin_simple(text: str) -> str:
    """Pig Latin that only moves the first consonant: "string" -> "tringsay"."""
    return _TOKEN.sub(lambda m: _pig_latin_simple_word(m.group(0)), text)


def _phonetic(ch: str) -> str:
    word = NATO_ALPHABET.get(ch.lower())
    if word is None:
        return ch
    return word.upper() if ch.isupper() else word


def phonetic_spelling(text: str) -> str:
    """Spell out letters with the NATO alphabet; "Ab" -> "ALPHA Bravo"."""
    return " ".join(_phonetic(ch) for ch in graphemes(text))


def unicode_code_points(text: str) -> str:
    return " ".join(f"U+{ord(ch):X}" for ch in text)


def apa_format(text: str) -> str:
    """Bold the first line as a title and bullet the remaining lines."""
    lines = split_lines(text)
    if not lines:
        return ""
    return join_lines([f"**{lines[0]}**"] + [APA_BULLET + line for line in lines[1:]])


def detect_content_type(text: str) -> str:
    """
    Classify text with a fixed set of heuristics.

    Checks run in priority order and the first match wins: email/contact,
    date, phone number, then short/long/general by length.
    """
    if "@" in text and ".com" in text:
        return "Email/Contact"
    if DATE_PATTERN.search(text):
        return "Date Content"
    if PHONE_PATTERN.search(text):
        return "Phone Numbers"

    length = len(graphemes(text))
    if length < SHORT_TEXT_LIMIT:
        return "Short Text"
    if length > LONG_TEXT_LIMIT:
        return "Long Document"
    return "General Text"
