"""
Unicode font-style transforms.

Every style here is a fixed per-character lookup table applied with an
identity fallback: characters missing from a table pass through untouched.
The strike/underline styles append a combining mark instead of looking
anything up, and the composite "platform fonts" are built from the tables.
"""

from string import ascii_lowercase, ascii_uppercase, digits
from typing import Mapping, Optional

from .text_utils import graphemes


class CharMap:
    """
    A character-mapping transform.

    Holds a static table from single characters to replacement strings and
    applies it grapheme by grapheme. Anything not in the table is kept as-is.
    """

    def __init__(self, name: str, table: Mapping[str, str]):
        self.name = name
        self.table = dict(table)

    def map_char(self, char: str) -> str:
        return self.table.get(char, char)

    def __call__(self, text: str) -> str:
        return "".join(self.map_char(g) for g in graphemes(text))

    def __repr__(self) -> str:
        return f"CharMap({self.name!r}, {len(self.table)} entries)"


def _offset_table(letters: str, first: int, exceptions: Optional[dict] = None) -> dict:
    """Map consecutive characters onto a consecutive code point block."""
    table = {ch: chr(first + i) for i, ch in enumerate(letters)}
    table.update(exceptions or {})
    return table


# Mathematical sans-serif bold (U+1D5D4..)
BOLD = CharMap("bold", {
    **_offset_table(ascii_uppercase, 0x1D5D4),
    **_offset_table(ascii_lowercase, 0x1D5EE),
})

# Mathematical italic; the small h lives in Letterlike Symbols
ITALIC = CharMap("italic", {
    **_offset_table(ascii_uppercase, 0x1D434),
    **_offset_table(ascii_lowercase, 0x1D44E, {"h": "ℎ"}),
})

SMALL = CharMap("small", {
    "a": "ᵃ", "b": "ᵇ", "c": "ᶜ", "d": "ᵈ", "e": "ᵉ",
    "f": "ᶠ", "g": "ᵍ", "h": "ʰ", "i": "ᶦ", "j": "ʲ",
    "k": "ᵏ", "l": "ˡ", "m": "ᵐ", "n": "ⁿ", "o": "ᵒ",
    "p": "ᵖ", "q": "ᑫ", "r": "ʳ", "s": "ˢ", "t": "ᵗ",
    "u": "ᵘ", "v": "ᵛ", "w": "ʷ", "x": "ˣ", "y": "ʸ",
    "z": "ᶻ",
    "A": "ᴬ", "B": "ᴮ", "C": "ᶜ", "D": "ᴰ", "E": "ᴱ",
    "F": "ᶠ", "G": "ᴳ", "H": "ᴴ", "I": "ᴵ", "J": "ᴶ",
    "K": "ᴷ", "L": "ᴸ", "M": "ᴹ", "N": "ᴺ", "O": "ᴼ",
    "P": "ᴾ", "Q": "ᑫ", "R": "ᴿ", "S": "ˢ", "T": "ᵀ",
    "U": "ᵁ", "V": "ⱽ", "W": "ᵂ", "X": "ˣ", "Y": "ʸ",
    "Z": "ᶻ",
})

# Circled letters and digits; circled zero sits apart from 1-9
BUBBLE = CharMap("bubble", {
    **_offset_table(ascii_uppercase, 0x24B6),
    **_offset_table(ascii_lowercase, 0x24D0),
    **_offset_table(digits[1:], 0x2460),
    "0": "⓪",
})

# Fraktur capitals only
GOTHIC = CharMap("gothic", _offset_table(ascii_uppercase, 0x1D504, {
    "C": "ℭ",
    "H": "ℌ",
    "I": "ℑ",
    "R": "ℜ",
    "Z": "ℨ",
}))

WIDE = CharMap("wide", {
    **_offset_table(ascii_uppercase, 0xFF21),
    **_offset_table(ascii_lowercase, 0xFF41),
    **_offset_table(digits, 0xFF10),
})

SUPERSCRIPT = CharMap("superscript", {
    "0": "⁰", "1": "¹", "2": "²", "3": "³", "4": "⁴",
    "5": "⁵", "6": "⁶", "7": "⁷", "8": "⁸", "9": "⁹",
    "a": "ᵃ", "b": "ᵇ", "c": "ᶜ", "d": "ᵈ", "e": "ᵉ",
    "f": "ᶠ", "g": "ᵍ", "h": "ʰ", "i": "ᶦ", "j": "ʲ",
    "k": "ᵏ", "l": "ˡ", "m": "ᵐ", "n": "ⁿ", "o": "ᵒ",
    "p": "ᵖ", "r": "ʳ", "s": "ˢ", "t": "ᵗ", "u": "ᵘ",
    "v": "ᵛ", "w": "ʷ", "x": "ˣ", "y": "ʸ", "z": "ᶻ",
    "+": "⁺", "-": "⁻", "=": "⁼", "(": "⁽", ")": "⁾",
})

# Not every letter has a subscript form
SUBSCRIPT = CharMap("subscript", {
    "0": "₀", "1": "₁", "2": "₂", "3": "₃", "4": "₄",
    "5": "₅", "6": "₆", "7": "₇", "8": "₈", "9": "₉",
    "a": "ₐ", "e": "ₑ", "h": "ₕ", "i": "ᵢ", "k": "ₖ",
    "l": "ₗ", "m": "ₘ", "n": "ₙ", "o": "ₒ", "p": "ₚ",
    "r": "ᵣ", "s": "ₛ", "t": "ₜ", "u": "ᵤ", "v": "ᵥ",
    "x": "ₓ",
    "+": "₊", "-": "₋", "=": "₌", "(": "₍", ")": "₎",
})

WINGDINGS = CharMap("wingdings", {
    "a": "✌", "b": "☜", "c": "☞", "d": "☝", "e": "☟",
    "f": "✋", "g": "☺", "h": "\U0001f64f", "i": "\U0001f44c",
    "j": "\U0001f44d", "k": "\U0001f44e", "l": "☹", "m": "\U0001f4a3",
    "n": "☠", "o": "⚡", "p": "\U0001f511", "q": "\U0001f48e",
    "r": "\U0001f450", "s": "⭐", "t": "\U0001f319", "u": "☁",
    "v": "\U0001f302", "w": "✂", "x": "\U0001f4c1", "y": "\U0001f4c2",
    "z": "\U0001f453",
    "A": "♈", "B": "♉", "C": "♊", "D": "♋", "E": "♌",
    "F": "♍", "G": "♎", "H": "♏", "I": "♐", "J": "♑",
    "K": "♒", "L": "♓", "M": "M", "N": "N", "O": "●",
    "P": "❍", "Q": "■", "R": "□", "S": "⧄", "T": "◆",
    "U": "▐", "V": "⬟", "W": "⬢", "X": "⬡", "Y": "⭔",
    "Z": "◎",
})

UPSIDE_DOWN = CharMap("upside_down", {
    "a": "ɐ", "b": "q", "c": "ɔ", "d": "p", "e": "ǝ",
    "f": "ɟ", "g": "ƃ", "h": "ɥ", "i": "ᴉ", "j": "ɾ",
    "k": "ʞ", "l": "l", "m": "ɯ", "n": "u", "o": "o", "p": "d",
    "q": "b", "r": "ɹ", "s": "s", "t": "ʇ", "u": "n", "v": "ʌ",
    "w": "ʍ", "x": "x", "y": "ʎ", "z": "z",
    "A": "∀", "B": "B", "C": "Ɔ", "D": "D", "E": "Ǝ",
    "F": "Ⅎ", "G": "פ", "H": "H", "I": "I", "J": "ſ",
    "K": "ʞ", "L": "˥", "M": "W", "N": "N", "O": "O", "P": "Ԁ",
    "Q": "Q", "R": "ᴚ", "S": "S", "T": "⊥", "U": "∩",
    "V": "Λ", "W": "M", "X": "X", "Y": "ʎ", "Z": "Z",
    "0": "0", "1": "Ɩ", "2": "ᄅ", "3": "Ɛ", "4": "ㄣ",
    "5": "ϛ", "6": "9", "7": "ㄥ", "8": "8", "9": "6",
    ".": "˙", ",": "'", "'": ",", "!": "¡", "?": "¿",
    "(": ")", ")": "(", "[": "]", "]": "[", "{": "}", "}": "{",
    "<": ">", ">": "<", "&": "⅋", "_": "‾",
})

COMBINING_LONG_STROKE = "\u0336"
COMBINING_LOW_LINE = "\u0332"

DISCORD_FENCE = "```"
TWITTER_GLYPH = "\U0001f539"
FACEBOOK_GLYPH = "\U0001f4d8"


def bold_text(text: str) -> str:
    return BOLD(text)


def italic_text(text: str) -> str:
    return ITALIC(text)


def small_text(text: str) -> str:
    return SMALL(text)


def bubble_text(text: str) -> str:
    return BUBBLE(text)


def gothic_text(text: str) -> str:
    return GOTHIC(text)


def wide_text(text: str) -> str:
    return WIDE(text)


def superscript(text: str) -> str:
    return SUPERSCRIPT(text)


def subscript(text: str) -> str:
    return SUBSCRIPT(text)


def wingdings(text: str) -> str:
    return WINGDINGS(text)


def strikethrough(text: str) -> str:
    return "".join(g + COMBINING_LONG_STROKE for g in graphemes(text))


def underline(text: str) -> str:
    return "".join(g + COMBINING_LOW_LINE for g in graphemes(text))


def upside_down(text: str) -> str:
    """Flip each character, then reverse so the text reads rotated 180 degrees."""
    flipped = [UPSIDE_DOWN.map_char(g) for g in graphemes(text)]
    return "".join(reversed(flipped))


def discord_font(text: str) -> str:
    return f"{DISCORD_FENCE}{text}{DISCORD_FENCE}"


def instagram_font(text: str) -> str:
    return f"{BOLD(text)} {ITALIC(text)}"


def twitter_font(text: str) -> str:
    return f"{TWITTER_GLYPH} {BOLD(text)} {TWITTER_GLYPH}"


def facebook_font(text: str) -> str:
    return f"{FACEBOOK_GLYPH} {text} {FACEBOOK_GLYPH}"


def big_text(text: str) -> str:
    return BOLD(text.upper())
