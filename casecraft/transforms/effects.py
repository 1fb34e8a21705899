"""
Text-effect transforms.

zalgo_text and cursed_text are intentionally randomized: the same input
gives different output on every call. Both take an optional random.Random
so callers can seed them or keep one generator per thread.
"""

import random
import re
from typing import Optional

from .text_utils import graphemes

ZERO_WIDTH_SPACE = "\u200b"

# Combining marks that stack above, through and below the base character
ZALGO_ABOVE = (
    "\u030d", "\u030e", "\u0304", "\u0305", "\u033f",
    "\u0311", "\u0306", "\u0310", "\u0352", "\u0357",
)
ZALGO_MIDDLE = (
    "\u0315", "\u031b", "\u0340", "\u0341", "\u0358",
    "\u0321", "\u0322", "\u0327", "\u0328", "\u0334",
)
ZALGO_BELOW = (
    "\u0316", "\u0317", "\u0318", "\u0319", "\u031c",
    "\u031d", "\u031e", "\u031f", "\u0320", "\u0324",
)
ZALGO_MARKS = frozenset(ZALGO_ABOVE + ZALGO_MIDDLE + ZALGO_BELOW)

CURSED_GLITCHES = ("\u0489", "\u0334", "\u0337", "\u0338")

DEFAULT_ZALGO_INTENSITY = 10

_EDGE_SPACES = re.compile(r"^[^\S\r\n]+|[^\S\r\n]+$")

_default_rng = random.Random()


def reverse_text(text: str) -> str:
    """Reverse user-perceived characters, keeping combining sequences intact."""
    return "".join(reversed(graphemes(text)))


def zalgo_text(
    text: str,
    intensity: float = DEFAULT_ZALGO_INTENSITY,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Bury each character under random combining marks.

    For every character, up to intensity // 3 marks are drawn from the
    "above" pool, up to intensity // 4 from the "middle" pool and up to
    intensity // 3 from the "below" pool. Counts are uniform over the
    inclusive range. A non-positive intensity leaves the text as it is.

    Args:
        text: Input text.
        intensity: Corruption level, 0 disables the effect. Fractions are
            truncated toward zero.
        rng: Random source; a module-level generator is used if omitted.

    Returns:
        The corrupted text. Every original character is kept, in order.
    """
    intensity = int(intensity)
    if intensity <= 0:
        return text
    rng = rng or _default_rng

    out = []
    for ch in graphemes(text):
        out.append(ch)
        for pool, limit in (
            (ZALGO_ABOVE, intensity // 3),
            (ZALGO_MIDDLE, intensity // 4),
            (ZALGO_BELOW, intensity // 3),
        ):
            out.extend(rng.choice(pool) for _ in range(rng.randint(0, limit)))
    return "".join(out)


def cursed_text(text: str, rng: Optional[random.Random] = None) -> str:
    """Swap each character for itself or a glitch mark, uniformly at random."""
    rng = rng or _default_rng
    return "".join(rng.choice((ch,) + CURSED_GLITCHES) for ch in graphemes(text))


def invisible_text(text: str) -> str:
    return ZERO_WIDTH_SPACE * len(graphemes(text))


def slash_text(text: str) -> str:
    return "/".join(graphemes(text))


def stacked_text(text: str) -> str:
    return "".join(ch + "\n" for ch in graphemes(text))


def whitespace_text(text: str) -> str:
    spaced = "".join(ch + " " for ch in graphemes(text))
    return _EDGE_SPACES.sub("", spaced)
