"""
Shared helpers for character- and line-oriented transforms.
"""

import re
from typing import Iterable

import regex

_GRAPHEME = regex.compile(r"\X")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def graphemes(text: str) -> list[str]:
    """Split text into user-perceived characters (extended grapheme clusters)."""
    return _GRAPHEME.findall(text)


def split_lines(text: str) -> list[str]:
    """Split on any line break. Empty text has no lines."""
    if not text:
        return []
    return _LINE_BREAK.split(text)


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)
