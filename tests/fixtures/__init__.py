# Test fixtures
from .sample_texts import (
    SAMPLE_PARAGRAPH,
    SAMPLE_LIST,
    SAMPLE_MARKDOWN,
    SAMPLE_CONTACTS,
    SAMPLE_ACCENTED,
    SAMPLE_EMOJI,
    MALFORMED_PREFERENCES,
    get_text_batch,
)

__all__ = [
    "SAMPLE_PARAGRAPH",
    "SAMPLE_LIST",
    "SAMPLE_MARKDOWN",
    "SAMPLE_CONTACTS",
    "SAMPLE_ACCENTED",
    "SAMPLE_EMOJI",
    "MALFORMED_PREFERENCES",
    "get_text_batch",
]
