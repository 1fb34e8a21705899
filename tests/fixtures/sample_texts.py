"""
Sample texts for use in tests.
"""

SAMPLE_PARAGRAPH = (
    "The quick brown fox jumps over the lazy dog. "
    "It was the the best of times! Was it the worst of times?"
)

SAMPLE_LIST = """banana
apple
cherry
apple
banana
date"""

SAMPLE_MARKDOWN = "This is **bold**, *italic*, _underlined_ and ~~struck~~ text."

SAMPLE_CONTACTS = """
Reach the team at support@example.com or sales@example.org.
Jane Doe <jane.doe+news@mail.co.uk>, backup: not-an-email@, @nobody
"""

SAMPLE_ACCENTED = "Crème brûlée à la façon de Zoë"

# Family emoji (ZWJ sequence) and a flag: multi-code-point graphemes
SAMPLE_EMOJI = "hi \U0001F468\u200d\U0001F469\u200d\U0001F467 \U0001F1EB\U0001F1F7!"

# Preference file payloads that must all load as empty collections
MALFORMED_PREFERENCES = [
    "",
    "not json at all",
    "[1, 2, 3]",
    '"just a string"',
    '{"favoriteTransformations": "boldText", "transformationHistory": 42}',
    '{"favoriteTransformations": [1, 2], "transformationHistory": [null]}',
]


def get_text_batch():
    """A varied batch of inputs every transform must accept."""
    return [
        "",
        " ",
        "a",
        "Hello, World!",
        "line one\nline two\r\nline three",
        "  padded  \t text  ",
        "ÀÉÎÕÜ àéîõü ß",
        "1234567890 +-=()",
        "e\u0301 combining",
        SAMPLE_PARAGRAPH,
        SAMPLE_LIST,
        SAMPLE_MARKDOWN,
        SAMPLE_CONTACTS,
        SAMPLE_EMOJI,
        "SGVsbG8=",
        "not base64 !!",
    ]
