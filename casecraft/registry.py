"""
Static catalog of every transform and its display metadata.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .transforms import case, cleanup, effects, encoding, fonts


class Category(Enum):
    """Fixed grouping used for listing and filtering transforms."""
    CASE = "Case & Formatting"
    SOCIAL = "Social Media"
    EFFECTS = "Text Effects"
    CLEANUP = "Cleanup & Analysis"
    ENCODING = "Encoding & Technical"


@dataclass(frozen=True)
class TransformDescriptor:
    """
    A registered transform.

    The description is a human-readable summary and for the font styles
    is often a styled sample of the output instead.
    """
    id: str
    name: str
    description: str
    category: Category
    func: Callable[..., str]
    params: tuple[str, ...] = ()  # optional keyword arguments func accepts

    @property
    def randomized(self) -> bool:
        return "rng" in self.params


def _t(
    transform_id: str,
    name: str,
    description: str,
    category: Category,
    func: Callable[..., str],
    params: tuple[str, ...] = (),
) -> TransformDescriptor:
    return TransformDescriptor(transform_id, name, description, category, func, tuple(params))


C, S, E, U, T = (
    Category.CASE,
    Category.SOCIAL,
    Category.EFFECTS,
    Category.CLEANUP,
    Category.ENCODING,
)

TRANSFORMS: tuple[TransformDescriptor, ...] = (
    # Case & Formatting
    _t("sentenceCase", "Sentence Case", "Capitalize first letter of each sentence", C, case.capitalize_words),
    _t("lowercase", "lower case", "Convert to lowercase", C, case.lowercase),
    _t("uppercase", "UPPER CASE", "Convert to uppercase", C, case.uppercase),
    _t("capitalized", "Capitalized Case", "Capitalize Each Word", C, case.capitalize_words),
    _t("titleCase", "Title Case", "Title Style Capitalization", C, case.capitalize_words),
    _t("alternatingCase", "aLtErNaTiNg cAsE", "Alternate between upper and lower case", C, case.alternating_case),
    _t("inverseCase", "InVeRsE CaSe", "Swap case of all letters", C, case.inverse_case),
    _t("smartTitleCase", "Smart Title Case", "Title Case of the Words, Not the Articles", C, case.smart_title_case),
    _t("trueSentenceCase", "True Sentence Case", "Only the first word. Of each sentence.", C, case.true_sentence_case),

    # Social Media
    _t("boldText", "Bold Text", "Convert to bold unicode", S, fonts.bold_text),
    _t("italicText", "Italic Text", "Convert to italic unicode", S, fonts.italic_text),
    _t("smallText", "Small Text", "Tiny unicode characters", S, fonts.small_text),
    _t("bubbleText", "Bubble Text", fonts.bubble_text("Text in bubbles"), S, fonts.bubble_text),
    _t("gothicText", "Gothic Text", fonts.gothic_text("GOTHIC STYLE TEXT"), S, fonts.gothic_text),
    _t("wideText", "Wide Text", fonts.wide_text("Wide text characters"), S, fonts.wide_text),
    _t("superscript", "Superscript", fonts.superscript("superscript text"), S, fonts.superscript),
    _t("subscript", "Subscript", fonts.subscript("subscript text"), S, fonts.subscript),
    _t("strikethrough", "Strikethrough", fonts.strikethrough("Strikethrough text"), S, fonts.strikethrough),
    _t("underline", "Underline", fonts.underline("Underline text"), S, fonts.underline),
    _t("discordFont", "Discord Font", "Special font for Discord", S, fonts.discord_font),
    _t("instagramFont", "Instagram Font", "Stylish fonts for Instagram", S, fonts.instagram_font),
    _t("twitterFont", "Twitter Font", "Fonts for X/Twitter", S, fonts.twitter_font),
    _t("facebookFont", "Facebook Font", "Fonts for Facebook", S, fonts.facebook_font),

    # Text Effects
    _t("reverseText", "Reverse Text", "txet esreveR", E, effects.reverse_text),
    _t("upsideDown", "Upside Down", fonts.upside_down("upside-down text"), E, fonts.upside_down),
    _t("mirrorText", "Mirror Text", "txet rorriM", E, effects.reverse_text),
    _t("zalgoText", "Zalgo Text", "".join(ch + "\u0335" for ch in "Corrupted") + " text", E,
       effects.zalgo_text, ("intensity", "rng")),
    _t("invisibleText", "Invisible Text", "Empty/zero-width characters", E, effects.invisible_text),
    _t("cursedText", "Cursed Text", "Weird text effects", E, effects.cursed_text, ("rng",)),
    _t("slashText", "Slash Text", effects.slash_text("Text with slashes"), E, effects.slash_text),
    _t("stackedText", "Stacked Text", "T\ne\nx\nt", E, effects.stacked_text),
    _t("wingdings", "Wingdings", "Convert to Wingdings symbols", E, fonts.wingdings),
    _t("whitespaceText", "Whitespace Text", "Text with extra spaces", E, effects.whitespace_text),

    # Cleanup & Analysis
    _t("removeSpaces", "Remove Spaces", "Delete all spaces", U, cleanup.remove_spaces),
    _t("removeLineBreaks", "Remove Line Breaks", "Convert to single line", U, cleanup.remove_line_breaks),
    _t("removeUnderscores", "Remove Underscores", "Delete all _ characters", U, cleanup.remove_underscores),
    _t("removeFormatting", "Remove Formatting", "Strip all formatting", U, cleanup.remove_formatting),
    _t("removeLetters", "Remove Letters", "Keep only numbers/symbols", U, cleanup.remove_letters),
    _t("duplicateLineRemover", "Duplicate Line Remover", "Remove repeated lines", U, cleanup.remove_duplicate_lines),
    _t("duplicateWordFinder", "Duplicate Word Finder", "Find repeated words", U, cleanup.find_duplicate_words),
    _t("adjacentDuplicateWords", "Adjacent Duplicate Finder", "Spot doubled words like the the", U,
       cleanup.find_adjacent_duplicates),
    _t("plainText", "Plain Text", "Convert to plain text only", U, cleanup.plain_text),
    _t("whitespaceRemover", "Whitespace Remover", "Remove extra spaces", U, cleanup.compress_text),
    _t("removeExtraSpaces", "Remove Extra Spaces", "Collapse spaces and blank lines", U, cleanup.remove_extra_spaces),
    _t("removeNonAlphanumeric", "Remove Symbols", "Keep only letters and digits", U, cleanup.remove_non_alphanumeric),
    _t("stripDiacritics", "Strip Accents", "Remove accents and diacritics", U, cleanup.strip_diacritics),
    _t("removeFormattingASCII", "ASCII Only", "Strip accents and non-ASCII characters", U,
       cleanup.remove_formatting_ascii),
    _t("addLineNumbers", "Add Line Numbers", "Number each line", U, cleanup.add_line_numbers),
    _t("sortLines", "Sort Lines", "Alphabetical line order", U, cleanup.sort_lines),

    # Encoding & Technical
    _t("apaFormat", "APA Format", "Academic citation format", T, encoding.apa_format),
    _t("phoneticSpelling", "Phonetic Spelling", "Foh-NEH-tik SPEL-ing", T, encoding.phonetic_spelling),
    _t("pigLatin", "Pig Latin", "Igpay Atinlay anslatortray", T, encoding.pig_latin),
    _t("pigLatinSimple", "Pig Latin (Simple)", "Only the first consonant moves", T, encoding.pig_latin_simple),
    _t("unicodeText", "Unicode Text", "Convert to unicode points", T, encoding.unicode_code_points),
    _t("base64Encode", "Base64 Encode", "Encode to base64", T, encoding.base64_encode),
    _t("base64Decode", "Base64 Decode", "Decode from base64", T, encoding.base64_decode),
    _t("extractEmails", "Extract Emails", "Find email addresses", T, encoding.extract_emails),
    _t("compressText", "Text Compress", "Remove extra whitespace", T, cleanup.compress_text),
    _t("bigText", "Big Text", "Large unicode characters", T, fonts.big_text),
)

# Alternative names callers may use for registered transforms
ALIASES = {
    "removeDuplicateLines": "duplicateLineRemover",
    "findDuplicateWords": "duplicateWordFinder",
    "textCompress": "compressText",
    "unicodeConverted": "unicodeText",
    "unicodeBold": "boldText",
    "unicodeItalic": "italicText",
}

TRANSFORMS_BY_ID = {t.id: t for t in TRANSFORMS}

if len(TRANSFORMS_BY_ID) != len(TRANSFORMS):
    raise RuntimeError("Duplicate transform id in registry")
