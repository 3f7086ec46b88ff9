"""
Display title normalization for doc items.

Turns provisional titles such as "http requests in VintLang" into
"HTTP Requests". Formatting is idempotent.
"""

from __future__ import annotations

import re
from typing import List, Tuple

# Trailing language-name clutter: "in Vint", "in VintLang", "VintLang basics"
LANGUAGE_SUFFIX_PATTERN = re.compile(r"\s+(in\s+)?(vint|vintlang)(\s+.*)?$", re.IGNORECASE | re.DOTALL)

ACRONYM_CORRECTIONS: List[Tuple[str, str]] = [
    ("Http", "HTTP"),
    ("Api", "API"),
    ("Sql", "SQL"),
    ("Json", "JSON"),
    ("Xml", "XML"),
    ("Uuid", "UUID"),
    ("Csv", "CSV"),
    ("Os", "OS"),
    ("If", "If"),
    ("For", "For"),
]

_ACRONYM_PATTERNS = [
    (re.compile(rf"\b{word}\b", re.IGNORECASE), replacement)
    for word, replacement in ACRONYM_CORRECTIONS
]


def strip_language_suffix(title: str) -> str:
    return LANGUAGE_SUFFIX_PATTERN.sub("", title)


def _capitalize(word: str) -> str:
    capitalized = word.capitalize()
    # Some characters title-case into sequences that capitalize differently
    # a second time (e.g. U+0149); those words are left as written.
    if capitalized.capitalize() != capitalized:
        return word
    return capitalized


def capitalize_words(title: str) -> str:
    """Capitalize each whitespace-separated word and join with single spaces."""
    return " ".join(_capitalize(word) for word in title.split())


def correct_acronyms(title: str) -> str:
    for pattern, replacement in _ACRONYM_PATTERNS:
        title = pattern.sub(replacement, title)
    return title


def format_title(title: str) -> str:
    """Format a provisional title for display.

    Args:
        title: Title taken from a heading or derived from a filename

    Returns:
        Title without the language suffix, in capitalized words, with
        known acronyms upper-cased

    Example:
        >>> format_title("http requests in VintLang")
        'HTTP Requests'
    """
    return correct_acronyms(capitalize_words(strip_language_suffix(title)))
