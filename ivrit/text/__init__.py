"""Hebrew text normalization and transliteration."""

from ivrit.text.nikud import has_nikud, is_nikud, strip_nikud, toggle_nikud
from ivrit.text.rtl import (
    contains_hebrew,
    hebrew_core,
    is_hebrew_letter,
    is_hebrew_word,
    normalize_zero_width,
    text_direction,
)
from ivrit.text.translit import transliterate

__all__ = [
    "contains_hebrew",
    "has_nikud",
    "hebrew_core",
    "is_hebrew_letter",
    "is_hebrew_word",
    "is_nikud",
    "normalize_zero_width",
    "strip_nikud",
    "text_direction",
    "toggle_nikud",
    "transliterate",
]
