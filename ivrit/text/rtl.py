"""Right-to-left text helpers: invisible characters and letter classes."""

import re

from ivrit.text.nikud import NIKUD_CLASS

# Zero-width space/non-joiner/joiner, word joiner, LTR and RTL marks.
ZERO_WIDTH_CHARS = "\u200B\u200C\u200D\u2060\u200E\u200F"

_ZERO_WIDTH_RE = re.compile(f"[{ZERO_WIDTH_CHARS}]")
_HEBREW_RE = re.compile("[\u0590-\u05FF\uFB1D-\uFB4F]")
_HEBREW_LETTER_RE = re.compile(r"[א-ת]")
_HEBREW_WORD_RE = re.compile(r"[א-ת]+")

# Anything that is neither a Hebrew letter nor a point, at either edge.
_EDGE_RE = re.compile(
    f"^[^א-ת{NIKUD_CLASS}]+|[^א-ת{NIKUD_CLASS}]+$"
)


def normalize_zero_width(text: str) -> str:
    """Remove zero-width and directional-mark characters."""
    return _ZERO_WIDTH_RE.sub("", text)


def contains_hebrew(text: str) -> bool:
    """Return True if ``text`` holds any character from the Hebrew blocks."""
    return _HEBREW_RE.search(text) is not None


def text_direction(text: str) -> str:
    """Return ``"rtl"`` for text containing Hebrew, ``"ltr"`` otherwise."""
    return "rtl" if contains_hebrew(text) else "ltr"


def is_hebrew_letter(ch: str) -> bool:
    """Return True if ``ch`` is a Hebrew base letter (final forms included)."""
    return bool(_HEBREW_LETTER_RE.fullmatch(ch))


def is_hebrew_word(text: str) -> bool:
    """Return True if ``text`` is non-empty and made only of Hebrew letters."""
    return bool(_HEBREW_WORD_RE.fullmatch(text))


def hebrew_core(word: str) -> str:
    """Trim leading and trailing characters that are not Hebrew letters or points.

    ``"עולם,"`` becomes ``"עולם"`` and ``'"שלום'`` becomes ``"שלום"``;
    inner characters (geresh, gershayim, maqaf) are kept.
    """
    return _EDGE_RE.sub("", word)
