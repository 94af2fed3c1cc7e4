"""Nikud (vowel point) and cantillation handling.

The vowel points and cantillation marks are combining characters in
the U+0591–U+05C7 block. Hebrew punctuation living in the same block
(maqaf U+05BE, paseq U+05C0, sof pasuq U+05C3, nun hafukha U+05C6)
is not a diacritic and is left alone.
"""

import re

# Cantillation U+0591–U+05AF, points U+05B0–U+05BD, rafe, shin/sin dots,
# upper/lower dots and qamats qatan.
NIKUD_CLASS = "\u0591-\u05AF\u05B0-\u05BD\u05BF\u05C1\u05C2\u05C4\u05C5\u05C7"

_NIKUD_RE = re.compile(f"[{NIKUD_CLASS}]")


def is_nikud(ch: str) -> bool:
    """Return True if ``ch`` is a Hebrew vowel point or cantillation mark."""
    return bool(_NIKUD_RE.fullmatch(ch))


def strip_nikud(text: str) -> str:
    """Remove all vowel points and cantillation marks from ``text``."""
    return _NIKUD_RE.sub("", text)


def has_nikud(text: str) -> bool:
    """Return True if ``text`` contains any vowel point or cantillation mark."""
    return _NIKUD_RE.search(text) is not None


def toggle_nikud(text: str, show_nikud: bool) -> str:
    """Return ``text`` as-is, or stripped of nikud when ``show_nikud`` is False."""
    if show_nikud:
        return text
    return strip_nikud(text)
