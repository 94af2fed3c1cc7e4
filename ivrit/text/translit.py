"""Letter-by-letter Hebrew to Latin transliteration for display."""

HEBREW_TO_LATIN: dict[str, str] = {
    "א": "ʾ",
    "ב": "b",
    "ג": "g",
    "ד": "d",
    "ה": "h",
    "ו": "v",
    "ז": "z",
    "ח": "ḥ",
    "ט": "ṭ",
    "י": "y",
    "כ": "k",
    "ך": "kh",
    "ל": "l",
    "מ": "m",
    "ם": "m",
    "נ": "n",
    "ן": "n",
    "ס": "s",
    "ע": "ʿ",
    "פ": "p",
    "ף": "f",
    "צ": "ts",
    "ץ": "ts",
    "ק": "q",
    "ר": "r",
    "ש": "sh",
    "ת": "t",
}


def transliterate(text: str) -> str:
    """Substitute each Hebrew letter with its Latin approximation.

    Nikud, punctuation and non-Hebrew characters pass through unchanged.
    """
    return "".join(HEBREW_TO_LATIN.get(ch, ch) for ch in text)
