"""Hebrew root extraction.

Roots are recovered with a layered strategy, first success wins:

1. Dictionary: the normalized word is a known form.
2. Affix stripping: remove at most one prefix and one suffix; a stem that
   is a known form gives that form's root, otherwise the first
   three-letter stem is taken as the root.
3. Templates: the word (or a stripped stem) fits a verb or noun pattern
   and the root letters are read off the pattern's slots.
4. A word of two or three letters is taken to be its own root.

Anything else (particles, loanwords, names) has no root: the extractor
returns None and never raises for string input.
"""

import logging
from functools import lru_cache

from ivrit.lexicon.dictionary import RootDictionary, get_default_dictionary
from ivrit.lexicon.tables import FINAL_FORMS, PREFIXES, SUFFIXES, TEMPLATES, to_final_form
from ivrit.text.nikud import strip_nikud
from ivrit.text.rtl import contains_hebrew, hebrew_core, is_hebrew_word

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 2
MIN_STEM_LENGTH = 2
ROOT_STEM_LENGTH = 3
BARE_ROOT_LENGTHS = (2, 3)

_PLAIN_FORMS = {final: plain for plain, final in FINAL_FORMS.items()}


class RootExtractor:
    """Extracts the most likely consonantal root of a single word.

    Args:
        dictionary: Lexicon used for exact and stem lookups.
    """

    def __init__(self, dictionary: RootDictionary) -> None:
        self._dictionary = dictionary

    def extract(self, word: str) -> str | None:
        """Return the root of ``word``, or None when none can be determined.

        Args:
            word: A single clitic-free word, with or without nikud.

        Returns:
            The root as a string of Hebrew letters, or None.

        Raises:
            TypeError: If word is not a string.
        """
        if not isinstance(word, str):
            raise TypeError(f"word must be a str, not {type(word).__name__}")

        normalized = hebrew_core(strip_nikud(word))
        if len(normalized) < MIN_WORD_LENGTH or not contains_hebrew(normalized):
            return None

        root = self._from_dictionary(normalized)
        if root:
            return root

        stems = self._affix_stems(normalized)
        root = self._from_stems(stems)
        if root:
            return root

        root = self._from_templates(normalized, stems)
        if root:
            return root

        if len(normalized) in BARE_ROOT_LENGTHS and is_hebrew_word(normalized):
            return normalized

        logger.debug("No root for %r", normalized)
        return None

    def _from_dictionary(self, form: str) -> str | None:
        root = self._dictionary.root_for_form(form)
        if root and is_hebrew_word(root):
            return root
        return None

    def _affix_stems(self, word: str) -> list[str]:
        """Every stem left by removing at most one prefix and one suffix.

        Stems are ordered by preference: longer prefixes first, and for each
        prefix longer suffixes first. At least one affix is removed.
        """
        stems: list[str] = []
        for prefix in (*PREFIXES, ""):
            if prefix:
                if not word.startswith(prefix) or len(word) - len(prefix) < MIN_STEM_LENGTH:
                    continue
                rest = word[len(prefix):]
                # A lone vav after a one-letter prefix is a vowel letter of
                # the word itself (כותב, הולך), not the start of a host.
                if len(prefix) == 1 and rest.startswith("ו") and not rest.startswith("וו"):
                    continue
            else:
                rest = word

            for suffix in (*SUFFIXES, ""):
                if not prefix and not suffix:
                    continue
                if suffix:
                    if not rest.endswith(suffix) or len(rest) - len(suffix) < MIN_STEM_LENGTH:
                        continue
                    stem = rest[: -len(suffix)]
                else:
                    stem = rest
                stems.append(to_final_form(stem))
        return stems

    def _from_stems(self, stems: list[str]) -> str | None:
        for stem in stems:
            root = self._from_dictionary(stem)
            if root:
                return root
        for stem in stems:
            if len(stem) == ROOT_STEM_LENGTH and is_hebrew_word(stem):
                return stem
        return None

    def _from_templates(self, word: str, stems: list[str]) -> str | None:
        for candidate in (word, *(s for s in stems if len(s) > ROOT_STEM_LENGTH)):
            for template in TEMPLATES:
                letters = template.match(candidate)
                if letters and is_hebrew_word(letters):
                    logger.debug("%r matched template %s", candidate, template.name)
                    return to_final_form(_plain(letters))
        return None


def _plain(letters: str) -> str:
    """Write every letter in its non-final form."""
    return "".join(_PLAIN_FORMS.get(ch, ch) for ch in letters)


def categorize_word(word: str) -> str:
    """Guess the morphological shape of a word from its affixes.

    This is a surface heuristic for display hints, not a tagger.
    """
    normalized = strip_nikud(word)

    if normalized.startswith("ל") and len(normalized) > 3:
        return "infinitive"
    if normalized.startswith("מ") and len(normalized) > 3:
        return "participle"
    if normalized.startswith("י") and len(normalized) > 3:
        return "future"
    if normalized.startswith("הת") and len(normalized) > 4:
        return "past_reflexive"
    if normalized.startswith("ה") and len(normalized) > 4:
        return "past_causative"
    if normalized.endswith("ים"):
        return "plural_masculine"
    if normalized.endswith("ות"):
        return "plural_feminine"
    if normalized.endswith("ה") and len(normalized) > 2:
        return "feminine"
    return "base"


def common_conjugations(root: str) -> list[str]:
    """Build a few example forms of a root.

    Three-letter roots give the Qal past and present, Pi'el past, Hif'il
    past and Qal infinitive; two-letter (hollow) roots give the bare form,
    the feminine past and the infinitive. Output is deterministic.
    """
    root = strip_nikud(root or "")
    if len(root) < 2 or not is_hebrew_word(root):
        return []

    letters = _plain(root)
    if len(letters) == 3:
        r1, r2, r3 = letters
        forms = [
            f"{r1}{r2}{r3}",
            f"{r1}ו{r2}{r3}",
            f"{r1}י{r2}{r3}",
            f"ה{r1}{r2}י{r3}",
            f"ל{r1}{r2}ו{r3}",
        ]
    elif len(letters) == 2:
        r1, r2 = letters
        forms = [
            f"{r1}{r2}",
            f"{r1}{r2}ה",
            f"ל{r1}ו{r2}",
        ]
    else:
        return []

    return list(dict.fromkeys(to_final_form(f) for f in forms))


@lru_cache(maxsize=1)
def get_default_extractor() -> RootExtractor:
    """Return the process-wide extractor over the bundled dictionary."""
    return RootExtractor(get_default_dictionary())


def extract_root(word: str) -> str | None:
    """Return the root of ``word`` using the bundled dictionary."""
    return get_default_extractor().extract(word)


def root_meaning(root: str) -> str | None:
    """Return the English gloss of ``root``, or None."""
    return get_default_dictionary().gloss_for_root(root)
