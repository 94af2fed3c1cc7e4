"""Clitic-aware tokenizer for Hebrew sentences."""

import logging
import math
from functools import lru_cache

from ivrit.config import CliticScoringConfig
from ivrit.lexicon.dictionary import RootDictionary, get_default_dictionary
from ivrit.lexicon.tables import (
    HEBREW_CLITICS,
    PLURAL_SUFFIXES,
    PRONOUN_FORMS,
    VERB_PREFIXES,
    VERB_SUFFIXES,
)
from ivrit.models.chunk import Token
from ivrit.morphology.roots import RootExtractor
from ivrit.text.nikud import is_nikud, strip_nikud
from ivrit.text.rtl import hebrew_core, is_hebrew_letter, is_hebrew_word

logger = logging.getLogger(__name__)

REJECT = -math.inf


class CliticTokenizer:
    """Splits sentences into word tokens, peeling off leading clitics.

    Each whitespace-delimited word becomes one token, or two when its
    first letter is one of the seven one-letter clitics (ו ה ב כ ל מ ש)
    and the rest of the word scores as a plausible host:

    - the rest starts with the definite article ה,
    - it has an infinitive shape (ל + at least three letters),
    - it is a pronoun or an inflected preposition,
    - it carries a verb prefix or suffix,

    while a plural noun ending counts against splitting. A three-letter
    remainder needs strong evidence, since it is usually a root itself
    (מכתב is not מ + כתב).

    Args:
        config: Scorer weights and thresholds.
        dictionary: Lexicon used to recognise whole words when
            ``config.respect_lexicon`` is set.
        extractor: Root extractor applied to every non-clitic token.
    """

    def __init__(
        self,
        config: CliticScoringConfig,
        dictionary: RootDictionary,
        extractor: RootExtractor | None = None,
    ) -> None:
        self._config = config
        self._dictionary = dictionary
        self._extractor = extractor or RootExtractor(dictionary)

    def tokenize(self, sentence: str) -> list[Token]:
        """Split a sentence into tokens with sequential ``idx`` values.

        Args:
            sentence: One segmented sentence.

        Returns:
            Tokens in storage order, indexed from 0.

        Raises:
            TypeError: If sentence is not a string.
        """
        if not isinstance(sentence, str):
            raise TypeError(f"sentence must be a str, not {type(sentence).__name__}")

        tokens: list[Token] = []
        for word in sentence.split():
            split_at = self._clitic_boundary(word)
            if split_at is None:
                tokens.append(self._word_token(len(tokens), word))
                continue

            clitic, host = word[:split_at], word[split_at:]
            letter = hebrew_core(strip_nikud(clitic))
            tokens.append(
                Token(idx=len(tokens), surface=clitic, lemma=clitic, root=letter)
            )
            tokens.append(self._word_token(len(tokens), host))

        return tokens

    def score(self, base: str) -> float:
        """Score how plausible it is that ``base`` is a host after a clitic.

        Args:
            base: The unpointed word without its first letter.

        Returns:
            The score, or ``-inf`` when splitting is ruled out.
        """
        cfg = self._config
        is_pronoun = base in PRONOUN_FORMS

        if not is_hebrew_word(base) or len(base) <= 1:
            return REJECT
        if len(base) == 2 and not is_pronoun:
            return REJECT

        score = 0
        if base.startswith("ה"):
            score += cfg.article_weight
        if base.startswith("ל") and len(base) > 3:
            score += cfg.infinitive_weight
        if is_pronoun:
            score += cfg.pronoun_weight
        if _has_verb_affix(base):
            score += cfg.verb_affix_weight
        if base.endswith(PLURAL_SUFFIXES):
            score -= cfg.plural_penalty

        if len(base) == 3 and score < cfg.short_base_min_score:
            return REJECT
        return score

    def _clitic_boundary(self, word: str) -> int | None:
        """Return the index in ``word`` where the host starts, or None."""
        core = hebrew_core(strip_nikud(word))
        if len(core) < self._config.min_split_length:
            return None
        if core[0] not in HEBREW_CLITICS or not is_hebrew_letter(core[1]):
            return None
        if self._config.respect_lexicon and self._dictionary.has_form(core):
            return None

        base = core[1:]
        score = self.score(base)
        if score < self._config.split_threshold:
            return None

        logger.debug("Splitting %r as %s + %s (score %s)", word, core[0], base, score)
        return _after_first_letter(word)

    def _word_token(self, idx: int, surface: str) -> Token:
        return Token(
            idx=idx,
            surface=surface,
            lemma=surface,
            root=self._extractor.extract(surface),
        )


def _has_verb_affix(base: str) -> bool:
    for suffix in VERB_SUFFIXES:
        if base.endswith(suffix):
            # ה + ... + ו is more often a possessive than a verb ending.
            if suffix == "ו" and base.endswith("הו"):
                continue
            return True
    return any(
        base.startswith(prefix) and len(base) > len(prefix) + 1
        for prefix in VERB_PREFIXES
    )


def _after_first_letter(word: str) -> int:
    """Index just past the first Hebrew letter of ``word`` and its points."""
    i = 0
    while not is_hebrew_letter(word[i]):
        i += 1
    i += 1
    while i < len(word) and is_nikud(word[i]):
        i += 1
    return i


@lru_cache(maxsize=1)
def get_default_tokenizer() -> CliticTokenizer:
    """Return the process-wide tokenizer with default weights."""
    return CliticTokenizer(CliticScoringConfig(), get_default_dictionary())


def tokenize(sentence: str) -> list[Token]:
    """Tokenize ``sentence`` with the default configuration and lexicon."""
    return get_default_tokenizer().tokenize(sentence)
