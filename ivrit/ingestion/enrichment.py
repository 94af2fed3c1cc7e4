"""Attaching translations and glosses produced by a translation service.

The segmenter never translates. A translator receives each chunk's text
and its token surfaces, and the results are attached to copies of the
chunks; tokens are never re-segmented.
"""

import logging
from typing import Protocol

from ivrit.lexicon.dictionary import RootDictionary
from ivrit.lexicon.tables import HEBREW_CLITICS
from ivrit.models.chunk import Chunk
from ivrit.morphology.roots import RootExtractor
from ivrit.text.nikud import strip_nikud

logger = logging.getLogger(__name__)


class Translator(Protocol):
    """Anything that can translate a sentence and gloss its words."""

    def translate_sentence(self, text: str) -> str | None: ...

    def gloss_tokens(self, surfaces: list[str]) -> list[str | None]: ...


def apply_translation(
    chunk: Chunk,
    translation: str | None,
    glosses: list[str | None] | None = None,
) -> Chunk:
    """Return a copy of ``chunk`` carrying a translation and token glosses.

    Args:
        chunk: The segmented chunk.
        translation: Sentence translation, or None to leave it absent.
        glosses: One gloss per token in token order, or None to keep the
            current glosses.

    Returns:
        The enriched copy.

    Raises:
        ValueError: If glosses is not parallel to the chunk's tokens.
    """
    tokens = chunk.tokens
    if glosses is not None:
        if len(glosses) != len(tokens):
            raise ValueError(
                f"Expected {len(tokens)} glosses for chunk {chunk.id}, got {len(glosses)}"
            )
        tokens = [
            token.model_copy(update={"gloss": gloss})
            for token, gloss in zip(tokens, glosses)
        ]
    return chunk.model_copy(update={"translation": translation, "tokens": tokens})


def enrich_chunks(chunks: list[Chunk], translator: Translator) -> list[Chunk]:
    """Translate and gloss every chunk with ``translator``."""
    enriched: list[Chunk] = []
    for chunk in chunks:
        translation = translator.translate_sentence(chunk.text)
        glosses = translator.gloss_tokens([t.surface for t in chunk.tokens])
        enriched.append(apply_translation(chunk, translation, glosses))
    logger.debug("Enriched %d chunks", len(enriched))
    return enriched


class LexiconGlosser:
    """Offline translator that glosses words from the root lexicon.

    Clitics get their fixed meaning, other words the gloss of their root.
    It has no sentence translation.

    Args:
        dictionary: Lexicon to read glosses from.
    """

    def __init__(self, dictionary: RootDictionary) -> None:
        self._dictionary = dictionary
        self._extractor = RootExtractor(dictionary)

    def translate_sentence(self, text: str) -> str | None:
        return None

    def gloss_tokens(self, surfaces: list[str]) -> list[str | None]:
        return [self._gloss(surface) for surface in surfaces]

    def _gloss(self, surface: str) -> str | None:
        bare = strip_nikud(surface).strip()
        if bare in HEBREW_CLITICS:
            return HEBREW_CLITICS[bare]
        root = self._extractor.extract(surface)
        if root is None:
            return None
        return self._dictionary.gloss_for_root(root)
