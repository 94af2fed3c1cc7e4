"""Text to chunk segmentation pipeline."""

import logging
from functools import lru_cache
from uuid import uuid4

from ivrit.config import AppConfig
from ivrit.lexicon.dictionary import RootDictionary, load_dictionary
from ivrit.models.chunk import Chunk, ChunkKind
from ivrit.segmentation.sentences import segment_sentences, split_phrases
from ivrit.segmentation.tokenizer import CliticTokenizer
from ivrit.text.rtl import normalize_zero_width

logger = logging.getLogger(__name__)


class TextSegmenter:
    """Turns raw Hebrew text into sentence (or phrase) chunks with tokens.

    Pipeline: zero-width normalization -> sentence segmentation ->
    clitic-aware tokenization -> root extraction per token. Diacritics are
    preserved in chunk and token text.

    Args:
        config: Application configuration (scorer weights, phrase mode).
        dictionary: Lexicon to use. Defaults to the one named in config.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        dictionary: RootDictionary | None = None,
    ) -> None:
        self._config = config or AppConfig()
        self._dictionary = dictionary or load_dictionary(self._config.lexicon.path)
        self._tokenizer = CliticTokenizer(self._config.clitics, self._dictionary)

    def segment(self, raw: str) -> list[Chunk]:
        """Segment using the configured granularity."""
        if self._config.segmentation.split_phrases:
            return self.segment_phrases(raw)
        return self.segment_text(raw)

    def segment_text(self, raw: str) -> list[Chunk]:
        """Split raw text into sentence chunks.

        Args:
            raw: Text as captured, possibly with nikud and invisible marks.

        Returns:
            One Chunk per sentence, in text order. Empty for blank text.

        Raises:
            TypeError: If raw is not a string.
        """
        sentences = segment_sentences(self._normalize(raw))
        chunks = [
            self._build_chunk(ChunkKind.SENTENCE, index, sentence)
            for index, sentence in enumerate(sentences)
        ]
        logger.debug("Segmented %d sentences", len(chunks))
        return chunks

    def segment_phrases(self, raw: str) -> list[Chunk]:
        """Split raw text into phrase chunks (sentences, then phrases)."""
        phrases = [
            phrase
            for sentence in segment_sentences(self._normalize(raw))
            for phrase in split_phrases(sentence)
        ]
        chunks = [
            self._build_chunk(ChunkKind.PHRASE, index, phrase)
            for index, phrase in enumerate(phrases)
        ]
        logger.debug("Segmented %d phrases", len(chunks))
        return chunks

    def _normalize(self, raw: str) -> str:
        if not isinstance(raw, str):
            raise TypeError(f"text must be a str, not {type(raw).__name__}")
        return normalize_zero_width(raw)

    def _build_chunk(self, kind: ChunkKind, index: int, text: str) -> Chunk:
        return Chunk(
            id=f"{kind.value}-{index}-{uuid4().hex[:8]}",
            kind=kind,
            text=text,
            tokens=self._tokenizer.tokenize(text),
        )


@lru_cache(maxsize=1)
def get_default_segmenter() -> TextSegmenter:
    """Return the process-wide segmenter with default configuration."""
    return TextSegmenter()


def segment_text(raw: str) -> list[Chunk]:
    """Segment ``raw`` into sentence chunks with the default configuration."""
    return get_default_segmenter().segment_text(raw)
