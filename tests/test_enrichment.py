"""Tests for attaching translations and glosses to chunks."""

import pytest

from ivrit.ingestion import LexiconGlosser, apply_translation, enrich_chunks
from ivrit.lexicon import get_default_dictionary
from ivrit.models import Chunk, Token
from ivrit.segmentation import TextSegmenter


class FakeTranslator:
    """Returns canned output and records the sentences it was given."""

    def __init__(self) -> None:
        self.sentences: list[str] = []

    def translate_sentence(self, text: str) -> str | None:
        self.sentences.append(text)
        return f"EN:{text}"

    def gloss_tokens(self, surfaces: list[str]) -> list[str | None]:
        return [f"g:{s}" for s in surfaces]


@pytest.fixture
def chunk() -> Chunk:
    return Chunk(
        id="sentence-0-0000abcd",
        text="והבית",
        tokens=[
            Token(idx=0, surface="ו", lemma="ו", root="ו"),
            Token(idx=1, surface="הבית", lemma="הבית", root="בית"),
        ],
    )


@pytest.fixture
def glosser() -> LexiconGlosser:
    return LexiconGlosser(get_default_dictionary())


class TestApplyTranslation:
    def test_attaches_translation_and_glosses(self, chunk: Chunk) -> None:
        enriched = apply_translation(chunk, "and the house", ["and", "the house"])

        assert enriched.translation == "and the house"
        assert [t.gloss for t in enriched.tokens] == ["and", "the house"]
        assert [t.surface for t in enriched.tokens] == ["ו", "הבית"]
        assert enriched.id == chunk.id

    def test_input_chunk_is_untouched(self, chunk: Chunk) -> None:
        apply_translation(chunk, "and the house", ["and", "the house"])

        assert chunk.translation is None
        assert all(t.gloss is None for t in chunk.tokens)

    def test_translation_only(self, chunk: Chunk) -> None:
        enriched = apply_translation(chunk, "and the house")

        assert enriched.translation == "and the house"
        assert enriched.tokens == chunk.tokens

    def test_gloss_count_mismatch(self, chunk: Chunk) -> None:
        with pytest.raises(ValueError, match="Expected 2 glosses"):
            apply_translation(chunk, None, ["and"])


class TestEnrichChunks:
    def test_fake_translator(self, chunk: Chunk) -> None:
        translator = FakeTranslator()
        [enriched] = enrich_chunks([chunk], translator)

        assert translator.sentences == ["והבית"]
        assert enriched.translation == "EN:והבית"
        assert [t.gloss for t in enriched.tokens] == ["g:ו", "g:הבית"]

    def test_no_chunks(self) -> None:
        assert enrich_chunks([], FakeTranslator()) == []


class TestLexiconGlosser:
    def test_no_sentence_translation(self, glosser: LexiconGlosser) -> None:
        assert glosser.translate_sentence("שלום עולם") is None

    def test_clitic_meanings(self, glosser: LexiconGlosser) -> None:
        assert glosser.gloss_tokens(["ו", "ה", "בְּ"]) == ["and", "the", "in"]

    def test_root_glosses(self, glosser: LexiconGlosser) -> None:
        house, god, unknown = glosser.gloss_tokens(["הבית", "אלהים", "hello"])
        assert house is not None and "house" in house
        assert god is not None and "God" in god
        assert unknown is None

    def test_segmented_text(self, glosser: LexiconGlosser) -> None:
        chunks = TextSegmenter().segment_text("והבית.")
        [enriched] = enrich_chunks(chunks, glosser)

        assert enriched.translation is None
        assert enriched.tokens[0].gloss == "and"
        assert "house" in (enriched.tokens[1].gloss or "")
