"""Text ingestion and post-segmentation enrichment."""

from ivrit.ingestion.enrichment import (
    LexiconGlosser,
    Translator,
    apply_translation,
    enrich_chunks,
)
from ivrit.ingestion.reader import TextReader

__all__ = [
    "LexiconGlosser",
    "TextReader",
    "Translator",
    "apply_translation",
    "enrich_chunks",
]
