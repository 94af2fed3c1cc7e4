"""Root extraction and related morphology helpers."""

from ivrit.morphology.roots import (
    RootExtractor,
    categorize_word,
    common_conjugations,
    extract_root,
    get_default_extractor,
    root_meaning,
)

__all__ = [
    "RootExtractor",
    "categorize_word",
    "common_conjugations",
    "extract_root",
    "get_default_extractor",
    "root_meaning",
]
