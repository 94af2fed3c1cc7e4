"""Root lexicon and fixed morphological tables."""

from ivrit.lexicon.dictionary import (
    RootDictionary,
    get_default_dictionary,
    gloss_for_root,
    load_dictionary,
)

__all__ = [
    "RootDictionary",
    "get_default_dictionary",
    "gloss_for_root",
    "load_dictionary",
]
