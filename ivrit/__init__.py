"""Ivrit Reader: Hebrew sentence segmentation, clitic splitting and root extraction."""

from ivrit.lexicon.dictionary import gloss_for_root
from ivrit.morphology.roots import extract_root
from ivrit.segmentation.pipeline import TextSegmenter, segment_text
from ivrit.segmentation.sentences import segment_sentences
from ivrit.segmentation.tokenizer import tokenize
from ivrit.text.nikud import has_nikud, strip_nikud
from ivrit.text.rtl import normalize_zero_width
from ivrit.text.translit import transliterate

__version__ = "1.0.0"

__all__ = [
    "TextSegmenter",
    "extract_root",
    "gloss_for_root",
    "has_nikud",
    "normalize_zero_width",
    "segment_sentences",
    "segment_text",
    "strip_nikud",
    "tokenize",
    "transliterate",
]
