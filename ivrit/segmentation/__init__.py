"""Sentence segmentation, clitic-aware tokenization and the chunk pipeline."""

from ivrit.segmentation.pipeline import TextSegmenter, segment_text
from ivrit.segmentation.sentences import segment_sentences, split_phrases
from ivrit.segmentation.tokenizer import CliticTokenizer, tokenize

__all__ = [
    "CliticTokenizer",
    "TextSegmenter",
    "segment_sentences",
    "segment_text",
    "split_phrases",
    "tokenize",
]
