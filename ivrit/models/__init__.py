"""Data models for the Ivrit Reader pipeline."""

from ivrit.models.chunk import Chunk, ChunkKind, Token
from ivrit.models.lexicon import LexiconEntry, PatternTemplate

__all__ = [
    "Chunk",
    "ChunkKind",
    "LexiconEntry",
    "PatternTemplate",
    "Token",
]
