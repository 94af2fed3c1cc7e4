"""Chunk and token data models."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ROOT_PATTERN = re.compile(r"^[א-ת]+$")


class ChunkKind(str, Enum):
    """Granularity of a segmented chunk."""

    SENTENCE = "sentence"
    PHRASE = "phrase"


class Token(BaseModel):
    """One morphological unit: a whole word, or one half of a clitic + host pair."""

    model_config = ConfigDict(frozen=True)

    idx: int = Field(ge=0)
    surface: str
    lemma: str
    root: str | None = None
    gloss: str | None = None
    pos: str | None = None  # passthrough, never filled by the segmenter

    @field_validator("root")
    @classmethod
    def _root_is_hebrew_letters(cls, value: str | None) -> str | None:
        if value is not None and not _ROOT_PATTERN.match(value):
            raise ValueError(f"Root must contain only Hebrew letters: {value!r}")
        return value

    @property
    def vocab_key(self) -> tuple[str, str | None]:
        """Key under which a vocabulary entry refers to this token."""
        return (self.lemma, self.root)


class Chunk(BaseModel):
    """A segmented sentence (or phrase) with its ordered tokens.

    Tokens are kept in storage order (first word of the string first),
    even though the text is displayed right-to-left.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    kind: ChunkKind = ChunkKind.SENTENCE
    text: str
    tokens: list[Token] = Field(default_factory=list)
    translation: str | None = None
