"""Lexicon data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field


class LexiconEntry(BaseModel):
    """A lexicon entry keyed by a stable identifier (a Strong's number
    for the classical lexicon, an ``M``-prefixed key for modern words)."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    root: str  # nikud-free
    gloss: str = ""


class PatternTemplate(BaseModel):
    """A morphological template.

    ``shape`` spells the template with literal Hebrew letters and the
    digits ``1``, ``2``, ``3`` standing for the root consonants, e.g.
    ``"ה12י3"`` for the Hif'il past (הפעיל).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    shape: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def length(self) -> int:
        return len(self.shape)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def positions(self) -> tuple[int, ...]:
        slots = sorted((ch, i) for i, ch in enumerate(self.shape) if ch.isdigit())
        return tuple(i for _, i in slots)

    def match(self, word: str) -> str | None:
        """Return the root letters if ``word`` fits this template, else None."""
        if len(word) != self.length:
            return None
        for ch, template_ch in zip(word, self.shape):
            if not template_ch.isdigit() and ch != template_ch:
                return None
        return "".join(word[i] for i in self.positions)
