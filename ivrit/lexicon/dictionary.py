"""Read-only root dictionary loaded from the YAML lexicon."""

import logging
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType

import yaml

from ivrit.models.lexicon import LexiconEntry
from ivrit.text.nikud import strip_nikud

logger = logging.getLogger(__name__)

BUNDLED_LEXICON = "lexicon.yaml"


class RootDictionary:
    """Maps normalized word forms to lexicon entries (root + gloss).

    Three tables are held, none of which is modified after construction:

    - word form -> identifier
    - identifier -> LexiconEntry
    - root -> gloss, built from the modern entries first and then the
      classical ones, so the first classical entry with a root wins.

    Args:
        entries: Classical entries keyed by identifier.
        forms: Normalized word form -> identifier.
        modern: Supplementary entries for modern words.
    """

    def __init__(
        self,
        entries: Mapping[str, LexiconEntry],
        forms: Mapping[str, str],
        modern: Mapping[str, LexiconEntry] | None = None,
    ) -> None:
        modern = modern or {}

        all_entries: dict[str, LexiconEntry] = {**entries, **modern}
        all_forms: dict[str, str] = {}
        for form, identifier in forms.items():
            if identifier not in all_entries:
                raise ValueError(f"Form {form!r} refers to unknown identifier {identifier!r}")
            all_forms[strip_nikud(form)] = identifier
        # Every root is also a form of its own entry unless a form claims it.
        for identifier, entry in all_entries.items():
            all_forms.setdefault(entry.root, identifier)

        glosses: dict[str, str] = {}
        for entry in modern.values():
            glosses.setdefault(entry.root, entry.gloss)
        for entry in entries.values():
            glosses.setdefault(entry.root, entry.gloss)

        self._entries = MappingProxyType(all_entries)
        self._forms = MappingProxyType(all_forms)
        self._glosses = MappingProxyType(glosses)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RootDictionary":
        """Load a dictionary from a lexicon YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            The loaded RootDictionary.

        Raises:
            FileNotFoundError: If path does not exist.
            ValueError: If the file is not a valid lexicon.
        """
        lexicon_path = Path(path)
        if not lexicon_path.exists():
            raise FileNotFoundError(f"Lexicon not found: {lexicon_path}")
        with open(lexicon_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        dictionary = cls.from_mapping(data)
        logger.info("Loaded lexicon %s: %s", lexicon_path, dictionary)
        return dictionary

    @classmethod
    def bundled(cls) -> "RootDictionary":
        """Load the lexicon shipped with the package."""
        source = resources.files("ivrit.lexicon").joinpath("data").joinpath(BUNDLED_LEXICON)
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
        dictionary = cls.from_mapping(data)
        logger.info("Loaded bundled lexicon: %s", dictionary)
        return dictionary

    @classmethod
    def from_mapping(cls, data: object) -> "RootDictionary":
        """Build a dictionary from parsed lexicon data.

        Raises:
            ValueError: If a section is missing, has the wrong shape, or an
                entry has no root.
        """
        if not isinstance(data, dict):
            raise ValueError("Lexicon must be a mapping with an 'entries' section")
        try:
            entries = _parse_entries(data["entries"])
        except KeyError as e:
            raise ValueError("Lexicon has no 'entries' section") from e
        modern = _parse_entries(data.get("modern") or {})
        forms = data.get("forms") or {}
        if not isinstance(forms, dict):
            raise ValueError("Lexicon 'forms' section must be a mapping")
        return cls(
            entries=entries,
            forms={str(k): str(v) for k, v in forms.items()},
            modern=modern,
        )

    def lookup_identifier(self, form: str) -> str | None:
        """Return the identifier of a word form, or None."""
        return self._forms.get(strip_nikud(form))

    def entry(self, identifier: str) -> LexiconEntry | None:
        return self._entries.get(identifier)

    def has_form(self, form: str) -> bool:
        return strip_nikud(form) in self._forms

    def root_for_form(self, form: str) -> str | None:
        """Return the root of a known word form, or None."""
        identifier = self.lookup_identifier(form)
        if identifier is None:
            return None
        return self._entries[identifier].root

    def gloss_for_root(self, root: str) -> str | None:
        """Return the English gloss of a root, or None.

        Modern entries are consulted before the classical lexicon.
        """
        if not root:
            return None
        return self._glosses.get(strip_nikud(root))

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return f"{len(self._entries)} entries, {len(self._forms)} forms"


def _parse_entries(section: object) -> dict[str, LexiconEntry]:
    if not isinstance(section, dict):
        raise ValueError("Lexicon entry sections must be mappings")
    entries: dict[str, LexiconEntry] = {}
    for identifier, raw in section.items():
        if not isinstance(raw, dict) or not raw.get("root"):
            raise ValueError(f"Lexicon entry {identifier!r} has no root")
        entries[str(identifier)] = LexiconEntry(
            identifier=str(identifier),
            root=strip_nikud(str(raw["root"])).strip(),
            gloss=str(raw.get("gloss", "")),
        )
    return entries


@lru_cache(maxsize=None)
def load_dictionary(path: str | None = None) -> RootDictionary:
    """Load (once per process and path) a lexicon, the bundled one by default."""
    if path is None:
        return RootDictionary.bundled()
    return RootDictionary.from_yaml(path)


def get_default_dictionary() -> RootDictionary:
    """Return the process-wide bundled dictionary."""
    return load_dictionary(None)


def gloss_for_root(root: str) -> str | None:
    """Return the gloss of ``root`` from the bundled dictionary."""
    return get_default_dictionary().gloss_for_root(root)
