"""Fixed morphological tables: clitics, affixes, pronouns and templates.

Everything here is an immutable tuple, frozenset or read-only mapping so
the tables can be shared freely between threads and worker processes.
"""

from types import MappingProxyType

from ivrit.models.lexicon import PatternTemplate

# One-letter bound morphemes written directly onto their host word.
HEBREW_CLITICS = MappingProxyType({
    "ו": "and",
    "ה": "the",
    "ב": "in",
    "כ": "like, as",
    "ל": "to",
    "מ": "from",
    "ש": "that",
})

# Prefixes tried by the root extractor, longest first.
PREFIXES: tuple[str, ...] = (
    "כש", "שה", "לה", "מה", "וה", "וכ", "ול", "ומ", "וש", "וב",
    "ו", "ה", "ב", "כ", "ל", "מ", "ש",
)

# Suffixes tried by the root extractor, longest first.
SUFFIXES: tuple[str, ...] = (
    "ים", "ות", "תי", "נו", "תם", "תן", "כם", "כן", "הם", "הן", "יו", "יה",
    "ה", "ת", "י", "ו", "ן",
)

# Clitic-split scorer: verb inflection shapes seen on a base.
VERB_SUFFIXES: tuple[str, ...] = ("תי", "נו", "תם", "תן", "ני", "ו", "ן")
VERB_PREFIXES: tuple[str, ...] = ("הת", "מת", "ית", "ת", "י", "נ", "א")
PLURAL_SUFFIXES: tuple[str, ...] = ("ים", "ות")

# Independent pronouns, object pronouns and inflected prepositions.
PRONOUN_FORMS: frozenset[str] = frozenset({
    "אני", "אתה", "את", "הוא", "היא", "אנחנו", "אתם", "אתן", "הם", "הן",
    "אותי", "אותך", "אותו", "אותה", "אותנו", "אתכם", "אותם", "אותן",
    "ממני", "ממך", "ממנו", "ממנה", "מכם", "מהם", "מהן",
    "לי", "לך", "לו", "לה", "לנו", "לכם", "להם", "להן",
    "עלי", "עליך", "עליו", "עליה", "עלינו", "עליהם",
    "איתי", "איתך", "איתו", "איתה", "איתנו", "איתם",
    "בי", "בך", "בו", "בה", "בנו", "בהם",
})

# Letters written in a distinct form at the end of a word.
FINAL_FORMS = MappingProxyType({
    "כ": "ך",
    "מ": "ם",
    "נ": "ן",
    "פ": "ף",
    "צ": "ץ",
})

# Verb templates (Qal, Pi'el, Hif'il, Hitpa'el) then noun templates.
# Order matters: the first template that fits wins.
TEMPLATES: tuple[PatternTemplate, ...] = tuple(
    PatternTemplate(name=name, shape=shape)
    for name, shape in (
        ("qal_past", "123"),
        ("qal_participle", "1ו23"),
        ("qal_participle_plural", "1ו23ים"),
        ("qal_participle_feminine_plural", "1ו23ות"),
        ("qal_future", "י12ו3"),
        ("qal_future_second", "ת12ו3"),
        ("qal_infinitive", "ל12ו3"),
        ("piel_past", "1י23"),
        ("piel_participle", "מ123"),
        ("piel_infinitive", "ל123"),
        ("hifil_past", "ה12י3"),
        ("hifil_participle", "מ12י3"),
        ("hifil_future", "י12י3"),
        ("hifil_infinitive", "לה12י3"),
        ("hitpael_past", "הת123"),
        ("hitpael_participle", "מת123"),
        ("hitpael_future", "ית123"),
        ("hitpael_infinitive", "להת123"),
        ("verbal_noun_piel", "1י2ו3"),
        ("verbal_noun_qal", "12י3ה"),
        ("verbal_noun_hifil", "ה123ה"),
        ("verbal_noun_hitpael", "הת123ות"),
        ("noun_tafil", "ת12י3"),
        ("noun_agent", "123ן"),
        ("noun_diminutive", "123ון"),
    )
)


def to_final_form(word: str) -> str:
    """Write the last letter of ``word`` in its final (sofit) form."""
    if word and word[-1] in FINAL_FORMS:
        return word[:-1] + FINAL_FORMS[word[-1]]
    return word
