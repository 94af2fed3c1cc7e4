"""Tests for the clitic-aware tokenizer."""

import math

import pytest

from ivrit.config import CliticScoringConfig
from ivrit.lexicon import RootDictionary, get_default_dictionary
from ivrit.segmentation.tokenizer import CliticTokenizer, tokenize


@pytest.fixture
def dictionary() -> RootDictionary:
    return get_default_dictionary()


@pytest.fixture
def config() -> CliticScoringConfig:
    return CliticScoringConfig()


@pytest.fixture
def tokenizer(config: CliticScoringConfig, dictionary: RootDictionary) -> CliticTokenizer:
    return CliticTokenizer(config=config, dictionary=dictionary)


def _surfaces(tokenizer: CliticTokenizer, sentence: str) -> list[str]:
    return [t.surface for t in tokenizer.tokenize(sentence)]


# ── Splitting decisions ──────────────────────────────────────────────────────


class TestCliticSplit:
    def test_and_the_house(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize("והבית")
        assert len(tokens) == 2
        clitic, host = tokens
        assert (clitic.idx, clitic.surface, clitic.lemma, clitic.root) == (0, "ו", "ו", "ו")
        assert (host.idx, host.surface, host.lemma, host.root) == (1, "הבית", "הבית", "בית")

    def test_letter_is_not_split_from_three_letter_root(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize("מכתב")
        assert len(tokens) == 1
        assert tokens[0].surface == "מכתב"
        assert tokens[0].root == "כתב"

    def test_short_base_guard_without_lexicon(self, dictionary: RootDictionary) -> None:
        tokenizer = CliticTokenizer(CliticScoringConfig(respect_lexicon=False), dictionary)
        assert _surfaces(tokenizer, "מכתב") == ["מכתב"]

    def test_verb_prefix_on_three_letter_base_is_not_enough(
        self, tokenizer: CliticTokenizer
    ) -> None:
        # ה + ילד scores 2 from the yod, below the bar for three-letter bases
        tokens = tokenizer.tokenize("הילד")
        assert [t.surface for t in tokens] == ["הילד"]
        assert tokens[0].root == "ילד"

    def test_pronoun_base(self, tokenizer: CliticTokenizer) -> None:
        assert _surfaces(tokenizer, "שלי") == ["ש", "לי"]
        assert _surfaces(tokenizer, "שהם") == ["ש", "הם"]

    def test_infinitive_with_verb_suffix(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize("ולמדתי")
        assert [t.surface for t in tokens] == ["ו", "למדתי"]
        assert tokens[1].root == "למד"

    def test_plural_noun_is_not_split(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize("בספרים")
        assert [t.surface for t in tokens] == ["בספרים"]
        assert tokens[0].root == "ספר"

    def test_future_verb_host(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize("ויאמר")
        assert [t.surface for t in tokens] == ["ו", "יאמר"]
        assert tokens[1].root == "אמר"

    def test_known_words_are_scored_like_any_other(self, tokenizer: CliticTokenizer) -> None:
        # לך is a pronoun and לומך has an infinitive shape
        assert _surfaces(tokenizer, "מלך") == ["מ", "לך"]
        assert _surfaces(tokenizer, "שלומך") == ["ש", "לומך"]

    def test_lexicon_guard_keeps_known_words(self, dictionary: RootDictionary) -> None:
        tokenizer = CliticTokenizer(CliticScoringConfig(respect_lexicon=True), dictionary)
        tokens = tokenizer.tokenize("מלך שלומך")
        assert [t.surface for t in tokens] == ["מלך", "שלומך"]
        assert [t.root for t in tokens] == ["מלך", "שלום"]

    def test_lexicon_guard_still_splits_unknown_words(self, dictionary: RootDictionary) -> None:
        tokenizer = CliticTokenizer(CliticScoringConfig(respect_lexicon=True), dictionary)
        assert _surfaces(tokenizer, "והבית") == ["ו", "הבית"]

    @pytest.mark.parametrize("word", ["ו", "של", "מה", "לו"])
    def test_short_words_never_split(self, tokenizer: CliticTokenizer, word: str) -> None:
        assert _surfaces(tokenizer, word) == [word]

    def test_non_clitic_first_letter(self, tokenizer: CliticTokenizer) -> None:
        assert _surfaces(tokenizer, "עולם") == ["עולם"]

    def test_second_character_not_a_letter(self, tokenizer: CliticTokenizer) -> None:
        assert _surfaces(tokenizer, "ו-הבית") == ["ו-הבית"]

    def test_threshold_is_configurable(self, dictionary: RootDictionary) -> None:
        tokenizer = CliticTokenizer(CliticScoringConfig(split_threshold=10), dictionary)
        assert _surfaces(tokenizer, "והבית") == ["והבית"]


class TestSurfaceHandling:
    def test_pointed_word(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize("וְהַבַּיִת")
        assert [t.surface for t in tokens] == ["וְ", "הַבַּיִת"]
        assert tokens[0].lemma == "וְ"
        assert tokens[0].root == "ו"
        assert tokens[1].root == "בית"

    def test_punctuation_stays_on_surface(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize('"והבית,')
        assert [t.surface for t in tokens] == ['"ו', "הבית,"]
        assert tokens[0].lemma == '"ו'
        assert tokens[0].root == "ו"
        assert tokens[1].root == "בית"

    def test_split_surfaces_rejoin_to_word(self, tokenizer: CliticTokenizer) -> None:
        for word in ["והבית", "וְהַבַּיִת", "ולמדתי", "שלי"]:
            assert "".join(_surfaces(tokenizer, word)) == word

    def test_non_hebrew_words(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize("hello world 123")
        assert [t.surface for t in tokens] == ["hello", "world", "123"]
        assert all(t.root is None for t in tokens)

    def test_empty_sentence(self, tokenizer: CliticTokenizer) -> None:
        assert tokenizer.tokenize("") == []
        assert tokenizer.tokenize("   ") == []

    def test_non_string_fails_fast(self, tokenizer: CliticTokenizer) -> None:
        with pytest.raises(TypeError):
            tokenizer.tokenize(None)  # type: ignore[arg-type]


class TestTokenInvariants:
    SENTENCE = "ולמדתי את הספר בבית הספר והבית שלי, hello 42!"

    def test_indices_are_contiguous(self, tokenizer: CliticTokenizer) -> None:
        tokens = tokenizer.tokenize(self.SENTENCE)
        assert [t.idx for t in tokens] == list(range(len(tokens)))

    def test_deterministic(self, tokenizer: CliticTokenizer) -> None:
        assert tokenizer.tokenize(self.SENTENCE) == tokenizer.tokenize(self.SENTENCE)

    def test_module_level_tokenize(self) -> None:
        tokens = tokenize("והבית")
        assert [t.surface for t in tokens] == ["ו", "הבית"]


# ── Scorer ───────────────────────────────────────────────────────────────────


class TestScore:
    def test_article(self, tokenizer: CliticTokenizer) -> None:
        assert tokenizer.score("הבית") == 3

    def test_pronoun_and_article(self, tokenizer: CliticTokenizer) -> None:
        assert tokenizer.score("הוא") == 6

    def test_infinitive_and_verb_suffix(self, tokenizer: CliticTokenizer) -> None:
        assert tokenizer.score("למדתי") == 4

    def test_plural_penalty(self, tokenizer: CliticTokenizer) -> None:
        assert tokenizer.score("ספרים") == -1

    def test_verb_suffix(self, tokenizer: CliticTokenizer) -> None:
        assert tokenizer.score("דברו") == 2

    def test_he_vav_ending_is_not_a_verb_suffix(self, tokenizer: CliticTokenizer) -> None:
        assert tokenizer.score("דברהו") == 0

    def test_verb_prefix_needs_room(self, tokenizer: CliticTokenizer) -> None:
        # a future prefix counts only with at least two letters after it
        assert tokenizer.score("תכתב") == 2

    @pytest.mark.parametrize("base", ["כתב", "ל", "", "ab", "אב", "ספר"])
    def test_rejections(self, tokenizer: CliticTokenizer, base: str) -> None:
        assert tokenizer.score(base) == -math.inf

    def test_custom_weights(self, dictionary: RootDictionary) -> None:
        config = CliticScoringConfig(article_weight=5, plural_penalty=3)
        tokenizer = CliticTokenizer(config, dictionary)
        assert tokenizer.score("הבית") == 5
        assert tokenizer.score("הספרים") == 2
