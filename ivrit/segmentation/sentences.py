"""Sentence and phrase boundaries for Hebrew text."""

import re

# A run of terminal punctuation followed by whitespace or end of text,
# or a blank line.
SENTENCE_BOUNDARY = re.compile(r"[.?!…]+(?:\s|$)|\n\s*\n")

# Commas (Latin and Arabic), maqaf, or the gap before a word that starts
# with the conjunction vav.
PHRASE_BOUNDARY = re.compile(r"[,،]|־|\s+(?=ו\S)")

_WHITESPACE = re.compile(r"\s+")


def segment_sentences(text: str) -> list[str]:
    """Split text into sentences.

    Terminal punctuation is consumed, runs of punctuation count as a
    single boundary, and a final sentence without punctuation is kept.

    Args:
        text: Raw (zero-width normalized) text.

    Returns:
        Non-empty sentences with internal whitespace collapsed.
    """
    sentences: list[str] = []
    for piece in SENTENCE_BOUNDARY.split(text):
        cleaned = _WHITESPACE.sub(" ", piece).strip()
        if cleaned:
            sentences.append(cleaned)
    return sentences


def split_phrases(sentence: str) -> list[str]:
    """Split a sentence into phrases on commas, maqaf and vav-conjunctions.

    The vav stays attached to the phrase it introduces. A sentence with
    no boundary comes back as a single phrase.
    """
    phrases = [p.strip() for p in PHRASE_BOUNDARY.split(sentence)]
    phrases = [p for p in phrases if p]
    return phrases or [sentence]
