"""
Word-class classifier.

Labels a token with a coarse grammatical role using small per-direction
lookup sets. Only the placement heuristic uses these labels.
"""

from __future__ import annotations

from enum import Enum

from core.puzzle.constants import SHORT_WORD_MAX_LENGTH, WORD_CLASS_TABLES
from core.puzzle.tokenizer import normalize_word
from core.schemas import Direction


class WordClass(str, Enum):
    """Coarse grammatical role of a token."""
    ARTICLE = "article"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    PRONOUN = "pronoun"
    TIME_ADVERB = "time_adverb"
    SHORT_WORD = "short_word"
    OTHER = "other"


# Lookup order decides ambiguous entries ("het" is an article before a pronoun)
_LOOKUP_ORDER = (
    WordClass.ARTICLE,
    WordClass.PREPOSITION,
    WordClass.CONJUNCTION,
    WordClass.PRONOUN,
    WordClass.TIME_ADVERB,
)


def _lookup(key: str, tables: dict[str, set[str]]) -> WordClass | None:
    for word_class in _LOOKUP_ORDER:
        if key in tables[word_class.value]:
            return word_class
    return None


def classify(token: str, direction: Direction) -> WordClass:
    """
    Classify a token for the sentence language of `direction`.

    Elided French forms (l'homme, j'ai, d'eau) are classified by their
    elided prefix.
    """
    key = normalize_word(token, strip_punctuation=True).replace("’", "'")
    if not key:
        return WordClass.OTHER

    tables = WORD_CLASS_TABLES[Direction(direction)]

    found = _lookup(key, tables)
    if found is not None:
        return found

    if "'" in key[:-1]:
        prefix = key[:key.index("'") + 1]
        found = _lookup(prefix, tables)
        if found is not None:
            return found

    if len(key) <= SHORT_WORD_MAX_LENGTH:
        return WordClass.SHORT_WORD
    return WordClass.OTHER
