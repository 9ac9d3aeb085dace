"""
Tokenizer and normalizer for sentence puzzles.

Tokens are whitespace-separated words with their attached punctuation.
Two tokens are the same word when their normalized forms are equal.
"""

from __future__ import annotations

import re
import unicodedata

from core.puzzle.constants import BLANK_MARKERS, PUNCTUATION


_PUNCTUATION_RE = re.compile(f"[{re.escape(PUNCTUATION)}]")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(sentence: str) -> list[str]:
    """
    Split a sentence into ordered tokens on whitespace runs.

    Punctuation attached to a word stays part of that token.
    """
    return [token for token in _WHITESPACE_RE.split((sentence or "").strip()) if token]


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_word(token: str, strip_punctuation: bool = False) -> str:
    """
    Comparison key for a single token.

    Args:
        token: Raw token text
        strip_punctuation: Also remove the fixed punctuation set

    Returns:
        Lowercased token without diacritical marks
    """
    normalized = strip_diacritics((token or "").lower())
    if strip_punctuation:
        normalized = _PUNCTUATION_RE.sub("", normalized)
    return normalized.strip()


def normalize_sentence(sentence: str) -> str:
    """Comparison key for a whole sentence (punctuation stripped, spaces collapsed)."""
    normalized = normalize_word(sentence, strip_punctuation=True)
    return _WHITESPACE_RE.sub(" ", normalized).strip()


def same_word(a: str, b: str, strip_punctuation: bool = False) -> bool:
    return normalize_word(a, strip_punctuation) == normalize_word(b, strip_punctuation)


def complete_blank_sentence(sentence: str, word: str) -> str:
    """
    Fill the blank of a fill-in-the-blank sentence and drop the final period.

    Example:
        >>> complete_blank_sentence("Ik lees een _____.", "boek")
        'Ik lees een boek'
    """
    completed = sentence or ""
    for marker in BLANK_MARKERS:
        completed = re.sub(re.escape(marker), lambda _: word, completed, flags=re.IGNORECASE)
    completed = completed.strip()
    if completed.endswith("."):
        completed = completed[:-1].rstrip()
    return completed
