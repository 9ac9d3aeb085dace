"""
Placement heuristic for long sentences and hints.

Long sentences (more than 10 tokens) start with roughly a third of the
slots pre-filled, biased toward syntactically load-bearing tokens. Hints
reuse the same word classes to decide which empty slots to fill first.
"""

from __future__ import annotations

import math
from typing import Sequence

from core.puzzle.constants import (
    CLASS_WEIGHTS,
    FIRST_HALF_BONUS,
    PREFILL_MIN_TOKENS,
    PREFILL_RATIO,
    SHORT_WORD_WINDOW,
    TIME_ADVERB_WINDOW,
)
from core.puzzle.word_classes import WordClass, classify
from core.schemas import Direction


_ALWAYS_STRATEGIC = {
    WordClass.ARTICLE,
    WordClass.PREPOSITION,
    WordClass.CONJUNCTION,
    WordClass.PRONOUN,
}


def needs_prefill(token_count: int) -> bool:
    return token_count >= PREFILL_MIN_TOKENS


def prefill_target_count(token_count: int) -> int:
    """
    Number of slots to pre-fill, edges included.
    """
    if not needs_prefill(token_count):
        return 0
    # Rounded first so 20 * 0.35 stays 7
    return max(2, math.ceil(round(token_count * PREFILL_RATIO, 6)))


def is_strategic(token: str, position: int, token_count: int, direction: Direction) -> bool:
    """
    Whether a token is a priority candidate for pre-placement.

    Time adverbs only count in the first 30% of the sentence, short words
    in the first 60%.
    """
    word_class = classify(token, direction)
    if word_class in _ALWAYS_STRATEGIC:
        return True
    if word_class == WordClass.TIME_ADVERB:
        return position < token_count * TIME_ADVERB_WINDOW
    if word_class == WordClass.SHORT_WORD:
        return position < token_count * SHORT_WORD_WINDOW
    return False


def _evenly_spaced(candidates: list[int], count: int) -> list[int]:
    if count <= 0 or not candidates:
        return []
    count = min(count, len(candidates))
    step = len(candidates) / count
    return [candidates[int((k + 0.5) * step)] for k in range(count)]


def choose_prefill_positions(correct_tokens: Sequence[str], direction: Direction) -> list[int]:
    """
    Pick the slot positions to pre-fill before the user starts.

    Args:
        correct_tokens: Tokens of the correct sentence, in order
        direction: Selects the word-class tables

    Returns:
        Sorted positions; empty for sentences of 10 tokens or fewer
    """
    n = len(correct_tokens)
    target = prefill_target_count(n)
    if target == 0:
        return []

    chosen = [0, n - 1]

    for position in range(1, n - 1):
        if len(chosen) >= target:
            break
        if is_strategic(correct_tokens[position], position, n, direction):
            chosen.append(position)

    if len(chosen) < target:
        interior = [p for p in range(1, n - 1) if p not in chosen]
        chosen.extend(_evenly_spaced(interior, target - len(chosen)))

    return sorted(chosen)


def hint_priority(token: str, position: int, token_count: int, direction: Direction) -> int:
    """Class weight plus a bonus for the first half of the sentence."""
    score = CLASS_WEIGHTS[classify(token, direction).value]
    if position < token_count / 2:
        score += FIRST_HALF_BONUS
    return score


def order_by_priority(
    positions: Sequence[int],
    correct_tokens: Sequence[str],
    direction: Direction
) -> list[int]:
    """Highest priority first; ties keep sentence order."""
    n = len(correct_tokens)
    return sorted(
        positions,
        key=lambda p: (-hint_priority(correct_tokens[p], p, n, direction), p)
    )
