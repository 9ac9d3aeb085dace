"""
Alignment matcher.

Aligns the tokens of a distorted sentence (scrambled, or containing a
mistake) against the tokens of its correct form.

The walk is greedy and left to right: each correct token claims the first
unclaimed distorted token with the same normalized form. Ties are broken by
input order, which keeps positional correspondence for mildly reordered
sentences. Repeated words with different roles can mis-align; this is the
accepted behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.puzzle.tokenizer import normalize_word


@dataclass(frozen=True)
class AlignedToken:
    """
    One token of an alignment.

    target_index is the slot in the correct sentence (-1 for extras).
    source_index is the position in the distorted sentence (-1 for missing).
    """
    text: str
    target_index: int
    source_index: int


@dataclass(frozen=True)
class Alignment:
    """Three disjoint token sets produced by `align`."""
    matched: tuple[AlignedToken, ...]
    missing: tuple[AlignedToken, ...]
    extra: tuple[AlignedToken, ...]

    @property
    def total(self) -> int:
        return len(self.matched) + len(self.missing) + len(self.extra)


def align(
    distorted_tokens: list[str],
    correct_tokens: list[str],
    strip_punctuation: bool = False
) -> Alignment:
    """
    Align distorted tokens against correct tokens.

    Args:
        distorted_tokens: Tokens of the distorted sentence, in order
        correct_tokens: Tokens of the correct sentence, in order
        strip_punctuation: Ignore attached punctuation when comparing

    Returns:
        Alignment with matched tokens in distorted-sentence order,
        missing tokens in correct-sentence order and extra tokens in
        distorted-sentence order
    """
    distorted_keys = [normalize_word(t, strip_punctuation) for t in distorted_tokens]
    claimed: dict[int, int] = {}  # distorted index -> target index
    missing: list[AlignedToken] = []

    for target_index, correct_token in enumerate(correct_tokens):
        key = normalize_word(correct_token, strip_punctuation)
        source_index = next(
            (i for i, k in enumerate(distorted_keys) if k == key and i not in claimed),
            -1
        )
        if source_index == -1:
            missing.append(AlignedToken(correct_token, target_index, -1))
        else:
            claimed[source_index] = target_index

    matched = tuple(
        AlignedToken(distorted_tokens[i], claimed[i], i)
        for i in sorted(claimed)
    )
    extra = tuple(
        AlignedToken(token, -1, i)
        for i, token in enumerate(distorted_tokens)
        if i not in claimed
    )
    return Alignment(matched=matched, missing=tuple(missing), extra=extra)
