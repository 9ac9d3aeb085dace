"""
Validation for sentence puzzles.

Per-slot validity compares the normalized slot text with the correct order.
Whole-sentence validity compares the reconstructed sentence with the
correct sentence after full normalization.
"""

from __future__ import annotations

from typing import Literal, Optional, Sequence

from core.puzzle.tokenizer import normalize_sentence, normalize_word


SlotStatus = Literal["correct", "incorrect", "empty"]


def validity_vector(
    slot_texts: Sequence[Optional[str]],
    correct_order: Sequence[str],
    strip_punctuation: bool = False
) -> tuple[bool, ...]:
    """
    One boolean per slot; empty slots are never valid.
    """
    return tuple(
        text is not None
        and i < len(correct_order)
        and normalize_word(text, strip_punctuation) == correct_order[i]
        for i, text in enumerate(slot_texts)
    )


def slot_status(text: Optional[str], valid: bool) -> SlotStatus:
    if text is None:
        return "empty"
    return "correct" if valid else "incorrect"


def reconstruct_sentence(slot_texts: Sequence[Optional[str]]) -> str:
    return " ".join(text for text in slot_texts if text).strip()


def is_sentence_correct(slot_texts: Sequence[Optional[str]], correct_sentence: str) -> bool:
    """
    Submission check: reconstructed sentence equals the correct sentence.

    Stronger than the validity vector, since the surface form of every
    word has to agree once punctuation and case are ignored.
    """
    if any(text is None for text in slot_texts):
        return False
    return normalize_sentence(reconstruct_sentence(slot_texts)) == normalize_sentence(correct_sentence)
