"""
Fallback sentences used when neither the store nor the generator delivers.

Keeps every exercise renderable: the vocabulary word is dropped into a
small fixed sentence of the right language.
"""

from __future__ import annotations

from core.puzzle.tokenizer import complete_blank_sentence
from core.schemas import Direction, ExerciseKind, SentenceContent


BLANK = "_____"

FALLBACK_SENTENCES = {
    Direction.DUTCH_TO_FRENCH: (
        "Ik zie een _____ in de tuin.",
        "Het woord _____ is nieuw voor mij.",
        "Wij praten vandaag over _____.",
        "Ik heb een _____ nodig.",
    ),
    Direction.FRENCH_TO_DUTCH: (
        "Je vois un _____ dans le jardin.",
        "Le mot _____ est nouveau pour moi.",
        "Nous parlons de _____ aujourd'hui.",
        "J'ai besoin de _____.",
    ),
}


def fallback_content(
    word: str,
    direction: Direction,
    kind: ExerciseKind,
    index: int = 0
) -> SentenceContent:
    """
    Build fallback content for a vocabulary word.

    The template is chosen by item index so the same item always gets
    the same sentence within a session. Find-error fallbacks contain no
    mistake; the sentence is its own correction.
    """
    templates = FALLBACK_SENTENCES[Direction(direction)]
    template = templates[index % len(templates)]

    if ExerciseKind(kind) == ExerciseKind.REORDER_SENTENCE:
        return SentenceContent(
            sentence_text=template,
            missing_or_error_word=word,
            is_fallback=True,
        )

    completed = complete_blank_sentence(template, word) + "."
    return SentenceContent(
        sentence_text=completed,
        missing_or_error_word=word,
        correct_text=completed,
        is_fallback=True,
    )
