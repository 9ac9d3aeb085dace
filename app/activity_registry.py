"""
Activity registry for Streamlit session handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.activities import AbstractActivity, FindErrorActivity, ReorderActivity
from core.schemas import Direction, ExerciseKind, SentenceContent, VocabularyItem


@dataclass(frozen=True)
class ActivitySpec:
    """
    Activity configuration and factory.
    """
    kind: ExerciseKind
    label: str
    description: str
    activity_factory: Callable[[VocabularyItem, SentenceContent, Direction], AbstractActivity]


ACTIVITY_SPECS: dict[ExerciseKind, ActivitySpec] = {
    ExerciseKind.REORDER_SENTENCE: ActivitySpec(
        kind=ExerciseKind.REORDER_SENTENCE,
        label="Remettre en ordre",
        description="Put the words of the sentence back in order",
        activity_factory=ReorderActivity,
    ),
    ExerciseKind.FIND_ERROR: ActivitySpec(
        kind=ExerciseKind.FIND_ERROR,
        label="Trouver l'erreur",
        description="Find the grammatical error and rebuild the sentence",
        activity_factory=FindErrorActivity,
    ),
}


def get_activity_spec(kind: ExerciseKind | str) -> ActivitySpec:
    return ACTIVITY_SPECS[ExerciseKind(kind)]
