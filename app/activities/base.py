"""
Abstract Base Activity

Defines the interface for sentence exercises (reorder, find the error).
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

from app.session_types import SubmissionResult
from core.puzzle import Puzzle, build_puzzle
from core.schemas import Direction, ExerciseKind, SentenceContent, VocabularyItem


class AbstractActivity(ABC):
    """
    Abstract base class for sentence exercises.

    An activity owns the puzzle built from one resolved sentence. It lives
    only as long as the learner stays on that sentence; navigating away
    discards it.
    Subclasses should implement:
    - render_prompt()
    - render_solution()
    """

    kind: ExerciseKind

    def __init__(
        self,
        item: VocabularyItem,
        content: SentenceContent,
        direction: Direction,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize activity.

        Args:
            item: Vocabulary item the sentence was resolved for
            content: Resolved sentence content
            direction: Exercise direction
        """
        self.item = item
        self.content = content
        self.direction = Direction(direction)
        self.puzzle: Puzzle = build_puzzle(self.kind, content, self.direction, rng=rng)
        self.result: Optional[SubmissionResult] = None

    @property
    def submitted(self) -> bool:
        return self.result is not None

    @property
    def correct_answer(self) -> str:
        return self.puzzle.correct_sentence

    @abstractmethod
    def render_prompt(self, key_prefix: str) -> None:
        """Render the exercise instructions above the board."""
        pass

    @abstractmethod
    def render_solution(self, key_prefix: str) -> None:
        """Render the solution after submission."""
        pass
