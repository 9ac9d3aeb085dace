"""
Session item types used by the Streamlit controller.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionResult:
    """
    Outcome of one submitted puzzle within a session.
    """
    item_id: str
    was_correct: bool
    user_answer: str
    correct_answer: str
    hints_used: int = 0


def session_score(results: dict[int, SubmissionResult]) -> int:
    """One point per puzzle answered correctly."""
    return sum(1 for result in results.values() if result.was_correct)


def session_accuracy(results: dict[int, SubmissionResult]) -> float:
    """Percentage of submitted puzzles answered correctly (0 when none)."""
    if not results:
        return 0.0
    return session_score(results) / len(results) * 100
