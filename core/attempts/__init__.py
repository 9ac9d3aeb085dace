"""
Attempts - exercise answer log

Quick start:
    from core import attempts

    attempts.init_db()
    attempts.record_attempt_in_background(
        user_id, item_id, "reorder_sentence", "dutch_to_french",
        user_answer, correct_answer, was_correct
    )
"""

from core.attempts.database import (
    get_default_user_id,
    get_engine,
    get_recent_attempts,
    get_session,
    init_db,
    is_test_mode,
    record_attempt,
    record_attempt_in_background,
    set_engine,
)
from core.attempts.models import QuizAttempt


__all__ = [
    # Recording
    "record_attempt",
    "record_attempt_in_background",
    "get_recent_attempts",

    # Database
    "init_db",
    "get_engine",
    "set_engine",
    "get_session",
    "is_test_mode",
    "get_default_user_id",

    # Models
    "QuizAttempt",
]
