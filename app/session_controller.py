"""
Session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

import streamlit as st

from app.activity_registry import get_activity_spec
from app.session_types import SubmissionResult
from core import attempts, lexicon_repo
from core.schemas import Direction, ExerciseKind
from core.sentence_service import SentenceService
from core.supply import SentenceSupply

logger = logging.getLogger(__name__)

SESSION_SIZE = 10


def _shutdown_supply() -> None:
    supply: Optional[SentenceSupply] = st.session_state.supply
    if supply is not None:
        supply.shutdown(wait=False)
    st.session_state.supply = None


def start_new_session(kind: ExerciseKind, direction: Direction, lesson_id: Optional[str] = None) -> None:
    """
    Start a new exercise session.
    """
    kind = ExerciseKind(kind)
    direction = Direction(direction)

    try:
        items = lexicon_repo.get_vocabulary_items(lesson_id=lesson_id, limit=SESSION_SIZE)
    except Exception as exc:
        logger.exception("[SUPPLY] Could not load vocabulary")
        st.error(f"Error loading vocabulary: {exc}")
        return

    if not items:
        st.error("No vocabulary items available.")
        return

    service = SentenceService(kind)
    try:
        service.preload([item.id for item in items], direction)
    except Exception:
        # Each item falls back to a per-item lookup
        logger.warning("[SUPPLY] Batch preload failed", exc_info=True)

    _shutdown_supply()
    st.session_state.supply = SentenceSupply(items, direction, kind, service)
    st.session_state.session_id = str(uuid.uuid4())
    st.session_state.exercise_kind = kind
    st.session_state.direction = direction
    st.session_state.lesson_id = lesson_id
    st.session_state.session_items = items
    st.session_state.session_position = 0
    st.session_state.session_results = {}
    st.session_state.session_finished = False

    logger.info("[SUPPLY] Started %s session with %d items (%s)", kind.value, len(items), direction.value)
    load_current_item()


def load_current_item() -> None:
    """
    Build a fresh activity for the current position.

    The sentence comes from the supply cache once resolved, so returning to
    a position re-deals its puzzle (new tokens, full hint budget) without
    another outbound call. Resolving also prefetches the next positions.
    """
    position = st.session_state.session_position
    supply: SentenceSupply = st.session_state.supply
    item = st.session_state.session_items[position]

    if supply.is_resolved(position):
        content = supply.resolve(position)
    else:
        with st.spinner("Préparation de la phrase..."):
            content = supply.resolve(position)

    spec = get_activity_spec(st.session_state.exercise_kind)
    st.session_state.activity = spec.activity_factory(item, content, st.session_state.direction)


def go_to(position: int) -> None:
    """Navigate to another sentence of the session. In-flight work keeps running."""
    if not 0 <= position < len(st.session_state.session_items):
        return
    st.session_state.session_position = position
    load_current_item()


def go_next() -> None:
    if st.session_state.session_position + 1 >= len(st.session_state.session_items):
        finish_session()
        return
    go_to(st.session_state.session_position + 1)


def go_previous() -> None:
    go_to(st.session_state.session_position - 1)


def submit_current() -> Optional[SubmissionResult]:
    """
    Validate the whole sentence, update the score and record the attempt.

    Returns:
        The submission result, or None if the puzzle was already submitted
    """
    activity = st.session_state.activity
    if activity is None or activity.submitted:
        return None

    puzzle = activity.puzzle
    result = SubmissionResult(
        item_id=activity.item.id,
        was_correct=puzzle.is_sentence_correct(),
        user_answer=puzzle.user_answer(),
        correct_answer=activity.correct_answer,
        hints_used=puzzle.hints_used,
    )
    activity.result = result
    puzzle.cancel()
    # Only the first submission for a position counts toward the score
    st.session_state.session_results.setdefault(st.session_state.session_position, result)

    attempts.record_attempt_in_background(
        st.session_state.user_id,
        result.item_id,
        activity.kind.value,
        activity.direction.value,
        result.user_answer,
        result.correct_answer,
        result.was_correct,
    )
    return result


def finish_session() -> None:
    """Show the summary screen; the supply keeps its finished work until a new session."""
    st.session_state.session_finished = True
    st.session_state.activity = None


def end_session() -> None:
    """
    End the current session.
    """
    _shutdown_supply()
    st.session_state.session_items = []
    st.session_state.activity = None
    st.session_state.exercise_kind = None
    st.session_state.session_finished = False
