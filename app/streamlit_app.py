"""
Dutch Sentence Puzzles - Main App

Streamlit UI for the reorder and find-the-error sentence exercises.
"""

import logging
import os

import streamlit as st
from dotenv import load_dotenv

from app.activity_registry import ACTIVITY_SPECS
from app.session_controller import (
    end_session,
    go_next,
    go_previous,
    start_new_session,
    submit_current,
)
from app.state import ensure_session_state, init_database
from app.ui import (
    render_puzzle_board,
    render_session_complete,
    render_session_stats,
)
from core import attempts, lexicon_repo
from core.schemas import Direction

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# ---- Page Setup ----

st.set_page_config(
    page_title="Dutch Sentence Puzzles",
    page_icon="🇳🇱",
    layout="centered"
)

init_database()
ensure_session_state()


@st.cache_data(ttl=600)
def _lesson_ids() -> list[str]:
    return lexicon_repo.get_lesson_ids()


# ---- UI Rendering ----

def render_test_mode_warning():
    """Show warning if in test mode."""
    if attempts.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_learning_db (set TEST_MODE=false in .env for production)")


def render_intro_screen():
    """Render intro screen with direction, lesson and mode selection."""
    st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
    st.title("🇳🇱 Dutch Sentence Puzzles")
    render_test_mode_warning()

    if st.session_state.session_finished:
        render_session_complete()
        end_session()

    directions = list(Direction)
    st.session_state.direction = st.radio(
        "Direction",
        directions,
        index=directions.index(Direction(st.session_state.direction)),
        format_func=lambda d: d.label,
        horizontal=True,
    )

    try:
        lessons = _lesson_ids()
    except Exception as exc:
        st.error(f"Could not load lessons: {exc}")
        lessons = []

    lesson_choice = st.selectbox("Leçon", ["Toutes"] + lessons)
    st.session_state.lesson_id = None if lesson_choice == "Toutes" else lesson_choice

    st.markdown("### ✏️ Exercices")
    columns = st.columns(len(ACTIVITY_SPECS))
    for column, spec in zip(columns, ACTIVITY_SPECS.values()):
        with column:
            if st.button(spec.label, type="primary", use_container_width=True, help=spec.description):
                start_new_session(spec.kind, st.session_state.direction, st.session_state.lesson_id)
                st.rerun()


def render_active_session():
    """Render the current puzzle and its controls."""
    activity = st.session_state.activity
    puzzle = activity.puzzle
    position = st.session_state.session_position

    key_prefix = f"{st.session_state.session_id}_{position}"
    activity.render_prompt(key_prefix)

    earlier = st.session_state.session_results.get(position)
    if earlier is not None and not activity.submitted:
        st.caption(f"Déjà répondu : {'✅' if earlier.was_correct else '❌'} (le score garde la première réponse)")
    st.markdown("<br>", unsafe_allow_html=True)

    if render_puzzle_board(puzzle, key_prefix, locked=activity.submitted):
        st.rerun()

    st.markdown("<br>", unsafe_allow_html=True)

    if not activity.submitted:
        col1, col2 = st.columns(2)
        with col1:
            if st.button(
                f"💡 Indice ({puzzle.hints_remaining})",
                use_container_width=True,
                disabled=puzzle.hints_remaining == 0,
                key=f"{key_prefix}_hint",
            ):
                puzzle.cancel()
                puzzle.use_hint()
                st.rerun()
        with col2:
            if st.button(
                "Valider",
                type="primary",
                use_container_width=True,
                disabled=not puzzle.is_filled(),
                key=f"{key_prefix}_submit",
            ):
                submit_current()
                st.rerun()
    else:
        if activity.result.was_correct:
            st.success("✅ Correct !")
        else:
            st.error("❌ Pas tout à fait.")
        activity.render_solution(key_prefix)

    st.markdown("<br>", unsafe_allow_html=True)
    col1, col2 = st.columns(2)
    with col1:
        if st.button("⬅️ Précédent", use_container_width=True, disabled=position == 0,
                     key=f"{key_prefix}_prev"):
            go_previous()
            st.rerun()
    with col2:
        if st.button("Suivant ➡️", use_container_width=True, key=f"{key_prefix}_next"):
            go_next()
            st.rerun()

    if attempts.is_test_mode():
        st.caption("TEST MODE - Using test_learning_db")


# ---- Main App ----

def main():
    """Main app entry point."""
    if st.session_state.activity is not None:
        quit_clicked = render_session_stats()
        if quit_clicked:
            end_session()
            st.rerun()

    if st.session_state.activity is None:
        render_intro_screen()
    else:
        render_active_session()


if __name__ == "__main__":
    main()
