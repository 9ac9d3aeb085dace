"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import logging

import streamlit as st

from core import attempts
from core.schemas import Direction

logger = logging.getLogger(__name__)


def init_database() -> None:
    """
    Initialize the attempt log schema (cached per Streamlit process).
    """
    @st.cache_resource
    def _init_database() -> None:
        attempts.init_db()

    try:
        _init_database()
    except Exception as exc:
        # The exercises still work without the attempt log
        logger.warning("[ATTEMPTS] Attempt log unavailable: %s", exc)


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "user_id" not in st.session_state:
        st.session_state.user_id = attempts.get_default_user_id()
    if "direction" not in st.session_state:
        st.session_state.direction = Direction.DUTCH_TO_FRENCH
    if "lesson_id" not in st.session_state:
        st.session_state.lesson_id = None
    if "exercise_kind" not in st.session_state:
        st.session_state.exercise_kind = None
    if "session_id" not in st.session_state:
        st.session_state.session_id = None
    if "session_items" not in st.session_state:
        st.session_state.session_items = []
    if "session_position" not in st.session_state:
        st.session_state.session_position = 0
    if "session_results" not in st.session_state:
        st.session_state.session_results = {}
    if "supply" not in st.session_state:
        st.session_state.supply = None
    if "activity" not in st.session_state:
        st.session_state.activity = None
    if "session_finished" not in st.session_state:
        st.session_state.session_finished = False
