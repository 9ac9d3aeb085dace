"""
Session Statistics UI

Renders progress metrics and controls.
"""

import streamlit as st

from app.session_types import session_accuracy, session_score


def render_session_stats() -> bool:
    """
    Render session progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    if not st.session_state.session_items:
        return False

    results = st.session_state.session_results

    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        total = len(st.session_state.session_items)
        current = st.session_state.session_position + 1
        st.metric("Phrase", f"{current}/{total}")

    with col2:
        st.metric("Score", f"{session_score(results)}/{len(results)}")

    with col3:
        activity = st.session_state.activity
        if activity is not None:
            st.metric("Indices", f"{activity.puzzle.hints_remaining}")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Quit session", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete():
    """Render session completion message."""
    results = st.session_state.session_results
    if results:
        st.success(
            f"🎉 Session terminée ! Score : {session_score(results)}/{len(results)}"
        )
        st.info(f"Précision : {session_accuracy(results):.1f}%")
