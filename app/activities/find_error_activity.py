"""
Find-Error Activity

Exercise mode: rebuild the correct sentence from one containing a mistake.
"""

import streamlit as st

from app.activities.base import AbstractActivity
from app.ui.sentence_card import render_sentence_card
from app.ui.puzzle_style import PROMPT_CARD_STYLE, SOLUTION_CARD_STYLE
from app.ui.speech import render_speak_button
from core.schemas import ExerciseKind


class FindErrorActivity(AbstractActivity):
    """
    Find-the-error activity.

    The faulty sentence is shown on the card. Its words sit in the source
    pool, words it should not contain can be parked in the unused pool and
    words it lacks wait in the available pool.
    """

    kind = ExerciseKind.FIND_ERROR

    def render_prompt(self, key_prefix: str) -> None:
        render_sentence_card(
            main_text=self.content.sentence_text,
            subtitle="Trouve l'erreur et reconstruis la phrase correcte",
            corner_text=self.content.error_type or "",
            style=PROMPT_CARD_STYLE,
        )
        if self.content.is_fallback:
            st.caption("Phrase de secours (la génération a échoué)")

    def render_solution(self, key_prefix: str) -> None:
        subtitle = self.content.explanation or ""
        if self.content.translation:
            subtitle = f"{subtitle} ({self.content.translation})" if subtitle else self.content.translation
        render_sentence_card(
            main_text=self.correct_answer,
            subtitle=subtitle,
            corner_text=self.content.error_type or "",
            style=SOLUTION_CARD_STYLE,
        )
        col1, col2 = st.columns(2)
        with col1:
            render_speak_button(
                self.correct_answer,
                self.direction.speech_locale,
                key=f"{key_prefix}_speak_solution",
            )
        with col2:
            if self.content.translation:
                render_speak_button(
                    self.content.translation,
                    self.direction.translation_locale,
                    key=f"{key_prefix}_speak_translation",
                    label="🔊 Traduction",
                )
