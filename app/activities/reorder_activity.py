"""
Reorder Activity

Exercise mode: put the shuffled words of a sentence back in order.
"""

import streamlit as st

from app.activities.base import AbstractActivity
from app.ui.sentence_card import render_sentence_card
from app.ui.puzzle_style import PROMPT_CARD_STYLE, SOLUTION_CARD_STYLE
from app.ui.speech import render_speak_button
from core.schemas import ExerciseKind


class ReorderActivity(AbstractActivity):
    """
    Reorder-the-sentence activity.

    Shows the vocabulary word and the sentence translation as a clue;
    the words of the sentence wait shuffled in the source pool.
    """

    kind = ExerciseKind.REORDER_SENTENCE

    def render_prompt(self, key_prefix: str) -> None:
        """Render the word and translation clue."""
        word = self.content.missing_or_error_word
        render_sentence_card(
            main_text="Remets les mots dans le bon ordre",
            subtitle=self.content.translation or "",
            corner_text=word,
            style=PROMPT_CARD_STYLE,
        )
        if self.content.translation:
            render_speak_button(
                self.content.translation,
                self.direction.translation_locale,
                key=f"{key_prefix}_speak_translation",
                label="🔊 Traduction",
            )
        if self.content.is_fallback:
            st.caption("Phrase de secours (la génération a échoué)")

    def render_solution(self, key_prefix: str) -> None:
        """Render the correct sentence."""
        render_sentence_card(
            main_text=self.correct_answer,
            subtitle=self.content.translation or "",
            corner_text=self.item.word_for(self.direction),
            style=SOLUTION_CARD_STYLE,
        )
        render_speak_button(
            self.correct_answer,
            self.direction.speech_locale,
            key=f"{key_prefix}_speak_solution",
        )
