"""UI Components for the sentence puzzles"""

from app.ui.sentence_card import render_sentence_card
from app.ui.puzzle_board import render_puzzle_board
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.speech import render_speak_button, speak

__all__ = [
    "render_sentence_card",
    "render_puzzle_board",
    "render_session_stats",
    "render_session_complete",
    "render_speak_button",
    "speak",
]
