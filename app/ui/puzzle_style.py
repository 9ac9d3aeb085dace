"""
Sentence card and puzzle board style presets.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "28px 24px"
CARD_MIN_HEIGHT = "150px"
PROMPT_BG_COLOR = "#f0f2f6"
SOLUTION_BG_COLOR = "#e8f4f8"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "1.6em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_SUBTITLE_FONT_SIZE = "1.0em"
DEFAULT_SUBTITLE_COLOR = "#666"
DEFAULT_CORNER_FONT_SIZE = "0.85em"
DEFAULT_CORNER_COLOR = "#666"


@dataclass(frozen=True)
class CardStyle:
    """
    Visual style preset for sentence cards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    subtitle_style: str = "italic"
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    bg_color: str = PROMPT_BG_COLOR


PROMPT_CARD_STYLE = CardStyle()

SOLUTION_CARD_STYLE = CardStyle(
    main_font_size="1.5em",
    subtitle_style="normal",
    bg_color=SOLUTION_BG_COLOR,
)


# ---- Puzzle Board ----

# Slot marker per validation status
SLOT_STATUS_ICONS = {
    "correct": "🟩",
    "incorrect": "🟥",
    "empty": "⬜",
}

EMPTY_SLOT_LABEL = "＿＿"
HELD_MARKER = "👆"

POOL_LABELS = {
    "source": "Mots de la phrase",
    "unused": "Mots en trop",
    "available": "Mots disponibles",
}

SLOTS_PER_ROW = 6
TOKENS_PER_ROW = 5
