"""
Sentence Card UI Component

Renders the exercise prompt and the solution as a styled card.
"""

from __future__ import annotations

import html

import streamlit as st

from app.ui.puzzle_style import CARD_MIN_HEIGHT, CARD_PADDING, PROMPT_CARD_STYLE, CardStyle


def render_sentence_card(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: CardStyle | None = None,
) -> None:
    """
    Render a sentence card.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller)
        corner_text: Optional text in top-right corner
        style: Style preset (default: prompt card)
    """
    style = style or PROMPT_CARD_STYLE

    # Generated sentences are untrusted text
    main_text = html.escape(main_text)
    subtitle = html.escape(subtitle)
    corner_text = html.escape(corner_text)

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 12px; right: 18px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color}; '
            f'font-style: italic;">{corner_text}</div>'
        )

    main_html = (
        f'<h2 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        'font-weight: normal; margin: 0; text-align: center; line-height: 1.4; '
        f'overflow-wrap: anywhere;">{main_text}</h2>'
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            f'font-style: {style.subtitle_style}; margin: 12px 0 0 0; text-align: center; '
            f'line-height: 1.4;">{subtitle}</p>'
        )

    card = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(card, unsafe_allow_html=True)
