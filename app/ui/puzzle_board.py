"""
Puzzle Board UI

Renders the target slots and the token pools of a puzzle as buttons.
A click picks a token up, a second click drops it.
"""

from __future__ import annotations

import streamlit as st

from app.board_actions import click_pool, click_slot, click_token, return_to_origin
from app.ui.puzzle_style import (
    EMPTY_SLOT_LABEL,
    HELD_MARKER,
    POOL_LABELS,
    SLOT_STATUS_ICONS,
    SLOTS_PER_ROW,
    TOKENS_PER_ROW,
)
from core.puzzle import Puzzle, PuzzleSnapshot, Zone


def _chunks(values: list, size: int) -> list[list]:
    return [values[i:i + size] for i in range(0, len(values), size)]


def _render_slots(puzzle: Puzzle, snapshot: PuzzleSnapshot, key_prefix: str, locked: bool) -> bool:
    changed = False
    held_slot = snapshot.held.slot if snapshot.held and snapshot.held.zone == Zone.TARGET else None

    positions = list(range(len(snapshot.slots)))
    for row in _chunks(positions, SLOTS_PER_ROW):
        columns = st.columns(SLOTS_PER_ROW)
        for column, slot in zip(columns, row):
            token = snapshot.slots[slot]
            icon = SLOT_STATUS_ICONS[snapshot.statuses[slot]]
            text = token.text if token is not None else EMPTY_SLOT_LABEL
            marker = f" {HELD_MARKER}" if slot == held_slot else ""
            with column:
                if st.button(
                    f"{icon} {text}{marker}",
                    key=f"{key_prefix}_slot_{slot}",
                    disabled=locked,
                    use_container_width=True,
                ):
                    changed = click_slot(puzzle, slot) or changed
    return changed


def _render_pool(
    puzzle: Puzzle,
    snapshot: PuzzleSnapshot,
    zone: Zone,
    key_prefix: str,
    locked: bool
) -> bool:
    tokens = list(getattr(snapshot, zone.value))
    held_id = snapshot.held.token_id if snapshot.held else None
    changed = False

    header, drop = st.columns([4, 1])
    with header:
        st.markdown(f"**{POOL_LABELS[zone.value]}**")
    with drop:
        can_drop = (
            not locked
            and snapshot.held is not None
            and snapshot.held.zone == Zone.TARGET
        )
        if st.button("⬇️", key=f"{key_prefix}_drop_{zone.value}", disabled=not can_drop,
                     help="Remettre le mot ici"):
            changed = click_pool(puzzle, zone) or changed

    if not tokens:
        st.caption("—")
        return changed

    for row in _chunks(tokens, TOKENS_PER_ROW):
        columns = st.columns(TOKENS_PER_ROW)
        for column, token in zip(columns, row):
            marker = f" {HELD_MARKER}" if token.id == held_id else ""
            with column:
                if st.button(
                    f"{token.text}{marker}",
                    key=f"{key_prefix}_tok_{token.id}",
                    disabled=locked,
                    use_container_width=True,
                ):
                    changed = click_token(puzzle, token.id) or changed
    return changed


def render_puzzle_board(puzzle: Puzzle, key_prefix: str, locked: bool = False) -> bool:
    """
    Render the full board.

    Args:
        puzzle: Puzzle to render and mutate
        key_prefix: Unique prefix for widget keys (one per session position)
        locked: Disable all interaction (after submission)

    Returns:
        True if a click changed the board (caller should rerun)
    """
    snapshot = puzzle.snapshot()
    changed = _render_slots(puzzle, snapshot, key_prefix, locked)

    held = snapshot.held
    if held is not None and held.zone == Zone.TARGET and not locked:
        if st.button("↩️ Renvoyer le mot à sa place d'origine", key=f"{key_prefix}_return"):
            changed = return_to_origin(puzzle, held.slot) or changed

    st.markdown("<br>", unsafe_allow_html=True)
    changed = _render_pool(puzzle, snapshot, Zone.SOURCE, key_prefix, locked) or changed

    if snapshot.unused or puzzle.alignment.extra:
        changed = _render_pool(puzzle, snapshot, Zone.UNUSED, key_prefix, locked) or changed
    if snapshot.available or puzzle.alignment.missing:
        changed = _render_pool(puzzle, snapshot, Zone.AVAILABLE, key_prefix, locked) or changed

    return changed
