"""
Click-to-pick / click-to-drop handling for the puzzle board.

Streamlit has no native drag and drop, so a drag is two clicks: the first
picks a token up, the second drops it on a slot or a pool. These helpers
translate clicks into puzzle drag primitives and stay free of Streamlit
so they can be tested directly.
"""

from __future__ import annotations

from core.puzzle import Puzzle, Zone


def click_token(puzzle: Puzzle, token_id: str) -> bool:
    """
    A token in one of the pools was clicked.

    Clicking the held token again cancels the drag; clicking another
    token while holding one swaps the selection.

    Returns:
        True if the board changed
    """
    held = puzzle.held
    if held is not None and held.token_id == token_id:
        puzzle.cancel()
        return True
    return puzzle.pick_up(token_id)


def click_slot(puzzle: Puzzle, slot: int) -> bool:
    """
    A target slot was clicked.

    With a token held, the token is dropped on the slot (swapping or
    displacing its occupant). Otherwise the occupant, if any, is picked up.
    """
    held = puzzle.held
    if held is not None:
        if held.zone == Zone.TARGET and held.slot == slot:
            puzzle.cancel()
            return True
        return puzzle.drop_on(Zone.TARGET, slot)

    occupant = puzzle.state.token_at(slot)
    if occupant is None:
        return False
    return puzzle.pick_up(occupant.id)


def click_pool(puzzle: Puzzle, zone: Zone | str) -> bool:
    """
    A pool's drop area was clicked.

    Only a token held from the target row can be dropped; the puzzle
    rejects pools other than the token's own origin.
    """
    if puzzle.held is None:
        return False
    return puzzle.drop_on(Zone(zone))


def return_to_origin(puzzle: Puzzle, slot: int) -> bool:
    """Send the token in `slot` back to the pool it came from."""
    occupant = puzzle.state.token_at(slot)
    if occupant is None:
        return False
    puzzle.cancel()
    return puzzle.move_to_pool(occupant.id, slot, occupant.origin)
