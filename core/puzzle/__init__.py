"""
Sentence Puzzle Engine

Token-placement puzzles for the "reorder the sentence" and "find the
error" exercises.

Quick start:
    from core import puzzle

    game = puzzle.build_puzzle(ExerciseKind.REORDER_SENTENCE, content, Direction.DUTCH_TO_FRENCH)

    # Drag a token from the source pool into the first slot
    token = game.pool(puzzle.Zone.SOURCE)[0]
    game.move_to_target(token.id, puzzle.Zone.SOURCE, 0)

    game.slot_status(0)        # "correct" | "incorrect" | "empty"
    game.is_fully_correct()
"""

# Engine API
from core.puzzle.engine import (
    HeldToken,
    Puzzle,
    PuzzleSnapshot,
    build_find_error_puzzle,
    build_puzzle,
    build_reorder_puzzle,
)

# Zone store (for advanced usage)
from core.puzzle.zones import (
    Location,
    MoveToPool,
    MoveToTarget,
    PuzzleState,
    Token,
    Zone,
    apply_move,
    check_invariants,
)

# Building blocks
from core.puzzle.alignment import AlignedToken, Alignment, align
from core.puzzle.tokenizer import (
    complete_blank_sentence,
    normalize_sentence,
    normalize_word,
    tokenize,
)
from core.puzzle.word_classes import WordClass, classify
from core.puzzle.constants import HINT_CAP


__all__ = [
    # Engine
    "HeldToken",
    "Puzzle",
    "PuzzleSnapshot",
    "build_find_error_puzzle",
    "build_puzzle",
    "build_reorder_puzzle",

    # Zones
    "Location",
    "MoveToPool",
    "MoveToTarget",
    "PuzzleState",
    "Token",
    "Zone",
    "apply_move",
    "check_invariants",

    # Building blocks
    "AlignedToken",
    "Alignment",
    "align",
    "complete_blank_sentence",
    "normalize_sentence",
    "normalize_word",
    "tokenize",
    "WordClass",
    "classify",

    # Parameters
    "HINT_CAP",
]
