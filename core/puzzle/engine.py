"""
Puzzle Engine - stateful puzzle instance for one sentence

Wraps the pure zone store with the operations the host view calls:
token transfers (also exposed as pick-up / drop / cancel primitives),
validity, completion checks and the hint budget.

Main workflow:
1. Build a puzzle from sentence content (build_puzzle)
2. Apply moves triggered by the user
3. Read validity / status after every move
4. Check the whole sentence on submission

Invalid moves are logged and ignored; nothing here raises to the host view.
"""

from __future__ import annotations

import logging
import random
import uuid
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from core.puzzle import placement, validation
from core.puzzle.alignment import Alignment, align
from core.puzzle.constants import FIRST_HINT_PLACEMENTS, HINT_CAP, NEXT_HINT_PLACEMENTS
from core.puzzle.tokenizer import complete_blank_sentence, normalize_word, tokenize
from core.puzzle.zones import (
    Location,
    Move,
    MoveToPool,
    MoveToTarget,
    PuzzleState,
    Token,
    Zone,
    apply_move,
    check_invariants,
    seed_state,
)
from core.schemas import Direction, ExerciseKind, SentenceContent

logger = logging.getLogger(__name__)

SHUFFLE_ATTEMPTS = 5


def new_token_id() -> str:
    return f"tok-{uuid.uuid4().hex}"


@dataclass(frozen=True)
class HeldToken:
    """A token picked up and not yet dropped."""
    token_id: str
    zone: Zone
    slot: Optional[int] = None


@dataclass(frozen=True)
class PuzzleSnapshot:
    """
    Everything the host view needs to render a puzzle.
    """
    slots: tuple[Optional[Token], ...]
    statuses: tuple[validation.SlotStatus, ...]
    source: tuple[Token, ...]
    unused: tuple[Token, ...]
    available: tuple[Token, ...]
    held: Optional[HeldToken]
    hints_used: int
    hints_remaining: int
    filled: bool
    fully_correct: bool


def _tokens_from_alignment(alignment: Alignment) -> list[Token]:
    """
    Create tokens in display order: the distorted sentence first, then missing words.
    """
    distorted = sorted(alignment.matched + alignment.extra, key=lambda a: a.source_index)
    tokens = [
        Token(
            id=new_token_id(),
            text=a.text,
            origin=Zone.SOURCE if a.target_index >= 0 else Zone.UNUSED,
            answer_index=a.target_index,
        )
        for a in distorted
    ]
    tokens.extend(
        Token(id=new_token_id(), text=a.text, origin=Zone.AVAILABLE, answer_index=a.target_index)
        for a in alignment.missing
    )
    return tokens


class Puzzle:
    """
    One sentence puzzle.

    Target slots follow the correct sentence; the source pool holds the
    matched tokens of the distorted sentence. Find-error puzzles also have
    an unused pool (extra words) and an available pool (missing words).
    """

    def __init__(
        self,
        kind: ExerciseKind,
        direction: Direction,
        correct_tokens: list[str],
        alignment: Alignment,
        correct_sentence: str,
        strip_punctuation: bool = False,
        prefill: bool = True
    ):
        self.kind = ExerciseKind(kind)
        self.direction = Direction(direction)
        self.correct_tokens = tuple(correct_tokens)
        self.correct_sentence = correct_sentence
        self.strip_punctuation = strip_punctuation
        self.correct_order = tuple(normalize_word(t, strip_punctuation) for t in correct_tokens)
        self.alignment = alignment

        tokens = _tokens_from_alignment(alignment)
        self._keys = {t.id: normalize_word(t.text, strip_punctuation) for t in tokens}
        self._initial_texts = Counter(t.text for t in tokens)
        self._state = seed_state(tokens, len(self.correct_tokens))
        self._held: Optional[HeldToken] = None
        self.hints_used = 0
        self.prefilled_slots: tuple[int, ...] = ()
        self._validity: tuple[bool, ...] = ()

        if prefill:
            self._prefill()
        self._refresh()

        logger.debug(
            "[PUZZLE] Built %s puzzle: %d slots, %d matched, %d missing, %d extra, %d pre-filled",
            self.kind.value, self.slot_count, len(alignment.matched),
            len(alignment.missing), len(alignment.extra), len(self.prefilled_slots)
        )

    # ---- State access ----

    @property
    def state(self) -> PuzzleState:
        return self._state

    @property
    def slot_count(self) -> int:
        return len(self.correct_tokens)

    @property
    def validity(self) -> tuple[bool, ...]:
        return self._validity

    @property
    def held(self) -> Optional[HeldToken]:
        return self._held

    def token(self, token_id: str) -> Optional[Token]:
        return self._state.tokens.get(token_id)

    def slot_texts(self) -> list[Optional[str]]:
        return [
            self._state.tokens[token_id].text if token_id is not None else None
            for token_id in self._state.slots()
        ]

    def pool(self, zone: Zone) -> tuple[Token, ...]:
        return self._state.pool(Zone(zone))

    def _refresh(self) -> None:
        self._validity = validation.validity_vector(
            self.slot_texts(), self.correct_order, self.strip_punctuation
        )

    def _apply(self, move: Move) -> bool:
        result = apply_move(self._state, move)
        if not result.accepted:
            logger.info("[PUZZLE] Ignored move %s: %s", type(move).__name__, result.reason)
            return False
        self._state = result.state
        self._refresh()
        return True

    # ---- Transfers ----

    def move_to_target(self, token_id: str, from_zone: Zone | str, to_slot: int) -> bool:
        """
        Place a token into a target slot.

        An occupied slot is vacated first: a token coming from another slot
        swaps places with the occupant, otherwise the occupant goes back to
        its own pool.

        Returns:
            True if the move was applied
        """
        return self._apply(MoveToTarget(token_id, Zone(from_zone), to_slot))

    def move_to_pool(self, token_id: str, from_slot: int, destination: Zone | str) -> bool:
        """
        Take a token out of a slot and return it to a pool.

        Only the pool a token was seeded into accepts it back.
        """
        return self._apply(MoveToPool(token_id, from_slot, Zone(destination)))

    # ---- Drag primitives ----

    def pick_up(self, token_id: str) -> bool:
        location = self._state.location_of(token_id)
        if location is None:
            logger.info("[PUZZLE] Ignored pick-up of unknown token %s", token_id)
            return False
        self._held = HeldToken(token_id, location.zone, location.slot)
        return True

    def drop_on(self, zone: Zone | str, slot: Optional[int] = None) -> bool:
        """
        Drop the held token on a zone (and slot, for the target zone).
        """
        held, self._held = self._held, None
        if held is None:
            return False

        zone = Zone(zone)
        if zone == Zone.TARGET:
            if slot is None:
                logger.info("[PUZZLE] Ignored drop on target without a slot")
                return False
            return self.move_to_target(held.token_id, held.zone, slot)

        if held.zone != Zone.TARGET:
            # Pool to pool: nothing moves
            return False
        return self.move_to_pool(held.token_id, held.slot, zone)

    def cancel(self) -> None:
        self._held = None

    # ---- Status ----

    def slot_status(self, slot: int) -> validation.SlotStatus:
        text = self.slot_texts()[slot]
        return validation.slot_status(text, self._validity[slot])

    def is_filled(self) -> bool:
        """
        Every slot is occupied and, for find-error, every missing word has
        been fetched from the available pool.
        """
        if self.slot_count == 0:
            return False
        if any(token_id is None for token_id in self._state.slots()):
            return False
        if self.kind == ExerciseKind.FIND_ERROR:
            return self._state.count(Zone.AVAILABLE) == 0
        return True

    def is_fully_correct(self) -> bool:
        return self.is_filled() and all(self._validity)

    def is_sentence_correct(self) -> bool:
        """Whole-sentence check used on submission."""
        return validation.is_sentence_correct(self.slot_texts(), self.correct_sentence)

    def user_answer(self) -> str:
        return validation.reconstruct_sentence(self.slot_texts())

    def check_invariants(self) -> list[str]:
        return check_invariants(self._state, self._initial_texts)

    # ---- Placement and hints ----

    def _find_token_for(
        self,
        slot: int,
        pools_only: bool = False,
        origin: Optional[Zone] = None
    ) -> Optional[Token]:
        """
        Best token to put into `slot`: same normalized text, not already
        correctly placed. Prefers the aligned token, then pooled tokens,
        then anything that is not an extra word.
        """
        key = self.correct_order[slot]
        best = None
        best_rank = None
        for token_id, token in self._state.tokens.items():
            if self._keys[token_id] != key:
                continue
            if origin is not None and token.origin != origin:
                continue
            location = self._state.locations[token_id]
            in_slot = location.zone == Zone.TARGET
            if in_slot and (pools_only or self._validity and self._validity[location.slot]):
                continue
            rank = (token.answer_index != slot, in_slot, token.origin == Zone.UNUSED)
            if best_rank is None or rank < best_rank:
                best, best_rank = token, rank
        return best

    def _place(self, token: Token, slot: int) -> bool:
        location: Location = self._state.locations[token.id]
        return self._apply(MoveToTarget(token.id, location.zone, slot))

    def _prefill(self) -> None:
        positions = placement.choose_prefill_positions(list(self.correct_tokens), self.direction)
        # Find-error only pre-fills words of the faulty sentence; a missing word stays to be found
        origin = Zone.SOURCE if self.kind == ExerciseKind.FIND_ERROR else None
        placed = []
        for position in positions:
            token = self._find_token_for(position, pools_only=True, origin=origin)
            if token is not None and self._place(token, position):
                placed.append(position)
        self.prefilled_slots = tuple(placed)

    @property
    def hints_remaining(self) -> int:
        return max(0, HINT_CAP - self.hints_used)

    def _correct_slot(self, slot: int) -> bool:
        occupant = self._state.token_at(slot)
        candidate = self._find_token_for(slot)
        if occupant is not None:
            self._apply(MoveToPool(occupant.id, slot, occupant.origin))
        if candidate is None:
            return occupant is not None
        return self._place(candidate, slot) or occupant is not None

    def use_hint(self) -> int:
        """
        Reveal tokens: wrong slots are corrected first, then empty slots
        are filled by priority.

        The first hint places two tokens, later hints one. A hint that
        changes nothing does not count against the budget.

        Returns:
            Number of slots changed (0 for a no-op)
        """
        if self.hints_used >= HINT_CAP:
            logger.info("[PUZZLE] Hint budget exhausted (%d/%d)", self.hints_used, HINT_CAP)
            return 0

        quota = FIRST_HINT_PLACEMENTS if self.hints_used == 0 else NEXT_HINT_PLACEMENTS
        tokens = list(self.correct_tokens)
        changed = 0

        slots = self._state.slots()
        wrong = [i for i in range(self.slot_count) if slots[i] is not None and not self._validity[i]]
        for slot in placement.order_by_priority(wrong, tokens, self.direction):
            if changed >= quota:
                break
            if self._correct_slot(slot):
                changed += 1

        slots = self._state.slots()
        empty = [i for i in range(self.slot_count) if slots[i] is None]
        for slot in placement.order_by_priority(empty, tokens, self.direction):
            if changed >= quota:
                break
            token = self._find_token_for(slot)
            if token is not None and self._place(token, slot):
                changed += 1

        if changed:
            self.hints_used += 1
        return changed

    # ---- Rendering ----

    def snapshot(self) -> PuzzleSnapshot:
        slots = tuple(
            self._state.tokens[token_id] if token_id is not None else None
            for token_id in self._state.slots()
        )
        return PuzzleSnapshot(
            slots=slots,
            statuses=tuple(self.slot_status(i) for i in range(self.slot_count)),
            source=self.pool(Zone.SOURCE),
            unused=self.pool(Zone.UNUSED),
            available=self.pool(Zone.AVAILABLE),
            held=self._held,
            hints_used=self.hints_used,
            hints_remaining=self.hints_remaining,
            filled=self.is_filled(),
            fully_correct=self.is_fully_correct(),
        )


# ---- Builders ----

def _shuffled(tokens: list[str], rng: random.Random) -> list[str]:
    shuffled = list(tokens)
    if len(set(tokens)) < 2:
        return shuffled
    for _ in range(SHUFFLE_ATTEMPTS):
        rng.shuffle(shuffled)
        if shuffled != tokens:
            break
    return shuffled


def build_reorder_puzzle(
    correct_sentence: str,
    direction: Direction,
    rng: Optional[random.Random] = None,
    prefill: bool = True
) -> Puzzle:
    """
    Reorder puzzle: the distorted sentence is a shuffle of the correct one.
    """
    correct_tokens = tokenize(correct_sentence)
    distorted = _shuffled(correct_tokens, rng or random.Random())
    return Puzzle(
        kind=ExerciseKind.REORDER_SENTENCE,
        direction=direction,
        correct_tokens=correct_tokens,
        alignment=align(distorted, correct_tokens),
        correct_sentence=correct_sentence,
        strip_punctuation=False,
        prefill=prefill,
    )


def build_find_error_puzzle(
    sentence_with_error: str,
    sentence_correct: str,
    direction: Direction,
    prefill: bool = True
) -> Puzzle:
    """
    Find-error puzzle: matched words go to the source pool, missing words
    to the available pool and extra words to the unused pool.
    """
    correct_tokens = tokenize(sentence_correct)
    return Puzzle(
        kind=ExerciseKind.FIND_ERROR,
        direction=direction,
        correct_tokens=correct_tokens,
        alignment=align(tokenize(sentence_with_error), correct_tokens, strip_punctuation=True),
        correct_sentence=sentence_correct,
        strip_punctuation=True,
        prefill=prefill,
    )


def build_puzzle(
    kind: ExerciseKind,
    content: SentenceContent,
    direction: Direction,
    rng: Optional[random.Random] = None
) -> Puzzle:
    """
    Build the puzzle for resolved sentence content.
    """
    if ExerciseKind(kind) == ExerciseKind.REORDER_SENTENCE:
        sentence = complete_blank_sentence(content.sentence_text, content.missing_or_error_word)
        return build_reorder_puzzle(sentence, direction, rng=rng)

    correct = content.correct_text or content.sentence_text
    return build_find_error_puzzle(content.sentence_text, correct, direction)
