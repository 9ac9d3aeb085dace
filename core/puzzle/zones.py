"""
Puzzle Zones - pure token store and transfer function

The four zones (target slots, source pool, unused pool, available pool)
are a single store keyed by token id. Transfers are pure functions
(state, move) -> state', so the conservation and provenance invariants
can be checked after every step.

This module handles ONLY zone bookkeeping.
Validation and hints are handled by the engine module.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class Zone(str, Enum):
    """Where a token currently lives."""
    TARGET = "target"        # Ordered reconstruction slots
    SOURCE = "source"        # Unplaced tokens of the distorted sentence
    UNUSED = "unused"        # Extra tokens (find-error only)
    AVAILABLE = "available"  # Missing tokens (find-error only)


POOLS = (Zone.SOURCE, Zone.UNUSED, Zone.AVAILABLE)


@dataclass(frozen=True)
class Token:
    """
    A draggable word.

    origin is the pool the token was seeded into; it decides where a
    displaced token goes back to and which pools it may enter.
    """
    id: str
    text: str
    origin: Zone
    answer_index: int = -1


@dataclass(frozen=True)
class Location:
    zone: Zone
    slot: Optional[int] = None


@dataclass(frozen=True)
class MoveToTarget:
    token_id: str
    from_zone: Zone
    to_slot: int


@dataclass(frozen=True)
class MoveToPool:
    token_id: str
    from_slot: int
    destination: Zone


Move = Union[MoveToTarget, MoveToPool]


@dataclass(frozen=True)
class PuzzleState:
    """
    Immutable zone assignment for one puzzle instance.

    `order` is the display order of tokens; a token entering a pool goes
    to the end of it.
    """
    tokens: Mapping[str, Token]
    locations: Mapping[str, Location]
    order: tuple[str, ...]
    slot_count: int

    def location_of(self, token_id: str) -> Optional[Location]:
        return self.locations.get(token_id)

    def slots(self) -> tuple[Optional[str], ...]:
        """Token id per target slot, None for empty slots."""
        slots: list[Optional[str]] = [None] * self.slot_count
        for token_id, location in self.locations.items():
            if location.zone == Zone.TARGET:
                slots[location.slot] = token_id
        return tuple(slots)

    def token_at(self, slot: int) -> Optional[Token]:
        token_id = self.slots()[slot]
        return self.tokens[token_id] if token_id is not None else None

    def pool(self, zone: Zone) -> tuple[Token, ...]:
        return tuple(
            self.tokens[token_id]
            for token_id in self.order
            if self.locations[token_id].zone == zone
        )

    def count(self, zone: Zone) -> int:
        return sum(1 for location in self.locations.values() if location.zone == zone)


@dataclass(frozen=True)
class MoveResult:
    state: PuzzleState
    accepted: bool
    reason: str = ""


# ---- Construction ----

def seed_state(tokens: list[Token], slot_count: int) -> PuzzleState:
    """
    Build the initial state: every token in its origin pool, all slots empty.
    """
    return PuzzleState(
        tokens=MappingProxyType({t.id: t for t in tokens}),
        locations=MappingProxyType({t.id: Location(t.origin) for t in tokens}),
        order=tuple(t.id for t in tokens),
        slot_count=slot_count,
    )


def _replace(
    state: PuzzleState,
    changes: dict[str, Location],
    to_back: tuple[str, ...] = ()
) -> PuzzleState:
    locations = dict(state.locations)
    locations.update(changes)
    order = tuple(t for t in state.order if t not in to_back) + to_back
    return PuzzleState(
        tokens=state.tokens,
        locations=MappingProxyType(locations),
        order=order,
        slot_count=state.slot_count,
    )


def _reject(state: PuzzleState, reason: str) -> MoveResult:
    return MoveResult(state=state, accepted=False, reason=reason)


# ---- Transfers ----

def _move_to_target(state: PuzzleState, move: MoveToTarget) -> MoveResult:
    location = state.location_of(move.token_id)
    if location is None:
        return _reject(state, f"unknown token {move.token_id}")
    if location.zone != move.from_zone:
        return _reject(state, f"token {move.token_id} is in {location.zone.value}, not {move.from_zone.value}")
    if not 0 <= move.to_slot < state.slot_count:
        return _reject(state, f"slot {move.to_slot} out of range")
    if location.zone == Zone.TARGET and location.slot == move.to_slot:
        return _reject(state, f"token {move.token_id} already in slot {move.to_slot}")

    changes = {move.token_id: Location(Zone.TARGET, move.to_slot)}
    to_back: tuple[str, ...] = ()

    occupant = state.slots()[move.to_slot]
    if occupant is not None:
        if location.zone == Zone.TARGET:
            # Slot to slot: the two tokens trade places
            changes[occupant] = Location(Zone.TARGET, location.slot)
        else:
            changes[occupant] = Location(state.tokens[occupant].origin)
            to_back = (occupant,)

    return MoveResult(state=_replace(state, changes, to_back), accepted=True)


def _move_to_pool(state: PuzzleState, move: MoveToPool) -> MoveResult:
    location = state.location_of(move.token_id)
    if location is None:
        return _reject(state, f"unknown token {move.token_id}")
    if location.zone != Zone.TARGET or location.slot != move.from_slot:
        return _reject(state, f"token {move.token_id} is not in slot {move.from_slot}")
    if move.destination not in POOLS:
        return _reject(state, f"{move.destination.value} is not a pool")

    token = state.tokens[move.token_id]
    if token.origin != move.destination:
        return _reject(state, f"token {move.token_id} belongs to {token.origin.value}, not {move.destination.value}")

    changes = {move.token_id: Location(move.destination)}
    return MoveResult(state=_replace(state, changes, (move.token_id,)), accepted=True)


def apply_move(state: PuzzleState, move: Move) -> MoveResult:
    """
    Apply one transfer.

    Invalid moves leave the state untouched and report why.
    """
    if isinstance(move, MoveToTarget):
        return _move_to_target(state, move)
    if isinstance(move, MoveToPool):
        return _move_to_pool(state, move)
    raise TypeError(f"Unknown move: {move!r}")


# ---- Invariants ----

def check_invariants(state: PuzzleState, initial_texts: Optional[Counter] = None) -> list[str]:
    """
    Return a list of invariant violations (empty when the state is sound).

    Checks count conservation, one token per slot, and pool provenance.
    """
    violations = []

    if set(state.locations) != set(state.tokens):
        violations.append("token set and location set differ")

    seen_slots: set[int] = set()
    for token_id, location in state.locations.items():
        token = state.tokens.get(token_id)
        if token is None:
            continue
        if location.zone == Zone.TARGET:
            if location.slot is None or not 0 <= location.slot < state.slot_count:
                violations.append(f"{token_id} in invalid slot {location.slot}")
            elif location.slot in seen_slots:
                violations.append(f"slot {location.slot} holds more than one token")
            else:
                seen_slots.add(location.slot)
        elif location.zone != token.origin:
            violations.append(f"{token_id} from {token.origin.value} found in {location.zone.value}")

    total = sum(state.count(zone) for zone in (Zone.TARGET, *POOLS))
    if total != len(state.tokens):
        violations.append(f"zone counts sum to {total}, expected {len(state.tokens)}")

    if initial_texts is not None:
        texts = Counter(state.tokens[t].text for t in state.locations if t in state.tokens)
        if texts != initial_texts:
            violations.append("token texts changed")

    return violations
