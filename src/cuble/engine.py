"""Cube state engine for Cuble.

Rules:
- Edge slots (0..11) hold edge pieces 0..11; corner slots (12..19) hold corners 12..19.
- A complete state is reachable iff the combined permutation parity is even, the edge
  orientation sum is 0 mod 2 and the corner orientation sum is 0 mod 3.
- ``verify`` only answers for well-formed states; malformed input raises ``InvalidShape``.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Set, Union

from . import pieces
from .pieces import CORNER_SLOTS, EDGE_SLOTS, NUM_SLOTS, UNASSIGNED
from .types import CubeState, ParityReport, PieceKind

logger = logging.getLogger(__name__)

GENERATION_ATTEMPT_LIMIT = 1000

Seed = Union[str, int]


class InvalidShape(ValueError):
    """Raised when a state is not a well-formed permutation/orientation pair."""


class GenerationError(RuntimeError):
    """Raised when no valid state was drawn within the attempt limit."""


def solved_state() -> CubeState:
    return CubeState(permutation=tuple(range(NUM_SLOTS)), orientation=(0,) * NUM_SLOTS)


def check_shape(state: CubeState, allow_unassigned: bool = False) -> None:
    """Validate array lengths, value ranges and piece roles.

    Raises:
        InvalidShape: if any slot holds a value that cannot be there.
    """

    permutation = state.permutation
    orientation = state.orientation
    if len(permutation) != NUM_SLOTS or len(orientation) != NUM_SLOTS:
        raise InvalidShape(
            f"permutation and orientation must have {NUM_SLOTS} entries; "
            f"got {len(permutation)} and {len(orientation)}"
        )
    seen: Set[int] = set()
    for slot in range(NUM_SLOTS):
        value = permutation[slot]
        twist = orientation[slot]
        if type(value) is not int or type(twist) is not int:
            raise InvalidShape(f"slot {slot} must hold integers")
        kind = pieces.slot_kind(slot)
        if not 0 <= twist < kind.orientations:
            raise InvalidShape(f"orientation {twist} out of range for {pieces.piece_at(slot)}")
        if value == UNASSIGNED:
            if not allow_unassigned:
                raise InvalidShape(f"slot {pieces.piece_at(slot)} is unassigned")
            continue
        if value not in pieces.slots_of_kind(kind):
            raise InvalidShape(f"value {value} cannot occupy {kind.name.lower()} slot {pieces.piece_at(slot)}")
        if value in seen:
            raise InvalidShape(f"piece {pieces.piece_at(value)} appears more than once")
        seen.add(value)


def _inversion_parity(values: Iterable[int]) -> int:
    assigned = [v for v in values if v != UNASSIGNED]
    inversions = 0
    for i in range(len(assigned)):
        for j in range(i + 1, len(assigned)):
            if assigned[i] > assigned[j]:
                inversions += 1
    return inversions & 1


def edge_parity(state: CubeState) -> int:
    """Return 1 when the edge orientation sum is odd."""

    return sum(state.orientation[slot] for slot in EDGE_SLOTS) % 2


def corner_parity(state: CubeState) -> int:
    """Return 1 when the corner orientation sum is not a multiple of 3."""

    return 0 if sum(state.orientation[slot] for slot in CORNER_SLOTS) % 3 == 0 else 1


def permutation_parity(state: CubeState) -> int:
    """Return the edge permutation parity XOR the corner permutation parity.

    Unassigned slots are skipped, so the bit is also meaningful for a partial guess.
    """

    edges = _inversion_parity(state.permutation[slot] for slot in EDGE_SLOTS)
    corners = _inversion_parity(state.permutation[slot] for slot in CORNER_SLOTS)
    return edges ^ corners


def parity_report(state: CubeState) -> ParityReport:
    return ParityReport(
        edge=edge_parity(state),
        corner=corner_parity(state),
        permutation=permutation_parity(state),
    )


def verify(state: CubeState) -> bool:
    """Return ``True`` if a complete, well-formed state is physically reachable."""

    check_shape(state)
    return parity_report(state).ok


def _draw_state(rng: random.Random) -> CubeState:
    edges = list(EDGE_SLOTS)
    corners = list(CORNER_SLOTS)
    rng.shuffle(edges)
    rng.shuffle(corners)
    orientation: List[int] = [rng.randrange(PieceKind.EDGE.orientations) for _ in EDGE_SLOTS]
    orientation.extend(rng.randrange(PieceKind.CORNER.orientations) for _ in CORNER_SLOTS)
    return CubeState(permutation=tuple(edges + corners), orientation=tuple(orientation))


def generate(seed: Seed, max_attempts: int = GENERATION_ATTEMPT_LIMIT) -> CubeState:
    """Draw a uniformly random reachable state from ``seed``.

    Random permutations and orientations are drawn and rejected until one passes
    ``verify``. The same seed always yields the same state.

    Raises:
        GenerationError: if ``max_attempts`` draws all fail.
    """

    rng = random.Random(seed)
    for attempt in range(1, max_attempts + 1):
        state = _draw_state(rng)
        if verify(state):
            logger.debug("generated state for seed %r after %d attempt(s)", seed, attempt)
            return state
    logger.error("no valid state for seed %r within %d attempts", seed, max_attempts)
    raise GenerationError(f"could not generate a valid state within {max_attempts} attempts")


def placed_pieces(state: CubeState) -> Set[int]:
    return {value for value in state.permutation if value != UNASSIGNED}


def available_pieces(state: CubeState, slot: int) -> List[int]:
    """Return pieces of the slot's kind that are not placed anywhere yet."""

    used = placed_pieces(state)
    return [value for value in pieces.slots_of_kind(pieces.slot_kind(slot)) if value not in used]


def _replace(values: tuple, slot: int, value: int) -> tuple:
    return values[:slot] + (value,) + values[slot + 1 :]


def assign_piece(state: CubeState, slot: int, piece: int) -> CubeState:
    """Place ``piece`` into ``slot`` with orientation reset to 0."""

    kind = pieces.slot_kind(slot)
    if piece not in pieces.slots_of_kind(kind):
        raise ValueError(f"piece {piece} cannot go in {kind.name.lower()} slot {pieces.piece_at(slot)}")
    current = state.permutation[slot]
    if piece != current and piece in placed_pieces(state):
        raise ValueError(f"piece {pieces.piece_at(piece)} is already placed")
    return CubeState(
        permutation=_replace(state.permutation, slot, piece),
        orientation=_replace(state.orientation, slot, 0),
    )


def erase_piece(state: CubeState, slot: int) -> CubeState:
    """Mark ``slot`` as unassigned; its orientation is kept."""

    pieces.slot_kind(slot)
    return CubeState(
        permutation=_replace(state.permutation, slot, UNASSIGNED),
        orientation=state.orientation,
    )


def rotate_piece(state: CubeState, slot: int) -> CubeState:
    """Step the orientation of ``slot`` backwards, wrapping to the highest value."""

    kind = pieces.slot_kind(slot)
    twist = (state.orientation[slot] - 1) % kind.orientations
    return CubeState(
        permutation=state.permutation,
        orientation=_replace(state.orientation, slot, twist),
    )


def correct_slots(guess: CubeState, answer: CubeState) -> List[bool]:
    """Per slot: does the guess hold the answer's piece in the answer's orientation?"""

    return [
        guess.permutation[slot] == answer.permutation[slot]
        and guess.orientation[slot] == answer.orientation[slot]
        for slot in range(NUM_SLOTS)
    ]


def pieces_correct(guess: CubeState, answer: CubeState) -> int:
    return sum(correct_slots(guess, answer))
