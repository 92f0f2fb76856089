"""Core data structures for Cuble.

Rule reminders:
- A cube state is a permutation + orientation pair over 20 slots (12 edges, then 8 corners).
- Edges have 2 orientations, corners have 3.
- States are values: edits build a new ``CubeState`` instead of mutating one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union


Vec3 = Tuple[float, float, float]


class PieceKind(Enum):
    """Movable piece families."""

    EDGE = 2
    CORNER = 3

    @property
    def orientations(self) -> int:
        """Number of distinct orientations (also the sticker count)."""

        return self.value


class Direction(Enum):
    """Screen-relative navigation directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @classmethod
    def parse(cls, raw: Union["Direction", str]) -> "Direction":
        """Accept a ``Direction``, a direction name, or one of the WASD keys."""

        if isinstance(raw, Direction):
            return raw
        if not isinstance(raw, str):
            raise ValueError(f"Invalid direction {raw!r}")
        token = raw.strip().lower()
        if token in _WASD:
            return _WASD[token]
        try:
            return cls(token)
        except ValueError as exc:
            raise ValueError(f"Invalid direction '{raw}'") from exc


_WASD = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


@dataclass(frozen=True)
class CubeState:
    """Permutation and orientation of the 20 movable slots.

    ``permutation[slot]`` is the index of the piece in that slot, or ``-1`` when the
    slot has not been assigned yet. ``orientation[slot]`` is the rotational offset of
    the occupying piece.
    """

    permutation: Tuple[int, ...]
    orientation: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "permutation", tuple(self.permutation))
        object.__setattr__(self, "orientation", tuple(self.orientation))

    @classmethod
    def from_lists(cls, permutation: Sequence[int], orientation: Sequence[int]) -> "CubeState":
        return cls(permutation=tuple(permutation), orientation=tuple(orientation))

    def is_complete(self) -> bool:
        """Return ``True`` when no slot is unassigned."""

        return all(value >= 0 for value in self.permutation)


@dataclass(frozen=True)
class CameraBasis:
    """Camera look and up vectors, in the renderer's world frame."""

    forward: Vec3
    up: Vec3


@dataclass(frozen=True)
class ParityReport:
    """The three parity bits; all zero means the state is reachable."""

    edge: int
    corner: int
    permutation: int

    @property
    def ok(self) -> bool:
        return not (self.edge or self.corner or self.permutation)

    def __str__(self) -> str:
        return f"EP: {self.edge}, CP: {self.corner}, PP: {self.permutation}"


@dataclass(frozen=True)
class FaceletComparison:
    """Per-facelet equality between a guess and the answer."""

    correct_facelets: int
    matches: Tuple[bool, ...]

    @property
    def solved(self) -> bool:
        return self.correct_facelets == len(self.matches)
