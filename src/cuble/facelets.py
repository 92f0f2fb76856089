"""Facelet projection and guess comparison.

The 54 facelets are laid out face by face in ``FACES`` order (U, L, F, R, B, D), nine
per face, row by row. Each entry of ``FACELET_SLOTS`` names the slot whose piece shows
that sticker; single letters are the fixed centers.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from . import pieces
from .pieces import FACES, UNASSIGNED
from .types import CubeState, FaceletComparison

NUM_FACELETS = 54
UNASSIGNED_COLOR = "X"

FACELET_SLOTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "U": ("UBL", "UB", "URB", "UL", "U", "UR", "ULF", "UF", "UFR"),
    "L": ("UBL", "UL", "ULF", "BL", "L", "FL", "DLB", "DL", "DFL"),
    "F": ("ULF", "UF", "UFR", "FL", "F", "FR", "DFL", "DF", "DRF"),
    "R": ("UFR", "UR", "URB", "FR", "R", "BR", "DRF", "DR", "DBR"),
    "B": ("URB", "UB", "UBL", "BR", "B", "BL", "DBR", "DB", "DLB"),
    "D": ("DFL", "DF", "DRF", "DL", "D", "DR", "DLB", "DB", "DBR"),
})

CENTER_INDICES: Tuple[int, ...] = tuple(face * 9 + 4 for face in range(len(FACES)))


def _sticker(face: str, name: str, state: CubeState) -> str:
    slot = pieces.slot_index(name)
    occupant = state.permutation[slot]
    if occupant == UNASSIGNED:
        return UNASSIGNED_COLOR
    label = pieces.piece_at(occupant)
    offset = name.index(face)
    if len(name) == 2:
        offset += state.orientation[slot]
    else:
        # Corners count twist the other way round for display.
        offset += 3 - state.orientation[slot]
    return label[offset % len(label)]


def project(state: CubeState) -> List[str]:
    """Return the 54 facelet colors shown by ``state``.

    Each color is a face letter; facelets of unassigned slots are ``UNASSIGNED_COLOR``.
    """

    colors: List[str] = []
    for face in FACES:
        for name in FACELET_SLOTS[face]:
            if pieces.is_center_name(name):
                colors.append(name)
            else:
                colors.append(_sticker(face, name, state))
    return colors


def compare_guess(guess_colors: Sequence[str], answer_colors: Sequence[str]) -> FaceletComparison:
    """Compare two projections facelet by facelet (exact match only)."""

    if len(guess_colors) != NUM_FACELETS or len(answer_colors) != NUM_FACELETS:
        raise ValueError(f"facelet lists must have {NUM_FACELETS} entries")
    matches = tuple(g == a for g, a in zip(guess_colors, answer_colors))
    return FaceletComparison(correct_facelets=sum(matches), matches=matches)


def stickers_correct(guess_colors: Sequence[str], answer_colors: Sequence[str]) -> int:
    """Count matching non-center stickers, plus the six centers."""

    comparison = compare_guess(guess_colors, answer_colors)
    solved = sum(1 for idx, ok in enumerate(comparison.matches) if ok and idx not in CENTER_INDICES)
    return solved + len(CENTER_INDICES)


def format_net(colors: Sequence[str], marks: Sequence[bool] | None = None) -> str:
    """Render colors as an unfolded cube (U on top, L F R B in a row, D below).

    When ``marks`` is given, mismatching facelets are shown in lowercase.
    """

    if len(colors) != NUM_FACELETS:
        raise ValueError(f"expected {NUM_FACELETS} colors, got {len(colors)}")

    def cell(index: int) -> str:
        color = colors[index]
        if marks is not None and not marks[index]:
            return color.lower()
        return color

    def row(face: int, r: int) -> str:
        start = face * 9 + r * 3
        return "".join(cell(i) for i in range(start, start + 3))

    up, left, front, right, back, down = range(len(FACES))
    pad = " " * 4
    lines: List[str] = []
    for r in range(3):
        lines.append(pad + row(up, r))
    for r in range(3):
        lines.append(" ".join(row(face, r) for face in (left, front, right, back)))
    for r in range(3):
        lines.append(pad + row(down, r))
    return "\n".join(lines)
