"""Static piece catalog for the Cuble puzzle.

Facts about the catalog:
- 20 movable pieces: 12 edges (two-letter names) and 8 corners (three-letter names).
- Slot indices 0..19 follow ``PIECE_ORDER`` (edges first, then corners).
- Grid coordinates are (x, y, z) in 0..2 with x toward R, y toward F and z toward U.
- Adjacency only links edges to corners, never edge to edge.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .types import PieceKind

UNASSIGNED = -1

EDGES: Tuple[str, ...] = (
    "UF", "UR", "UB", "UL", "DF", "DR", "DB", "DL", "FR", "FL", "BR", "BL",
)
CORNERS: Tuple[str, ...] = ("UFR", "URB", "UBL", "ULF", "DRF", "DFL", "DLB", "DBR")
PIECE_ORDER: Tuple[str, ...] = EDGES + CORNERS

NUM_EDGES = len(EDGES)
NUM_CORNERS = len(CORNERS)
NUM_SLOTS = len(PIECE_ORDER)
EDGE_SLOTS = range(0, NUM_EDGES)
CORNER_SLOTS = range(NUM_EDGES, NUM_SLOTS)

FACES = "ULFRBD"

Coord = Tuple[int, int, int]

GRID_COORDINATES: Mapping[str, Coord] = MappingProxyType(
    {
        "UF": (1, 2, 2), "UR": (2, 1, 2), "UB": (1, 0, 2), "UL": (0, 1, 2),
        "DF": (1, 2, 0), "DR": (2, 1, 0), "DB": (1, 0, 0), "DL": (0, 1, 0),
        "FR": (2, 2, 1), "FL": (0, 2, 1), "BR": (2, 0, 1), "BL": (0, 0, 1),
        "UFR": (2, 2, 2), "URB": (2, 0, 2), "UBL": (0, 0, 2), "ULF": (0, 2, 2),
        "DRF": (2, 2, 0), "DFL": (0, 2, 0), "DLB": (0, 0, 0), "DBR": (2, 0, 0),
    }
)

ADJACENCY: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "UFR": ("UF", "FR", "UR"),
        "URB": ("UR", "BR", "UB"),
        "UBL": ("UB", "BL", "UL"),
        "ULF": ("UL", "FL", "UF"),
        "DRF": ("DF", "FR", "DR"),
        "DFL": ("DF", "FL", "DL"),
        "DLB": ("DL", "BL", "DB"),
        "DBR": ("DB", "BR", "DR"),
        "UF": ("UFR", "ULF"),
        "UR": ("UFR", "URB"),
        "UB": ("URB", "UBL"),
        "UL": ("UBL", "ULF"),
        "DF": ("DRF", "DFL"),
        "DR": ("DRF", "DBR"),
        "DB": ("DBR", "DLB"),
        "DL": ("DLB", "DFL"),
        "FR": ("UFR", "DRF"),
        "FL": ("ULF", "DFL"),
        "BR": ("URB", "DBR"),
        "BL": ("UBL", "DLB"),
    }
)

_SLOT_BY_NAME: Mapping[str, int] = MappingProxyType(
    {name: idx for idx, name in enumerate(PIECE_ORDER)}
)


def is_piece_name(name: object) -> bool:
    """Return ``True`` for edge and corner names known to the catalog."""

    return isinstance(name, str) and name in _SLOT_BY_NAME


def is_center_name(name: object) -> bool:
    """Centers and placeholders are anything that is not a 2 or 3 letter string."""

    return not isinstance(name, str) or len(name) not in (2, 3)


def slot_index(name: str) -> int:
    """Return the slot index for a piece name (e.g. ``"UF"`` -> 0)."""

    try:
        return _SLOT_BY_NAME[name]
    except KeyError as exc:
        raise ValueError(f"Unknown piece '{name}'") from exc


def piece_at(index: int) -> str:
    if not 0 <= index < NUM_SLOTS:
        raise ValueError(f"slot index out of range: {index}")
    return PIECE_ORDER[index]


def slot_kind(index: int) -> PieceKind:
    if not 0 <= index < NUM_SLOTS:
        raise ValueError(f"slot index out of range: {index}")
    return PieceKind.EDGE if index < NUM_EDGES else PieceKind.CORNER


def piece_kind(name: str) -> PieceKind:
    return slot_kind(slot_index(name))


def slots_of_kind(kind: PieceKind) -> range:
    return EDGE_SLOTS if kind is PieceKind.EDGE else CORNER_SLOTS


def world_position(name: str) -> Tuple[float, float, float]:
    """Return the renderer-space center of a piece.

    The renderer frame is right-handed with x toward R, y toward U and z toward F,
    centered on the core. Grid (x, y, z) maps to (x - 1, z - 1, y - 1).
    """

    if name not in GRID_COORDINATES:
        raise ValueError(f"Unknown piece '{name}'")
    x, y, z = GRID_COORDINATES[name]
    return float(x - 1), float(z - 1), float(y - 1)
