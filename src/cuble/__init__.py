"""Cuble puzzle package."""

from .types import CameraBasis, CubeState, Direction, FaceletComparison, ParityReport, PieceKind
from .engine import (
    GENERATION_ATTEMPT_LIMIT,
    GenerationError,
    InvalidShape,
    check_shape,
    corner_parity,
    edge_parity,
    generate,
    parity_report,
    permutation_parity,
    solved_state,
    verify,
)
from .facelets import compare_guess, project, stickers_correct
from .navigation import resolve_direction
from .session import GuessResult, PuzzleSession, SessionConfig, SessionStatus

__all__ = [
    "CameraBasis",
    "CubeState",
    "Direction",
    "FaceletComparison",
    "GENERATION_ATTEMPT_LIMIT",
    "GenerationError",
    "GuessResult",
    "InvalidShape",
    "ParityReport",
    "PieceKind",
    "PuzzleSession",
    "SessionConfig",
    "SessionStatus",
    "check_shape",
    "compare_guess",
    "corner_parity",
    "edge_parity",
    "generate",
    "parity_report",
    "permutation_parity",
    "project",
    "resolve_direction",
    "solved_state",
    "stickers_correct",
    "verify",
]
