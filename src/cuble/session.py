"""Puzzle session orchestration for UI-driven or scripted play.

This module keeps UI concerns separate from the cube engine: the UI asks the
session to edit the guess, submit it, or move the selection, and reads back plain
values (``CubeState``, color lists, ``GuessResult``) instead of reaching into shared
mutable objects.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from . import engine, facelets, pieces, stats
from .engine import Seed
from .navigation import CONFIDENCE_THRESHOLD, resolve_direction
from .state_format import dump_state, load_state
from .types import CameraBasis, CubeState, Direction, FaceletComparison, ParityReport

logger = logging.getLogger(__name__)

MAX_GUESSES = 6


@dataclass
class SessionConfig:
    max_guesses: int = MAX_GUESSES
    generation_attempts: int = engine.GENERATION_ATTEMPT_LIMIT
    navigation_threshold: float = CONFIDENCE_THRESHOLD


class SessionStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GuessResult:
    """Feedback for one evaluated guess (guess 0 is the automatic baseline)."""

    guess_number: int
    state: CubeState
    colors: Tuple[str, ...]
    comparison: FaceletComparison
    pieces_correct: int
    stickers_correct: int

    @property
    def won(self) -> bool:
        return self.comparison.solved


class PuzzleSession:
    """Manage one Cuble puzzle: hidden answer, the player's guess, and scoring."""

    def __init__(self, seed: Seed, config: Optional[SessionConfig] = None) -> None:
        self.config = config or SessionConfig()
        self.seed: Seed
        self.answer: CubeState
        self.answer_colors: Tuple[str, ...]
        self.guess: CubeState
        self.last_submitted: CubeState
        self.last_result: Optional[GuessResult]
        self.history: List[GuessResult]
        self.guesses: int
        self.score: List[int]
        self.status: SessionStatus
        self.selected: Optional[str]
        self.stats_recorded: bool
        self.new_puzzle(seed)

    def new_puzzle(self, seed: Seed) -> None:
        """Start a fresh puzzle from ``seed`` and evaluate the baseline guess."""

        self.seed = seed
        self.answer = engine.generate(seed, max_attempts=self.config.generation_attempts)
        self.answer_colors = tuple(facelets.project(self.answer))
        self.guess = engine.solved_state()
        self.history = []
        self.guesses = 0
        self.score = [-1] * pieces.NUM_SLOTS
        self.status = SessionStatus.IN_PROGRESS
        self.selected = None
        self.stats_recorded = False
        self.last_submitted = self.guess
        self.last_result = None
        self._record(self._evaluate(self.guess))

    def _evaluate(self, state: CubeState) -> GuessResult:
        colors = tuple(facelets.project(state))
        return GuessResult(
            guess_number=self.guesses,
            state=state,
            colors=colors,
            comparison=facelets.compare_guess(colors, self.answer_colors),
            pieces_correct=engine.pieces_correct(state, self.answer),
            stickers_correct=facelets.stickers_correct(colors, self.answer_colors),
        )

    def _record(self, result: GuessResult) -> None:
        self.last_submitted = result.state
        self.last_result = result
        self.history.append(result)
        for slot, ok in enumerate(engine.correct_slots(result.state, self.answer)):
            if ok and self.score[slot] == -1:
                self.score[slot] = result.guess_number
        self.status = self._status_for(result)

    def _status_for(self, result: GuessResult) -> SessionStatus:
        if result.won:
            return SessionStatus.WON
        if self.guesses >= self.config.max_guesses:
            return SessionStatus.LOST
        return SessionStatus.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.status is not SessionStatus.IN_PROGRESS

    # Guess editing -----------------------------------------------------

    def is_locked(self, name: str) -> bool:
        """A slot is locked once the last submitted guess had it right."""

        slot = pieces.slot_index(name)
        return engine.correct_slots(self.last_submitted, self.answer)[slot]

    def _editable_slot(self, name: str) -> int:
        if self.is_over:
            raise ValueError("puzzle is over")
        slot = pieces.slot_index(name)
        if self.is_locked(name):
            raise ValueError(f"{name} is already correct")
        return slot

    def available_pieces(self, name: str) -> List[str]:
        """Pieces that may be placed into slot ``name`` (same kind, not placed yet)."""

        slot = pieces.slot_index(name)
        return [pieces.piece_at(value) for value in engine.available_pieces(self.guess, slot)]

    def assign(self, name: str, piece: str) -> CubeState:
        slot = self._editable_slot(name)
        if pieces.piece_kind(piece) is not pieces.slot_kind(slot):
            raise ValueError(f"{piece} does not fit the {name} slot")
        self.guess = engine.assign_piece(self.guess, slot, pieces.slot_index(piece))
        logger.debug("assign %s <- %s", name, piece)
        return self.guess

    def erase(self, name: str) -> CubeState:
        slot = self._editable_slot(name)
        self.guess = engine.erase_piece(self.guess, slot)
        logger.debug("erase %s", name)
        return self.guess

    def rotate(self, name: str) -> CubeState:
        slot = self._editable_slot(name)
        self.guess = engine.rotate_piece(self.guess, slot)
        logger.debug("rotate %s -> %d", name, self.guess.orientation[slot])
        return self.guess

    def parity(self) -> ParityReport:
        return engine.parity_report(self.guess)

    # Submission --------------------------------------------------------

    def can_submit(self) -> Tuple[bool, str]:
        if self.is_over:
            return False, "Puzzle is over"
        if not self.guess.is_complete():
            return False, "Every piece must be placed"
        if not engine.verify(self.guess):
            return False, f"Unreachable state ({self.parity()})"
        return True, "OK"

    def submit_guess(self) -> GuessResult:
        """Score the current guess against the answer.

        Raises:
            ValueError: if the guess is incomplete, unreachable, or the game is over.
        """

        ok, reason = self.can_submit()
        if not ok:
            raise ValueError(reason)
        self.guesses += 1
        result = self._evaluate(self.guess)
        self._record(result)
        logger.debug(
            "guess %d: %d/54 facelets, %d/20 pieces, status=%s",
            result.guess_number,
            result.comparison.correct_facelets,
            result.pieces_correct,
            self.status.value,
        )
        return result

    def pieces_correct(self) -> int:
        return engine.pieces_correct(self.guess, self.answer)

    def stickers_correct(self) -> int:
        return facelets.stickers_correct(facelets.project(self.guess), self.answer_colors)

    def status_message(self) -> str:
        if self.status is SessionStatus.WON:
            return f"You won in {self.guesses} guesses!"
        if self.status is SessionStatus.LOST:
            return f"Game Over! Maximum {self.config.max_guesses} guesses reached."
        return str(self.parity())

    def share_text(self, date_label: str, mode_label: str) -> str:
        score = " ".join(str(value) for value in self.score)
        return f"Cuble {date_label} ({mode_label}): {self.guesses}/{self.config.max_guesses}, {score}"

    def record_stats(self, distribution: Optional[Sequence[int]]) -> List[int]:
        """Return ``distribution`` with this puzzle's win counted.

        A puzzle counts once: calls before the win, after a loss, or after the win
        was already recorded return the distribution unchanged (migrated to the
        current bucket layout).
        """

        current = stats.migrate_stats(distribution)
        if self.status is not SessionStatus.WON or self.stats_recorded:
            return current
        self.stats_recorded = True
        logger.debug("recording win in %d guesses", self.guesses)
        return stats.record_win(current, self.guesses)

    # Selection ---------------------------------------------------------

    def select(self, name: Optional[str]) -> Optional[str]:
        """Select a piece (or center); selecting the current selection clears it."""

        if name is not None and not pieces.is_piece_name(name) and name not in tuple(pieces.FACES):
            raise ValueError(f"Unknown piece '{name}'")
        self.selected = None if name == self.selected else name
        return self.selected

    def navigate(self, direction: Union[Direction, str], camera: CameraBasis) -> Optional[str]:
        """Move the selection one piece in a screen direction; no-op without a target."""

        target = resolve_direction(
            self.selected, direction, camera, threshold=self.config.navigation_threshold
        )
        if target is not None:
            self.selected = target
        return target

    # Save / restore ----------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Return a JSON-compatible snapshot of the session."""

        return {
            "seed": self.seed,
            "guess": dump_state(self.guess),
            "last_submitted": dump_state(self.last_submitted),
            "guesses": self.guesses,
            "score": list(self.score),
            "status": self.status.value,
            "stats_recorded": self.stats_recorded,
        }

    @classmethod
    def restore(cls, payload: Mapping[str, Any], config: Optional[SessionConfig] = None) -> "PuzzleSession":
        """Rebuild a session from ``snapshot`` output; the answer is regenerated from the seed."""

        if "seed" not in payload:
            raise ValueError("snapshot is missing 'seed'")
        session = cls(payload["seed"], config=config)
        guesses = payload.get("guesses", 0)
        if type(guesses) is not int or not 0 <= guesses <= session.config.max_guesses:
            raise ValueError(f"invalid guess count {guesses!r}")
        score = payload.get("score", [-1] * pieces.NUM_SLOTS)
        if not isinstance(score, list) or len(score) != pieces.NUM_SLOTS or any(type(v) is not int or not -1 <= v <= guesses for v in score):
            raise ValueError("invalid score")
        session.guess = load_state(payload.get("guess"))
        session.last_submitted = load_state(payload.get("last_submitted"), allow_unassigned=False)
        stats_recorded = payload.get("stats_recorded", False)
        if not isinstance(stats_recorded, bool):
            raise ValueError(f"invalid stats_recorded flag {stats_recorded!r}")
        session.guesses = guesses
        session.score = list(score)
        session.last_result = session._evaluate(session.last_submitted)
        session.history = [session.last_result]
        # Status follows from the restored guesses; a stored value must agree.
        session.status = session._status_for(session.last_result)
        stored = payload.get("status")
        if stored is not None and stored != session.status.value:
            raise ValueError(f"snapshot status {stored!r} does not match its guesses ({session.status.value})")
        session.stats_recorded = stats_recorded and session.status is SessionStatus.WON
        return session
