"""CLI runner for Cuble.

Usage examples:
- Describe a puzzle: ``python -m cuble.runner --seed "Sun Oct 18 2026"``
- Reveal its answer: ``python -m cuble.runner --seed 42 --show-answer``
- Check a saved state: ``python -m cuble.runner --state guess.json``
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import engine, facelets, pieces
from .session import PuzzleSession
from .state_format import loads_state

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def describe_puzzle(seed: str, show_answer: bool = False) -> None:
    session = PuzzleSession(seed)
    baseline = session.history[0]
    print(f"Seed: {seed}")
    print(f"Pieces: {baseline.pieces_correct}/{pieces.NUM_SLOTS}")
    print(f"Stickers: {baseline.stickers_correct}/{facelets.NUM_FACELETS}")
    print("Feedback (lowercase = wrong):")
    print(facelets.format_net(baseline.colors, baseline.comparison.matches))
    if show_answer:
        print("Answer:")
        print(facelets.format_net(session.answer_colors))


def check_state_file(path: str) -> None:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    state = loads_state(text)
    print(f"Parity: {engine.parity_report(state)}")
    if not state.is_complete():
        print("Reachable: incomplete")
    else:
        print(f"Reachable: {'yes' if engine.verify(state) else 'no'}")
    print(facelets.format_net(facelets.project(state)))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate and inspect Cuble puzzles")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--seed", help="Seed string for the hidden cube")
    source.add_argument("--state", help="Path to a saved JSON cube state to check")
    parser.add_argument("--show-answer", action="store_true", help="Print the hidden cube")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.seed is not None:
        describe_puzzle(args.seed, show_answer=args.show_answer)
        return 0
    try:
        check_state_file(args.state)
    except (ValueError, OSError) as exc:
        print(f"ERROR {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
