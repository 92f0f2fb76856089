"""Win distribution bookkeeping.

Buckets hold wins in 1, 2, ..., 6 guesses plus a final "6+" bucket. The legacy
layout kept one bucket per guess count up to 22; ``migrate_stats`` folds it.
"""
from __future__ import annotations

from typing import List, Sequence

STAT_BUCKETS = 7
LEGACY_STAT_BUCKETS = 22


def new_stats() -> List[int]:
    return [0] * STAT_BUCKETS


def migrate_stats(stats: Sequence[int] | None) -> List[int]:
    """Return stats in the 7-bucket layout, folding legacy data when needed."""

    if stats is None:
        return new_stats()
    if len(stats) == STAT_BUCKETS:
        return list(stats)
    if len(stats) != LEGACY_STAT_BUCKETS:
        raise ValueError(f"stats must have {STAT_BUCKETS} or {LEGACY_STAT_BUCKETS} buckets")
    migrated = list(stats[: STAT_BUCKETS - 1])
    migrated.append(sum(stats[STAT_BUCKETS - 1 :]))
    return migrated


def record_win(stats: Sequence[int], guesses: int) -> List[int]:
    """Return a copy of ``stats`` with a win in ``guesses`` guesses counted."""

    updated = list(stats)
    bucket = min(max(guesses, 1) - 1, len(updated) - 1)
    updated[bucket] += 1
    return updated


def bucket_labels() -> List[str]:
    return [str(i) for i in range(1, STAT_BUCKETS)] + [f"{STAT_BUCKETS - 1}+"]
