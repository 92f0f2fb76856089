"""Screen-relative navigation between adjacent pieces.

A request such as "up" is interpreted against the camera: up/down follow the
re-orthogonalized screen-up axis, left/right follow the screen-right axis. Only the
fixed adjacency set of the current piece is considered (edges <-> corners).
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

import numpy as np

from . import pieces
from .types import CameraBasis, Direction

logger = logging.getLogger(__name__)

CONFIDENCE_THRESHOLD = 0.5
_DEGENERATE_EPS = 1e-4


def screen_axes(camera: CameraBasis) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """Return unit (right, screen_up) vectors, or ``None`` if forward is parallel to up."""

    forward = np.asarray(camera.forward, dtype=float)
    up = np.asarray(camera.up, dtype=float)
    forward_norm = np.linalg.norm(forward)
    up_norm = np.linalg.norm(up)
    if forward_norm == 0 or up_norm == 0:
        return None
    forward = forward / forward_norm
    right = np.cross(forward, up / up_norm)
    if float(np.dot(right, right)) < _DEGENERATE_EPS:
        return None
    right /= np.linalg.norm(right)
    screen_up = np.cross(right, forward)
    screen_up /= np.linalg.norm(screen_up)
    return right, screen_up


def resolve_direction(
    current: Optional[str],
    direction: Union[Direction, str],
    camera: CameraBasis,
    threshold: float = CONFIDENCE_THRESHOLD,
) -> Optional[str]:
    """Pick the adjacent piece that best matches a screen direction.

    A candidate qualifies only when its alignment with the requested axis is strictly
    greater than its alignment (in magnitude) with the perpendicular screen axis. The
    best qualifying score must also exceed ``threshold``; otherwise ``None`` is
    returned and the selection should stay where it is.
    """

    move = Direction.parse(direction)
    if current is None or pieces.is_center_name(current):
        return None
    candidates = pieces.ADJACENCY.get(current)
    if not candidates:
        return None
    axes = screen_axes(camera)
    if axes is None:
        logger.debug("camera basis is degenerate; ignoring %s", move.value)
        return None
    right, screen_up = axes

    if move.vertical:
        primary = screen_up if move is Direction.UP else -screen_up
        orthogonal = right
    else:
        primary = right if move is Direction.RIGHT else -right
        orthogonal = screen_up

    origin = np.asarray(pieces.world_position(current))
    best: Optional[str] = None
    best_score = float("-inf")
    for name in candidates:
        offset = np.asarray(pieces.world_position(name)) - origin
        offset /= np.linalg.norm(offset)
        score = float(np.dot(offset, primary))
        ortho = abs(float(np.dot(offset, orthogonal)))
        if score > best_score and score > ortho:
            best_score = score
            best = name

    if best_score > threshold:
        logger.debug("navigate %s from %s -> %s (%.3f)", move.value, current, best, best_score)
        return best
    return None
