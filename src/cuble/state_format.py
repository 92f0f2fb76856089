"""Save/restore shapes for cube states.

A state persists as two flat JSON arrays of 20 integers each::

    {"permutation": [0, 1, ..., 19], "orientation": [0, 0, ..., 0]}

Unassigned slots are stored as ``-1``.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional

from .engine import InvalidShape, check_shape
from .types import CubeState


def dump_state(state: CubeState) -> Dict[str, List[int]]:
    """Return a JSON-compatible dict for ``state``."""

    return {"permutation": list(state.permutation), "orientation": list(state.orientation)}


def _int_list(payload: Mapping[str, Any], key: str) -> List[int]:
    if key not in payload:
        raise InvalidShape(f"missing '{key}'")
    raw = payload[key]
    if not isinstance(raw, (list, tuple)):
        raise InvalidShape(f"'{key}' must be a list of integers")
    values: List[int] = []
    for item in raw:
        if type(item) is not int:
            raise InvalidShape(f"'{key}' must be a list of integers; got {item!r}")
        values.append(item)
    return values


def load_state(payload: Optional[Mapping[str, Any]], allow_unassigned: bool = True) -> CubeState:
    """Build a ``CubeState`` from a persisted dict.

    Raises:
        InvalidShape: if the payload is corrupted or not a legal shape.
    """

    if not isinstance(payload, Mapping):
        raise InvalidShape("state payload must be an object")
    state = CubeState.from_lists(_int_list(payload, "permutation"), _int_list(payload, "orientation"))
    check_shape(state, allow_unassigned=allow_unassigned)
    return state


def dumps_state(state: CubeState) -> str:
    return json.dumps(dump_state(state))


def loads_state(text: str, allow_unassigned: bool = True) -> CubeState:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidShape(f"state is not valid JSON: {exc.msg}") from exc
    return load_state(payload, allow_unassigned=allow_unassigned)
