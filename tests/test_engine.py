import logging

import pytest

from cuble import engine
from cuble.pieces import UNASSIGNED
from cuble.types import CubeState

SEEDS = ["Sun Oct 18 2026", "Mon Oct 19 2026", "1760774400000", 0, 42, 2024]


def _with(state: CubeState, slot: int, value: int, orientation: bool = False) -> CubeState:
    perm = list(state.permutation)
    orient = list(state.orientation)
    if orientation:
        orient[slot] = value
    else:
        perm[slot] = value
    return CubeState.from_lists(perm, orient)


def _swap(state: CubeState, a: int, b: int) -> CubeState:
    perm = list(state.permutation)
    perm[a], perm[b] = perm[b], perm[a]
    return CubeState.from_lists(perm, state.orientation)


def test_solved_state_is_valid():
    state = engine.solved_state()
    assert engine.verify(state)
    assert str(engine.parity_report(state)) == "EP: 0, CP: 0, PP: 0"


@pytest.mark.parametrize("seed", SEEDS)
def test_generate_is_deterministic(seed):
    first = engine.generate(seed)
    second = engine.generate(seed)
    assert first == second
    assert first.permutation == second.permutation
    assert first.orientation == second.orientation


def test_generated_states_are_valid_and_role_correct():
    for seed in range(200):
        state = engine.generate(f"seed-{seed}")
        assert engine.verify(state)
        assert sorted(state.permutation[:12]) == list(range(12))
        assert sorted(state.permutation[12:]) == list(range(12, 20))


def test_different_seeds_give_different_states():
    assert engine.generate("Sun Oct 18 2026") != engine.generate("Mon Oct 19 2026")


@pytest.mark.parametrize("seed", SEEDS)
def test_single_edge_flip_breaks_validity(seed):
    state = engine.generate(seed)
    flipped = _with(state, 3, state.orientation[3] ^ 1, orientation=True)
    assert not engine.verify(flipped)
    assert engine.edge_parity(flipped) == 1


@pytest.mark.parametrize("seed", SEEDS)
def test_single_corner_twist_breaks_validity(seed):
    state = engine.generate(seed)
    twisted = _with(state, 15, (state.orientation[15] + 1) % 3, orientation=True)
    assert not engine.verify(twisted)
    assert engine.corner_parity(twisted) == 1


@pytest.mark.parametrize("seed", SEEDS)
def test_edge_transposition_breaks_validity(seed):
    state = engine.generate(seed)
    swapped = _swap(state, 0, 1)
    assert not engine.verify(swapped)
    assert engine.permutation_parity(swapped) == 1


def test_edge_and_corner_transpositions_together_stay_valid():
    state = engine.generate("pair")
    assert engine.verify(_swap(_swap(state, 2, 7), 12, 19))


def test_shape_errors_raise_invalid_shape():
    solved = engine.solved_state()
    bad_states = [
        CubeState.from_lists(list(range(19)), [0] * 19),
        _with(solved, 0, 12),
        _with(solved, 12, 0),
        _with(solved, 1, 0),
        _with(solved, 5, 2, orientation=True),
        _with(solved, 13, 3, orientation=True),
        _with(solved, 4, UNASSIGNED),
        _with(solved, 6, 25),
    ]
    for state in bad_states:
        with pytest.raises(engine.InvalidShape):
            engine.verify(state)


def test_partial_states_pass_relaxed_shape_check():
    state = engine.erase_piece(engine.solved_state(), 4)
    engine.check_shape(state, allow_unassigned=True)
    with pytest.raises(engine.InvalidShape):
        engine.check_shape(state)
    assert not state.is_complete()
    assert engine.permutation_parity(state) == 0


def test_generation_cap_fails_loudly(caplog):
    with caplog.at_level(logging.ERROR, logger="cuble.engine"):
        with pytest.raises(engine.GenerationError):
            engine.generate("never", max_attempts=0)
    assert "no valid state" in caplog.text


def test_edits_return_new_states():
    solved = engine.solved_state()
    erased = engine.erase_piece(solved, 0)
    assert erased.permutation[0] == UNASSIGNED
    assert solved.permutation[0] == 0

    rotated = engine.rotate_piece(solved, 0)
    assert rotated.orientation[0] == 1
    assert engine.rotate_piece(rotated, 0).orientation[0] == 0

    corner = solved
    seen = []
    for _ in range(3):
        corner = engine.rotate_piece(corner, 12)
        seen.append(corner.orientation[12])
    assert seen == [2, 1, 0]


def test_erase_keeps_orientation_and_assign_resets_it():
    state = engine.rotate_piece(engine.solved_state(), 1)
    state = engine.erase_piece(state, 1)
    assert state.orientation[1] == 1
    state = engine.assign_piece(state, 1, 1)
    assert state.permutation[1] == 1
    assert state.orientation[1] == 0


def test_assign_rejects_wrong_kind_and_duplicates():
    solved = engine.solved_state()
    with pytest.raises(ValueError):
        engine.assign_piece(solved, 0, 12)
    with pytest.raises(ValueError):
        engine.assign_piece(solved, 0, 1)

    state = engine.erase_piece(engine.erase_piece(solved, 0), 1)
    assert engine.available_pieces(state, 0) == [0, 1]
    state = engine.assign_piece(state, 0, 1)
    assert engine.available_pieces(state, 1) == [0]


def test_pieces_correct_counts_piece_and_orientation():
    answer = engine.solved_state()
    guess = engine.rotate_piece(_swap(answer, 0, 1), 13)
    assert engine.pieces_correct(answer, answer) == 20
    assert engine.pieces_correct(guess, answer) == 17
    assert engine.correct_slots(guess, answer)[:3] == [False, False, True]
