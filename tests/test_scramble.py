import numpy as np
import pytest

from pocket222.arrangement import decompose
from pocket222.config import ScrambleClass
from pocket222.cube import Cube, Slot
from pocket222.moves import apply_moves
from pocket222.scramble import (
    FIRST_LAYER_SLOTS,
    full_scramble,
    make_scramble,
    random_move_scramble,
    scramble_cfl,
    scramble_cfl_oll,
    scramble_cll,
    scramble_oll,
    scramble_ofl,
)


def assert_legal(cube):
    # rebuilding through the validating constructor checks the color counts
    Cube(cube.stickers)
    pos, orr = decompose(cube)
    assert orr.is_solvable()
    return pos, orr


@pytest.mark.parametrize("kind", list(ScrambleClass))
def test_every_class_is_legal(rng, kind):
    for _ in range(20):
        assert_legal(make_scramble(kind, rng))


def test_full_scramble_varies(rng):
    cubes = {full_scramble(rng) for _ in range(20)}
    assert len(cubes) > 1
    for cube in cubes:
        assert_legal(cube)


def test_ofl_orients_first_layer(rng):
    for _ in range(20):
        _, orr = assert_legal(scramble_ofl(rng))
        assert all(orr.twists[slot] == 0 for slot in FIRST_LAYER_SLOTS)


def test_cfl_solves_first_layer(rng):
    for _ in range(20):
        pos, orr = assert_legal(scramble_cfl(rng))
        for slot in FIRST_LAYER_SLOTS:
            assert pos.home_of(slot) == slot
            assert orr.twists[slot] == 0


def test_oll_orients_everything(rng):
    for _ in range(20):
        _, orr = assert_legal(scramble_oll(rng))
        assert orr.is_solved()


def test_cfl_oll(rng):
    for _ in range(20):
        pos, orr = assert_legal(scramble_cfl_oll(rng))
        assert orr.is_solved()
        assert all(pos.home_of(slot) == slot for slot in FIRST_LAYER_SLOTS)


def test_cll_is_a_fixed_case():
    cube = scramble_cll()
    assert cube == scramble_cll()
    assert not cube.is_solved()
    pos, orr = assert_legal(cube)
    assert orr.is_solved()
    assert pos.home_of(Slot.ULB) == Slot.URF
    assert pos.home_of(Slot.URF) == Slot.ULB


def test_random_move_scramble(rng):
    cube, moves = random_move_scramble(25, rng)
    assert len(moves) == 25
    assert all(a.face != b.face for a, b in zip(moves, moves[1:]))
    assert cube == apply_moves(Cube.solved(), moves)


def test_seeded_scrambles_repeat():
    a = make_scramble("full", np.random.default_rng(7))
    b = make_scramble("full", np.random.default_rng(7))
    assert a == b


def test_cll_ignores_the_generator():
    assert scramble_cll(np.random.default_rng(1)) == scramble_cll(np.random.default_rng(2)) == scramble_cll()
    assert make_scramble(ScrambleClass.CLL, np.random.default_rng(3)) == scramble_cll()
