"""
Random legal cube states, optionally with part of the cube already solved.

Cubies are placed slot by slot, so a twist has to be chosen for the last cubie that
keeps the orientation sum at 0 mod 3; otherwise the state is unreachable.

Classes:
    full     any state
    ofl      first (D) layer oriented, everything else random
    cfl      first layer solved
    oll      first layer oriented, last layer oriented
    cfl_oll  first layer solved, last layer oriented
    cll      first layer solved, last layer oriented with the ULB and URF corners swapped
"""
from itertools import permutations
from typing import List, Optional, Tuple

import numpy as np

from .arrangement import OrientationArrangement
from .config import ScrambleClass
from .cube import ALL_CUBIES, Cube, Facelet, Slot
from .moves import AMOUNTS, Face, Move, apply_moves

# ALL_CUBIES lists the four yellow cubies first, then the four white ones
FIRST_LAYER_SLOTS = (Slot.DLB, Slot.DLF, Slot.DRF, Slot.DRB)
LAST_LAYER_SLOTS = (Slot.ULB, Slot.ULF, Slot.URF, Slot.URB)


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _take(cubies: list, rng: np.random.Generator):
    return cubies.pop(int(rng.integers(0, len(cubies))))


def _place_last(cube: Cube, slot: int, cubie) -> Cube:
    for rotation in range(3):
        placed = cube.with_cubie(slot, cubie, rotation)
        if OrientationArrangement.from_cube(placed).is_solvable():
            return placed
    raise RuntimeError("Really should have found a valid orientation for that last cubie")


def _random_first_layer(cube: Cube, cubies: list, rng: np.random.Generator) -> Cube:
    yellow = cubies[:4]
    del cubies[:4]
    for slot in FIRST_LAYER_SLOTS:
        cube = cube.with_cubie(slot, _take(yellow, rng), 0)
    return cube


def _solved_first_layer(cube: Cube, cubies: list) -> Cube:
    for slot in FIRST_LAYER_SLOTS:
        cube = cube.with_cubie(slot, cubies.pop(0), 0)
    return cube


def _random_last_layer(cube: Cube, cubies: list, rng: np.random.Generator) -> Cube:
    for slot in LAST_LAYER_SLOTS[:-1]:
        cube = cube.with_cubie(slot, _take(cubies, rng), int(rng.integers(0, 3)))
    return _place_last(cube, LAST_LAYER_SLOTS[-1], cubies.pop(0))


def _oriented_last_layer(cube: Cube, cubies: list, rng: np.random.Generator) -> Cube:
    # shuffle first, then try placements in a fixed order, so the result stays unbiased
    shuffled = [_take(cubies, rng) for _ in range(4)]
    for perm in permutations(range(4)):
        placed = cube
        for slot, i in zip(LAST_LAYER_SLOTS, perm):
            placed = placed.with_cubie(slot, shuffled[i], 0)
        if OrientationArrangement.from_cube(placed).is_solvable():
            return placed
    raise RuntimeError("Really should have found a valid arrangement for the last layer")


def full_scramble(rng: Optional[np.random.Generator] = None) -> Cube:
    rng = _rng(rng)
    cube = Cube.solved(Facelet.GREEN, Facelet.WHITE)
    cubies = list(ALL_CUBIES)

    for slot in list(Slot)[:-1]:
        cube = cube.with_cubie(slot, _take(cubies, rng), int(rng.integers(0, 3)))

    return _place_last(cube, Slot.URB, cubies.pop(0))


def scramble_ofl(rng: Optional[np.random.Generator] = None) -> Cube:
    rng = _rng(rng)
    cubies = list(ALL_CUBIES)
    cube = _random_first_layer(Cube.solved(Facelet.GREEN, Facelet.YELLOW), cubies, rng)
    return _random_last_layer(cube, cubies, rng)


def scramble_cfl(rng: Optional[np.random.Generator] = None) -> Cube:
    rng = _rng(rng)
    cubies = list(ALL_CUBIES)
    cube = _solved_first_layer(Cube.solved(Facelet.GREEN, Facelet.YELLOW), cubies)
    return _random_last_layer(cube, cubies, rng)


def scramble_oll(rng: Optional[np.random.Generator] = None) -> Cube:
    rng = _rng(rng)
    cubies = list(ALL_CUBIES)
    cube = _random_first_layer(Cube.solved(Facelet.GREEN, Facelet.YELLOW), cubies, rng)
    return _oriented_last_layer(cube, cubies, rng)


def scramble_cfl_oll(rng: Optional[np.random.Generator] = None) -> Cube:
    rng = _rng(rng)
    cubies = list(ALL_CUBIES)
    cube = _solved_first_layer(Cube.solved(Facelet.GREEN, Facelet.YELLOW), cubies)
    return _oriented_last_layer(cube, cubies, rng)


def scramble_cll(rng: Optional[np.random.Generator] = None) -> Cube:
    """Always the same case. `rng` is unused; it keeps the signature shared with the other scramblers."""
    cubies = list(ALL_CUBIES)
    cube = Cube.solved(Facelet.GREEN, Facelet.YELLOW)
    for slot in Slot:
        cube = cube.with_cubie(slot, cubies.pop(0), 0)
    return cube


def random_move_scramble(num_moves: int, rng: Optional[np.random.Generator] = None,
                         faces=tuple(Face)) -> Tuple[Cube, List[Move]]:
    """Apply `num_moves` random turns to a solved cube, never turning the same face twice in a row."""
    rng = _rng(rng)
    moves = []
    last_face = None
    for _ in range(num_moves):
        while True:
            face = faces[int(rng.integers(0, len(faces)))]
            if face != last_face:
                break
        moves.append(Move(face, AMOUNTS[int(rng.integers(0, 3))]))
        last_face = face
    return apply_moves(Cube.solved(), moves), moves


_SCRAMBLERS = {
    ScrambleClass.FULL: full_scramble,
    ScrambleClass.OFL: scramble_ofl,
    ScrambleClass.CFL: scramble_cfl,
    ScrambleClass.OLL: scramble_oll,
    ScrambleClass.CFL_OLL: scramble_cfl_oll,
    ScrambleClass.CLL: scramble_cll,
}


def make_scramble(kind: ScrambleClass, rng: Optional[np.random.Generator] = None) -> Cube:
    return _SCRAMBLERS[ScrambleClass(kind)](rng)
