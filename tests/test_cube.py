import numpy as np
import pytest

from pocket222.cube import ALL_CUBIES, Cube, Facelet, Slot, next_color
from pocket222.errors import InvalidColorPairError, InvalidCubeError
from pocket222.moves import Amount, Face, Move, apply_move, apply_moves

from tests.helpers import FACELETS, scrambled


def front_face(cube):
    # (ul, ur, dl, dr) of the F face
    return tuple(cube.sticker(i) for i in (8, 9, 10, 11))


def test_opposites():
    assert Facelet.YELLOW.opposite == Facelet.WHITE
    assert Facelet.WHITE.opposite == Facelet.YELLOW
    assert Facelet.GREEN.opposite == Facelet.BLUE
    assert Facelet.BLUE.opposite == Facelet.GREEN
    assert Facelet.RED.opposite == Facelet.ORANGE
    assert Facelet.ORANGE.opposite == Facelet.RED

    for f in FACELETS:
        assert f.opposite.opposite == f


def test_next_color_on_every_pair():
    for a in FACELETS:
        for b in FACELETS:
            if a != b and a.opposite != b:
                c = next_color(a, b)
                assert c not in (a, b, a.opposite, b.opposite)
            else:
                with pytest.raises(InvalidColorPairError):
                    next_color(a, b)


def test_next_color_follows_corner_order():
    for cubie in ALL_CUBIES:
        for i in range(3):
            assert next_color(cubie[i], cubie[(i + 1) % 3]) == cubie[(i + 2) % 3]


def test_invalid_color_pair_is_a_value_error():
    with pytest.raises(ValueError):
        next_color(Facelet.RED, Facelet.RED)


def test_solved_cube_exists_for_valid_pairs():
    for a in FACELETS:
        for b in FACELETS:
            if a != b and a.opposite != b:
                cube = Cube.solved(a, b)
                assert cube.is_solved()
                assert cube.reference_colors() == (a, b)
            else:
                with pytest.raises(InvalidColorPairError):
                    Cube.solved(a, b)


def test_constructor_validation():
    with pytest.raises(InvalidCubeError):
        Cube([0] * 23)
    with pytest.raises(InvalidCubeError):
        Cube([0] * 24)
    with pytest.raises(InvalidCubeError):
        Cube([6] * 4 + [1] * 4 + [2] * 4 + [3] * 4 + [4] * 4 + [5] * 4)

    cube = Cube(Cube.solved().stickers)
    assert cube == Cube.solved()


def test_from_string_round_trip():
    cube = scrambled("R U2 F' L D B2")
    assert Cube.from_string(str(cube)) == cube
    with pytest.raises(InvalidCubeError):
        Cube.from_string("X" * 24)


@pytest.mark.parametrize("face", list(Face))
def test_quarter_turn_period(face):
    start = Cube.solved(Facelet.GREEN, Facelet.WHITE)
    running = start
    for i in range(1, 4):
        running = running.quarter_turn(face)
        assert running != start, f"{face.name} returned to start after {i} turns"
    assert running.quarter_turn(face) == start


@pytest.mark.parametrize("face", list(Face))
def test_move_amount_periods(face):
    start = Cube.solved(Facelet.RED, Facelet.YELLOW)
    twice = Move(face, Amount.TWO)
    assert apply_move(start, twice) != start
    assert apply_moves(start, [twice, twice]) == start

    rev = Move(face, Amount.REV)
    assert apply_moves(start, [rev] * 4) == start
    assert apply_moves(start, [Move(face, Amount.ONE), rev]) == start


def test_simple_assertions_left():
    next_ = Cube.solved(Facelet.GREEN, Facelet.WHITE).quarter_turn(Face.L)
    assert front_face(next_) == (Facelet.WHITE, Facelet.GREEN, Facelet.WHITE, Facelet.GREEN)


def test_simple_assertions_right():
    next_ = Cube.solved(Facelet.GREEN, Facelet.WHITE).quarter_turn(Face.R)
    assert front_face(next_) == (Facelet.GREEN, Facelet.YELLOW, Facelet.GREEN, Facelet.YELLOW)


def test_simple_assertions_mid():
    next_ = scrambled("B D R", Facelet.YELLOW, Facelet.ORANGE)
    assert front_face(next_) == (Facelet.YELLOW, Facelet.RED, Facelet.ORANGE, Facelet.RED)


def test_simple_assertions_complex():
    next_ = scrambled("B D R F U L", Facelet.YELLOW, Facelet.ORANGE)
    assert front_face(next_) == (Facelet.WHITE, Facelet.GREEN, Facelet.BLUE, Facelet.RED)


@pytest.mark.parametrize("line", ["R L'", "U D'", "F B'", "R2 L2", "U' D"])
def test_whole_cube_rotations_stay_solved(line):
    cube = scrambled(line)
    assert cube.is_solved()
    assert cube != Cube.solved()


def test_single_turn_is_not_solved():
    for face in Face:
        assert not Cube.solved().quarter_turn(face).is_solved()


def test_solved_corners_match_cubies():
    cube = Cube.solved(Facelet.GREEN, Facelet.WHITE)
    cubies = set()
    for slot in Slot:
        colors = cube.corner(slot)
        # rotate so the U/D color comes first, matching ALL_CUBIES
        i = next(k for k, c in enumerate(colors) if c in (Facelet.YELLOW, Facelet.WHITE))
        cubies.add(colors[i:] + colors[:i])
    assert cubies == set(ALL_CUBIES)


def test_with_cubie_rotation():
    cube = Cube.solved()
    cubie = ALL_CUBIES[5]
    assert cube.with_cubie(Slot.URF, cubie, 0).corner(Slot.URF) == cubie
    assert cube.with_cubie(Slot.URF, cubie, 1).corner(Slot.URF) == (cubie[1], cubie[2], cubie[0])
    assert cube.with_cubie(Slot.URF, cubie, 3).corner(Slot.URF) == cubie


def test_cube_is_immutable_and_hashable():
    cube = Cube.solved()
    turned = cube.quarter_turn(Face.R)
    assert cube.is_solved()
    with pytest.raises(ValueError):
        cube.stickers[0] = 1
    assert len({cube, turned, Cube.solved()}) == 2
    assert isinstance(cube.key, bytes)
    assert np.array_equal(Cube(cube.stickers).stickers, cube.stickers)


def test_render_shows_every_sticker():
    rendered = Cube.solved().render()
    assert len(rendered.splitlines()) == 6
    assert sum(ch.isalpha() for ch in rendered) == 24


def test_reference_colors_read_the_dlb_corner():
    cube = Cube.solved(Facelet.GREEN, Facelet.WHITE)
    # DLB stickers run D, B, L
    assert cube.corner(Slot.DLB) == (Facelet.YELLOW, Facelet.BLUE, Facelet.ORANGE)
    assert cube.reference_colors() == (Facelet.GREEN, Facelet.WHITE)
    assert cube.target_faces()[Face.L] == Facelet.ORANGE

    # R, U and F never touch DLB, so the scheme survives them
    assert scrambled("R U2 F' R'").reference_colors() == (Facelet.GREEN, Facelet.WHITE)
