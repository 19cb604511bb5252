"""
Compact projections of a Cube relative to the fixed DLB corner.

PositionArrangement: for every slot, the home slot of the cubie sitting in it.
OrientationArrangement: for every slot, the twist of the cubie sitting in it, i.e.
where its U/D colored sticker ended up (0 on the U/D face, 1 one step clockwise,
2 one step counter-clockwise).

Both only support the canonical R, U and F turns, since these never move DLB.
"""
from enum import IntEnum
from math import factorial
from typing import Sequence, Tuple

from .cube import Cube, Slot, REFERENCE_SLOT, next_color
from .errors import InvalidColorPairError, InvalidCubeError
from .moves import Face


class Twist(IntEnum):
    CORRECT = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


# new[slot] = old[PERM[slot]]
SLOT_PERMS = {
    Face.R: (0, 1, 3, 7, 4, 5, 2, 6),
    Face.U: (0, 1, 2, 3, 5, 6, 7, 4),
    Face.F: (0, 2, 6, 3, 4, 1, 5, 7),
}

# twist added to the cubie arriving in each slot
SLOT_TWISTS = {
    Face.R: (0, 0, 1, 2, 0, 0, 2, 1),
    Face.U: (0, 0, 0, 0, 0, 0, 0, 0),
    Face.F: (0, 1, 2, 0, 0, 2, 1, 0),
}

_MUTABLE_SLOTS = range(1, 8)
_LEHMER_WEIGHTS = [factorial(6 - k) for k in range(7)]
_POW3 = [3 ** k for k in range(7)]

NUM_POSITION_INDICES = factorial(7)
NUM_ORIENTATION_INDICES = 3 ** 7


def _not_canonical(face):
    return ValueError(f"{face.name} turns move the reference corner and are not defined on arrangements")


def decompose(cube: Cube) -> Tuple["PositionArrangement", "OrientationArrangement"]:
    """Project a cube onto its position and orientation arrangements."""
    targets = cube.target_faces()
    up, down = targets[Face.U], targets[Face.D]
    right, left = targets[Face.R], targets[Face.L]
    front, back = targets[Face.F], targets[Face.B]

    homes = []
    twists = []
    for slot in Slot:
        colors = cube.corner(slot)
        is_up = is_right = is_front = None
        twist = None
        for i, color in enumerate(colors):
            if color == up or color == down:
                is_up = color == up
                twist = i
            elif color == right or color == left:
                is_right = color == right
            elif color == front or color == back:
                is_front = color == front

        if is_up is None or is_right is None or is_front is None:
            raise InvalidCubeError(f"Slot {slot.name} holds {[c.name for c in colors]}, which is not a corner")

        try:
            third = next_color(colors[0], colors[1])
        except InvalidColorPairError as e:
            raise InvalidCubeError(f"Slot {slot.name} holds an impossible corner") from e
        if third != colors[2]:
            raise InvalidCubeError(f"Slot {slot.name} holds a mirrored corner {[c.name for c in colors]}")

        homes.append(int(Slot.from_axes(is_up, is_right, is_front)))
        twists.append(twist)

    if len(set(homes)) != 8:
        raise InvalidCubeError("Two slots hold the same cubie")

    return PositionArrangement._wrap(tuple(homes)), OrientationArrangement._wrap(tuple(twists))


class PositionArrangement:
    __slots__ = ("slots",)

    def __init__(self, slots: Sequence[int]):
        slots = tuple(int(Slot(s)) for s in slots)
        if sorted(slots) != list(range(8)):
            raise ValueError(f"Not a permutation of the 8 slots: {slots}")
        if slots[REFERENCE_SLOT] != REFERENCE_SLOT:
            raise ValueError("The reference slot DLB must hold its own cubie")
        self.slots = slots

    @classmethod
    def _wrap(cls, slots: Tuple[int, ...]) -> "PositionArrangement":
        arr = object.__new__(cls)
        arr.slots = slots
        return arr

    @classmethod
    def solved(cls) -> "PositionArrangement":
        return cls._wrap(tuple(range(8)))

    @classmethod
    def from_cube(cls, cube: Cube) -> "PositionArrangement":
        return decompose(cube)[0]

    def is_solved(self) -> bool:
        return self.slots == _SOLVED_POSITIONS

    def home_of(self, slot: int) -> Slot:
        return Slot(self.slots[slot])

    def quarter_turn(self, face: Face) -> "PositionArrangement":
        try:
            perm = SLOT_PERMS[face]
        except KeyError:
            raise _not_canonical(face) from None
        old = self.slots
        return PositionArrangement._wrap(tuple(old[p] for p in perm))

    def index(self) -> int:
        """Gap-free index in [0, 5040) over the seven mutable slots."""
        v = self.slots
        idx = 0
        for k, i in enumerate(_MUTABLE_SLOTS):
            smaller = 0
            for j in range(i + 1, 8):
                if v[j] < v[i]:
                    smaller += 1
            idx += smaller * _LEHMER_WEIGHTS[k]
        return idx

    def __eq__(self, other):
        if not isinstance(other, PositionArrangement):
            return NotImplemented
        return self.slots == other.slots

    def __hash__(self):
        return hash(self.slots)

    def __repr__(self):
        return "PositionArrangement({})".format(", ".join(f"{Slot(i).name}={Slot(v).name}" for i, v in enumerate(self.slots)))


class OrientationArrangement:
    __slots__ = ("twists",)

    def __init__(self, twists: Sequence[int]):
        twists = tuple(int(Twist(t)) for t in twists)
        if len(twists) != 8:
            raise ValueError(f"Expected 8 twists, got {len(twists)}")
        if twists[REFERENCE_SLOT] != Twist.CORRECT:
            raise ValueError("The reference slot DLB is never twisted")
        self.twists = twists

    @classmethod
    def _wrap(cls, twists: Tuple[int, ...]) -> "OrientationArrangement":
        arr = object.__new__(cls)
        arr.twists = twists
        return arr

    @classmethod
    def solved(cls) -> "OrientationArrangement":
        return cls._wrap((0,) * 8)

    @classmethod
    def from_cube(cls, cube: Cube) -> "OrientationArrangement":
        return decompose(cube)[1]

    def is_solved(self) -> bool:
        return not any(self.twists)

    def is_solvable(self) -> bool:
        # the total twist mod 3 is the only invariant legal turns preserve
        return sum(self.twists) % 3 == 0

    def twist(self, slot: int) -> Twist:
        return Twist(self.twists[slot])

    def quarter_turn(self, face: Face) -> "OrientationArrangement":
        try:
            perm = SLOT_PERMS[face]
        except KeyError:
            raise _not_canonical(face) from None
        delta = SLOT_TWISTS[face]
        old = self.twists
        return OrientationArrangement._wrap(tuple((old[p] + d) % 3 for p, d in zip(perm, delta)))

    def index(self) -> int:
        """Index in [0, 2187), base 3 over the seven mutable slots."""
        t = self.twists
        return sum(t[i] * _POW3[k] for k, i in enumerate(_MUTABLE_SLOTS))

    def __eq__(self, other):
        if not isinstance(other, OrientationArrangement):
            return NotImplemented
        return self.twists == other.twists

    def __hash__(self):
        return hash(self.twists)

    def __repr__(self):
        return "OrientationArrangement({})".format(", ".join(f"{Slot(i).name}={t}" for i, t in enumerate(self.twists)))


_SOLVED_POSITIONS = tuple(range(8))

