"""
Facelet model of the pocket cube.

sticker indices:
       ┌──┬──┐
       │ 0│ 1│
       ├──┼──┤
       │ 2│ 3│
 ┌──┬──┼──┼──┼──┬──┬──┬──┐
 │16│17│ 8│ 9│ 4│ 5│20│21│
 ├──┼──┼──┼──┼──┼──┼──┼──┤
 │18│19│10│11│ 6│ 7│22│23│
 └──┴──┼──┼──┼──┴──┴──┴──┘
       │12│13│
       ├──┼──┤
       │14│15│
       └──┴──┘

faces are stored in the order U, R, F, D, L, B (four stickers each).

There are no centers on a pocket cube, so "solved" only means every face is a single
color. Which color belongs where is decided relative to the back-left-down (DLB) corner,
which the canonical R/U/F moves never touch.
"""
from enum import IntEnum
from typing import Dict, Sequence, Tuple

import numpy as np

from .errors import InvalidColorPairError, InvalidCubeError
from .moves import Face


class Facelet(IntEnum):
    YELLOW = 0
    RED = 1
    WHITE = 2
    ORANGE = 3
    BLUE = 4
    GREEN = 5

    @property
    def opposite(self) -> "Facelet":
        return _OPPOSITES[self]

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def from_letter(cls, letter: str) -> "Facelet":
        for facelet in cls:
            if facelet.letter == letter.upper():
                return facelet
        raise InvalidCubeError(f"Unknown facelet color {letter!r}")


_OPPOSITES = {
    Facelet.YELLOW: Facelet.WHITE,
    Facelet.WHITE: Facelet.YELLOW,
    Facelet.RED: Facelet.ORANGE,
    Facelet.ORANGE: Facelet.RED,
    Facelet.BLUE: Facelet.GREEN,
    Facelet.GREEN: Facelet.BLUE,
}

# Every corner cubie of a solved cube, colors listed clockwise with no set start:
# YOG is OGY is GYO, but OYG is a mirror image and never occurs.
ALL_CUBIES = [
    (Facelet.YELLOW, Facelet.ORANGE, Facelet.GREEN),
    (Facelet.YELLOW, Facelet.GREEN, Facelet.RED),
    (Facelet.YELLOW, Facelet.RED, Facelet.BLUE),
    (Facelet.YELLOW, Facelet.BLUE, Facelet.ORANGE),
    (Facelet.WHITE, Facelet.BLUE, Facelet.RED),
    (Facelet.WHITE, Facelet.RED, Facelet.GREEN),
    (Facelet.WHITE, Facelet.GREEN, Facelet.ORANGE),
    (Facelet.WHITE, Facelet.ORANGE, Facelet.BLUE),
]


class Slot(IntEnum):
    DLB = 0
    DLF = 1
    DRF = 2
    DRB = 3
    ULB = 4
    ULF = 5
    URF = 6
    URB = 7

    @classmethod
    def from_axes(cls, up: bool, right: bool, front: bool) -> "Slot":
        name = ("U" if up else "D") + ("R" if right else "L") + ("F" if front else "B")
        return cls[name]


REFERENCE_SLOT = Slot.DLB

# Stickers of each corner slot in clockwise order, starting with the U/D sticker
CORNER_STICKERS = np.array([
    [14, 23, 18],  # DLB
    [12, 19, 10],  # DLF
    [13, 11, 6],   # DRF
    [15, 7, 22],   # DRB
    [0, 16, 21],   # ULB
    [2, 8, 17],    # ULF
    [3, 4, 9],     # URF
    [1, 20, 5],    # URB
])

# clockwise quarter turns; new_stickers = stickers[QUARTER_TURNS[face]]
QUARTER_TURNS = {
    Face.U: np.array([2, 0, 3, 1, 20, 21, 6, 7, 4, 5, 10, 11, 12, 13, 14, 15, 8, 9, 18, 19, 16, 17, 22, 23]),
    Face.R: np.array([0, 9, 2, 11, 6, 4, 7, 5, 8, 13, 10, 15, 12, 22, 14, 20, 16, 17, 18, 19, 3, 21, 1, 23]),
    Face.F: np.array([0, 1, 19, 17, 2, 5, 3, 7, 10, 8, 11, 9, 6, 4, 14, 15, 16, 12, 18, 13, 20, 21, 22, 23]),
    Face.D: np.array([0, 1, 2, 3, 4, 5, 10, 11, 8, 9, 18, 19, 14, 12, 15, 13, 16, 17, 22, 23, 20, 21, 6, 7]),
    Face.L: np.array([23, 1, 21, 3, 4, 5, 6, 7, 0, 9, 2, 11, 8, 13, 10, 15, 18, 16, 19, 17, 20, 14, 22, 12]),
    Face.B: np.array([5, 7, 2, 3, 4, 15, 6, 14, 8, 9, 10, 11, 12, 13, 16, 18, 1, 17, 0, 19, 22, 20, 23, 21]),
}


def next_color(a: Facelet, b: Facelet) -> Facelet:
    """
    Returns the third color of the corner whose colors run clockwise a, b, (result).

    Raises InvalidColorPairError if a and b are equal or opposite, since no corner
    carries such a pair.
    """
    if a == b or a.opposite == b:
        raise InvalidColorPairError(f"The colors {a.name} and {b.name} do not appear on a corner together")

    for cubie in ALL_CUBIES:
        for i in range(3):
            if cubie[i] == a and cubie[(i + 1) % 3] == b:
                return cubie[(i + 2) % 3]

    raise InvalidColorPairError(f"No corner runs clockwise from {a.name} to {b.name}")


def face_colors(front: Facelet, up: Facelet) -> Dict[Face, Facelet]:
    right = next_color(front, up)
    return {
        Face.U: up,
        Face.R: right,
        Face.F: front,
        Face.D: up.opposite,
        Face.L: right.opposite,
        Face.B: front.opposite,
    }


class Cube:
    """An immutable assignment of the 24 stickers. Every turn returns a new Cube."""

    __slots__ = ("_stickers", "_key")

    def __init__(self, stickers: Sequence[int]):
        arr = np.array(stickers, dtype=np.uint8)
        if arr.shape != (24,):
            raise InvalidCubeError(f"A pocket cube has 24 stickers, got shape {arr.shape}")
        if arr.max() > 5:
            raise InvalidCubeError(f"Sticker values must be colors 0-5, got {arr.max()}")
        if not (np.bincount(arr, minlength=6) == 4).all():
            raise InvalidCubeError("Every color must appear on exactly 4 stickers")
        arr.flags.writeable = False
        self._stickers = arr
        self._key = arr.tobytes()

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Cube":
        # no validation; only used for arrays derived from an already valid cube
        cube = object.__new__(cls)
        arr.flags.writeable = False
        cube._stickers = arr
        cube._key = arr.tobytes()
        return cube

    @classmethod
    def solved(cls, front: Facelet = Facelet.GREEN, up: Facelet = Facelet.WHITE) -> "Cube":
        colors = face_colors(front, up)
        return cls._wrap(np.repeat(np.array([colors[face] for face in Face], dtype=np.uint8), 4))

    @classmethod
    def from_string(cls, s: str) -> "Cube":
        """Parse 24 color letters (Y, R, W, O, B, G) in sticker order; whitespace is ignored."""
        return cls([Facelet.from_letter(c) for c in "".join(s.split())])

    @property
    def stickers(self) -> np.ndarray:
        return self._stickers

    @property
    def key(self) -> bytes:
        return self._key

    def sticker(self, index: int) -> Facelet:
        return Facelet(int(self._stickers[index]))

    def corner(self, slot: int) -> Tuple[Facelet, Facelet, Facelet]:
        """Colors in `slot`, clockwise, starting with the U/D sticker."""
        a, b, c = self._stickers[CORNER_STICKERS[slot]]
        return Facelet(int(a)), Facelet(int(b)), Facelet(int(c))

    def is_solved(self) -> bool:
        faces = self._stickers.reshape(6, 4)
        return bool((faces == faces[:, :1]).all())

    def reference_colors(self) -> Tuple[Facelet, Facelet]:
        """(front, up) of the solved cube that keeps the DLB corner exactly as it is now."""
        down, back, _ = self.corner(REFERENCE_SLOT)
        return back.opposite, down.opposite

    def target_faces(self) -> Dict[Face, Facelet]:
        front, up = self.reference_colors()
        return face_colors(front, up)

    def quarter_turn(self, face: Face) -> "Cube":
        return Cube._wrap(self._stickers[QUARTER_TURNS[face]])

    def with_cubie(self, slot: int, cubie: Sequence[Facelet], rotation: int = 0) -> "Cube":
        """
        Return a copy with `cubie` placed in `slot`.

        The cubie's colors are given clockwise. `rotation` rotates them left that many
        times before they are written clockwise from the slot's U/D sticker. This can
        build unreachable states; check the orientation sum before solving.
        """
        colors = list(cubie)
        rotation %= 3
        colors = colors[rotation:] + colors[:rotation]
        arr = self._stickers.copy()
        arr[CORNER_STICKERS[slot]] = colors
        return Cube._wrap(arr)

    def render(self) -> str:
        s = [self.sticker(i).letter for i in range(24)]
        rows = [
            "    {} {}".format(s[0], s[1]),
            "    {} {}".format(s[2], s[3]),
            "{} {} {} {} {} {} {} {}".format(s[16], s[17], s[8], s[9], s[4], s[5], s[20], s[21]),
            "{} {} {} {} {} {} {} {}".format(s[18], s[19], s[10], s[11], s[6], s[7], s[22], s[23]),
            "    {} {}".format(s[12], s[13]),
            "    {} {}".format(s[14], s[15]),
        ]
        return "\n".join(rows)

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __str__(self):
        return "".join(self.sticker(i).letter for i in range(24))

    def __repr__(self):
        return f"Cube({str(self)!r})"
