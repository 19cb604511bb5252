from enum import Enum, IntEnum
from typing import Iterable, List, NamedTuple, Protocol, TypeVar


class Face(IntEnum):
    # same face order as the sticker net in cube.py
    U = 0
    R = 1
    F = 2
    D = 3
    L = 4
    B = 5


class Amount(Enum):
    ONE = 1
    TWO = 2
    REV = 3

    @property
    def turns(self) -> int:
        return self.value

    @property
    def suffix(self) -> str:
        return {Amount.ONE: "", Amount.TWO: "2", Amount.REV: "'"}[self]

    def inverse(self) -> "Amount":
        return {Amount.ONE: Amount.REV, Amount.TWO: Amount.TWO, Amount.REV: Amount.ONE}[self]


class Move(NamedTuple):
    face: Face
    amount: Amount

    def inverse(self) -> "Move":
        return Move(self.face, self.amount.inverse())

    def __str__(self):
        return self.face.name + self.amount.suffix


# The DLB corner never moves, so search only turns the three faces that do not touch it
CANONICAL_FACES = (Face.R, Face.U, Face.F)
AMOUNTS = (Amount.ONE, Amount.TWO, Amount.REV)

CANONICAL_MOVES = [Move(face, amount) for face in CANONICAL_FACES for amount in AMOUNTS]
ALL_MOVES = [Move(face, amount) for face in Face for amount in AMOUNTS]


class CanMove(Protocol):
    """Anything that knows how to take one clockwise quarter turn of a face."""

    def quarter_turn(self, face: Face) -> "CanMove":
        ...


T = TypeVar("T", bound=CanMove)


def apply_move(state: T, move: Move) -> T:
    # half and reverse turns are repeated quarter turns, never separate formulas
    for _ in range(move.amount.turns):
        state = state.quarter_turn(move.face)
    return state


def apply_moves(state: T, moves: Iterable[Move]) -> T:
    for move in moves:
        state = apply_move(state, move)
    return state


def reversed_moves(moves: Iterable[Move]) -> List[Move]:
    """
    Invert a move sequence.

    Applying `moves` and then `reversed_moves(moves)` leaves any state unchanged.
    Reversing a solution therefore gives a scramble for the same state.
    """
    return [m.inverse() for m in reversed(list(moves))]


def successor_moves(last_face=None, faces=CANONICAL_FACES):
    """Moves allowed after a turn of `last_face`: the same face twice is always redundant."""
    return [Move(face, amount) for face in faces if face != last_face for amount in AMOUNTS]
