"""Face-turn notation: "R U2 F' L" <-> Move lists."""
from typing import Iterable, List

from .errors import NotationError
from .moves import ALL_MOVES, Move

_TOKENS = {str(move): move for move in ALL_MOVES}


def parse_line(line: str) -> List[Move]:
    moves = []
    for tok in line.split():
        move = _TOKENS.get(tok)
        if move is None:
            raise NotationError(f"Unknown move {tok!r}; expected one of {' '.join(_TOKENS)}")
        moves.append(move)
    return moves


def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(str(m) for m in moves)
