"""
Exhaustive optimal solvers for the position-only and orientation-only sub-problems.

The sub-problem spaces are tiny (5040 positions, 729 solvable orientations), so a
plain breadth-first search from the arrangement to the solved arrangement is both
exhaustive and optimal.
"""
from typing import List

from .arrangement import OrientationArrangement, PositionArrangement
from .errors import InvalidCubeError, SearchExhaustedError
from .moves import Move, apply_move, successor_moves


def _breadth_first_solve(arr) -> List[Move]:
    if arr.is_solved():
        return []

    parent_map = {arr: None}  # arrangement -> (parent, move)

    def reconstruct_path(node):
        path = []
        while parent_map[node] is not None:
            parent, move = parent_map[node]
            path.append(move)
            node = parent
        return list(reversed(path))

    frontier = [arr]
    while frontier:
        next_frontier = []
        for current in frontier:
            link = parent_map[current]
            last_face = link[1].face if link is not None else None
            for move in successor_moves(last_face):
                moved = apply_move(current, move)
                if moved in parent_map:
                    continue
                parent_map[moved] = (current, move)
                if moved.is_solved():
                    return reconstruct_path(moved)
                next_frontier.append(moved)
        frontier = next_frontier

    raise SearchExhaustedError(f"{arr!r} cannot be solved with R, U and F turns")


def optimal_solve_position(arr: PositionArrangement) -> List[Move]:
    """Shortest canonical move sequence that puts every cubie in its home slot."""
    return _breadth_first_solve(arr)


def optimal_solve_orientation(arr: OrientationArrangement) -> List[Move]:
    """Shortest canonical move sequence that untwists every cubie."""
    if not arr.is_solvable():
        raise InvalidCubeError(f"{arr!r} has a twist sum that is not 0 mod 3")
    return _breadth_first_solve(arr)
