from enum import Enum
import time

import numpy as np

from .arrangement import (
    NUM_ORIENTATION_INDICES,
    NUM_POSITION_INDICES,
    OrientationArrangement,
    PositionArrangement,
)
from .errors import HeuristicCacheMissError
from .moves import CANONICAL_MOVES, apply_move
from .subsolve import optimal_solve_orientation, optimal_solve_position

# marks a table entry that has not been computed yet (a computed entry can be 0)
UNKNOWN = -1


class HeuristicType(str, Enum):
    NONE = "none"
    POS = "pos"
    ORR = "orr"
    POS_AND_ORR = "pos_and_orr"


class DistanceTable:
    """
    Exact sub-problem distances, indexed by the arrangement's dense index.

    Entries are filled lazily: the first lookup of an arrangement runs the exhaustive
    sub-solver and stores the distance of every arrangement along the optimal path it
    returns. `fill` computes the whole table up front instead.
    """

    def __init__(self, name, solver, solved, size):
        self.name = name
        self.table = np.full(size, UNKNOWN, dtype=np.int16)
        self.solver_calls = 0
        self._solver = solver
        self._solved = solved

    def lookup(self, arr) -> int:
        idx = arr.index()
        dist = self.table[idx]
        if dist != UNKNOWN:
            return int(dist)

        solution = self._solver(arr)
        self.solver_calls += 1

        remaining = len(solution)
        self.table[idx] = remaining
        # every suffix of a shortest path is itself a shortest path from where it starts
        running = arr
        for move in solution:
            running = apply_move(running, move)
            remaining -= 1
            self.table[running.index()] = remaining

        return len(solution)

    def lookup_or_die(self, arr) -> int:
        dist = self.table[arr.index()]
        if dist == UNKNOWN:
            raise HeuristicCacheMissError(f"No cached {self.name} distance for {arr!r}")
        return int(dist)

    def fill(self, verbose=False):
        """Compute every reachable entry by breadth-first search outward from solved."""
        start = time.time()
        depths = np.full(len(self.table), UNKNOWN, dtype=np.int16)
        depths[self._solved.index()] = 0

        frontier = [self._solved]
        depth = 0
        while frontier:
            depth += 1
            next_frontier = []
            for arr in frontier:
                for move in CANONICAL_MOVES:
                    moved = apply_move(arr, move)
                    idx = moved.index()
                    if depths[idx] == UNKNOWN:
                        depths[idx] = depth
                        next_frontier.append(moved)
            frontier = next_frontier

        self.table = depths
        if verbose:
            print(f"Computed {self.known()} {self.name} distances (max {depths.max()}) in {time.time() - start:.2f}s")

    def known(self) -> int:
        return int(np.count_nonzero(self.table != UNKNOWN))

    def __contains__(self, arr):
        return self.table[arr.index()] != UNKNOWN


def position_table() -> DistanceTable:
    return DistanceTable("position", optimal_solve_position, PositionArrangement.solved(), NUM_POSITION_INDICES)


def orientation_table() -> DistanceTable:
    return DistanceTable("orientation", optimal_solve_orientation, OrientationArrangement.solved(), NUM_ORIENTATION_INDICES)


class Heuristic:
    """
    Admissible estimate of the moves left to solve a cube, given its arrangements.

    `estimated_remaining_cost` fills caches as needed. `estimate_or_die` only reads
    them, and raises HeuristicCacheMissError on anything not computed yet.
    """

    def estimated_remaining_cost(self, pos: PositionArrangement, orr: OrientationArrangement) -> int:
        raise NotImplementedError

    def estimate_or_die(self, pos: PositionArrangement, orr: OrientationArrangement) -> int:
        raise NotImplementedError

    def preload(self, verbose=False):
        pass


class NoHeuristic(Heuristic):
    """Always 0, so IDA* degrades to iterative deepening."""

    def estimated_remaining_cost(self, pos, orr):
        return 0

    def estimate_or_die(self, pos, orr):
        return 0


class PosHeuristic(Heuristic):
    def __init__(self):
        self.pos_table = position_table()

    def estimated_remaining_cost(self, pos, orr):
        return self.pos_table.lookup(pos)

    def estimate_or_die(self, pos, orr):
        return self.pos_table.lookup_or_die(pos)

    def preload(self, verbose=False):
        self.pos_table.fill(verbose)


class OrrHeuristic(Heuristic):
    def __init__(self):
        self.orr_table = orientation_table()

    def estimated_remaining_cost(self, pos, orr):
        return self.orr_table.lookup(orr)

    def estimate_or_die(self, pos, orr):
        return self.orr_table.lookup_or_die(orr)

    def preload(self, verbose=False):
        self.orr_table.fill(verbose)


class FullHeuristic(Heuristic):
    # both axes have to reach 0, so the larger of two admissible bounds is still admissible
    def __init__(self):
        self.pos_table = position_table()
        self.orr_table = orientation_table()

    def estimated_remaining_cost(self, pos, orr):
        return max(self.orr_table.lookup(orr), self.pos_table.lookup(pos))

    def estimate_or_die(self, pos, orr):
        return max(self.orr_table.lookup_or_die(orr), self.pos_table.lookup_or_die(pos))

    def preload(self, verbose=False):
        self.orr_table.fill(verbose)
        self.pos_table.fill(verbose)


def make_heuristic(kind: HeuristicType) -> Heuristic:
    return {
        HeuristicType.NONE: NoHeuristic,
        HeuristicType.POS: PosHeuristic,
        HeuristicType.ORR: OrrHeuristic,
        HeuristicType.POS_AND_ORR: FullHeuristic,
    }[HeuristicType(kind)]()
