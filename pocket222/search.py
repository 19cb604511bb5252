import time
from typing import Dict, List, Optional

from .arrangement import decompose
from .cube import Cube
from .errors import HeuristicInconsistencyError, InvalidCubeError, SearchExhaustedError
from .heuristic import Heuristic, HeuristicType, make_heuristic
from .moves import Move, apply_move, successor_moves
from .short_circuit import ShortCircuitCache

# God's number for the pocket cube is 11; anything past this means a broken heuristic or move table
MAX_COST = 14

_FOUND = object()
_INF = float("inf")


class IDAStar:
    """
    Optimal solver: iterative deepening A* over canonical R/U/F turns.

    Each iteration is a depth-first search bounded by a cost ceiling. Nodes whose
    g + h exceeds the ceiling are pruned, and the smallest such value becomes the next
    ceiling. A node found in the short-circuit cache ends its branch right away.
    """

    def __init__(
        self,
        heuristic: Heuristic,
        short_circuit_cache: ShortCircuitCache,
        max_cost: int = MAX_COST,
        check_consistency: bool = True,
        verbose: bool = False,
    ):
        self.heuristic = heuristic
        self.short_circuit_cache = short_circuit_cache
        self.max_cost = max_cost
        self.check_consistency = check_consistency
        self.verbose = verbose
        self.metrics: Dict[str, float] = {}
        self._running: List[Move] = []
        self._threshold = 0

    def solve(self, cube: Cube) -> List[Move]:
        self.metrics = {
            "iterations": 0,
            "nodes_expanded": 0,
            "cache_hits": 0,
            "solution_length": 0,
            "time_seconds": 0.0,
        }
        start_time = time.time()

        if cube.is_solved():
            return []

        if not self.short_circuit_cache.matches(cube):
            raise ValueError("The short-circuit cache was seeded for a different color scheme than this cube")

        pos, orr = decompose(cube)
        if not orr.is_solvable():
            raise InvalidCubeError("The cube has a twisted corner and cannot be solved by turning faces")

        h = self.heuristic.estimated_remaining_cost(pos, orr)
        self._threshold = h

        while self._threshold <= self.max_cost:
            if self.verbose:
                print(f"threshold {self._threshold}")
            self.metrics["iterations"] += 1
            self._running = []

            result = self._search(cube, pos, orr, 0, h, None)
            if result is _FOUND:
                solution = self._running
                self.metrics["solution_length"] = len(solution)
                self.metrics["time_seconds"] = time.time() - start_time
                return solution

            self._threshold = result

        raise SearchExhaustedError(
            f"No solution within {self.max_cost} moves; every pocket cube is solvable in 11"
        )

    def _search(self, cube, pos, orr, g, h, last_face):
        known = self.short_circuit_cache.known_solution(cube)
        if known is not None:
            self.metrics["cache_hits"] += 1
            total = g + len(known)
            if total <= self._threshold:
                self._running.extend(known)
                return _FOUND
            return total

        # a cache miss means more than `depth` moves remain
        bound = g + self.short_circuit_cache.depth + 1
        if bound > self._threshold:
            return bound

        self.metrics["nodes_expanded"] += 1
        next_threshold = _INF

        for move in successor_moves(last_face):
            self._running.append(move)

            moved = apply_move(cube, move)
            if moved.is_solved():
                return _FOUND

            next_pos = apply_move(pos, move)
            next_orr = apply_move(orr, move)
            next_h = self.heuristic.estimated_remaining_cost(next_pos, next_orr)
            est_cost = g + 1 + next_h

            if self.check_consistency and est_cost < g + h:
                raise HeuristicInconsistencyError(
                    f"Estimated total dropped from {g + h} to {est_cost} after {move}"
                )

            if est_cost > self._threshold:
                next_threshold = min(next_threshold, est_cost)
            else:
                result = self._search(moved, next_pos, next_orr, g + 1, next_h, move.face)
                if result is _FOUND:
                    return _FOUND
                next_threshold = min(next_threshold, result)

            self._running.pop()

        return next_threshold


def optimal_solve_heuristic(
    cube: Cube,
    heuristic: Heuristic,
    short_circuit_cache: ShortCircuitCache,
    max_cost: int = MAX_COST,
    check_consistency: bool = True,
) -> List[Move]:
    return IDAStar(heuristic, short_circuit_cache, max_cost, check_consistency).solve(cube)


def optimal_solve(
    cube: Cube,
    heuristic_type: HeuristicType = HeuristicType.POS_AND_ORR,
    short_circuit_depth: int = 5,
    preload: bool = False,
    max_cost: int = MAX_COST,
    check_consistency: bool = True,
    verbose: bool = False,
    metrics: Optional[Dict[str, float]] = None,
) -> List[Move]:
    """
    Solve a single cube from scratch.

    Args:
        cube: Any reachable cube state; faces may be turned with all six faces.
        heuristic_type: Which distance estimate guides the search.
        short_circuit_depth: Depth of the exact-solution cache built around solved.
        preload: Fill the heuristic tables completely before searching.
        metrics: If given, updated with the search statistics.

    Returns:
        An optimal list of canonical moves (R, U, F turns only).
    """
    if cube.is_solved():
        return []

    front, up = cube.reference_colors()
    if verbose:
        print(f"Precomputing cache of depth {short_circuit_depth}")
    cache = ShortCircuitCache().load(short_circuit_depth, front, up, verbose=verbose)

    heuristic = make_heuristic(heuristic_type)
    if preload:
        heuristic.preload(verbose=verbose)

    solver = IDAStar(heuristic, cache, max_cost, check_consistency, verbose)
    solution = solver.solve(cube)
    if metrics is not None:
        metrics.update(solver.metrics)
    return solution
