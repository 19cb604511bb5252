import time
from typing import Dict, Optional, Tuple

from .cube import Cube, Facelet
from .moves import Move, apply_move, successor_moves


class ShortCircuitCache:
    """
    Exact solutions for every cube within `depth` canonical moves of solved.

    Filled once by `load`, read-only afterwards. A cube missing from a loaded cache
    needs more than `depth` moves, which the search uses as a lower bound.
    """

    def __init__(self):
        self._cache: Dict[bytes, Tuple[Move, ...]] = {}
        self.depth = 0
        self.front: Optional[Facelet] = None
        self.up: Optional[Facelet] = None

    def load(self, depth: int, front: Facelet = Facelet.GREEN, up: Facelet = Facelet.WHITE, verbose=False):
        start = time.time()
        solved = Cube.solved(front, up)
        cache = {solved.key: ()}

        # breadth-first, so the first path that reaches a cube is a shortest one;
        # every move has an inverse, so reversing that path solves the cube
        frontier = [solved]
        for _ in range(depth):
            next_frontier = []
            for cube in frontier:
                solution = cache[cube.key]
                last_face = solution[0].face if solution else None
                for move in successor_moves(last_face):
                    moved = apply_move(cube, move)
                    if moved.key in cache:
                        continue
                    cache[moved.key] = (move.inverse(),) + solution
                    next_frontier.append(moved)
            frontier = next_frontier

        self._cache = cache
        self.depth = depth
        self.front = front
        self.up = up

        if verbose:
            print(f"Computed relevant solutions up to depth {depth} in {time.time() - start:.2f}s")
            print(f"Short circuit cache has {len(cache)} unique patterns in it")
        return self

    def known_solution(self, cube: Cube) -> Optional[Tuple[Move, ...]]:
        return self._cache.get(cube.key)

    def matches(self, cube: Cube) -> bool:
        """True if this cache was seeded with the color scheme `cube` is solved towards."""
        if self.front is None:
            return True
        return cube.reference_colors() == (self.front, self.up)

    def cache_size(self) -> int:
        return len(self._cache)

    def __len__(self):
        return len(self._cache)
