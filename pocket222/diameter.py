"""
Computes the optimal-path bound of the pocket cube (sometimes called "God's number").

By symmetry the DLB cubie can be assumed solved, so every meaningfully different
state is a placement of the other seven cubies, each in one of three twists, whose
twist sum is 0 mod 3: 7! * 3^6 = 3674160 states. Each one is solved optimally and
the longest solution is the diameter.
"""
from collections import Counter, deque
from itertools import islice
import time
from typing import Iterator, Optional

from tqdm import tqdm

from .config import DiameterConfig
from .cube import ALL_CUBIES, Cube, Facelet, Slot
from .heuristic import make_heuristic
from .search import IDAStar
from .short_circuit import ShortCircuitCache

NUM_CONFIGURATIONS = 5040 * 729


def reference_cube() -> Cube:
    # first cubie goes in correct and oriented, which is fine by symmetry
    return Cube.solved(Facelet.GREEN, Facelet.WHITE).with_cubie(Slot.DLB, ALL_CUBIES[0], 0)


def iter_configurations() -> Iterator[Cube]:
    """Yield every solvable arrangement of the seven mutable cubies around a fixed DLB."""
    base = reference_cube()
    down = base.corner(Slot.DLB)[0]
    up_down = (down, down.opposite)
    remaining = deque(ALL_CUBIES[1:])

    def walk(cube, slot, twist_sum):
        for _ in range(len(remaining)):
            cubie = remaining.popleft()

            for rotation in range(3):
                placed = cube.with_cubie(slot, cubie, rotation)
                colors = placed.corner(slot)
                twist = next(i for i, c in enumerate(colors) if c in up_down)

                if slot == Slot.URB:
                    # only one twist of the last cubie keeps the sum at 0 mod 3
                    if (twist_sum + twist) % 3 == 0:
                        yield placed
                else:
                    yield from walk(placed, slot + 1, twist_sum + twist)

            remaining.append(cubie)

    yield from walk(base, Slot.DLF, 0)


def length_distribution(config: Optional[DiameterConfig] = None) -> Counter:
    """Count optimal solution lengths over every configuration (or the first `config.limit`)."""
    config = config or DiameterConfig()
    start = time.time()

    if config.verbose:
        print("By symmetry, we can assume the DLB corner is fixed and correctly oriented")

    heuristic = make_heuristic(config.heuristic)
    heuristic.preload(verbose=config.verbose)

    front, up = reference_cube().reference_colors()
    cache = ShortCircuitCache().load(config.short_circuit_depth, front, up, verbose=config.verbose)

    solver = IDAStar(heuristic, cache, config.max_cost, config.check_consistency)

    total = NUM_CONFIGURATIONS if config.limit is None else min(config.limit, NUM_CONFIGURATIONS)
    lengths = Counter()
    configurations = islice(iter_configurations(), config.limit)
    for cube in tqdm(configurations, total=total, desc="Solving configurations", disable=not config.verbose):
        lengths[len(solver.solve(cube))] += 1

    if config.verbose:
        print(f"Solved {sum(lengths.values())} configurations in {time.time() - start:.1f}s")
        for length in sorted(lengths):
            print(f"  {length:2d} moves: {lengths[length]}")

    return lengths


def compute_diameter(config: Optional[DiameterConfig] = None) -> int:
    return max(length_distribution(config))
