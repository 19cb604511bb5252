"""
Command line entry point.

    pocket222 solve --scramble "R U2 F' L D"
    pocket222 solve --scramble-class full --seed 3
    pocket222 diameter --verbose
"""
import sys
import time

from argdantic import ArgParser
import numpy as np

from .config import DiameterConfig, SolveConfig, merge_config_file
from .cube import Cube
from .diameter import compute_diameter
from .errors import CubeError
from .moves import apply_moves, reversed_moves
from .notation import format_moves, parse_line
from .scramble import make_scramble, random_move_scramble
from .search import optimal_solve

RANDOM_SCRAMBLE_MOVES = 25

cli = ArgParser()


def _scrambled_cube(config: SolveConfig, rng: np.random.Generator) -> Cube:
    if config.scramble is not None:
        moves = parse_line(config.scramble)
        print(f"Scramble: {format_moves(moves)}")
        return apply_moves(Cube.solved(config.front_facelet(), config.up_facelet()), moves)

    if config.scramble_class is not None:
        print(f"Random {config.scramble_class.value} scramble")
        return make_scramble(config.scramble_class, rng)

    cube, moves = random_move_scramble(RANDOM_SCRAMBLE_MOVES, rng)
    print(f"Random scramble: {format_moves(moves)}")
    return cube


@cli.command(singleton=True)
def solve(config: SolveConfig):
    """Optimally solve one scrambled cube."""
    try:
        config = merge_config_file(config)
        cube = _scrambled_cube(config, np.random.default_rng(config.seed))
        print(cube.render())
        print()

        metrics = {}
        start = time.time()
        solution = optimal_solve(
            cube,
            heuristic_type=config.heuristic,
            short_circuit_depth=config.short_circuit_depth,
            preload=config.preload_heuristics,
            max_cost=config.max_cost,
            check_consistency=config.check_consistency,
            verbose=config.verbose,
            metrics=metrics,
        )
        elapsed = time.time() - start
    except CubeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Solution: {format_moves(solution) or '(already solved)'}")
    print(f"Length: {len(solution)}")
    print(f"Inverse (scrambles a solved cube into this state): {format_moves(reversed_moves(solution))}")
    print(f"Nodes expanded: {metrics.get('nodes_expanded', 0)}, iterations: {metrics.get('iterations', 0)}")
    print(f"Time: {elapsed:.3f}s")


@cli.command(singleton=True)
def diameter(config: DiameterConfig):
    """Solve every configuration and report the longest optimal solution."""
    config = merge_config_file(config)
    start = time.time()
    try:
        result = compute_diameter(config)
    except CubeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    scope = "all configurations" if config.limit is None else f"the first {config.limit} configurations"
    print(f"Longest optimal solution over {scope}: {result} moves")
    print(f"Time: {time.time() - start:.1f}s")


if __name__ == "__main__":
    cli()
