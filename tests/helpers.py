from pocket222.cube import Cube, Facelet
from pocket222.moves import CANONICAL_MOVES, apply_move, apply_moves
from pocket222.notation import parse_line

FACELETS = list(Facelet)


def scrambled(line, front=Facelet.GREEN, up=Facelet.WHITE):
    return apply_moves(Cube.solved(front, up), parse_line(line))


def valid_color_pairs():
    return [(a, b) for a in FACELETS for b in FACELETS if a != b and a.opposite != b]


def random_moves(rng, n, moves=CANONICAL_MOVES):
    return [moves[int(i)] for i in rng.integers(0, len(moves), size=n)]


def cubes_by_distance(depth, front=Facelet.GREEN, up=Facelet.WHITE):
    """Brute force: every cube within `depth` canonical moves of solved, with its exact distance."""
    start = Cube.solved(front, up)
    seen = {start: 0}
    frontier = [start]
    for d in range(1, depth + 1):
        next_frontier = []
        for cube in frontier:
            for move in CANONICAL_MOVES:
                moved = apply_move(cube, move)
                if moved not in seen:
                    seen[moved] = d
                    next_frontier.append(moved)
        frontier = next_frontier
    return seen
