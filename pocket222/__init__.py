from .cube import (
    ALL_CUBIES,
    Cube,
    Facelet,
    Slot,
    face_colors,
    next_color,
)

from .moves import (
    ALL_MOVES,
    CANONICAL_MOVES,
    Amount,
    Face,
    Move,
    apply_move,
    apply_moves,
    reversed_moves,
)

from .arrangement import (
    OrientationArrangement,
    PositionArrangement,
    decompose,
)

from .subsolve import (
    optimal_solve_orientation,
    optimal_solve_position,
)

from .heuristic import (
    HeuristicType,
    make_heuristic,
)

from .short_circuit import ShortCircuitCache

from .search import (
    IDAStar,
    optimal_solve,
    optimal_solve_heuristic,
)

from .diameter import compute_diameter

from .notation import (
    format_moves,
    parse_line,
)

__all__ = [
    'ALL_CUBIES',
    'Cube',
    'Facelet',
    'Slot',
    'face_colors',
    'next_color',
    'ALL_MOVES',
    'CANONICAL_MOVES',
    'Amount',
    'Face',
    'Move',
    'apply_move',
    'apply_moves',
    'reversed_moves',
    'OrientationArrangement',
    'PositionArrangement',
    'decompose',
    'optimal_solve_orientation',
    'optimal_solve_position',
    'HeuristicType',
    'make_heuristic',
    'ShortCircuitCache',
    'IDAStar',
    'optimal_solve',
    'optimal_solve_heuristic',
    'compute_diameter',
    'format_moves',
    'parse_line',
]
