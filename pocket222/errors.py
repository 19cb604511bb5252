class CubeError(Exception):
    """Base class for every error raised by pocket222."""


class InvalidColorPairError(CubeError, ValueError):
    """Two colors were given that never share a corner (equal or opposite)."""


class InvalidCubeError(CubeError, ValueError):
    """A sticker assignment that cannot be reached on a physical pocket cube."""


class NotationError(CubeError, ValueError):
    """A move token that is not a face letter optionally followed by 2 or '."""


class HeuristicCacheMissError(CubeError, LookupError):
    """A strict lookup hit an arrangement whose distance was never computed."""


class SearchExhaustedError(CubeError, RuntimeError):
    """IDA* ran past its hard ceiling. Means a bug in a heuristic or a move table."""


class HeuristicInconsistencyError(CubeError, RuntimeError):
    """The estimated total cost dropped from a node to its child during search."""
