"""Custom exceptions shared across layers"""


class KnightPathError(Exception):
    """Base class: everything the knight path finder raises on purpose."""


class InvalidCoordinateError(KnightPathError):
    """Text that cannot be read as a square on the board (or a square off the board)."""


class NoPathFoundError(KnightPathError):
    """The search ran out of squares to explore before reaching the target."""


class UnreachableStateError(KnightPathError):
    """Predecessor links do not lead back to the starting square."""
