"""
Geometry of the knight

The search only asks "where can I go from here?", so the move generation is passed in as a strategy
(defaults to the knight). Keeps the search free of any chess knowledge.
"""

from typing import Callable

from src.knight.square import Square

Vector = tuple[int, int]

# (delta_rank, delta_file): |delta_rank| + |delta_file| = 3, never along a straight line
KNIGHT_DELTAS: list[Vector] = [
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
]

NeighboursFn = Callable[[Square], list[Square]]


def single_step_targets(square: Square, deltas: list[Vector]) -> list[Square]:
    """Apply every delta once and keep the landing squares that are still on the board"""
    targets: list[Square] = []
    for dr, df in deltas:
        target_square = Square(square.rank + dr, square.file + df)
        if not target_square.is_within_bounds():
            continue
        targets.append(target_square)
    return targets


def knight_moves(square: Square) -> list[Square]:
    """All squares a knight standing on `square` can jump to (between 2 and 8 of them)"""
    return single_step_targets(square, KNIGHT_DELTAS)


def is_knight_move(from_square: Square, to_square: Square) -> bool:
    delta = (to_square.rank - from_square.rank, to_square.file - from_square.file)
    return delta in KNIGHT_DELTAS
