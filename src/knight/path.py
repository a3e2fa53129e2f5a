"""Turning the predecessor links found by the search into the actual route of the knight"""

from dataclasses import dataclass

from src.core.exceptions import UnreachableStateError
from src.knight.square import BOARD_DIMENSIONS, Square, encode

MAX_PATH_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass(frozen=True)
class KnightPath:
    """Squares visited by the knight, start and end included"""

    squares: tuple[Square, ...]

    @property
    def start(self) -> Square:
        return self.squares[0]

    @property
    def end(self) -> Square:
        return self.squares[-1]

    @property
    def moves(self) -> int:
        return len(self.squares) - 1

    def to_algebraic(self) -> list[str]:
        return [encode(square) for square in self.squares]

    def to_notation(self) -> str:
        """The squares glued together without separator, ex) a1 -> b3 -> c5 becomes 'a1b3c5'"""
        return "".join(self.to_algebraic())


def reconstruct(
    predecessors: dict[Square, Square], start: Square, end: Square
) -> KnightPath:
    """
    Walk the predecessor links backwards from `end` until we hit `start`, then flip the list around.
    ---
    Every square (except the start) was discovered exactly once, so the links form a tree rooted at `start`
    and the walk ends after at most 64 steps. If it doesn't, the map did not come from a successful search.
    """
    reversed_path: list[Square] = [end]
    current = end
    while current != start:
        if current not in predecessors:
            raise UnreachableStateError(
                f"No route back to {start} from {current}: square was never reached."
            )
        current = predecessors[current]
        reversed_path.append(current)
        if len(reversed_path) > MAX_PATH_SQUARES:
            raise UnreachableStateError(
                f"Predecessor links from {end} never lead back to {start}."
            )

    return KnightPath(tuple(reversed(reversed_path)))
