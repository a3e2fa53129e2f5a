"""
Breadth-first search over the knight-move graph
-----

Nodes are the 64 squares, edges the legal knight jumps. Instead of a FIFO queue every square carries a
visitation tag and the whole board is scanned once per BFS layer:

* QUEUED squares are expanded during the current scan.
* Squares they discover become QUEUED_NEXT, and only get promoted to QUEUED after the scan.

So all squares at distance d are expanded before any square at distance d+1, and the first time a square
gets discovered is along a shortest route. That first discovery is the one recorded in the predecessor map.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from src.core.exceptions import InvalidCoordinateError, NoPathFoundError
from src.knight.moves import NeighboursFn, knight_moves
from src.knight.path import KnightPath, reconstruct
from src.knight.square import Square, all_squares

_LOGGER = logging.getLogger(__name__)


class VisitState(Enum):
    UNVISITED = auto()
    QUEUED_NEXT = auto()
    QUEUED = auto()
    VISITED = auto()


@dataclass
class SearchResult:
    """What the search leaves behind: the links back to the start, and whether the target was found."""

    predecessors: dict[Square, Square] = field(default_factory=dict)
    reached: bool = False
    layers: int = 0


def search(
    start: Square, end: Square, neighbours: NeighboursFn = knight_moves
) -> SearchResult:
    """Layer-by-layer BFS from `start` until `end` gets expanded, or nothing is left to expand."""
    for square in (start, end):
        if not square.is_within_bounds():
            raise InvalidCoordinateError(f"{square} is not a square on the board.")

    squares = all_squares()
    board: dict[Square, VisitState] = {
        square: VisitState.UNVISITED for square in squares
    }
    board[start] = VisitState.QUEUED
    result = SearchResult()

    while True:
        _LOGGER.debug("Expanding layer %d", result.layers)
        for square in squares:
            if board[square] != VisitState.QUEUED:
                continue

            board[square] = VisitState.VISITED
            if square == end:
                result.reached = True
                return result

            for target in neighbours(square):
                if not target.is_within_bounds():
                    continue
                # first discovery wins: it is always along a shortest route
                if board[target] == VisitState.UNVISITED:
                    board[target] = VisitState.QUEUED_NEXT
                    result.predecessors[target] = square

        # start of the next layer
        frontier = [s for s in squares if board[s] == VisitState.QUEUED_NEXT]
        if not frontier:
            _LOGGER.debug("Frontier empty after %d layer(s)", result.layers + 1)
            return result
        for square in frontier:
            board[square] = VisitState.QUEUED
        result.layers += 1


def shortest_path(
    start: Square, end: Square, neighbours: NeighboursFn = knight_moves
) -> KnightPath:
    """Search + reconstruction. Raises NoPathFoundError when `end` can't be reached from `start`."""
    result = search(start, end, neighbours)
    if not result.reached:
        raise NoPathFoundError(f"No sequence of moves leads from {start} to {end}.")
    return reconstruct(result.predecessors, start, end)


def distance(start: Square, end: Square) -> int:
    """Minimal number of knight moves between two squares"""
    return shortest_path(start, end).moves
