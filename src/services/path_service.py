"""Orchestration between the outer shell (requests in, responses out) and the search."""

import logging

from src.api.models import PathRequest, PathResponse
from src.knight.path import KnightPath
from src.knight.search import shortest_path
from src.knight.square import decode, encode

_LOGGER = logging.getLogger(__name__)


class KnightPathService:
    """Answers shortest-path queries. Holds no state between queries."""

    def find_shortest_path(self, request: PathRequest) -> PathResponse:
        """Decode the squares, search, and report one shortest path."""
        start = decode(request.start)
        end = decode(request.end)

        path = shortest_path(start, end)
        _LOGGER.info(
            "Shortest path %s -> %s: %d move(s), %s",
            request.start,
            request.end,
            path.moves,
            path.to_notation(),
        )
        return self._create_path_response(path)

    def find_shortest_path_between(self, start: str, end: str) -> PathResponse:
        """Convenience: skip building the request yourself."""
        return self.find_shortest_path(PathRequest(start=start, end=end))

    # -- Internal helpers --
    def _create_path_response(self, path: KnightPath) -> PathResponse:
        squares = path.to_algebraic()
        return PathResponse(
            start=encode(path.start),
            end=encode(path.end),
            moves=path.moves,
            path=squares,
            notation=path.to_notation(),
        )
