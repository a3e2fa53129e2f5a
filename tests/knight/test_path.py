"""Unit tests for /src/knight/path.py"""

import pytest

from src.core.exceptions import UnreachableStateError
from src.knight.path import KnightPath, reconstruct
from src.knight.square import decode


def links(*pairs: tuple[str, str]) -> dict:
    """Predecessor map from (square, reached_from) pairs in algebraic notation"""
    return {decode(square): decode(previous) for square, previous in pairs}


def test_reconstruct_follows_the_links() -> None:
    predecessors = links(("b3", "a1"), ("c5", "b3"), ("c2", "a1"))
    path = reconstruct(predecessors, decode("a1"), decode("c5"))
    assert path.to_algebraic() == ["a1", "b3", "c5"]
    assert path.moves == 2
    assert path.to_notation() == "a1b3c5"


def test_reconstruct_start_is_end() -> None:
    path = reconstruct({}, decode("d4"), decode("d4"))
    assert path.squares == (decode("d4"),)
    assert path.moves == 0


def test_reconstruct_undiscovered_square() -> None:
    with pytest.raises(UnreachableStateError):
        _ = reconstruct(links(("b3", "a1")), decode("a1"), decode("h8"))


def test_reconstruct_broken_chain() -> None:
    """The chain stops before reaching the start"""
    with pytest.raises(UnreachableStateError):
        _ = reconstruct(links(("c5", "b3")), decode("a1"), decode("c5"))


def test_reconstruct_cyclic_links() -> None:
    """Could never come out of a search, but must not hang either"""
    with pytest.raises(UnreachableStateError):
        _ = reconstruct(links(("b3", "c5"), ("c5", "b3")), decode("a1"), decode("c5"))


def test_knight_path_properties() -> None:
    path = KnightPath(tuple(decode(sq) for sq in ["a1", "c2", "e3"]))
    assert path.start == decode("a1")
    assert path.end == decode("e3")
    assert path.moves == 2
    assert path.to_notation() == "a1c2e3"
