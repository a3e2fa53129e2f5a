"""
A square on the board, and the conversion to/from algebraic notation ('a1' - 'h8')

(placed in its own module as the move generation, the search and the path all need it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidCoordinateError

# (ranks, files). Knights only ever travel on the standard board.
BOARD_DIMENSIONS = (8, 8)

FILE_LETTERS = "abcdefgh"
RANK_DIGITS = "12345678"


@dataclass(frozen=True)
class Square:
    """Zero-based: a1 is (rank=0, file=0), h8 is (rank=7, file=7)"""

    rank: int
    file: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). The file letter may be upper case."""
        if not isinstance(sq, str) or len(sq) != 2:
            raise InvalidCoordinateError(
                f"Cannot interpret {sq!r} as a square: expected a file letter followed by a rank digit."
            )

        file_char = sq[0].lower()
        rank_char = sq[1]
        if file_char not in FILE_LETTERS:
            raise InvalidCoordinateError(
                f"Invalid file {sq[0]!r} in {sq!r}: must be a letter from 'a' to 'h'."
            )
        if rank_char not in RANK_DIGITS:
            raise InvalidCoordinateError(
                f"Invalid rank {sq[1]!r} in {sq!r}: must be a digit from '1' to '8'."
            )
        return cls(rank=RANK_DIGITS.index(rank_char), file=FILE_LETTERS.index(file_char))

    def to_algebraic(self) -> str:
        if not self.is_within_bounds():
            raise InvalidCoordinateError(f"{self} is not a square on the board.")
        return f"{FILE_LETTERS[self.file]}{RANK_DIGITS[self.rank]}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.rank < BOARD_DIMENSIONS[0]) and (
            0 <= self.file < BOARD_DIMENSIONS[1]
        )


def decode(text: str) -> Square:
    return Square.from_algebraic(text)


def encode(square: Square) -> str:
    return square.to_algebraic()


def all_squares() -> list[Square]:
    """Every square of the board, rank by rank (a1, b1, ..., h1, a2, ..., h8)"""
    return [
        Square(rank, file)
        for rank in range(BOARD_DIMENSIONS[0])
        for file in range(BOARD_DIMENSIONS[1])
    ]
