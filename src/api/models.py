"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from src.knight.square import Square

SquareName = str


# --- REQUEST MODELS ---
class PathRequest(BaseModel):
    start: SquareName
    end: SquareName

    @field_validator(*["start", "end"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        """Raises InvalidCoordinateError straight away, before any search gets started."""
        return Square.from_algebraic(value.strip()).to_algebraic()


# --- RESPONSE MODELS ---
class PathResponse(BaseModel):
    start: SquareName
    end: SquareName
    moves: int
    path: list[SquareName]
    notation: str
