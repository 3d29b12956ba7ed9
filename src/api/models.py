"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Rejection

BoardRow = str
SquareName = str


def _is_algebraic_notation(value: str) -> bool:
    """a1 - h8"""
    if len(value) != 2:
        return False

    first_character = value[0]
    second_character = value[1]
    return first_character in "abcdefgh" and second_character in "12345678"


def validate_square_name(value: str) -> str:
    name = value.strip().lower()
    if not _is_algebraic_notation(name):
        raise InvalidRequestError(f"Cannot interpret {value!r} as a valid square name.")
    return name


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """Every new game starts from the standard position with White to move. Nothing to configure (yet)."""


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return validate_square_name(value)


class MoveBody(BaseModel):
    """Body of the HTTP move route (the game id is part of the path)"""

    from_square: SquareName
    to_square: SquareName


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return validate_square_name(value)


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    turn: Color
    board: list[BoardRow]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    square: SquareName
    destinations: list[SquareName]


class MoveResponse(BaseModel):
    accepted: bool
    reason: Optional[Rejection] = None
    promoted: bool = False
    game: GameResponse
