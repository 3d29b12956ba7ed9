"""HTTP routes. Thin: build the request model, hand it to the ChessService, return its response."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveBody,
    MoveRequest,
    MoveResponse,
)
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.chess_service import ChessService

router = APIRouter(prefix="/games", tags=["games"])


def get_service(db: Annotated[Session, Depends(get_db)]) -> ChessService:
    return ChessService(SQLGameRepository(db))


Service = Annotated[ChessService, Depends(get_service)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_game(service: Service) -> GameResponse:
    return service.create_new_game(CreateGameRequest())


@router.get("/{game_id}")
def get_game(game_id: UUID, service: Service) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.get("/{game_id}/legal-moves")
def legal_moves(
    game_id: UUID, square: Annotated[str, Query()], service: Service
) -> LegalMovesResponse:
    return service.legal_moves(LegalMovesRequest(game_id=game_id, square=square))


@router.post("/{game_id}/moves")
def make_move(game_id: UUID, body: MoveBody, service: Service) -> MoveResponse:
    request = MoveRequest(
        game_id=game_id, from_square=body.from_square, to_square=body.to_square
    )
    return service.make_move(request)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: UUID, service: Service) -> None:
    service.delete_game(DeleteGameRequest(game_id=game_id))
