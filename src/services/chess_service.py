"""Orchestration of communication from API router (or CLI) to business logic and persistence layers (and the reverse direction)."""

from dataclasses import replace
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
)
from src.chess.game import Game
from src.chess.square import Square
from src.core.exceptions import GameNotFoundError
from src.core.logger import get_logger
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = get_logger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game in the standard position."""

        new_game = Game.new_game()
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when the board changed for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Candidate destinations of the piece on the requested square (to highlight them)."""

        game = Game.from_model(self._fetch_game(request.game_id))
        destinations = game.legal_moves(Square.from_algebraic(request.square))
        return LegalMovesResponse(
            game_id=request.game_id,
            square=request.square,
            destinations=sorted(square.to_algebraic() for square in destinations),
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Make a move attempt.

        A rejected move is not an error: nothing gets stored and the response says why.
        Losing a race against another move on the same game is an error (StaleGameError).
        """
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)

        outcome = game.attempt_move(
            Square.from_algebraic(request.from_square),
            Square.from_algebraic(request.to_square),
        )
        if not outcome.accepted:
            return MoveResponse(
                accepted=False,
                reason=outcome.reason,
                game=self._create_game_response(request.game_id, stored_model),
            )

        # based on the version we read: a concurrent move on the same game makes this raise StaleGameError
        after_move = replace(game.to_model(), version=stored_model.version)
        stored_after_move = self.repo.update_game(request.game_id, after_move)
        if stored_after_move is None:
            raise GameNotFoundError(f"Game with {request.game_id=} not found.")
        return MoveResponse(
            accepted=True,
            promoted=outcome.promoted,
            game=self._create_game_response(request.game_id, stored_after_move),
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise GameNotFoundError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        return GameResponse(game_id=game_id, turn=model.turn, board=model.layout)

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model
