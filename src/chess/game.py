"""
The Game class is the entrypoint into the domain layer for the service layer (and any other driver).
It owns the board and whose turn it is, and is the only thing that ever moves pieces around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.chess.board import Board
from src.chess.moves import is_promotion_square
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import GameStateError
from src.core.logger import get_logger
from src.core.models import GameModel
from src.core.shared_types import Color, PieceKind, Rejection, opponent

logger = get_logger(__name__)


@dataclass(frozen=True)
class MoveOutcome:
    """Result of a move attempt. `reason` is only filled in when the move was rejected."""

    accepted: bool
    reason: Optional[Rejection] = None
    promoted: bool = False

    @classmethod
    def rejected(cls, reason: Rejection) -> MoveOutcome:
        return cls(accepted=False, reason=reason)


class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE / UI ---

    def __init__(self, board: Board, turn: Color = Color.WHITE) -> None:
        self._board = board
        self._turn = turn

    @classmethod
    def new_game(cls) -> Game:
        """Standard starting position, White to move."""
        return cls(Board.standard(), Color.WHITE)

    @classmethod
    def from_model(cls, model: GameModel) -> Game:
        """Define how to construct a Game from the information the Service layer actually has"""
        try:
            turn = Color(model.turn)
        except ValueError as err:
            raise GameStateError(
                f"Invalid turn: {model.turn!r}. \nPick one from {','.join(color.value for color in Color)}"
            ) from err
        return cls(Board.from_layout(model.layout), turn)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(layout=self._board.to_layout(), turn=self._turn.value)

    @property
    def board(self) -> Board:
        """
        Read access for rendering.
        NOTE: do not mutate it. All changes must go through `move()` to keep the turn order intact.
        """
        return self._board

    @property
    def turn(self) -> Color:
        return self._turn

    def legal_moves(self, square: Square) -> set[Square]:
        """Candidate destinations for the piece on `square` (empty if there is none). Does not care whose turn it is."""
        piece = self._board.get(square)
        if piece is None:
            return set()
        return piece.legal_moves(square, self._board)

    def move(self, from_square: Square, to_square: Square) -> bool:
        """Try to make a move. Returns False (and changes nothing) if the move is not allowed."""
        return self.attempt_move(from_square, to_square).accepted

    def attempt_move(self, from_square: Square, to_square: Square) -> MoveOutcome:
        """
        Attempt to make a move
        -----

        1. both squares must be on the board
        2. there must be a piece to move
        3. ... of the color whose turn it is
        4. the destination must be one of the piece's candidate moves

        Only then the board is updated, the pawn promoted (if needed) and the turn passed on.
        """
        rejection = self._validate(from_square, to_square)
        if rejection is not None:
            logger.debug(
                "Rejected move %s -> %s: %s", from_square, to_square, rejection.value
            )
            return MoveOutcome.rejected(rejection)

        piece = self._board.get(from_square)
        # for the typechecker: _validate made sure there is a piece
        assert piece is not None

        self._update_board(piece, from_square, to_square)
        promoted = self._promote_if_needed(piece, to_square)
        self._change_turn()

        logger.info(
            "%s moved %s from %s to %s%s",
            piece.color.name,
            piece.kind.value,
            from_square.to_algebraic(),
            to_square.to_algebraic(),
            " (promoted)" if promoted else "",
        )
        return MoveOutcome(accepted=True, promoted=promoted)

    # -- PRIVATE HELPERS ---
    def _validate(self, from_square: Square, to_square: Square) -> Optional[Rejection]:
        if not (
            self._board.in_bounds(from_square) and self._board.in_bounds(to_square)
        ):
            return Rejection.OUT_OF_BOUNDS

        piece = self._board.get(from_square)
        if piece is None:
            return Rejection.EMPTY_SQUARE

        if piece.color != self._turn:
            return Rejection.NOT_YOUR_TURN

        if to_square not in piece.legal_moves(from_square, self._board):
            return Rejection.ILLEGAL_MOVE

        return None

    def _update_board(self, piece: Piece, from_square: Square, to_square: Square) -> None:
        self._board.set(to_square, piece)
        self._board.set(from_square, None)

    def _promote_if_needed(self, piece: Piece, to_square: Square) -> bool:
        """A pawn on the farthest row always becomes a queen of the same color."""
        if piece.kind != PieceKind.PAWN or not is_promotion_square(
            to_square, piece.color
        ):
            return False
        self._board.set(to_square, Piece(piece.color, PieceKind.QUEEN))
        return True

    def _change_turn(self) -> None:
        self._turn = opponent(self._turn)


def new_game() -> Game:
    return Game.new_game()
