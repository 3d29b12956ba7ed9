"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the candidate destinations for each piece kind.

NOTE: These are the only rules. Nothing checks whether the mover's own king is left under attack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol

from src.chess.square import Square
from src.core.shared_types import Color, PieceKind

if TYPE_CHECKING:
    from src.chess.pieces import Piece


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def get(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]

DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = STRAIGHTS + DIAGONALS

# White moves towards row 0, Black towards row 7
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


def _is_opponent(square: Square, color: Color, board: Board) -> bool:
    piece = board.get(square)
    return piece is not None and piece.color != color


def _is_available(square: Square, color: Color, board: Board) -> bool:
    """Empty or holding an opponent's piece (so it can be captured)."""
    piece = board.get(square)
    return piece is None or piece.color != color


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, color: Color, board: Board, directions: list[Vector]
) -> set[Square]:
    """
    Raycasting algorithm
    -----

    ---
    Walk along each direction until we hit another piece or the edge of the board.
    The first occupied square ends the ray and only counts if the opponent stands there.
    """
    moves: set[Square] = set()
    for d_row, d_col in directions:
        target_square = square.offset(d_row, d_col)
        while target_square.is_within_bounds():
            piece = board.get(target_square)
            if piece is not None:
                if piece.color != color:
                    moves.add(target_square)
                break

            moves.add(target_square)
            target_square = target_square.offset(d_row, d_col)
    return moves


def single_step_move(
    square: Square, color: Color, board: Board, deltas: list[Vector]
) -> set[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump a fixed offset"""
    moves: set[Square] = set()
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue

        if _is_available(target_square, color, board):
            moves.add(target_square)
    return moves


def candidate_pawn_moves(square: Square, color: Color, board: Board) -> set[Square]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - can move by two from its starting row, if both squares are empty.
    - takes diagonally (forward), and only takes.

    NOTE: no en passant in this rule set.
    """
    moves: set[Square] = set()
    direction = PAWN_DIRECTION[color]

    one_step = square.offset(direction, 0)
    if one_step.is_within_bounds() and board.get(one_step) is None:
        moves.add(one_step)

        two_steps = square.offset(2 * direction, 0)
        if (
            square.row == PAWN_START_ROW[color]
            and two_steps.is_within_bounds()
            and board.get(two_steps) is None
        ):
            moves.add(two_steps)

    for d_col in (-1, 1):
        target_square = square.offset(direction, d_col)
        if target_square.is_within_bounds() and _is_opponent(
            target_square, color, board
        ):
            moves.add(target_square)
    return moves


def candidate_knight_moves(square: Square, color: Color, board: Board) -> set[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(square, color, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, color: Color, board: Board) -> set[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, color, board, DIAGONALS)


def candidate_rook_moves(square: Square, color: Color, board: Board) -> set[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, color, board, STRAIGHTS)


def candidate_queen_moves(square: Square, color: Color, board: Board) -> set[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(square, color, board, STRAIGHTS + DIAGONALS)


def candidate_king_moves(square: Square, color: Color, board: Board) -> set[Square]:
    """The king can move by a single square at the time. No castling."""
    return single_step_move(square, color, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Color, Board], set[Square]]
MOVEMENT_RULES: dict[PieceKind, CandidateMovesFn] = {
    PieceKind.PAWN: candidate_pawn_moves,
    PieceKind.KNIGHT: candidate_knight_moves,
    PieceKind.BISHOP: candidate_bishop_moves,
    PieceKind.ROOK: candidate_rook_moves,
    PieceKind.QUEEN: candidate_queen_moves,
    PieceKind.KING: candidate_king_moves,
}


def is_promotion_square(square: Square, color: Color) -> bool:
    """A pawn reaching the farthest row for its color gets promoted"""
    return square.row == PROMOTION_ROW[color]
