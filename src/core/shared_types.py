"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceKind(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class Rejection(StrEnum):
    """Why a move attempt was turned down. The board and turn are never touched in any of these cases."""

    OUT_OF_BOUNDS = "out of bounds"
    EMPTY_SQUARE = "empty square"
    NOT_YOUR_TURN = "not your turn"
    ILLEGAL_MOVE = "illegal move"


def opponent(color: Color) -> Color:
    return Color.WHITE if color == Color.BLACK else Color.BLACK
