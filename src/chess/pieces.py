"""Defines the chess pieces and how they are encoded"""

from __future__ import annotations

from dataclasses import dataclass

from src.chess.moves import MOVEMENT_RULES, Board
from src.chess.square import Square
from src.core.exceptions import InvalidLayoutError
from src.core.shared_types import Color, PieceKind

PIECE_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}

SYMBOL_TO_KIND: dict[str, PieceKind] = {
    value: key for key, value in PIECE_SYMBOLS.items()
}


@dataclass(frozen=True)
class Piece:
    """
    A piece is just its color and kind. Two white pawns are interchangeable.
    Frozen: promotion replaces the piece on the board with a new value.
    """

    color: Color
    kind: PieceKind

    @property
    def symbol(self) -> str:
        """Single letter used for display (P, N, B, R, Q, K)"""
        return PIECE_SYMBOLS[self.kind]

    @classmethod
    def from_char(cls, character: str) -> Piece:
        # upper case: White pieces, lower case: Black pieces
        kind = SYMBOL_TO_KIND.get(character.upper())
        if kind is None or len(character) != 1:
            raise InvalidLayoutError(f"Unknown piece character: {character!r}")
        color = Color.WHITE if character.isupper() else Color.BLACK
        return cls(color, kind)

    def to_char(self) -> str:
        return self.symbol if self.color == Color.WHITE else self.symbol.lower()

    def legal_moves(self, position: Square, board: Board) -> set[Square]:
        """
        Candidate destination squares for this piece standing on `position`.

        Pure: only reads the supplied board. Off-board positions have no moves.
        """
        if not position.is_within_bounds():
            return set()
        movement_rule = MOVEMENT_RULES[self.kind]
        return movement_rule(position, self.color, board)

    def __str__(self) -> str:
        return f"{self.color.name[0]}{self.symbol}"
