"""The Game board: a passive 8x8 store of pieces. It never validates moves itself."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterator, Optional

from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import BoardStateError, InvalidLayoutError
from src.core.shared_types import Color, PieceKind

EMPTY_SQUARE_CHAR = "."

# Back rank from the a-file to the h-file (same for both colors)
BACK_RANK: list[PieceKind] = [
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
]

# row index of (back rank, pawn rank) per color
STARTING_ROWS: dict[Color, tuple[int, int]] = {
    Color.BLACK: (0, 1),
    Color.WHITE: (7, 6),
}

Grid = list[list[Optional[Piece]]]


def _empty_grid() -> Grid:
    rows, cols = BOARD_DIMENSIONS
    return [[None] * cols for _ in range(rows)]


@dataclass
class Board:
    grid: Grid = field(default_factory=_empty_grid)

    @classmethod
    def standard(cls) -> Board:
        """Fresh board in the standard starting position"""
        board = cls()
        board.init_standard()
        return board

    @classmethod
    def from_layout(cls, layout: list[str]) -> Board:
        """
        Construct a board from a list of row strings (row 0 first).

        ex. standard starting position:
        ["rnbqkbnr", "pppppppp", "........", ..., "PPPPPPPP", "RNBQKBNR"]
        """
        rows, cols = BOARD_DIMENSIONS
        if len(layout) != rows:
            raise InvalidLayoutError(f"Layout needs {rows} rows, got {len(layout)}.")

        board = cls()
        for row, row_chars in enumerate(layout):
            if len(row_chars) != cols:
                raise InvalidLayoutError(
                    f"Row {row} needs {cols} characters, got {row_chars!r}."
                )
            for col, character in enumerate(row_chars):
                if character == EMPTY_SQUARE_CHAR:
                    continue
                board.set(Square(row, col), Piece.from_char(character))
        return board

    def to_layout(self) -> list[str]:
        return [
            "".join(
                piece.to_char() if piece else EMPTY_SQUARE_CHAR for piece in row
            )
            for row in self.grid
        ]

    # --- ACCESSORS ---
    def in_bounds(self, square: Square) -> bool:
        return square.is_within_bounds()

    def get(self, square: Square) -> Optional[Piece]:
        """Out of bounds reads just like an empty square"""
        if not self.in_bounds(square):
            return None
        return self.grid[square.row][square.col]

    def set(self, square: Square, piece: Optional[Piece]) -> None:
        """Silently ignored when out of bounds"""
        if not self.in_bounds(square):
            return
        self.grid[square.row][square.col] = piece

    def init_standard(self) -> None:
        """Place the 32 pieces of the starting position. Only allowed on a fresh (empty) board."""
        if self.occupied_squares():
            raise BoardStateError(
                "Standard layout can only be placed on an empty board."
            )

        for color, (back_row, pawn_row) in STARTING_ROWS.items():
            for col, kind in enumerate(BACK_RANK):
                self.set(Square(back_row, col), Piece(color, kind))
                self.set(Square(pawn_row, col), Piece(color, PieceKind.PAWN))

    # --- QUERIES ---
    def squares(self) -> Iterator[Square]:
        rows, cols = BOARD_DIMENSIONS
        for row in range(rows):
            for col in range(cols):
                yield Square(row, col)

    def occupied_squares(self) -> list[Square]:
        return [square for square in self.squares() if self.get(square) is not None]

    def locate_color(self, color: Color) -> list[Square]:
        squares: list[Square] = []
        for square in self.squares():
            piece = self.get(square)
            if piece is not None and piece.color == color:
                squares.append(square)
        return squares

    def snapshot(self) -> Board:
        """Independent copy. Hand this to anyone who only needs to read (rendering, tests)."""
        return deepcopy(self)
