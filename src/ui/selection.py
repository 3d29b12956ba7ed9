"""
Click handling for a board view.

The Game knows nothing about what the user has selected. This module keeps that state on the presentation side:
first click picks up one of your pieces (and remembers where it may go), second click tries to put it down.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.chess.game import Game
from src.chess.square import Square

TILE_SIZE = 80


def square_at(x: int, y: int, tile_size: int = TILE_SIZE) -> Square:
    """Map a pointer position (pixels, origin top-left) to the square under it. May be off the board."""
    return Square(row=y // tile_size, col=x // tile_size)


@dataclass
class Selection:
    selected: Optional[Square] = None
    highlights: set[Square] = field(default_factory=set)

    def clear(self) -> None:
        self.selected = None
        self.highlights = set()

    def click(self, game: Game, square: Square) -> bool:
        """
        Handle a click on `square`. Returns True if this click made a move.

        * nothing selected: select the clicked piece if it belongs to the side to move.
        * something selected: try to move there. If that fails and you clicked another one of your
          own pieces, that piece becomes the selection instead.
        """
        if not game.board.in_bounds(square):
            return False

        if self.selected is None:
            self._select_if_own_piece(game, square)
            return False

        moved = game.move(self.selected, square)
        self.clear()
        if not moved:
            self._select_if_own_piece(game, square)
        return moved

    def _select_if_own_piece(self, game: Game, square: Square) -> None:
        piece = game.board.get(square)
        if piece is not None and piece.color == game.turn:
            self.selected = square
            self.highlights = game.legal_moves(square)
