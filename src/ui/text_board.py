"""Plain-text rendering of the board (used by the CLI)"""

from typing import Optional

from src.chess.board import Board
from src.chess.game import Game
from src.chess.square import BOARD_DIMENSIONS, Square
from src.ui.selection import Selection

FILES = "abcdefgh"


def _cell(board: Board, square: Square, selection: Optional[Selection]) -> str:
    piece = board.get(square)
    symbol = piece.to_char() if piece else " "
    if selection is not None and selection.selected == square:
        return f"[{symbol}]"
    if selection is not None and square in selection.highlights:
        return f"({symbol})"
    # light squares are blank, dark squares dotted (same colouring as a real board: a1 is dark)
    if piece is None and (square.row + square.col) % 2 == 1:
        return " . "
    return f" {symbol} "


def render_board(board: Board, selection: Optional[Selection] = None) -> str:
    """
    Row 0 (rank 8) on top. White pieces are upper case, Black pieces lower case.
    The selected square is shown as [X], squares it can move to as (X).
    """
    rows, cols = BOARD_DIMENSIONS
    lines: list[str] = []
    for row in range(rows):
        rank = rows - row
        cells = "".join(_cell(board, Square(row, col), selection) for col in range(cols))
        lines.append(f"{rank} {cells}")
    lines.append("  " + "".join(f" {file} " for file in FILES[:cols]))
    return "\n".join(lines)


def status_line(game: Game) -> str:
    return f"Turn: {game.turn.name}"
