"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidRequestError

# Chess board is always 8x8 (rows, columns).
BOARD_DIMENSIONS = (8, 8)
RANK_CHARS = "12345678"


@dataclass(frozen=True)
class Square:
    """
    Row 0 is Black's back rank, row 7 is White's back rank (White plays "up" the screen).
    Column 0 is the a-file.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' -> (0, 0), 'e2' -> (6, 4), 'h1' -> (7, 7)"""
        name = sq.strip().lower()
        if len(name) != 2 or name[1] not in RANK_CHARS:
            raise InvalidRequestError(f"Cannot interpret {sq!r} as a square name.")

        col = ascii_lowercase.find(name[0])
        rank = int(name[1])
        square = cls(BOARD_DIMENSIONS[0] - rank, col)
        if col < 0 or not square.is_within_bounds():
            raise InvalidRequestError(f"Square {sq!r} is not on the board.")
        return square

    def to_algebraic(self) -> str:
        return f"{ascii_lowercase[self.col]}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        """The square reached by stepping (d_row, d_col). May lie outside the board."""
        return Square(self.row + d_row, self.col + d_col)
