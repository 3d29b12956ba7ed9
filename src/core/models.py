"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, the API layer (higher) and the domain/db layers (lower) use the model(s) defined here to send to/receive from the Service.
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
BoardRow = str
ColorName = str


@dataclass
class GameModel:
    """
    Transport-safe representation of a chess game used between API, Service, DB, and Game layers.

    layout: 8 strings of 8 characters. First string is row 0 (Black's back rank).
    '.' is an empty square, upper case letters are White pieces, lower case Black pieces.
    version: how many times the stored record has been updated. Writes are only accepted for the
    version they were based on, so two moves computed from the same snapshot cannot both land.
    """

    layout: list[BoardRow]
    turn: ColorName
    version: int = 0
