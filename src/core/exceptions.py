"""
Custom exceptions shared by all layers.

NOTE: a rejected move is NOT an exception. Game.move reports it through its return value.
These are only raised at the boundaries (parsing input, loading stored games, misusing the board setup).
"""


class GameError(Exception):
    """Top-level exception. Catch this one if you do not care about the specifics."""


class InvalidRequestError(GameError):
    """Input from the outside world (API / CLI) could not be interpreted."""


class GameStateError(GameError):
    """Stored / supplied game state is inconsistent."""


class BoardStateError(GameError):
    """Board used in a way its lifecycle does not allow."""


class InvalidLayoutError(GameError):
    """A board layout (list of rows) could not be parsed."""


class RepositoryError(GameError):
    """Something went wrong in the persistence layer."""


class GameNotFoundError(RepositoryError):
    """No game stored under the requested id."""


class StaleGameError(RepositoryError):
    """The stored game changed after it was read (another move got there first)."""
