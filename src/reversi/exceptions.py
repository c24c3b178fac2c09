"""
Error types raised by the Reversi engine.
"""


class ReversiError(Exception):
    """Base class for every error raised by the engine."""


class InvalidConfigurationError(ReversiError, ValueError):
    """Bad board size, duplicate players or a bad disk binding at construction time."""


class GameAlreadyOverError(ReversiError):
    """A move was attempted after the game ended."""


class NotActivePlayerError(ReversiError):
    """A move was attempted by a player whose turn it is not."""


class CannotPlaceDiskError(ReversiError):
    """The target cell is occupied, off the board, or flips no opponent disk."""


class GameNotOverYetError(ReversiError):
    """The winner was queried before the game ended."""


class UnknownPlayerError(ReversiError, KeyError):
    """The player id is not one of the two players of this game."""


class StateFormatError(ReversiError, ValueError):
    """A saved game state does not describe a valid game."""
