"""
Reversi rules engine.
This package contains the board, move resolution and turn logic for Reversi.
"""

from .board import (
    Board,
    Disk,
    DIRECTIONS,
    EMPTY,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    any_legal_move,
    apply_move,
    captures,
    count_disks,
    flip_run,
    is_legal,
    legal_moves,
)
from .config import Config, GameConfig, LoggingConfig, get_default_config
from .exceptions import (
    CannotPlaceDiskError,
    GameAlreadyOverError,
    GameNotOverYetError,
    InvalidConfigurationError,
    NotActivePlayerError,
    ReversiError,
    StateFormatError,
    UnknownPlayerError,
)
from .game import ReversiGame
from .logger import Logger, setup_logger

__all__ = [
    'Board', 'Disk', 'DIRECTIONS', 'EMPTY', 'MAX_BOARD_SIZE', 'MIN_BOARD_SIZE',
    'any_legal_move', 'apply_move', 'captures', 'count_disks', 'flip_run',
    'is_legal', 'legal_moves',
    'Config', 'GameConfig', 'LoggingConfig', 'get_default_config',
    'CannotPlaceDiskError', 'GameAlreadyOverError', 'GameNotOverYetError',
    'InvalidConfigurationError', 'NotActivePlayerError', 'ReversiError',
    'StateFormatError', 'UnknownPlayerError',
    'ReversiGame',
    'Logger', 'setup_logger',
]
