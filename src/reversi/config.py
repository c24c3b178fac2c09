"""
Configuration parameters for the Reversi engine.
"""
import os
import logging
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

from .board import MIN_BOARD_SIZE, MAX_BOARD_SIZE, validate_board_size
from .exceptions import InvalidConfigurationError


@dataclass
class GameConfig:
    """Configuration for new games."""
    board_size: int = 8
    min_board_size: int = MIN_BOARD_SIZE
    max_board_size: int = MAX_BOARD_SIZE


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "reversi"
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """
        Check the configuration against the engine limits.

        Raises:
            InvalidConfigurationError: if any value is out of range
        """
        game = self.game
        if game.min_board_size < MIN_BOARD_SIZE or game.max_board_size > MAX_BOARD_SIZE:
            raise InvalidConfigurationError(
                f"Board size limits must stay within [{MIN_BOARD_SIZE}, {MAX_BOARD_SIZE}]"
            )
        if game.min_board_size > game.max_board_size:
            raise InvalidConfigurationError("min_board_size is larger than max_board_size")
        validate_board_size(game.board_size, game.min_board_size, game.max_board_size)

        if not isinstance(logging.getLevelName(str(self.logging.log_level).upper()), int):
            raise InvalidConfigurationError(f"Unknown log level {self.logging.log_level!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'reversi'),
            game=GameConfig(**config_dict.get('game', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
