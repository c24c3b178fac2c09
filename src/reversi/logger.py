"""
Logging utilities for the Reversi engine.
"""
import os
import json
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config


class Logger:
    """Logger for game progress and results."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.handlers = []
        self.logger = logging.getLogger(__package__)
        self._previous_level = None
        config.validate()
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)

        level = logging.getLevelName(config.logging.log_level.upper())
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        self.handlers.append(console)

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'games.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)
            self.save_config()

        # Engine modules log below the package logger
        self._previous_level = self.logger.level
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def save_config(self):
        """Save the configuration to a JSON file."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log metrics to the configured handlers.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step (moves played)
            prefix: Prefix for metric names (e.g., 'game/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

    def log_game(self, game) -> None:
        """Log the board and score of a game."""
        player_0_count, player_1_count = game.get_score()
        # Every move adds exactly one disk to the four of the opening
        step = player_0_count + player_1_count - 4

        self.logger.info("Board:\n%s", game.get_board())
        metrics = {
            str(game.players[0]): player_0_count,
            str(game.players[1]): player_1_count,
            'game_over': game.is_game_over(),
        }
        if game.is_game_over():
            metrics['winner'] = game.get_winner()
        self.log_metrics(metrics, step, prefix='game/')

    def close(self):
        """Detach and close the handlers added by this logger and restore its level."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        if self._previous_level is not None:
            self.logger.setLevel(self._previous_level)
            self._previous_level = None

    def __del__(self):
        """Ensure resources are properly released."""
        self.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
