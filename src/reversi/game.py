"""
Reversi game module.
Handles turn order, passing, game termination and the save/load boundary.
"""
import os
import json
import logging
from typing import Any, Dict, List, Optional, Tuple
import numpy as np

from .board import Board, Disk, any_legal_move, apply_move, legal_moves
from .config import Config
from .exceptions import (
    GameAlreadyOverError,
    GameNotOverYetError,
    InvalidConfigurationError,
    NotActivePlayerError,
    StateFormatError,
    UnknownPlayerError,
)

logger = logging.getLogger(__name__)


class ReversiGame:
    """
    A two-player Reversi game.

    Player ids are opaque to the engine; the host is responsible for
    authenticating whoever calls make_move on a player's behalf.
    """

    def __init__(self, board_size: int, player_0_id: Any, player_1_id: Any, player_0_disk: Disk):
        """
        Initialize a new Reversi game.

        Args:
            board_size: Even board size between MIN_BOARD_SIZE and MAX_BOARD_SIZE
            player_0_id: Id of the player who moves first
            player_1_id: Id of the second player
            player_0_disk: Disk color of player 0; player 1 gets the opposite one
        """
        if player_0_id == player_1_id:
            raise InvalidConfigurationError("player_0 and player_1 must be different players")
        if not isinstance(player_0_disk, Disk):
            raise InvalidConfigurationError(f"player_0_disk must be a Disk, got {player_0_disk!r}")

        self.board = Board(board_size)
        self.size = self.board.size
        self.players = (player_0_id, player_1_id)
        self.disks = (player_0_disk, player_0_disk.opposite())
        # There is no random draw for the opening move, player 0 always starts
        self.active_player_index = 0
        self.game_over = False
        self.winner = None

    @classmethod
    def from_config(cls, config: Config, player_0_id: Any, player_1_id: Any,
                    player_0_disk: Disk) -> 'ReversiGame':
        """Create a game using the board size from a configuration."""
        config.validate()
        return cls(config.game.board_size, player_0_id, player_1_id, player_0_disk)

    def make_move(self, player_id: Any, x: int, y: int) -> int:
        """
        Place the active player's disk at (x, y) and advance the turn.

        Args:
            player_id: Id of the player making the move
            x: Column of the move (0-based)
            y: Row of the move (0-based)

        Returns:
            Number of opponent disks flipped by the move

        Raises:
            GameAlreadyOverError: if the game has ended
            NotActivePlayerError: if player_id is not the active player
            CannotPlaceDiskError: if the move is not legal
        """
        if self.game_over:
            raise GameAlreadyOverError("The game has already ended")
        if not self.is_active(player_id):
            raise NotActivePlayerError(f"{player_id!r} is not the active player")

        disk = self.disks[self.active_player_index]
        flipped = apply_move(self.board, disk, x, y)

        # Opponent first, then the mover, then the end of the game
        if any_legal_move(self.board, disk.opposite()):
            self.active_player_index = 1 - self.active_player_index
        elif any_legal_move(self.board, disk):
            logger.debug("%r has no legal move, %r plays again",
                         self.players[1 - self.active_player_index], player_id)
        else:
            self.game_over = True
            self._determine_winner()

        return flipped

    def _winner_from_score(self) -> Optional[Any]:
        """Player with more disks, or None for a tie."""
        player_0_count, player_1_count = self.get_score()
        if player_0_count > player_1_count:
            return self.players[0]
        if player_1_count > player_0_count:
            return self.players[1]
        return None

    def _determine_winner(self) -> None:
        """Determine the winner based on disk counts."""
        self.winner = self._winner_from_score()
        logger.info("Game over. Score %d-%d, winner: %r", *self.get_score(), self.winner)

    def is_game_over(self) -> bool:
        return self.game_over

    def get_winner(self) -> Optional[Any]:
        """
        Get the winner of the game.

        Returns:
            Id of the winning player, or None for a tie

        Raises:
            GameNotOverYetError: if the game is still in progress
        """
        if not self.game_over:
            raise GameNotOverYetError("The game has not ended")
        return self.winner

    def get_players(self) -> Tuple[Any, Any]:
        return self.players

    def get_active_player(self) -> Any:
        return self.players[self.active_player_index]

    def is_active(self, player_id: Any) -> bool:
        return self.players[self.active_player_index] == player_id

    def get_own_disk(self, player_id: Any) -> Disk:
        """Get the disk color bound to a player."""
        for index, player in enumerate(self.players):
            if player == player_id:
                return self.disks[index]
        raise UnknownPlayerError(player_id)

    def get_board(self) -> Board:
        """Get a copy of the board."""
        return self.board.copy()

    def get_board_state(self) -> np.ndarray:
        return self.board.get_board_state()

    def get_legal_moves(self) -> List[Tuple[int, int]]:
        """
        Get all legal moves for the active player.

        Returns:
            List of (x, y) tuples, empty once the game is over
        """
        if self.game_over:
            return []
        return legal_moves(self.board, self.disks[self.active_player_index])

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score.

        Returns:
            Tuple of (player_0_disks, player_1_disks)
        """
        return self.board.count(self.disks[0]), self.board.count(self.disks[1])

    def to_dict(self) -> Dict[str, Any]:
        """Convert the full game state to a JSON-compatible dictionary."""
        return {
            'board_size': self.size,
            'players': list(self.players),
            'player_0_disk': self.disks[0].name,
            'board': self.board.to_list(),
            'active_player_index': self.active_player_index,
            'game_over': self.game_over,
            'winner': self.winner,
        }

    @classmethod
    def from_dict(cls, state: Dict[str, Any]) -> 'ReversiGame':
        """
        Restore a game written by to_dict().

        Raises:
            StateFormatError: if the data does not describe a valid game
        """
        try:
            player_0_id, player_1_id = state['players']
            player_0_disk = Disk[state['player_0_disk']]
            game = cls(state['board_size'], player_0_id, player_1_id, player_0_disk)
            board = Board.from_list(state['board'])
            active_player_index = state['active_player_index']
            game_over = state['game_over']
            winner = state['winner']
        except (KeyError, TypeError, ValueError) as exc:
            raise StateFormatError(f"Invalid game state: {exc}") from exc

        if board.size != game.size:
            raise StateFormatError(f"Board is {board.size}x{board.size}, expected size {game.size}")
        if (not isinstance(active_player_index, int) or isinstance(active_player_index, bool)
                or active_player_index not in (0, 1)):
            raise StateFormatError(f"Invalid active player index {active_player_index!r}")
        if not isinstance(game_over, bool):
            raise StateFormatError(f"game_over must be a boolean, got {game_over!r}")
        if winner is not None and winner not in game.players:
            raise StateFormatError(f"Invalid winner {winner!r}")

        game.board = board
        game.active_player_index = active_player_index

        # The flags must agree with what the board allows
        active_disk = game.disks[active_player_index]
        can_move = (any_legal_move(board, active_disk.opposite())
                    or any_legal_move(board, active_disk))
        if game_over == can_move:
            raise StateFormatError(
                f"game_over is {game_over} but a legal move {'exists' if can_move else 'is missing'}"
            )
        if not game_over:
            if not any_legal_move(board, active_disk):
                raise StateFormatError(f"Active player {game.players[active_player_index]!r} has no legal move")
            if winner is not None:
                raise StateFormatError(f"Game in progress cannot have winner {winner!r}")
        elif winner != game._winner_from_score():
            raise StateFormatError(f"Winner {winner!r} does not match the disk counts {game.get_score()}")

        game.game_over = game_over
        game.winner = winner
        return game

    def save(self, filepath: str):
        """Save the game state to a JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'ReversiGame':
        """Load a game state from a JSON file."""
        with open(filepath, 'r') as f:
            state = json.load(f)
        return cls.from_dict(state)

    def __str__(self) -> str:
        """String representation of the game state."""
        result = [str(self.board)]
        player_0_count, player_1_count = self.get_score()
        result.append(f"Score - {self.players[0]} ({self.disks[0].name.title()}): {player_0_count}, "
                      f"{self.players[1]} ({self.disks[1].name.title()}): {player_1_count}")

        if self.game_over:
            if self.winner is None:
                result.append("Game over! It's a draw!")
            else:
                result.append(f"Game over! {self.winner} wins!")
        else:
            result.append(f"Active player: {self.get_active_player()}")

        return "\n".join(result)
