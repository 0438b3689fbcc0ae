"""
rules.py - Turn-based game control and Gymnasium environment for Connect Four

This module provides:
1. ConnectFourGame, which runs a console game between two players
2. ConnectFourEnv, a Gymnasium-compatible environment over the same board
"""

from typing import Any, Callable, Dict, Optional, Tuple, TYPE_CHECKING

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.utils import ROWS, COLS, Mark, GameState, INVALID_MOVE_MESSAGE
from connectfour.game.board import Board

if TYPE_CHECKING:
    from connectfour.players.base import Player


class ConnectFourGame:
    """
    Runs a game between two players on one board.

    Player one moves first. The state only leaves IN_PROGRESS after a
    successful move, and the current player only changes while the game
    is still in progress.
    """

    def __init__(self, player1: 'Player', player2: 'Player',
                 board: Optional[Board] = None,
                 output_fn: Callable[[str], None] = print):
        if player1.mark == player2.mark:
            raise ValueError("Players must use different marks")

        debug.debug(f"Initializing ConnectFourGame: {player1!r} vs {player2!r}", "game")
        self.player1 = player1
        self.player2 = player2
        self.board = board if board is not None else Board()
        self.output_fn = output_fn
        self.current_player = player1
        self.state = GameState.IN_PROGRESS

    def display(self) -> None:
        self.output_fn(self.board.render())
        self.output_fn("")

    def other_player(self) -> 'Player':
        return self.player2 if self.current_player is self.player1 else self.player1

    def play_turn(self) -> GameState:
        """
        Play one half-move for the current player.

        Returns:
            The game state after the turn
        """
        if self.state.is_game_over():
            return self.state

        self.display()
        column = self.current_player.get_next_move(self.board)

        if not self.board.apply_move(column, self.current_player.mark):
            # Players only return legal columns, but the board has the last word
            debug.warning(f"{self.current_player.name} returned unplayable column {column}", "game")
            self.output_fn(INVALID_MOVE_MESSAGE)
            return self.state

        self.state = self.board.evaluate_state()
        debug.debug(f"{self.current_player.name} played {column}, state {self.state.name}", "game")

        if not self.state.is_game_over():
            self.current_player = self.other_player()

        return self.state

    def start(self) -> GameState:
        """
        Play until the game ends, then show the final board and result.

        Returns:
            The terminal game state
        """
        while not self.state.is_game_over():
            self.play_turn()

        self.display()
        self.output_fn(self.get_result_message(self.state))
        debug.info(f"Game over after {len(self.board.moves_made)} moves: {self.state.name}", "game")
        return self.state

    def get_result_message(self, state: GameState) -> str:
        if state == GameState.DRAW:
            return "The game ended in a draw."
        if state == GameState.PLAYER_ONE_WINS:
            return f"{self.player1.name} wins!"
        if state == GameState.PLAYER_TWO_WINS:
            return f"{self.player2.name} wins!"
        return ""


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both sides act through ``step``: X moves first and the marks alternate
    after every legal move.

    Rewards (win 1, loss -1, draw 0.1, illegal move -0.5, from X's point of
    view) are only there to honour the Gymnasium ``step`` contract; the
    ``simulate`` command reads ``game_state`` instead.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: One of ``metadata['render_modes']`` or None
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        # 6x7 board with cell values 0 (empty), 1 (X), 2 (O)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.board = Board()
        self.current_mark = Mark.X
        self.game_state = GameState.IN_PROGRESS
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode on an empty board.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")

        self.board = Board()
        self.current_mark = Mark.X
        self.game_state = GameState.IN_PROGRESS

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Drop the current mark into column ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if self.game_state.is_game_over():
            raise RuntimeError("step() called on a finished game; call reset() first")

        action = int(action)
        if not self.board.apply_move(action, self.current_mark):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.game_state = self.board.evaluate_state()
        reward = self.reward_step
        terminated = self.game_state.is_game_over()

        if self.game_state == GameState.PLAYER_ONE_WINS:
            reward = self.reward_win
        elif self.game_state == GameState.PLAYER_TWO_WINS:
            reward = self.reward_lose
        elif self.game_state == GameState.DRAW:
            reward = self.reward_draw
        else:
            self.current_mark = Mark.O if self.current_mark is Mark.X else Mark.X

        if terminated:
            debug.info(f"Episode finished: {self.game_state.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.board.render()

        if self.render_mode == "human":
            print(self.board.render())
            print()

        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = [] if self.game_state.is_game_over() else self.board.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'current_mark': self.current_mark.glyph,
            'game_state': self.game_state.name,
            'moves_made': len(self.board.moves_made),
            'winning_line': self.board.winning_line(),
        }
