"""
computer.py - Random-move computer player

The computer draws columns uniformly with replacement until it hits a legal
one, so every legal column is equally likely and full columns never come up.
"""

from typing import Optional, TYPE_CHECKING

import numpy as np
from gymnasium.utils import seeding

from connectfour.debug import debug
from connectfour.players.base import Player
from connectfour.utils import COLS, Mark

if TYPE_CHECKING:
    from connectfour.game.board import Board


class ComputerPlayer(Player):
    """
    Computer opponent with an injectable random source.

    Args:
        mark: The mark to play
        name: Display name
        rng: Generator to draw columns from; takes precedence over ``seed``
        seed: Seed for a fresh generator when ``rng`` is not given
    """

    def __init__(self, mark: Mark, name: str = "Computer",
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        super().__init__(mark, name)
        if rng is None:
            rng, seed = seeding.np_random(seed)
        self.rng = rng
        self.seed = seed

    def get_next_move(self, board: 'Board') -> int:
        if not board.get_valid_moves():
            raise ValueError("No valid moves.")

        while True:
            column = int(self.rng.integers(0, COLS))
            if board.is_valid_move(column):
                debug.debug(f"{self.name} picks column {column}", "player")
                return column
            debug.trace(f"{self.name} redraws, column {column} is full", "player")
