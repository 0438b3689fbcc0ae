"""Test doubles and board fixtures shared by the Connect Four tests."""

from typing import Iterable, List

import numpy as np

from connectfour.players.base import Player
from connectfour.utils import ROWS, COLS, Mark


class ScriptedPlayer(Player):
    """Player that replays a fixed list of columns."""

    def __init__(self, mark: Mark, name: str, columns: Iterable[int]):
        super().__init__(mark, name)
        self.columns = list(columns)
        self.turns = 0

    def get_next_move(self, board):
        self.turns += 1
        return self.columns.pop(0)


class ConsoleFeeder:
    """Stands in for input(): returns queued lines and records prompts."""

    def __init__(self, lines: Iterable[str]):
        self.lines = iter(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        try:
            return next(self.lines)
        except StopIteration:
            raise EOFError("no more input")


def draw_grid() -> np.ndarray:
    """Full board with no four-in-a-row: X on even columns in rows 0-2, on odd columns in rows 3-5."""
    grid = np.zeros((ROWS, COLS), dtype=int)
    for row in range(ROWS):
        for col in range(COLS):
            x_here = (col + (1 if row >= 3 else 0)) % 2 == 0
            grid[row, col] = Mark.X.value if x_here else Mark.O.value
    return grid


# Alternating X/O move order that fills draw_grid() under gravity
DRAW_SEQUENCE = (
    [0, 1] * 3 + [2, 3] * 3 + [4, 5] * 3
    + [6, 0] * 3
    + [1, 2] * 3 + [3, 4] * 3 + [5, 6] * 3
)
