"""
utils.py - Constants, enumerations and grid helpers for Connect Four

Row 0 of every grid is the bottom row; pieces fall towards it.
"""

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

# Board dimensions are fixed for this game
ROWS = 6
COLS = 7
CONNECT_N = 4  # pieces in a row needed to win

INVALID_MOVE_MESSAGE = "Invalid move. Please try again."

Coord = Tuple[int, int]  # (row, col)


class Mark(Enum):
    """Contents of a single cell."""
    EMPTY = 0
    X = 1    # player one
    O = 2    # player two

    @property
    def glyph(self) -> str:
        return "." if self is Mark.EMPTY else self.name

    def __str__(self):
        return self.glyph


class GameState(Enum):
    """Outcome of a board, derived after every move."""
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"

    def is_game_over(self) -> bool:
        return self is not GameState.IN_PROGRESS

    @classmethod
    def win_for(cls, mark: Mark) -> "GameState":
        if mark is Mark.X:
            return cls.PLAYER_ONE_WINS
        if mark is Mark.O:
            return cls.PLAYER_TWO_WINS
        raise ValueError(f"No win state for mark {mark!r}")


# Scan directions as (row step, col step); rows grow upwards
DIRECTIONS = (
    (0, 1),    # horizontal
    (1, 0),    # vertical
    (1, 1),    # diagonal up-right
    (-1, 1),   # diagonal down-right
)


def is_valid_position(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


def find_four(grid: np.ndarray) -> Optional[Tuple[Mark, List[Coord]]]:
    """
    Find the first run of CONNECT_N equal non-empty cells.

    Every cell is tried as the start of a run in each of DIRECTIONS, so the
    result does not depend on which move created the run.

    Args:
        grid: A ROWS x COLS array of Mark values

    Returns:
        The winning mark and the coordinates of its run, or None
    """
    for row in range(ROWS):
        for col in range(COLS):
            value = grid[row, col]
            if value == Mark.EMPTY.value:
                continue

            for dr, dc in DIRECTIONS:
                end_row = row + dr * (CONNECT_N - 1)
                end_col = col + dc * (CONNECT_N - 1)
                if not is_valid_position(end_row, end_col):
                    continue

                line = [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]
                if all(grid[r, c] == value for r, c in line):
                    return Mark(int(value)), line

    return None


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as text, top row first.

    Returns:
        ROWS lines of COLS space-separated glyphs
    """
    lines = []
    for row in range(ROWS - 1, -1, -1):
        lines.append(" ".join(Mark(int(grid[row, col])).glyph for col in range(COLS)))
    return "\n".join(lines)
