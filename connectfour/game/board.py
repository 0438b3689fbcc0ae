"""
board.py - Board representation and move mechanics for Connect Four

The Board owns the grid, validates and applies moves, and derives the
game state from its contents. Row 0 is the bottom row.
"""

import numpy as np
from typing import List

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, Coord, Mark, GameState,
                               find_four, render_board_ascii)


class Board:
    """
    A fixed 6x7 Connect Four board.

    Cells hold Mark values. The only mutation is apply_move, so a piece
    always rests on the bottom row or on another piece.
    """

    def __init__(self):
        debug.trace("Initializing new Board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=int)
        self.moves_made: List[int] = []

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a piece can be dropped into a column.

        Args:
            column: The column to check (0-indexed)

        Returns:
            True if the column exists and its top cell is empty
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False

        if not (0 <= column < COLS):
            debug.trace(f"Invalid move: column {column} out of bounds", "board")
            return False

        if self.grid[ROWS - 1, column] != Mark.EMPTY.value:
            debug.trace(f"Invalid move: column {column} is full", "board")
            return False

        return True

    def get_valid_moves(self) -> List[int]:
        return [col for col in range(COLS) if self.is_valid_move(col)]

    def column_height(self, column: int) -> int:
        """Number of pieces currently stacked in a column."""
        return int(np.count_nonzero(self.grid[:, column] != Mark.EMPTY.value))

    def apply_move(self, column: int, mark: Mark) -> bool:
        """
        Drop a piece into a column.

        Args:
            column: The column to drop into (0-indexed)
            mark: The mark of the player making the move

        Returns:
            True if the piece was placed, False if the column is full or
            out of range (the board is left unchanged)
        """
        if mark is Mark.EMPTY:
            raise ValueError("Cannot drop an empty mark")

        if not self.is_valid_move(column):
            debug.debug(f"Rejected move in column {column} for {mark}", "board")
            return False

        # gravity: the column height is the lowest empty row
        row = self.column_height(column)
        self.grid[row, column] = mark.value
        self.moves_made.append(int(column))
        debug.debug(f"Placed {mark} at ({row}, {column})", "board")
        return True

    def is_full(self) -> bool:
        return bool(np.all(self.grid[ROWS - 1, :] != Mark.EMPTY.value))

    def evaluate_state(self) -> GameState:
        """
        Derive the game state from the board contents.

        Returns:
            The win state of the first four-in-a-row found, otherwise DRAW
            for a full board and IN_PROGRESS for anything else
        """
        found = find_four(self.grid)
        if found is not None:
            mark, line = found
            debug.info(f"Four in a row for {mark} at {line}", "board")
            return GameState.win_for(mark)

        if self.is_full():
            return GameState.DRAW

        return GameState.IN_PROGRESS

    def winning_line(self) -> List[Coord]:
        """Coordinates of the first four-in-a-row, or an empty list."""
        found = find_four(self.grid)
        return found[1] if found else []

    def get_state(self) -> np.ndarray:
        """A copy of the grid as a numpy array."""
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as text, top row first.

        Returns:
            Six lines of seven space-separated glyphs, '.' for empty cells
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
