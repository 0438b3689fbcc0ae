"""
human.py - Console-driven player
"""

import re
from typing import Callable, TYPE_CHECKING

from connectfour.debug import debug
from connectfour.players.base import Player
from connectfour.utils import COLS, Mark, INVALID_MOVE_MESSAGE

if TYPE_CHECKING:
    from connectfour.game.board import Board

COLUMN_PATTERN = re.compile(r"[+-]?[0-9]+")


class HumanPlayer(Player):
    """
    Reads columns from an input channel until a legal one is entered.

    ``input_fn`` and ``output_fn`` default to the console. End of input
    (EOFError) is not handled here and ends the game.
    """

    def __init__(self, mark: Mark, name: str = "Player",
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        super().__init__(mark, name)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def prompt(self) -> str:
        return f"{self.name} is the {self.mark.glyph}, enter your column (0-{COLS - 1}): "

    @staticmethod
    def parse_column(raw: str):
        """
        Return the integer in ``raw`` or None if it is not one.

        Only an optional sign and ASCII digits are accepted, so forms such
        as "0_3" or non-ASCII digits are rejected.
        """
        text = raw.strip()
        if not COLUMN_PATTERN.fullmatch(text):
            return None
        return int(text)

    def get_next_move(self, board: 'Board') -> int:
        while True:
            raw = self.input_fn(self.prompt())
            column = self.parse_column(raw)
            if column is not None and board.is_valid_move(column):
                return column

            debug.debug(f"{self.name} entered unusable column {raw!r}", "player")
            self.output_fn(INVALID_MOVE_MESSAGE)
