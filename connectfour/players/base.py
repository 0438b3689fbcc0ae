"""
base.py - Common interface for Connect Four players
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from connectfour.utils import Mark

if TYPE_CHECKING:
    from connectfour.game.board import Board


class Player(ABC):
    """A participant identified by its mark and display name."""

    def __init__(self, mark: Mark, name: str = "Player"):
        if mark is Mark.EMPTY:
            raise ValueError("A player needs a non-empty mark")
        self._mark = mark
        self._name = name

    @property
    def mark(self) -> Mark:
        return self._mark

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def get_next_move(self, board: 'Board') -> int:
        """
        Choose the column for the next move.

        Args:
            board: The current board; implementations must not modify it

        Returns:
            A column index that is a legal move on ``board``
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mark={self._mark.glyph!r}, name={self._name!r})"
