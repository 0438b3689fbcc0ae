"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the turn-based game
controller and a Gymnasium environment over the same board.
"""

from connectfour.game.board import Board
from connectfour.game.rules import ConnectFourGame, ConnectFourEnv

__all__ = ['Board', 'ConnectFourGame', 'ConnectFourEnv']
