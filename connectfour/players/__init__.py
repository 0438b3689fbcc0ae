"""
connectfour.players - Player implementations for Connect Four

A player is anything that can pick the next column given the board:
a human at the console or a computer choosing uniformly at random.
"""

from connectfour.players.base import Player
from connectfour.players.human import HumanPlayer
from connectfour.players.computer import ComputerPlayer

__all__ = ['Player', 'HumanPlayer', 'ComputerPlayer']
