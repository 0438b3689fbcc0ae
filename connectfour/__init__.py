"""
connectfour - Connect Four console game

This package provides the board and win detection, human and random
computer players, a turn-based game controller, a Gymnasium environment
and a command-line interface.
"""

# Version number
__version__ = '0.1.0'
