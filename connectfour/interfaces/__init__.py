"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the command-line interface for the game.
"""

# Don't import anything here to avoid circular imports
__all__ = []
