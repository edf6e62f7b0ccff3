"""
Display module for TicTacToe.
Draws the board and maps clicks to cells.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
