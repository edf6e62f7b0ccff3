"""
Logic module for TicTacToe.
Handles game state, rules, and the AI opponent.
"""

from .game_state import GameState, Mark, Outcome, TurnPhase, new_board
from .move_validator import MoveValidator
from .win_checker import WinChecker, evaluate
from .ai_player import AIPlayer, select_move
from .game_controller import GameController
