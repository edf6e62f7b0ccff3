"""
Move validator for TicTacToe.
Validates that the player's moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import BOARD_CELLS, GameState, TurnPhase


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves made by the player.

    Rules:
    1. Game must not be over
    2. It must be the player's turn
    3. Can only place on empty cells of the board
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if game_state.phase != TurnPhase.PLAYER_TURN:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the opponent to move!"
            )

        if not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-8."
            )

        if game_state.board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already taken by {game_state.board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the side to move.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
