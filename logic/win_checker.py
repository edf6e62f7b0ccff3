"""
Win checker for TicTacToe.
Decides whether a board is won, tied, or still going.
"""

from typing import Optional, Tuple
from .game_state import Board, GameState, Mark, Outcome, TurnPhase


# All possible winning lines as cell indices (row-major).
# Checked in this order; the first complete line decides the winner.
WINNING_LINES = [
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
]


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the first line holding three identical marks.

    Args:
        board: A 9-cell board.

    Returns:
        The winning line as a tuple of indices, or None.
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def evaluate(board: Board) -> Outcome:
    """
    Classify a board.

    A board with two winning marks cannot come out of a real game, so no
    attempt is made to detect one; the first line found wins.

    Args:
        board: A 9-cell board.

    Returns:
        The Outcome of the board.
    """
    line = get_winning_line(board)
    if line is not None:
        return Outcome.for_mark(board[line[0]])

    if all(cell is not None for cell in board):
        return Outcome.TIE

    return Outcome.ONGOING


class WinChecker:
    """
    Checks for win conditions on a GameState.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = get_winning_line(game_state.board)
        if line is None:
            return None
        return game_state.board[line[0]]

    def check_draw(self, game_state: GameState) -> bool:
        """True if the board is full and nobody has three in a row."""
        return evaluate(game_state.board) == Outcome.TIE

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with the outcome of its board.
        Ends the game if the board is won or tied.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        outcome = evaluate(game_state.board)
        game_state.outcome = outcome

        if outcome.is_over:
            game_state.phase = TurnPhase.GAME_OVER

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """Get the winning line of the game, if there is one."""
        return get_winning_line(game_state.board)
