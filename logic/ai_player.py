"""
AI player for TicTacToe.
Uses an exhaustive Minimax search to choose the best move.
"""

from typing import Optional
from .game_state import Board, GameState, Mark, Outcome, empty_cells
from .win_checker import evaluate


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    Every line of play is searched to the end with no pruning. A win
    scores +1, a loss -1 and a tie 0, no matter how many moves it takes.
    When several moves share the best score the lowest cell index is
    played.
    """

    def __init__(self, mark: Mark = Mark.OPPONENT):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI places (default: OPPONENT)
        """
        self.mark = mark

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def select_move(self, board: Board) -> Optional[int]:
        """
        Pick the best cell for this AI's mark.

        The board is not modified.

        Args:
            board: A 9-cell board where it is this AI's turn.

        Returns:
            Index of the best empty cell, or None if the game is
            already decided or the board is full.
        """
        self.positions_evaluated = 0

        if evaluate(board).is_over:
            return None

        best_score = float('-inf')
        best_move = None

        for index in empty_cells(board):
            # Try this move on a copy
            new_board = list(board)
            new_board[index] = self.mark

            score = self._minimax(new_board, is_maximizing=False)

            # Strictly greater, so the first of equal moves is kept
            if score > best_score:
                best_score = score
                best_move = index

        return best_move

    def _minimax(self, board: Board, is_maximizing: bool) -> int:
        """
        Score a position assuming both sides play perfectly from here.

        Args:
            board: Position to evaluate.
            is_maximizing: True if it is this AI's turn.

        Returns:
            +1, 0 or -1 from this AI's point of view.
        """
        self.positions_evaluated += 1

        outcome = evaluate(board)
        if outcome.is_over:
            return self._score(outcome)

        mark = self.mark if is_maximizing else self.mark.opposite()
        scores = []
        for index in empty_cells(board):
            new_board = list(board)
            new_board[index] = mark
            scores.append(self._minimax(new_board, not is_maximizing))

        return max(scores) if is_maximizing else min(scores)

    def _score(self, outcome: Outcome) -> int:
        """Score a finished game for this AI."""
        if outcome == Outcome.TIE:
            return 0
        if outcome == Outcome.for_mark(self.mark):
            return 1
        return -1

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the best move for the current game.

        Args:
            game_state: Current game state.

        Returns:
            Cell index of the best move, or None if no move should be made.
        """
        if game_state.current_mark != self.mark:
            print(f"Warning: It's not {self.mark.value}'s turn!")
            return None

        move = self.select_move(game_state.board)

        print(f"AI evaluated {self.positions_evaluated} positions. Best move: {move}")

        return move

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(game_state)

        if move is None:
            return "No moves available!"

        row, col = divmod(move, 3)
        return f"Place {self.mark.value} at cell {move} (row {row}, column {col})"


def select_move(board: Board) -> Optional[int]:
    """
    Choose the opponent's move for a board.

    Args:
        board: A 9-cell board where it is the opponent's turn.

    Returns:
        Index of the chosen empty cell, or None if there is no move to make.
    """
    return AIPlayer(Mark.OPPONENT).select_move(board)
