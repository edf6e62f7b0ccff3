"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the move history.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field


# A board is a flat list of 9 cells in row-major order.
# None means empty, otherwise the Mark placed there.
BOARD_CELLS = 9


class Mark(Enum):
    """The two marks that can be placed on the board."""
    PLAYER = "X"
    OPPONENT = "O"

    def opposite(self) -> "Mark":
        """Get the other side's mark."""
        return Mark.OPPONENT if self == Mark.PLAYER else Mark.PLAYER


class Outcome(Enum):
    """Classification of a board: still going, won by one side, or tied."""
    ONGOING = "ongoing"
    PLAYER_WINS = "player_wins"
    OPPONENT_WINS = "opponent_wins"
    TIE = "tie"

    @classmethod
    def for_mark(cls, mark: Mark) -> "Outcome":
        """Get the win outcome for a mark."""
        return cls.PLAYER_WINS if mark == Mark.PLAYER else cls.OPPONENT_WINS

    @property
    def is_over(self) -> bool:
        return self != Outcome.ONGOING


class TurnPhase(Enum):
    """States of the game loop."""
    PLAYER_TURN = "player_turn"
    OPPONENT_TURN = "opponent_turn"
    GAME_OVER = "game_over"


Board = List[Optional[Mark]]


def new_board() -> Board:
    """Create an empty board."""
    return [None] * BOARD_CELLS


def empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells, in index order."""
    return [i for i, cell in enumerate(board) if cell is None]


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move of the game this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board as 9 cells
    - Whose turn it is (the player always starts)
    - Move history
    - Game result
    """

    board: Board = field(default_factory=new_board)

    phase: TurnPhase = TurnPhase.PLAYER_TURN

    moves: List[Move] = field(default_factory=list)

    # Set by WinChecker.update_game_state
    outcome: Outcome = Outcome.ONGOING

    @property
    def is_game_over(self) -> bool:
        return self.phase == TurnPhase.GAME_OVER

    @property
    def current_mark(self) -> Optional[Mark]:
        """The mark to be placed next, or None if the game is over."""
        if self.phase == TurnPhase.PLAYER_TURN:
            return Mark.PLAYER
        if self.phase == TurnPhase.OPPONENT_TURN:
            return Mark.OPPONENT
        return None

    def make_move(self, index: int) -> bool:
        """
        Place the current mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not 0 <= index < BOARD_CELLS:
            print(f"Cell {index} is off the board!")
            return False

        if self.board[index] is not None:
            print(f"Cell {index} is already occupied!")
            return False

        mark = self.current_mark
        self.board[index] = mark
        self.moves.append(Move(mark=mark, index=index, move_number=len(self.moves)))

        # Winner detection is done by WinChecker, just switch turns here
        if mark == Mark.PLAYER:
            self.phase = TurnPhase.OPPONENT_TURN
        else:
            self.phase = TurnPhase.PLAYER_TURN

        return True

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices.
        """
        return empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            board=list(self.board),
            phase=self.phase,
            moves=list(self.moves),
            outcome=self.outcome,
        )

    def print_board(self):
        """Print the board to console."""
        print("\n┌───┬───┬───┐")

        for row in range(3):
            row_str = "│"
            for col in range(3):
                cell = self.board[row * 3 + col]
                symbol = cell.value if cell is not None else " "
                row_str += f" {symbol} │"
            print(row_str)

            if row < 2:
                print("├───┼───┼───┤")

        print("└───┴───┴───┘")

        if self.outcome == Outcome.TIE:
            print("\nIt's a tie!")
        elif self.outcome.is_over:
            winner = Mark.PLAYER if self.outcome == Outcome.PLAYER_WINS else Mark.OPPONENT
            print(f"\nWinner is: {winner.value}")
        elif self.current_mark is not None:
            print(f"\nCurrent turn: {self.current_mark.value}")
