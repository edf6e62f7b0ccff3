"""
Game controller for TicTacToe.

Drives one game at a time through its phases:
PLAYER_TURN -> OPPONENT_TURN -> PLAYER_TURN ... -> GAME_OVER

The front ends (Tkinter UI and the OpenCV window) feed clicks into
handle_player_move(), schedule play_opponent_move() and call reset()
when a new game should begin.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .game_state import GameState, Mark, Outcome, TurnPhase
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer


@dataclass
class SessionScore:
    """Results of the games played since the program started."""
    player_wins: int = 0
    opponent_wins: int = 0
    ties: int = 0

    def record(self, outcome: Outcome):
        if outcome == Outcome.PLAYER_WINS:
            self.player_wins += 1
        elif outcome == Outcome.OPPONENT_WINS:
            self.opponent_wins += 1
        elif outcome == Outcome.TIE:
            self.ties += 1

    def __str__(self) -> str:
        return f"You: {self.player_wins}  AI: {self.opponent_wins}  Ties: {self.ties}"


class GameController:
    """
    Main controller for a TicTacToe session.

    Game flow:
    1. Player (X) picks a cell
    2. Move is validated and placed
    3. AI (O) calculates and places its reply
    4. Repeat until someone wins or it's a tie
    """

    def __init__(self):
        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Mark.OPPONENT)
        self.score = SessionScore()

    @property
    def phase(self) -> TurnPhase:
        return self.game_state.phase

    @property
    def is_game_over(self) -> bool:
        return self.game_state.is_game_over

    def handle_player_move(self, index: int) -> ValidationResult:
        """
        Process a move by the player.

        Args:
            index: Cell the player picked.

        Returns:
            ValidationResult; the move is only made when it is valid.
        """
        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            print(f"Rejected move: {result.error_message}")
            return result

        print(f">>> Player placed X at cell {index}")
        self.game_state.make_move(index)
        self._after_move()

        return result

    def play_opponent_move(self) -> Optional[int]:
        """
        Let the AI make its move.

        Returns:
            The cell the AI played, or None if it did not move.
        """
        if self.game_state.phase != TurnPhase.OPPONENT_TURN:
            return None

        move = self.ai.get_best_move(self.game_state)

        if move is None:
            print("ERROR: AI could not find a move!")
            return None

        print(f">>> AI placed O at cell {move}")
        self.game_state.make_move(move)
        self._after_move()

        return move

    def _after_move(self):
        """Check for the end of the game after every placement."""
        self.win_checker.update_game_state(self.game_state)

        if self.game_state.is_game_over:
            self.score.record(self.game_state.outcome)
            self.game_state.print_board()
            print(f"Score: {self.score}")

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.game_state)

    def result_message(self) -> Optional[str]:
        """Text announcing the result, or None while the game is going."""
        outcome = self.game_state.outcome
        if outcome == Outcome.TIE:
            return "It's a tie!"
        if outcome == Outcome.PLAYER_WINS:
            return f"Winner is: {Mark.PLAYER.value}"
        if outcome == Outcome.OPPONENT_WINS:
            return f"Winner is: {Mark.OPPONENT.value}"
        return None

    def status_message(self) -> str:
        """Short description of what is happening now."""
        message = self.result_message()
        if message is not None:
            return message
        if self.game_state.phase == TurnPhase.PLAYER_TURN:
            return "Your turn (X)"
        return "AI is thinking..."

    def reset(self):
        """Start a new game. The session score is kept."""
        print("\nResetting game...")
        self.game_state = GameState()
