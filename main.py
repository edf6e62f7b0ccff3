"""
Main script for TicTacToe.

Play X against an AI that never loses. By default the Tkinter UI is
launched; with --no-ui the game runs in a plain OpenCV window instead.

Run this script to play!
"""

import cv2
import time
from typing import Optional

from display.config import DisplayConfig
from display.board_renderer import BoardRenderer

from logic.game_controller import GameController
from logic.game_state import TurnPhase


class TicTacToeWindow:
    """
    TicTacToe in an OpenCV window.

    Game flow:
    1. Player clicks a cell to place X
    2. After a short delay the AI places O
    3. Repeat until someone wins or it's a tie
    4. The result is shown and a new game starts after a delay
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()
        self.renderer = BoardRenderer(self.config)
        self.controller = GameController()

        # Deadlines (time.monotonic) for the scheduled steps
        self.opponent_due: Optional[float] = None
        self.restart_due: Optional[float] = None

        self.last_image = None
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print("Click a cell to play. Press 'q' to quit, 'r' to reset, 's' to save screenshot\n")

        cv2.namedWindow(self.config.WINDOW_TITLE)
        cv2.setMouseCallback(self.config.WINDOW_TITLE, self._on_mouse)

        self.is_running = True
        try:
            self._game_loop()
        finally:
            cv2.destroyAllWindows()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            self._run_due_steps(time.monotonic())

            self.last_image = self.renderer.render(
                self.controller.game_state.board,
                winning_line=self.controller.winning_line(),
                status=self.controller.status_message()
            )
            cv2.imshow(self.config.WINDOW_TITLE, self.last_image)

            key = cv2.waitKey(30) & 0xFF
            if key == ord('q'):
                print("\nGame quit by user.")
                self.is_running = False
            elif key == ord('s'):
                self.renderer.save_screenshot(self.last_image)
            elif key == ord('r'):
                self._reset_game()

    def _run_due_steps(self, now: float):
        """Run the AI reply or the restart once its deadline has passed."""
        if self.opponent_due is not None and now >= self.opponent_due:
            self.opponent_due = None
            self.controller.play_opponent_move()
            self._schedule_next()

        if self.restart_due is not None and now >= self.restart_due:
            self.restart_due = None
            self.controller.reset()

    def _on_mouse(self, event, x, y, flags, param):
        """OpenCV mouse callback."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return

        if self.controller.phase != TurnPhase.PLAYER_TURN:
            return

        index = self.renderer.pixel_to_cell(x, y)
        if index is None:
            return

        if self.controller.handle_player_move(index).is_valid:
            self._schedule_next()

    def _schedule_next(self):
        """Set the deadline for the AI reply or the automatic restart."""
        phase = self.controller.phase
        now = time.monotonic()

        if phase == TurnPhase.OPPONENT_TURN:
            self.opponent_due = now + self.config.OPPONENT_DELAY_MS / 1000
        elif phase == TurnPhase.GAME_OVER:
            self.restart_due = now + self.config.RESTART_DELAY_MS / 1000

    def _reset_game(self):
        """Reset the game and drop anything scheduled."""
        self.opponent_due = None
        self.restart_due = None
        self.controller.reset()
        print("Game reset!")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe against an unbeatable AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in an OpenCV window instead of the Tkinter UI"
    )
    parser.add_argument(
        "--restart-delay",
        type=int,
        default=DisplayConfig.RESTART_DELAY_MS,
        help="Milliseconds before a finished game restarts"
    )

    args = parser.parse_args(argv)

    if args.restart_delay < 0:
        parser.error("--restart-delay must be 0 or more")

    config = DisplayConfig()
    config.RESTART_DELAY_MS = args.restart_delay

    # Launch UI by default
    if not args.no_ui:
        import ui
        ui.main(config)
        return

    window = TicTacToeWindow(config)

    try:
        window.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
