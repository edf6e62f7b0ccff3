"""
TicTacToe UI
A graphical interface for playing TicTacToe against the AI using Tkinter.

Shows:
- The board, drawn with OpenCV (click a cell to play X)
- Game status and session score
- Reset and Quit buttons
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from display.config import DisplayConfig
from display.board_renderer import BoardRenderer

from logic.game_controller import GameController
from logic.game_state import TurnPhase


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.renderer = BoardRenderer(self.config)
        self.controller = GameController()

        # Pending root.after() callbacks
        self.opponent_job: Optional[str] = None
        self.restart_job: Optional[str] = None

        # Placement of the board image on the canvas
        self.image_offset = (0, 0)
        self.image_scale = 1.0
        self.last_image = None

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg='#1a1a2e')

        width, height = self.renderer.image_size
        self.root.geometry(f"{width + 300}x{height + 40}")
        self.root.minsize(width // 2 + 300, height // 2 + 40)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Left panel - board
        self.board_canvas = tk.Canvas(main_frame, bg='#0f0f1a', highlightthickness=2,
                                      highlightbackground='#00d4ff')
        self.board_canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))
        self.board_canvas.bind("<Button-1>", self._on_click)
        self.board_canvas.bind("<Configure>", lambda event: self._refresh())

        # Right panel
        right_frame = ttk.Frame(main_frame, width=260)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 10))

        legend_frame = ttk.Frame(right_frame)
        legend_frame.pack(pady=5)
        ttk.Label(legend_frame, text="X = You  ", foreground='#00ff88').pack(side=tk.LEFT)
        ttk.Label(legend_frame, text="O = AI", foreground='#ff6b6b').pack(side=tk.LEFT)

        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.score_label = ttk.Label(right_frame, text="")
        self.score_label.pack()

        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        tk.Button(
            right_frame,
            text="Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=20,
            command=self._reset_game
        ).pack(pady=5)

        tk.Button(
            right_frame,
            text="Screenshot",
            font=('Segoe UI', 10),
            bg='#2d3748',
            fg='white',
            width=20,
            command=self._save_screenshot
        ).pack(pady=5)

        tk.Button(
            right_frame,
            text="Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=20,
            command=self._quit
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Handle a click on the board canvas."""
        # Clicks are ignored while the AI moves or a restart is pending
        if self.controller.phase != TurnPhase.PLAYER_TURN:
            return

        offset_x, offset_y = self.image_offset
        x = (event.x - offset_x) / self.image_scale
        y = (event.y - offset_y) / self.image_scale

        index = self.renderer.pixel_to_cell(int(x), int(y))
        if index is None:
            return

        result = self.controller.handle_player_move(index)
        if not result.is_valid:
            return

        self._after_move()

    def _opponent_move(self):
        """Let the AI reply (scheduled with root.after)."""
        self.opponent_job = None
        self.controller.play_opponent_move()
        self._after_move()

    def _after_move(self):
        """Schedule whatever comes next in the game."""
        phase = self.controller.phase

        if phase == TurnPhase.OPPONENT_TURN:
            self.opponent_job = self.root.after(self.config.OPPONENT_DELAY_MS, self._opponent_move)
        elif phase == TurnPhase.GAME_OVER:
            self.restart_job = self.root.after(self.config.RESTART_DELAY_MS, self._restart)

        self._refresh()

    def _restart(self):
        """Automatic restart after a finished game."""
        self.restart_job = None
        self._reset_game()

    def _cancel_jobs(self):
        for job in (self.opponent_job, self.restart_job):
            if job is not None:
                self.root.after_cancel(job)
        self.opponent_job = None
        self.restart_job = None

    def _refresh(self):
        """Redraw the board and the status labels."""
        image = self.renderer.render(
            self.controller.game_state.board,
            winning_line=self.controller.winning_line(),
            status=self.controller.status_message()
        )
        self.last_image = image
        self._update_board_canvas(image)

        self.status_label.configure(text=self.controller.status_message())
        self.score_label.configure(text=str(self.controller.score))

    def _update_board_canvas(self, image):
        """Show the rendered board on the canvas, scaled to fit."""
        canvas_width = self.board_canvas.winfo_width()
        canvas_height = self.board_canvas.winfo_height()

        if canvas_width < 10 or canvas_height < 10:
            return

        image_height, image_width = image.shape[:2]
        scale = min(canvas_width / image_width, canvas_height / image_height)
        new_width = int(image_width * scale)
        new_height = int(image_height * scale)

        image = cv2.resize(image, (new_width, new_height))
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

        photo = ImageTk.PhotoImage(Image.fromarray(image_rgb))

        self.board_canvas.delete("all")
        x = (canvas_width - new_width) // 2
        y = (canvas_height - new_height) // 2
        self.board_canvas.create_image(x, y, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        self.image_offset = (x, y)
        self.image_scale = scale

    def _save_screenshot(self):
        if self.last_image is None:
            return
        try:
            path = self.renderer.save_screenshot(self.last_image)
        except IOError as e:
            self.status_label.configure(text=f"ERROR: {str(e)[:30]}")
            return
        self.status_label.configure(text=f"Saved {path.name}")

    def _reset_game(self):
        """Reset the game."""
        self._cancel_jobs()
        self.controller.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_jobs()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self._refresh()
        self.root.mainloop()


def main(config: Optional[DisplayConfig] = None):
    """Main entry point."""
    print("\n" + "="*60)
    print("   Tic-Tac-Toe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(config)
    ui.run()


if __name__ == "__main__":
    main()
