"""
Board renderer for TicTacToe.
Draws the board as an OpenCV image and converts click positions to cells.
"""

import time
import cv2
import numpy as np
from pathlib import Path
from typing import Optional, Sequence, Tuple

from logic.game_state import Board, Mark
from .config import DisplayConfig


class BoardRenderer:
    """
    Draws the 3x3 board, the X and O marks, the winning line and a
    status strip into a BGR numpy image.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    @property
    def image_size(self) -> Tuple[int, int]:
        """(width, height) of the rendered image."""
        size = self.config.BOARD_OUTPUT_SIZE
        return size, size + self.config.STATUS_BAR_HEIGHT

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel center (x, y) of a cell."""
        cell_size = self.config.CELL_OUTPUT_SIZE
        row, col = divmod(index, self.config.BOARD_SIZE)
        return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2

    def render(
        self,
        board: Board,
        winning_line: Optional[Sequence[int]] = None,
        status: Optional[str] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: A 9-cell board.
            winning_line: Cells to strike through, if the game is won.
            status: Text shown under the board.

        Returns:
            BGR image of the board.
        """
        width, height = self.image_size
        image = np.zeros((height, width, 3), dtype=np.uint8)
        image[:] = self.config.BACKGROUND_COLOR

        self._draw_grid(image)

        for index, cell in enumerate(board):
            if cell == Mark.PLAYER:
                self._draw_x(image, index)
            elif cell == Mark.OPPONENT:
                self._draw_o(image, index)

        if winning_line:
            cv2.line(
                image,
                self.cell_center(winning_line[0]),
                self.cell_center(winning_line[-1]),
                self.config.WIN_LINE_COLOR,
                self.config.WIN_LINE_THICKNESS
            )

        if status:
            self._draw_status(image, status)

        return image

    def _draw_grid(self, image: np.ndarray):
        size = self.config.BOARD_OUTPUT_SIZE
        cell_size = self.config.CELL_OUTPUT_SIZE

        for i in range(1, self.config.BOARD_SIZE):
            # Vertical lines
            cv2.line(image, (i * cell_size, 0), (i * cell_size, size),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)
            # Horizontal lines
            cv2.line(image, (0, i * cell_size), (size, i * cell_size),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)

    def _draw_x(self, image: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        half = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_MARGIN
        cv2.line(image, (cx - half, cy - half), (cx + half, cy + half),
                 self.config.PLAYER_COLOR, self.config.MARK_THICKNESS)
        cv2.line(image, (cx + half, cy - half), (cx - half, cy + half),
                 self.config.PLAYER_COLOR, self.config.MARK_THICKNESS)

    def _draw_o(self, image: np.ndarray, index: int):
        radius = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_MARGIN
        cv2.circle(image, self.cell_center(index), radius,
                   self.config.OPPONENT_COLOR, self.config.MARK_THICKNESS)

    def _draw_status(self, image: np.ndarray, status: str):
        font = cv2.FONT_HERSHEY_SIMPLEX
        scale = 0.9
        (text_width, text_height), _ = cv2.getTextSize(status, font, scale, 2)

        x = max((self.config.BOARD_OUTPUT_SIZE - text_width) // 2, 5)
        y = self.config.BOARD_OUTPUT_SIZE + (self.config.STATUS_BAR_HEIGHT + text_height) // 2
        cv2.putText(image, status, (x, y), font, scale, self.config.TEXT_COLOR, 2)

    def pixel_to_cell(self, x: int, y: int) -> Optional[int]:
        """
        Convert a pixel position on the rendered image to a cell index.

        Args:
            x: Column in pixels.
            y: Row in pixels.

        Returns:
            Cell index (0-8), or None if the point is outside the board.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        cell_size = self.config.CELL_OUTPUT_SIZE
        last = self.config.BOARD_SIZE - 1
        col = min(int(x) // cell_size, last)
        row = min(int(y) // cell_size, last)
        return row * self.config.BOARD_SIZE + col

    def save_screenshot(self, image: np.ndarray, directory: Optional[str] = None) -> Path:
        """
        Save a rendered board as PNG.

        Args:
            image: Image returned by render().
            directory: Output directory. Uses SCREENSHOT_DIR if not provided.

        Returns:
            Path of the written file.
        """
        output_dir = Path(directory or self.config.SCREENSHOT_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)

        path = output_dir / f"tictactoe_{int(time.time() * 1000)}.png"
        if not cv2.imwrite(str(path), image):
            raise IOError(f"Could not write screenshot to {path}")

        print(f"Saved: {path}")
        return path
