"""
Display configuration for TicTacToe.
Sizes, colors and timings used by the board renderer and the front ends.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    """

    # ==================== BOARD IMAGE ====================
    BOARD_SIZE = 3

    # Output size of the board image (pixels)
    BOARD_OUTPUT_SIZE = 480
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 160 pixels per cell

    # Strip under the board for the status text
    STATUS_BAR_HEIGHT = 60

    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    WIN_LINE_THICKNESS = 12

    # Space between a mark and the cell border
    MARK_MARGIN = CELL_OUTPUT_SIZE // 5

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (46, 26, 26)     # Same dark navy as the Tk window
    GRID_COLOR = (255, 212, 0)          # Cyan-ish blue
    PLAYER_COLOR = (136, 255, 0)        # Green X
    OPPONENT_COLOR = (107, 107, 255)    # Red O
    WIN_LINE_COLOR = (0, 215, 255)      # Gold
    TEXT_COLOR = (220, 220, 220)

    # ==================== TIMING ====================
    # Delay before the AI replies to a player move (milliseconds)
    OPPONENT_DELAY_MS = 300

    # Delay before a finished game restarts on its own (milliseconds)
    RESTART_DELAY_MS = 2000

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic-Tac-Toe"

    # Where screenshots are written
    SCREENSHOT_DIR = "screenshots"
