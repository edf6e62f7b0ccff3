"""
Tests for the display module.
Renders boards off-screen, so no window or display is needed.

Usage:
    python test_display.py
    pytest test_display.py
"""

import sys

import cv2
import numpy as np
import pytest

from display import BoardRenderer, DisplayConfig
from logic.game_state import Mark, new_board


X = Mark.PLAYER
O = Mark.OPPONENT


@pytest.fixture
def renderer():
    return BoardRenderer(DisplayConfig())


def pixel(image: np.ndarray, point) -> tuple:
    x, y = point
    return tuple(int(v) for v in image[y, x])


def test_render_size(renderer):
    config = renderer.config
    image = renderer.render(new_board())

    assert image.dtype == np.uint8
    assert image.shape == (
        config.BOARD_OUTPUT_SIZE + config.STATUS_BAR_HEIGHT,
        config.BOARD_OUTPUT_SIZE,
        3,
    )


def test_empty_cell_is_background(renderer):
    image = renderer.render(new_board())
    assert pixel(image, renderer.cell_center(4)) == renderer.config.BACKGROUND_COLOR


def test_marks_are_drawn(renderer):
    config = renderer.config
    board = new_board()
    board[0] = X
    board[4] = O

    image = renderer.render(board)

    # The two strokes of the X cross in the middle of the cell
    assert pixel(image, renderer.cell_center(0)) == config.PLAYER_COLOR

    # The O is a ring: hollow middle, colored rim
    cx, cy = renderer.cell_center(4)
    radius = config.CELL_OUTPUT_SIZE // 2 - config.MARK_MARGIN
    assert pixel(image, (cx, cy)) == config.BACKGROUND_COLOR
    assert pixel(image, (cx + radius, cy)) == config.OPPONENT_COLOR


def test_winning_line_is_drawn_over_marks(renderer):
    board = new_board()
    for index in (0, 1, 2):
        board[index] = X

    image = renderer.render(board, winning_line=(0, 1, 2))
    assert pixel(image, renderer.cell_center(1)) == renderer.config.WIN_LINE_COLOR


def test_status_text_stays_in_status_bar(renderer):
    config = renderer.config
    plain = renderer.render(new_board())
    with_status = renderer.render(new_board(), status="It's a tie!")

    board_area = slice(0, config.BOARD_OUTPUT_SIZE)
    assert np.array_equal(plain[board_area], with_status[board_area])
    assert not np.array_equal(plain, with_status)


@pytest.mark.parametrize("point, expected", [
    ((0, 0), 0),
    ((240, 80), 1),
    ((479, 0), 2),
    ((100, 240), 3),
    ((240, 240), 4),
    ((479, 479), 8),
    ((-1, 10), None),
    ((480, 10), None),
    ((100, 500), None),  # Status bar
])
def test_pixel_to_cell(renderer, point, expected):
    assert renderer.pixel_to_cell(*point) == expected


def test_cell_center_round_trip(renderer):
    for index in range(9):
        assert renderer.pixel_to_cell(*renderer.cell_center(index)) == index


def test_save_screenshot(renderer, tmp_path):
    image = renderer.render([X, O, None, None, X, None, None, None, O])
    path = renderer.save_screenshot(image, str(tmp_path / "shots"))

    assert path.exists()
    assert path.suffix == ".png"

    loaded = cv2.imread(str(path))
    assert np.array_equal(loaded, image)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
