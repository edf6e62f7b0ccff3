"""
Tests for the TicTacToe logic modules.

Usage:
    python test_modules.py      # Run all tests
    pytest test_modules.py
"""

import sys

import pytest

from logic.game_state import GameState, Mark, Outcome, TurnPhase, new_board
from logic.win_checker import WINNING_LINES, WinChecker, evaluate, get_winning_line
from logic.ai_player import AIPlayer, select_move
from logic.move_validator import MoveValidator
from logic.game_controller import GameController


X = Mark.PLAYER
O = Mark.OPPONENT
_ = None


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_wins(line, mark):
    board = new_board()
    for index in line:
        board[index] = mark

    assert evaluate(board) == Outcome.for_mark(mark)
    assert get_winning_line(board) == line


def test_first_line_in_order_decides():
    board = [
        O, O, O,
        X, X, X,
        _, _, _,
    ]
    assert evaluate(board) == Outcome.OPPONENT_WINS
    assert get_winning_line(board) == (0, 1, 2)


def test_empty_board_is_ongoing():
    assert evaluate(new_board()) == Outcome.ONGOING


def test_full_board_without_line_is_tie():
    board = [
        X, O, X,
        O, X, O,
        O, X, O,
    ]
    assert evaluate(board) == Outcome.TIE


def test_win_on_full_board_is_not_tie():
    board = [
        X, X, X,
        O, O, X,
        X, O, O,
    ]
    assert evaluate(board) == Outcome.PLAYER_WINS


def test_partial_board_is_ongoing():
    board = [
        X, O, _,
        _, X, _,
        _, _, O,
    ]
    assert evaluate(board) == Outcome.ONGOING
    assert get_winning_line(board) is None


def test_win_checker_updates_game_state():
    game = GameState()
    game.board = [
        X, X, X,
        O, O, _,
        _, _, _,
    ]
    checker = WinChecker()

    assert checker.check_winner(game) == X
    assert not checker.check_draw(game)

    checker.update_game_state(game)
    assert game.outcome == Outcome.PLAYER_WINS
    assert game.phase == TurnPhase.GAME_OVER


def test_win_checker_leaves_ongoing_game_alone():
    game = GameState()
    game.make_move(4)

    WinChecker().update_game_state(game)
    assert game.outcome == Outcome.ONGOING
    assert game.phase == TurnPhase.OPPONENT_TURN


# ==================== AI PLAYER ====================

def test_ai_takes_the_win():
    board = [
        O, O, _,
        X, X, _,
        _, _, _,
    ]
    assert select_move(board) == 2


def test_ai_blocks_the_player():
    board = [
        X, X, _,
        O, O, _,
        _, _, _,
    ]
    # Cell 2 blocks and sets up a double threat, so it scores as well as
    # the immediate win at 5 and comes first
    assert select_move(board) == 2


def test_ai_blocks_when_no_win_available():
    board = [
        X, _, _,
        _, O, _,
        _, _, X,
    ]
    move = select_move(board)
    # Playing a corner here loses to a fork
    assert move in (1, 3, 5, 7)


def test_single_empty_cell_is_chosen():
    board = [
        X, O, X,
        X, O, O,
        O, X, _,
    ]
    assert evaluate(board) == Outcome.ONGOING
    assert select_move(board) == 8


def test_full_board_has_no_move():
    board = [
        X, O, X,
        O, X, O,
        O, X, O,
    ]
    assert select_move(board) is None


def test_finished_board_has_no_move():
    board = [
        X, X, X,
        O, O, _,
        _, _, _,
    ]
    assert select_move(board) is None


def test_search_does_not_change_board():
    board = [
        X, _, _,
        _, _, _,
        _, _, _,
    ]
    before = list(board)
    select_move(board)
    assert board == before


@pytest.mark.parametrize("board", [
    [X, _, _, _, _, _, _, _, _],
    [_, _, _, _, X, _, _, _, _],
    [X, O, _, _, X, _, _, _, _],
    [X, _, _, _, O, _, _, X, _],
    [_, X, _, X, O, _, _, _, _],
])
def test_ai_picks_empty_cell(board):
    move = select_move(board)
    assert move is not None
    assert board[move] is None


def test_ai_never_loses_from_empty_board():
    board = new_board()
    opponent = AIPlayer(O)
    player = AIPlayer(X)

    move = opponent.select_move(board)
    assert move == 0  # Every first move ties, so the lowest index is kept
    board[move] = O

    side = player
    while not evaluate(board).is_over:
        move = side.select_move(board)
        assert board[move] is None
        board[move] = side.mark
        side = opponent if side is player else player

    assert evaluate(board) != Outcome.PLAYER_WINS


def test_get_best_move_checks_turn():
    game = GameState()
    ai = AIPlayer(O)

    # Player moves first
    assert ai.get_best_move(game) is None

    game.make_move(4)
    move = ai.get_best_move(game)
    assert move is not None
    assert ai.positions_evaluated > 0
    assert "Place O" in ai.get_move_suggestion(game)


# ==================== GAME STATE ====================

def test_game_state_alternates_turns():
    game = GameState()
    assert game.current_mark == X

    assert game.make_move(0)
    assert game.phase == TurnPhase.OPPONENT_TURN
    assert game.current_mark == O

    assert game.make_move(4)
    assert game.phase == TurnPhase.PLAYER_TURN

    assert game.board[0] == X
    assert game.board[4] == O
    assert [m.index for m in game.moves] == [0, 4]
    assert game.moves[1].move_number == 1


def test_game_state_rejects_bad_moves():
    game = GameState()
    game.make_move(0)

    assert not game.make_move(0)
    assert not game.make_move(9)
    assert game.current_mark == O

    game.phase = TurnPhase.GAME_OVER
    assert not game.make_move(1)
    assert game.current_mark is None


def test_game_state_copy_is_independent():
    game = GameState()
    game.make_move(0)
    clone = game.copy()
    clone.make_move(1)

    assert game.board[1] is None
    assert len(game.moves) == 1
    assert clone.board[1] == O


# ==================== MOVE VALIDATOR ====================

def test_validator():
    game = GameState()
    validator = MoveValidator()

    assert validator.validate_move(game, 4).is_valid

    result = validator.validate_move(game, 12)
    assert not result.is_valid
    assert "Invalid cell" in result.error_message

    game.make_move(4)
    result = validator.validate_move(game, 0)
    assert not result.is_valid
    assert "opponent" in result.error_message

    game.make_move(0)
    result = validator.validate_move(game, 0)
    assert not result.is_valid
    assert "already taken" in result.error_message

    assert validator.get_valid_moves(game) == [1, 2, 3, 5, 6, 7, 8]

    game.phase = TurnPhase.GAME_OVER
    assert not validator.validate_move(game, 1).is_valid
    assert validator.get_valid_moves(game) == []


# ==================== GAME CONTROLLER ====================

def test_controller_turn_cycle():
    controller = GameController()
    assert controller.status_message() == "Your turn (X)"

    # Not the AI's turn yet
    assert controller.play_opponent_move() is None

    assert controller.handle_player_move(4).is_valid
    assert controller.phase == TurnPhase.OPPONENT_TURN
    assert not controller.handle_player_move(0).is_valid

    move = controller.play_opponent_move()
    assert move is not None
    assert controller.game_state.board[move] == O
    assert controller.phase == TurnPhase.PLAYER_TURN


def test_controller_full_game_and_reset():
    controller = GameController()

    while not controller.is_game_over:
        # Player always takes the first free cell
        index = controller.game_state.get_empty_cells()[0]
        assert controller.handle_player_move(index).is_valid
        controller.play_opponent_move()

    assert controller.game_state.outcome != Outcome.PLAYER_WINS
    assert controller.result_message() in ("Winner is: O", "It's a tie!")
    assert controller.status_message() == controller.result_message()
    assert not controller.handle_player_move(0).is_valid

    games_played = (controller.score.player_wins + controller.score.opponent_wins
                    + controller.score.ties)
    assert games_played == 1
    assert controller.score.player_wins == 0

    controller.reset()
    assert controller.game_state.board == new_board()
    assert controller.phase == TurnPhase.PLAYER_TURN
    assert controller.result_message() is None
    assert controller.winning_line() is None
    # Score survives a reset
    assert controller.score.player_wins + controller.score.opponent_wins + controller.score.ties == 1


def test_controller_reports_winning_line():
    controller = GameController()
    controller.game_state.board = [
        X, X, _,
        O, O, _,
        _, _, _,
    ]
    controller.game_state.phase = TurnPhase.OPPONENT_TURN

    move = controller.play_opponent_move()
    assert move == 2
    # Not over yet: O blocked, X must now defend
    assert controller.phase == TurnPhase.PLAYER_TURN

    controller.handle_player_move(5)
    controller.play_opponent_move()
    assert controller.game_state.outcome == Outcome.OPPONENT_WINS
    assert controller.winning_line() in WINNING_LINES
    assert controller.score.opponent_wins == 1


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
