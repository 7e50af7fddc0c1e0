from minikit.tictactoe_board import CELL_SIZE, Board
from minikit.tictactoe_game import status_message


def play(moves):
    board = Board()
    for row, col in moves:
        board.handle_click(col * CELL_SIZE + 1, row * CELL_SIZE + 1)
    return board


def test_ongoing_game_has_no_message():
    assert status_message(play([(0, 0), (1, 1)])) == ""
    assert status_message(Board()) == ""


def test_x_wins():
    board = play([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert status_message(board) == "Player X wins!"


def test_o_wins():
    board = play([(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)])
    assert status_message(board) == "Player O wins!"


def test_draw():
    board = play([(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)])
    assert status_message(board) == "It's a draw!"


def test_reset_clears_message():
    board = play([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    board.reset()
    assert status_message(board) == ""