import pytest

from minikit.tictactoe_board import CELL_SIZE, Board


def click_cell(board, row, col):
    return board.handle_click(col * CELL_SIZE + CELL_SIZE // 2, row * CELL_SIZE + CELL_SIZE // 2)


def play(board, moves):
    for row, col in moves:
        click_cell(board, row, col)


def test_new_board_is_empty():
    board = Board()
    assert all(board.cell(r, c) == " " for r in range(3) for c in range(3))
    assert not board.is_full()
    assert not board.check_win("X")
    assert not board.check_win("O")
    assert board.current_player == "X"


def test_turns_alternate():
    board = Board()
    assert click_cell(board, 0, 0) == "X"
    assert click_cell(board, 1, 1) == "O"
    assert board.cell(0, 0) == "X"
    assert board.cell(1, 1) == "O"
    assert board.current_player == "X"


def test_occupied_cell_ignored():
    board = Board()
    click_cell(board, 0, 0)
    assert click_cell(board, 0, 0) is None
    assert board.cell(0, 0) == "X"
    assert board.current_player == "O"


@pytest.mark.parametrize("x,y", [(600, 0), (0, 600), (0, 650), (-250, 10)])
def test_out_of_bounds_ignored(x, y):
    board = Board()
    assert board.handle_click(x, y) is None
    assert board.current_player == "X"


def test_small_negative_truncates_to_first_cell():
    board = Board()
    assert board.handle_click(-50, 10) == "X"
    assert board.cell(0, 0) == "X"


def test_pixel_maps_to_cell():
    board = Board()
    board.handle_click(250, 450)
    assert board.cell(2, 1) == "X"


def test_row_win():
    board = Board()
    play(board, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert board.check_win("X")
    assert not board.check_win("O")


def test_column_win_for_o():
    board = Board()
    play(board, [(0, 0), (0, 1), (2, 2), (1, 1), (1, 0), (2, 1)])
    assert board.check_win("O")
    assert not board.check_win("X")


@pytest.mark.parametrize(
    "moves",
    [
        [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)],
        [(0, 2), (0, 1), (1, 1), (0, 0), (2, 0)],
    ],
)
def test_diagonal_wins(moves):
    board = Board()
    play(board, moves)
    assert board.check_win("X")


def test_full_board_draw():
    board = Board()
    play(board, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)])
    assert board.is_full()
    assert not board.check_win("X")
    assert not board.check_win("O")


def test_reset_clears_board():
    board = Board()
    play(board, [(0, 0), (1, 1)])
    click_cell(board, 2, 2)
    board.reset()
    assert all(board.cell(r, c) == " " for r in range(3) for c in range(3))
    assert board.current_player == "X"
    assert click_cell(board, 1, 1) == "X"