"""Tic-tac-toe board state driven by clicks on a 600x600 grid."""

from __future__ import annotations

CELL_SIZE = 200
SIZE = 3
EMPTY = " "

_LINES = (
    *(((r, 0), (r, 1), (r, 2)) for r in range(SIZE)),
    *(((0, c), (1, c), (2, c)) for c in range(SIZE)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def _cell_index(coordinate: int) -> int:
    """Pixel to cell index, truncating toward zero."""
    return int(coordinate / CELL_SIZE)


class Board:
    """A 3x3 grid where X and O take turns, X first."""

    def __init__(self) -> None:
        self._grid = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.x_turn = True

    @property
    def current_player(self) -> str:
        """The marker that the next valid click will place."""
        return "X" if self.x_turn else "O"

    def cell(self, row: int, col: int) -> str:
        """The marker at ``row``, ``col``: 'X', 'O' or a space."""
        return self._grid[row][col]

    def handle_click(self, x: int, y: int) -> str | None:
        """Place the current marker in the cell under pixel ``x``, ``y``.

        Returns the marker placed, or None when the click is outside the
        grid or on an occupied cell.
        """
        col = _cell_index(x)
        row = _cell_index(y)
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            return None
        if self._grid[row][col] != EMPTY:
            return None
        marker = self.current_player
        self._grid[row][col] = marker
        self.x_turn = not self.x_turn
        return marker

    def check_win(self, marker: str) -> bool:
        """Whether ``marker`` fills a row, column or diagonal."""
        return any(all(self._grid[r][c] == marker for r, c in line) for line in _LINES)

    def is_full(self) -> bool:
        """Whether no empty cell remains."""
        return all(value != EMPTY for row in self._grid for value in row)

    def reset(self) -> None:
        """Clear the grid and give the turn to X."""
        self._grid = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.x_turn = True